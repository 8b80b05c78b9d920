"""Space request and response models."""

from pydantic import BaseModel, ConfigDict, Field

from .envelope import CommonResponse

_REQUEST_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class SpaceListRequest(BaseModel):
    """Get space list request parameters."""

    page: int = Field(1, ge=1)
    page_size: int = Field(20, ge=1, le=100, alias="pageSize")

    model_config = _REQUEST_CONFIG


class SpaceInfo(BaseModel):
    """Space information."""

    name: str
    is_public: bool = Field(..., alias="public")
    # Seconds since epoch, UTC+8
    created_at: int = Field(..., alias="createdAt")
    file_count: int = Field(..., alias="fileCount")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SpaceListResponse(CommonResponse):
    data: list[SpaceInfo] | None = None


class CreateSpaceRequest(BaseModel):
    """Create space request parameters.

    The space name may only combine letters and digits, 4 to 15 characters;
    the server enforces this.
    """

    space: str
    is_public: bool = Field(False, alias="public")

    model_config = _REQUEST_CONFIG


class CreateSpaceResponse(CommonResponse):
    pass


class DeleteSpaceRequest(BaseModel):
    """Delete space request parameters. The space must contain no files."""

    space: str

    model_config = _REQUEST_CONFIG


class DeleteSpaceResponse(CommonResponse):
    pass


class ToggleSpaceAccessibilityRequest(BaseModel):
    """Toggle space accessibility request parameters."""

    space: str
    is_public: bool = Field(..., alias="public")

    model_config = _REQUEST_CONFIG


class ToggleSpaceAccessibilityResponse(CommonResponse):
    pass
