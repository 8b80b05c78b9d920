"""File request and response models."""

from pydantic import BaseModel, ConfigDict, Field

from .envelope import CommonResponse

_REQUEST_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class SpaceFileListRequest(BaseModel):
    """Get space file list request parameters."""

    space: str
    page: int = Field(1, ge=1)
    page_size: int = Field(20, ge=1, le=100, alias="pageSize")

    model_config = _REQUEST_CONFIG


class FileInfo(BaseModel):
    """File information.

    For files in a private space, ``url`` carries an access ticket that is
    valid for 20 seconds.
    """

    name: str
    byte_size: int = Field(..., alias="byteSize")
    # Human readable size, e.g. "1.2 MB"
    size: str
    uploaded_at: int = Field(..., alias="uploadedAt")
    url: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FileListData(BaseModel):
    """Files in a space, newest upload first."""

    files: list[FileInfo] = Field(default_factory=list, alias="list")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SpaceFileListResponse(CommonResponse):
    data: FileListData | None = None


class FileAccessTicketRequest(BaseModel):
    """Get file access ticket request parameters."""

    filename: str
    space: str

    model_config = _REQUEST_CONFIG


class TicketData(BaseModel):
    ticket: str

    model_config = ConfigDict(frozen=True)


class FileAccessTicketResponse(CommonResponse):
    data: TicketData | None = None


class UploadFileRequest(BaseModel):
    """Upload file request parameters.

    Sent as multipart form data; ``file_content`` never goes into a JSON body.
    """

    filename: str = Field(..., min_length=1)
    space: str
    file_content: bytes = Field(..., exclude=True, repr=False)

    model_config = _REQUEST_CONFIG


class UploadFileData(BaseModel):
    space: str
    filename: str
    url: str

    model_config = ConfigDict(frozen=True)


class UploadFileResponse(CommonResponse):
    data: UploadFileData | None = None


class DeleteFileRequest(BaseModel):
    """Delete files request parameters. Supports batch deletion."""

    filename_list: list[str] = Field(..., alias="filenameList")
    space: str

    model_config = _REQUEST_CONFIG


class DeleteFileResponse(CommonResponse):
    pass
