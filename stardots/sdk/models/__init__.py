"""Data models for StarDots requests and responses.

Architecture:
    All models are Pydantic v2 models and immutable (frozen=True). Wire names
    (camelCase, ``public``) are aliases; Python code uses snake_case field
    names and ``populate_by_name`` accepts either.

Model Categories:
    - Envelope: CommonResponse, Envelope, JsonValue union
    - Spaces: SpaceListRequest, CreateSpaceRequest, ... and their responses
    - Files: SpaceFileListRequest, UploadFileRequest, ... and their responses
"""

from .envelope import CommonResponse, Envelope
from .file import (
    DeleteFileRequest,
    DeleteFileResponse,
    FileAccessTicketRequest,
    FileAccessTicketResponse,
    FileInfo,
    FileListData,
    SpaceFileListRequest,
    SpaceFileListResponse,
    TicketData,
    UploadFileData,
    UploadFileRequest,
    UploadFileResponse,
)
from .json_value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from .space import (
    CreateSpaceRequest,
    CreateSpaceResponse,
    DeleteSpaceRequest,
    DeleteSpaceResponse,
    SpaceInfo,
    SpaceListRequest,
    SpaceListResponse,
    ToggleSpaceAccessibilityRequest,
    ToggleSpaceAccessibilityResponse,
)

__all__ = [
    "CommonResponse",
    "Envelope",
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "SpaceListRequest",
    "SpaceListResponse",
    "SpaceInfo",
    "CreateSpaceRequest",
    "CreateSpaceResponse",
    "DeleteSpaceRequest",
    "DeleteSpaceResponse",
    "ToggleSpaceAccessibilityRequest",
    "ToggleSpaceAccessibilityResponse",
    "SpaceFileListRequest",
    "SpaceFileListResponse",
    "FileInfo",
    "FileListData",
    "FileAccessTicketRequest",
    "FileAccessTicketResponse",
    "TicketData",
    "UploadFileRequest",
    "UploadFileResponse",
    "UploadFileData",
    "DeleteFileRequest",
    "DeleteFileResponse",
]
