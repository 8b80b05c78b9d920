"""StarDots SDK - Async client for the StarDots object storage API."""

from .auth import Credentials, RequestSigner, SignedHeaders, compute_sign, sign_request
from .client import StarDots
from .config import DEFAULT_REQUEST_TIMEOUT, ENDPOINT, SDK_VERSION
from .core import (
    DecodingError,
    EncodingError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    StarDotsError,
)
from .models import (
    CommonResponse,
    CreateSpaceRequest,
    CreateSpaceResponse,
    DeleteFileRequest,
    DeleteFileResponse,
    DeleteSpaceRequest,
    DeleteSpaceResponse,
    Envelope,
    FileAccessTicketRequest,
    FileAccessTicketResponse,
    FileInfo,
    FileListData,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    SpaceFileListRequest,
    SpaceFileListResponse,
    SpaceInfo,
    SpaceListRequest,
    SpaceListResponse,
    TicketData,
    ToggleSpaceAccessibilityRequest,
    ToggleSpaceAccessibilityResponse,
    UploadFileData,
    UploadFileRequest,
    UploadFileResponse,
)

__version__ = SDK_VERSION

__all__ = [
    # Client
    "StarDots",
    "ENDPOINT",
    "DEFAULT_REQUEST_TIMEOUT",
    # Auth
    "Credentials",
    "RequestSigner",
    "SignedHeaders",
    "compute_sign",
    "sign_request",
    # Envelope
    "CommonResponse",
    "Envelope",
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    # Spaces
    "SpaceListRequest",
    "SpaceListResponse",
    "SpaceInfo",
    "CreateSpaceRequest",
    "CreateSpaceResponse",
    "DeleteSpaceRequest",
    "DeleteSpaceResponse",
    "ToggleSpaceAccessibilityRequest",
    "ToggleSpaceAccessibilityResponse",
    # Files
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
    # Exceptions
    "StarDotsError",
    "InvalidURLError",
    "InvalidResponseError",
    "NetworkError",
    "DecodingError",
    "EncodingError",
]
