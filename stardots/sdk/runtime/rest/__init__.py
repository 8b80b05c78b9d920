"""REST runtime abstractions."""

from .codec import decode_envelope, encode_request_body
from .http_client import HTTPClient, validate_url
from .multipart import FilePart, build_multipart_body, new_boundary
from .runner import BodyKind, ResponseAdapter, RestEndpointSpec, RestRunner, TypedResponseAdapter

__all__ = [
    "HTTPClient",
    "validate_url",
    "FilePart",
    "build_multipart_body",
    "new_boundary",
    "decode_envelope",
    "encode_request_body",
    "BodyKind",
    "RestEndpointSpec",
    "RestRunner",
    "ResponseAdapter",
    "TypedResponseAdapter",
]
