"""multipart/form-data body builder."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass

CRLF = b"\r\n"


@dataclass(frozen=True)
class FilePart:
    file_name: str
    content: bytes
    field_name: str = "file"
    content_type: str = "application/octet-stream"


def new_boundary() -> str:
    """Random boundary token, unique per call."""
    return f"Boundary-{str(uuid.uuid4()).upper()}"


def content_type_for(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


def build_multipart_body(
    boundary: str,
    form_fields: Mapping[str, str],
    file_part: FilePart | None = None,
) -> bytes:
    """Serialize form fields, then the optional file part, then the closing delimiter.

    Examples:
        >>> build_multipart_body("B", {"space": "demo"})
        b'--B\\r\\nContent-Disposition: form-data; name="space"\\r\\n\\r\\ndemo\\r\\n--B--\\r\\n'
    """
    delimiter = f"--{boundary}".encode() + CRLF
    body = bytearray()

    for key, value in form_fields.items():
        body += delimiter
        body += f'Content-Disposition: form-data; name="{key}"'.encode() + CRLF + CRLF
        body += str(value).encode() + CRLF

    if file_part is not None:
        body += delimiter
        body += (
            f'Content-Disposition: form-data; name="{file_part.field_name}"; '
            f'filename="{file_part.file_name}"'
        ).encode() + CRLF
        body += f"Content-Type: {file_part.content_type}".encode() + CRLF + CRLF
        body += file_part.content + CRLF

    body += f"--{boundary}--".encode() + CRLF
    return bytes(body)
