"""Upload file endpoint definition and adapter.

Sent as multipart form data: a ``space`` field followed by the ``file`` part.
"""

from __future__ import annotations

from stardots.sdk.models import UploadFileRequest, UploadFileResponse
from stardots.sdk.runtime.rest import BodyKind, FilePart, RestEndpointSpec, TypedResponseAdapter


def build_form(params: UploadFileRequest) -> dict[str, str]:
    return {"space": params.space}


def build_file(params: UploadFileRequest) -> FilePart:
    return FilePart(file_name=params.filename, content=params.file_content)


SPEC = RestEndpointSpec(
    id="file_upload",
    method="PUT",
    path="/openapi/file/upload",
    body_kind=BodyKind.MULTIPART,
    build_form=build_form,
    build_file=build_file,
)


class Adapter(TypedResponseAdapter):
    response_model = UploadFileResponse
