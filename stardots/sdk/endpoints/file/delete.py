"""Delete files endpoint definition and adapter. Supports batch deletion."""

from stardots.sdk.models import DeleteFileResponse
from stardots.sdk.runtime.rest import BodyKind, RestEndpointSpec, TypedResponseAdapter

SPEC = RestEndpointSpec(
    id="file_delete",
    method="DELETE",
    path="/openapi/file/delete",
    body_kind=BodyKind.JSON,
)


class Adapter(TypedResponseAdapter):
    response_model = DeleteFileResponse
