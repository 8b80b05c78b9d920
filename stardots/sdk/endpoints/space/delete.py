"""Delete space endpoint definition and adapter.

The server refuses to delete a space that still contains files.
"""

from stardots.sdk.models import DeleteSpaceResponse
from stardots.sdk.runtime.rest import BodyKind, RestEndpointSpec, TypedResponseAdapter

SPEC = RestEndpointSpec(
    id="space_delete",
    method="DELETE",
    path="/openapi/space/delete",
    body_kind=BodyKind.JSON,
)


class Adapter(TypedResponseAdapter):
    response_model = DeleteSpaceResponse
