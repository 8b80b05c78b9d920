"""Create space endpoint definition and adapter."""

from stardots.sdk.models import CreateSpaceResponse
from stardots.sdk.runtime.rest import BodyKind, RestEndpointSpec, TypedResponseAdapter

SPEC = RestEndpointSpec(
    id="space_create",
    method="PUT",
    path="/openapi/space/create",
    body_kind=BodyKind.JSON,
)


class Adapter(TypedResponseAdapter):
    response_model = CreateSpaceResponse
