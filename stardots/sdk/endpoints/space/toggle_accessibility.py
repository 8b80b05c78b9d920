"""Toggle space accessibility endpoint definition and adapter."""

from stardots.sdk.models import ToggleSpaceAccessibilityResponse
from stardots.sdk.runtime.rest import BodyKind, RestEndpointSpec, TypedResponseAdapter

SPEC = RestEndpointSpec(
    id="space_toggle_accessibility",
    method="POST",
    path="/openapi/space/accessibility/toggle",
    body_kind=BodyKind.JSON,
)


class Adapter(TypedResponseAdapter):
    response_model = ToggleSpaceAccessibilityResponse
