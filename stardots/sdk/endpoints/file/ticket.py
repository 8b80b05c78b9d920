"""File access ticket endpoint definition and adapter.

Files in a private space are only served when the URL carries a ticket.
"""

from stardots.sdk.models import FileAccessTicketResponse
from stardots.sdk.runtime.rest import BodyKind, RestEndpointSpec, TypedResponseAdapter

SPEC = RestEndpointSpec(
    id="file_ticket",
    method="POST",
    path="/openapi/file/ticket",
    body_kind=BodyKind.JSON,
)


class Adapter(TypedResponseAdapter):
    response_model = FileAccessTicketResponse
