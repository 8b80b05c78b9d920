"""Space list endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from stardots.sdk.models import SpaceListRequest, SpaceListResponse
from stardots.sdk.runtime.rest import BodyKind, RestEndpointSpec, TypedResponseAdapter


def build_query(params: SpaceListRequest) -> dict[str, Any]:
    return {"page": params.page, "pageSize": params.page_size}


SPEC = RestEndpointSpec(
    id="space_list",
    method="GET",
    path="/openapi/space/list",
    body_kind=BodyKind.NONE,
    build_query=build_query,
)


class Adapter(TypedResponseAdapter):
    """Narrows ``data`` into a list of SpaceInfo."""

    response_model = SpaceListResponse
