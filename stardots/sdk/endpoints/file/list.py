"""Space file list endpoint definition and adapter.

Files are listed newest upload first.
"""

from __future__ import annotations

from typing import Any

from stardots.sdk.models import SpaceFileListRequest, SpaceFileListResponse
from stardots.sdk.runtime.rest import BodyKind, RestEndpointSpec, TypedResponseAdapter


def build_query(params: SpaceFileListRequest) -> dict[str, Any]:
    return {"page": params.page, "pageSize": params.page_size, "space": params.space}


SPEC = RestEndpointSpec(
    id="file_list",
    method="GET",
    path="/openapi/file/list",
    body_kind=BodyKind.NONE,
    build_query=build_query,
)


class Adapter(TypedResponseAdapter):
    response_model = SpaceFileListResponse
