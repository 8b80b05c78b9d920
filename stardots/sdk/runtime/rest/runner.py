"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...auth.signer import RequestSigner
from ...core.exceptions import InvalidResponseError
from ...models.envelope import CommonResponse, Envelope
from .codec import decode_envelope, encode_request_body
from .http_client import HTTPClient, validate_url
from .multipart import FilePart

logger = logging.getLogger(__name__)


class BodyKind(str, Enum):
    NONE = "none"
    JSON = "json"
    MULTIPART = "multipart"


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "PUT" | "POST" | "DELETE"
    path: str
    body_kind: BodyKind = BodyKind.NONE
    build_query: Callable[[Any], dict[str, Any]] | None = None
    # JSON bodies default to the request model itself
    build_body: Callable[[Any], Any] | None = None
    build_form: Callable[[Any], Mapping[str, str]] | None = None
    build_file: Callable[[Any], FilePart | None] | None = None


class ResponseAdapter:
    def parse(self, envelope: Envelope, params: Any) -> Any:
        return envelope


class TypedResponseAdapter(ResponseAdapter):
    """Narrows the envelope into a typed CommonResponse subclass."""

    response_model: type[CommonResponse] = CommonResponse

    def parse(self, envelope: Envelope, params: Any) -> Any:
        return self.response_model.from_envelope(envelope)


class RestRunner:
    def __init__(
        self,
        http: HTTPClient,
        base_url: str,
        signer: RequestSigner,
    ) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._signer = signer

    def build_url(self, spec: RestEndpointSpec, params: Any) -> str:
        url = validate_url(f"{self._base_url}{spec.path}")
        if spec.build_query:
            url = url.with_query({k: str(v) for k, v in spec.build_query(params).items()})
        return str(url)

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: Any,
        timeout: float | None = None,
    ) -> Any:
        url = self.build_url(spec, params)
        headers = self._signer.headers()

        logger.debug(
            "Dispatching request",
            extra={"endpoint": spec.id, "method": spec.method, "path": spec.path},
        )

        if spec.body_kind == BodyKind.MULTIPART:
            form = spec.build_form(params) if spec.build_form else {}
            file_part = spec.build_file(params) if spec.build_file else None
            raw, status = await self._http.send_multipart(
                spec.method, url, form, file_part, headers=headers, timeout=timeout
            )
        else:
            body = None
            if spec.body_kind == BodyKind.JSON:
                payload = spec.build_body(params) if spec.build_body else params
                body = encode_request_body(payload)
            raw, status = await self._http.send_json(
                spec.method, url, body, headers=headers, timeout=timeout
            )

        if not raw:
            raise InvalidResponseError(status)

        envelope = decode_envelope(raw)
        if not envelope.success:
            logger.debug(
                "Business failure",
                extra={"endpoint": spec.id, "status": status, "code": envelope.code},
            )
        return adapter.parse(envelope, params)
