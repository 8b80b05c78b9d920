"""StarDots client.

Architecture:
    StarDots holds the immutable credentials and wires three collaborators:
    - RequestSigner: fresh x-stardots-* headers per call
    - HTTPClient: aiohttp transport for JSON and multipart bodies
    - RestRunner: executes an endpoint spec and hands the envelope to its adapter

Error model:
    Transport and parsing failures raise StarDotsError subclasses.
    Business failures (``success=False``, non-zero ``code``) come back as
    ordinary typed responses; HTTP 4xx/5xx are never raised.

Example:
    >>> async with StarDots("key", "secret") as client:  # doctest: +SKIP
    ...     spaces = await client.get_space_list(SpaceListRequest())
    ...     if spaces.success:
    ...         print([space.name for space in spaces.data])
"""

from __future__ import annotations

import logging
import os
from typing import Any

from .auth.signer import Credentials, RequestSigner
from .config import (
    DEFAULT_REQUEST_TIMEOUT,
    ENDPOINT,
    ENV_CLIENT_KEY,
    ENV_CLIENT_SECRET,
    ENV_ENDPOINT,
)
from .endpoints.file import delete as file_delete
from .endpoints.file import list as file_list
from .endpoints.file import ticket as file_ticket
from .endpoints.file import upload as file_upload
from .endpoints.space import create as space_create
from .endpoints.space import delete as space_delete
from .endpoints.space import list as space_list
from .endpoints.space import toggle_accessibility as space_toggle
from .models import (
    CreateSpaceRequest,
    CreateSpaceResponse,
    DeleteFileRequest,
    DeleteFileResponse,
    DeleteSpaceRequest,
    DeleteSpaceResponse,
    FileAccessTicketRequest,
    FileAccessTicketResponse,
    SpaceFileListRequest,
    SpaceFileListResponse,
    SpaceListRequest,
    SpaceListResponse,
    ToggleSpaceAccessibilityRequest,
    ToggleSpaceAccessibilityResponse,
    UploadFileRequest,
    UploadFileResponse,
)
from .runtime.rest import HTTPClient, RestRunner

logger = logging.getLogger(__name__)


class StarDots:
    """Async client for the StarDots open API."""

    def __init__(
        self,
        client_key: str,
        client_secret: str,
        endpoint: str = ENDPOINT,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        *,
        http_client: HTTPClient | None = None,
        signer: RequestSigner | None = None,
    ) -> None:
        # An injected signer owns the credentials used for signing
        if signer is not None:
            self._credentials = signer.credentials
        else:
            self._credentials = Credentials(client_key=client_key, client_secret=client_secret)
        self.endpoint = endpoint
        self.timeout = timeout
        self._http = http_client or HTTPClient(timeout=timeout)
        self._owns_http = http_client is None
        self._signer = signer or RequestSigner(self._credentials)
        self._runner = RestRunner(self._http, endpoint, self._signer)

    @classmethod
    def from_env(cls, **kwargs: Any) -> StarDots:
        """Create a client from STARDOTS_CLIENT_KEY, STARDOTS_CLIENT_SECRET
        and the optional STARDOTS_ENDPOINT environment variables.
        """
        kwargs.setdefault("endpoint", os.environ.get(ENV_ENDPOINT) or ENDPOINT)
        return cls(
            os.environ.get(ENV_CLIENT_KEY, ""),
            os.environ.get(ENV_CLIENT_SECRET, ""),
            **kwargs,
        )

    @property
    def client_key(self) -> str:
        return self._credentials.client_key

    def __repr__(self) -> str:
        return f"StarDots(endpoint={self.endpoint!r}, client_key={self.client_key!r})"

    # Space operations

    async def get_space_list(
        self, params: SpaceListRequest | None = None, *, timeout: float | None = None
    ) -> SpaceListResponse:
        """Get space list data."""
        return await self._runner.run(
            spec=space_list.SPEC,
            adapter=space_list.Adapter(),
            params=params or SpaceListRequest(),
            timeout=timeout,
        )

    async def create_space(
        self, params: CreateSpaceRequest, *, timeout: float | None = None
    ) -> CreateSpaceResponse:
        """Create a new space."""
        return await self._runner.run(
            spec=space_create.SPEC, adapter=space_create.Adapter(), params=params, timeout=timeout
        )

    async def delete_space(
        self, params: DeleteSpaceRequest, *, timeout: float | None = None
    ) -> DeleteSpaceResponse:
        """Delete an existing space. The space must not contain any files."""
        return await self._runner.run(
            spec=space_delete.SPEC, adapter=space_delete.Adapter(), params=params, timeout=timeout
        )

    async def toggle_space_accessibility(
        self, params: ToggleSpaceAccessibilityRequest, *, timeout: float | None = None
    ) -> ToggleSpaceAccessibilityResponse:
        """Toggle the accessibility of a space."""
        return await self._runner.run(
            spec=space_toggle.SPEC, adapter=space_toggle.Adapter(), params=params, timeout=timeout
        )

    # File operations

    async def get_space_file_list(
        self, params: SpaceFileListRequest, *, timeout: float | None = None
    ) -> SpaceFileListResponse:
        """Get the files in a space, sorted by upload time descending."""
        return await self._runner.run(
            spec=file_list.SPEC, adapter=file_list.Adapter(), params=params, timeout=timeout
        )

    async def file_access_ticket(
        self, params: FileAccessTicketRequest, *, timeout: float | None = None
    ) -> FileAccessTicketResponse:
        """Get an access ticket for a file in a private space."""
        return await self._runner.run(
            spec=file_ticket.SPEC, adapter=file_ticket.Adapter(), params=params, timeout=timeout
        )

    async def upload_file(
        self, params: UploadFileRequest, *, timeout: float | None = None
    ) -> UploadFileResponse:
        """Upload a file to a space as multipart form data."""
        logger.debug(
            "Uploading file",
            extra={"space": params.space, "file_name": params.filename, "size": len(params.file_content)},
        )
        return await self._runner.run(
            spec=file_upload.SPEC, adapter=file_upload.Adapter(), params=params, timeout=timeout
        )

    async def delete_file(
        self, params: DeleteFileRequest, *, timeout: float | None = None
    ) -> DeleteFileResponse:
        """Delete files in a space. Supports batch deletion."""
        return await self._runner.run(
            spec=file_delete.SPEC, adapter=file_delete.Adapter(), params=params, timeout=timeout
        )

    async def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> StarDots:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
