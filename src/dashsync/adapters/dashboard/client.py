"""HTTP client for the dashboard API catalog."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from dashsync.adapters.http_resilience import ClientFactory, ResilientClient
from dashsync.domain.errors import AlreadyExistsError, NotFoundError, RemoteError, TransportError
from dashsync.domain.identity import find_by_id, resolve_identity

from .schema import APIListResponse, StatusResponse
from .translator import build_record_payload, parse_record

if TYPE_CHECKING:
    from dashsync.config.dashboard import DashboardConfig
    from dashsync.domain.model import APIDefinition, RemoteRecord

log = getLogger(__name__)

APIS_ENDPOINT = "/api/apis"
# Asks the dashboard for the whole catalog in a single page.
UNPAGINATED_PARAMS = {"p": "-2"}


class DashboardClient:
    """Catalog operations against the dashboard REST API.

    ``create_api`` and ``update_api`` re-list the catalog first so that each call
    checks its precondition against the current remote state, even when the
    caller already planned against an older listing.

    Every call opens a fresh HTTP client, but all of them share one rate limiter
    so the configured request rate holds across a whole sync pass.
    """

    def __init__(
        self,
        *,
        config: DashboardConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._resilience = config.authenticated_resilience()
        ratelimit = self._resilience.ratelimit
        self._limiter = ratelimit.build() if ratelimit is not None else None
        self._client_factory: ClientFactory = client_factory or ResilientClient

    def list_apis(self) -> list[RemoteRecord]:
        return asyncio.run(self._list_apis_async())

    def create_api(self, definition: APIDefinition) -> str:
        return asyncio.run(self._create_api_async(definition))

    def update_api(self, definition: APIDefinition) -> None:
        asyncio.run(self._update_api_async(definition))

    def delete_api(self, definition_id: str) -> None:
        asyncio.run(self._delete_api_async(definition_id))

    async def _list_apis_async(self) -> list[RemoteRecord]:
        async with self._open_client() as client:
            return await self._fetch_listing(client)

    async def _create_api_async(self, definition: APIDefinition) -> str:
        async with self._open_client() as client:
            remote = await self._fetch_listing(client)
            match = resolve_identity(definition, remote)
            if match is not None:
                raise AlreadyExistsError(definition.label, key=match.key, value=match.value)

            response = await self._perform_request(
                client,
                "POST",
                APIS_ENDPOINT,
                json=build_record_payload(definition),
            )
            status = self._unwrap_status(response)
            return status.meta or ""

    async def _update_api_async(self, definition: APIDefinition) -> None:
        async with self._open_client() as client:
            remote = await self._fetch_listing(client)
            existing = find_by_id(definition.id, remote)
            if existing is None:
                raise NotFoundError(definition.id)
            # api_id is assigned by the dashboard and must survive updates.
            if not definition.api_id and existing.definition.api_id:
                log.debug(
                    "Backfilling api_id %s for API %s", existing.definition.api_id, definition.id
                )
                definition.api_id = existing.definition.api_id

            response = await self._perform_request(
                client,
                "PUT",
                f"{APIS_ENDPOINT}/{definition.id}",
                json=build_record_payload(definition),
            )
            self._unwrap_status(response)

    async def _delete_api_async(self, definition_id: str) -> None:
        async with self._open_client() as client:
            response = await self._perform_request(
                client,
                "DELETE",
                f"{APIS_ENDPOINT}/{definition_id}",
            )
            self._unwrap_status(response)

    def _open_client(self) -> ResilientClient:
        return self._client_factory(self._resilience, limiter=self._limiter)

    async def _fetch_listing(self, client: ResilientClient) -> list[RemoteRecord]:
        response = await self._perform_request(
            client,
            "GET",
            APIS_ENDPOINT,
            params=UNPAGINATED_PARAMS,
        )
        if response.status_code != httpx.codes.OK:
            raise RemoteError(
                f"API returned error: {response.text}",
                status_code=response.status_code,
            )

        try:
            listing = APIListResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise RemoteError(
                f"Unexpected API listing payload: {exc}",
                status_code=response.status_code,
            ) from exc

        return [parse_record(record) for record in listing.apis]

    async def _perform_request(
        self,
        client: ResilientClient,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: object = None,
    ) -> httpx.Response:
        try:
            return await client.request(method, path, params=params, json=json)
        except httpx.RequestError as exc:
            log.error("%s %s failed: %s", method, path, exc)
            raise TransportError(f"{method} {path} failed: {exc}") from exc

    @staticmethod
    def _unwrap_status(response: httpx.Response) -> StatusResponse:
        if response.status_code != httpx.codes.OK:
            raise RemoteError(
                f"API returned error: {response.text} (code: {response.status_code})",
                status_code=response.status_code,
            )

        try:
            status = StatusResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise RemoteError(
                f"Unexpected API response payload: {exc}",
                status_code=response.status_code,
            ) from exc

        if not status.ok:
            raise RemoteError(
                f"API request completed, but with error: {status.message}",
                status_code=response.status_code,
            )
        return status
