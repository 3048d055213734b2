"""
HTTP client for reading schema metadata from a Directus server.

Authenticates with email/password (or a static token) and fetches
/collections, /fields, /relations and the OpenAPI spec.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.errors import DirectusRequestError
from ..core.schema_types import SchemaSnapshot

logger = logging.getLogger(__name__)


class DirectusClient:
    """
    HTTP client for the Directus REST API.

    Usage:
        async with DirectusClient("http://localhost:8055") as client:
            await client.login("admin@example.com", "password")
            snapshot = await client.fetch_snapshot()
    """

    def __init__(
        self,
        host: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize Directus client.

        Args:
            host: Base URL of the server (e.g., "http://localhost:8055")
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.host = host.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.token: str | None = None
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "DirectusClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.host,
                timeout=self.timeout,
                transport=self.transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def use_token(self, token: str) -> None:
        """Authenticate with a static access token."""
        self.token = token

    async def login(self, email: str, password: str) -> str:
        """
        Log in and keep the access token for later requests.

        Returns:
            The access token

        Raises:
            DirectusRequestError: If the credentials are rejected
        """
        data = await self._request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password, "mode": "json"},
        )
        payload = data.get("data") if isinstance(data, dict) else None
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise DirectusRequestError("/auth/login", 200, "response has no access token", self.host)
        self.token = token
        return token

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        """Send a request and return the decoded JSON body."""
        client = await self._get_client()

        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        logger.debug(f"{method} {self.host}{endpoint}")
        try:
            response = await client.request(method, endpoint, headers=headers, **kwargs)
        except httpx.RequestError as e:
            raise DirectusRequestError(endpoint, 0, str(e), self.host) from e

        if response.status_code >= 400:
            raise DirectusRequestError(endpoint, response.status_code, response.text, self.host)

        try:
            return response.json()
        except ValueError as e:
            raise DirectusRequestError(endpoint, response.status_code, f"invalid JSON: {e}", self.host) from e

    async def _fetch_data(self, endpoint: str) -> list[dict[str, Any]]:
        """GET an endpoint and return its `data` list."""
        body = await self._request("GET", endpoint)
        if not isinstance(body, dict):
            raise DirectusRequestError(endpoint, 200, "response body is not a JSON object", self.host)
        data = body.get("data") or []
        if not isinstance(data, list):
            raise DirectusRequestError(endpoint, 200, "response data is not a list", self.host)
        return data

    async def fetch_collections(self) -> list[dict[str, Any]]:
        return await self._fetch_data("/collections")

    async def fetch_fields(self) -> list[dict[str, Any]]:
        return await self._fetch_data("/fields")

    async def fetch_relations(self) -> list[dict[str, Any]]:
        return await self._fetch_data("/relations")

    async def fetch_spec(self) -> dict[str, Any]:
        """Fetch the OpenAPI document of the server."""
        spec = await self._request("GET", "/server/specs/oas")
        if not isinstance(spec, dict):
            raise DirectusRequestError("/server/specs/oas", 200, "response body is not a JSON object", self.host)
        return spec

    async def fetch_snapshot(self) -> SchemaSnapshot:
        """
        Fetch collections, fields and relations as one snapshot.

        Returns:
            SchemaSnapshot ready for the type generator
        """
        collections = await self.fetch_collections()
        fields = await self.fetch_fields()
        relations = await self.fetch_relations()
        logger.info(
            f"Fetched {len(collections)} collections, {len(fields)} fields, "
            f"{len(relations)} relations from {self.host}"
        )
        return SchemaSnapshot.from_payloads(collections, fields, relations)
