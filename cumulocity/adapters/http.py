"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

HTTP/REST transport adapter (default).
"""

from __future__ import annotations

import base64
import time
from typing import Optional

import httpx

from cumulocity.adapters.base import BaseAdapter
from cumulocity.core.request import RequestDescriptor
from cumulocity.core.response import ResponseEnvelope
from cumulocity.exceptions import SDKConfigurationError, TransportError
from cumulocity.logging_config import get_logger, log_request, log_response

logger = get_logger(__name__)

APPLICATION_KEY_HEADER = "X-Cumulocity-Application-Key"


def basic_authorization(username: str, password: str, tenant: Optional[str] = None) -> str:
    """``Authorization`` value for platform basic auth (``tenant/user:password``)."""
    principal = f"{tenant}/{username}" if tenant else username
    token = base64.b64encode(f"{principal}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class HttpAdapter(BaseAdapter):
    """Default HTTP transport using ``httpx.AsyncClient``.

    One client (and its connection pool) is shared by all calls; it holds no
    per-call state.

    Args:
        base_url: Root URL of the tenant (e.g. ``https://example.cumulocity.com``).
        tenant: Tenant id prefixed to the basic-auth user name.
        username: Basic-auth user name.
        password: Basic-auth password.
        token: OAI-Secure / JWT token sent as ``Authorization: Bearer``.
            Mutually exclusive with username/password.
        application_key: Value of the ``X-Cumulocity-Application-Key`` header.
        timeout: Request timeout in seconds.
        verify_ssl: Verify server certificates.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        base_url: str,
        tenant: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        application_key: Optional[str] = None,
        timeout: float = 30,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if token and (username or password):
            raise SDKConfigurationError(
                "HttpAdapter accepts either a token or username/password, not both."
            )
        if bool(username) != bool(password):
            raise SDKConfigurationError(
                "HttpAdapter requires username and password together."
            )
        self._base_url = base_url.rstrip("/")
        self._tenant = tenant
        self._username = username
        self._password = password
        self._token = token
        self._application_key = application_key
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._connected = False

    @property
    def base_url(self) -> str:
        return self._base_url

    def _authorization(self) -> Optional[str]:
        if self._token:
            return f"Bearer {self._token}"
        if self._username and self._password:
            return basic_authorization(self._username, self._password, self._tenant)
        return None

    def adapt(self, request: RequestDescriptor) -> RequestDescriptor:
        adapted = request if request.base_url else request.with_base_url(self._base_url)
        authorization = self._authorization()
        if authorization and not adapted.has_header("Authorization"):
            adapted = adapted.with_header("Authorization", authorization)
        if self._application_key and not adapted.has_header(APPLICATION_KEY_HEADER):
            adapted = adapted.with_header(APPLICATION_KEY_HEADER, self._application_key)
        return adapted

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                verify=self._verify_ssl,
                transport=self._transport,
            )
            self._connected = True
        return self._client

    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        client = self._ensure_client()
        url = request.url if request.base_url else f"{self._base_url}{request.path}"

        log_request(
            logger,
            request.method,
            url,
            params=len(request.params),
            headers=[name for name, _ in request.headers],
            body_bytes=len(request.body or b""),
        )
        start = time.monotonic()
        try:
            resp = await client.request(
                method=request.method,
                url=url,
                params=list(request.params),
                headers=list(request.headers),
                content=request.body,
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "http_transport_error",
                method=request.method,
                url=url,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise TransportError(f"{request.method} {url} failed: {exc}") from exc
        elapsed = round((time.monotonic() - start) * 1000, 2)

        log_response(logger, request.method, url, resp.status_code, elapsed)
        return ResponseEnvelope(
            status_code=resp.status_code,
            body=resp.content,
            headers=tuple(resp.headers.multi_items()),
            request=request,
            elapsed_ms=elapsed,
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
