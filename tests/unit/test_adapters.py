"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for transport adapters.
"""

import base64

import httpx
import pytest

from cumulocity.adapters.base import BaseAdapter
from cumulocity.adapters.http import APPLICATION_KEY_HEADER, HttpAdapter, basic_authorization
from cumulocity.adapters.mock import MockAdapter
from cumulocity.core.request import RequestDescriptor
from cumulocity.core.response import ResponseEnvelope
from cumulocity.exceptions import SDKConfigurationError, TransportError


BASE_URL = "https://example.cumulocity.com"


def recording_transport(status_code=200, content=b"{}", headers=None):
    """httpx transport answering every call the same way and recording it."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, content=content, headers=headers or {})

    return httpx.MockTransport(handler), seen


class TestBasicAuthorization:
    def test_tenant_prefix(self):
        value = basic_authorization("admin", "secret", tenant="t100")
        assert value == "Basic " + base64.b64encode(b"t100/admin:secret").decode()

    def test_without_tenant(self):
        value = basic_authorization("admin", "secret")
        assert value == "Basic " + base64.b64encode(b"admin:secret").decode()


class TestHttpAdapter:
    def test_is_base_adapter(self):
        assert isinstance(HttpAdapter(base_url=BASE_URL), BaseAdapter)

    def test_token_and_password_conflict(self):
        with pytest.raises(SDKConfigurationError):
            HttpAdapter(base_url=BASE_URL, username="u", password="p", token="t")

    def test_username_requires_password(self):
        with pytest.raises(SDKConfigurationError):
            HttpAdapter(base_url=BASE_URL, username="u")

    def test_adapt_sets_base_url_and_basic_auth(self):
        adapter = HttpAdapter(base_url=BASE_URL + "/", tenant="t1", username="u", password="p")
        adapted = adapter.adapt(RequestDescriptor(method="GET", path="/alarm/alarms"))

        assert adapted.url == BASE_URL + "/alarm/alarms"
        assert adapted.header_values("Authorization") == [basic_authorization("u", "p", "t1")]

    def test_adapt_bearer_token_and_application_key(self):
        adapter = HttpAdapter(base_url=BASE_URL, token="jwt", application_key="app-key")
        adapted = adapter.adapt(RequestDescriptor(method="GET", path="/x"))

        assert adapted.header_values("Authorization") == ["Bearer jwt"]
        assert adapted.header_values(APPLICATION_KEY_HEADER) == ["app-key"]

    def test_adapt_is_idempotent(self):
        adapter = HttpAdapter(base_url=BASE_URL, username="u", password="p", application_key="k")
        request = RequestDescriptor(method="POST", path="/x", params=(("a", "1"),), body=b"{}")
        once = adapter.adapt(request)
        twice = adapter.adapt(once)

        assert once == twice
        assert (twice.method, twice.path, twice.params, twice.body) == ("POST", "/x", (("a", "1"),), b"{}")

    def test_adapt_keeps_explicit_authorization(self):
        adapter = HttpAdapter(base_url=BASE_URL, username="u", password="p")
        request = RequestDescriptor(method="GET", path="/x", headers=(("Authorization", "Bearer other"),))
        assert adapter.adapt(request).header_values("Authorization") == ["Bearer other"]

    @pytest.mark.asyncio
    async def test_send_translates_request_and_response(self):
        transport, seen = recording_transport(
            status_code=201, content=b'{"id": "1"}', headers={"Content-Type": "application/json"}
        )
        adapter = HttpAdapter(base_url=BASE_URL, username="u", password="p", transport=transport)
        request = adapter.adapt(
            RequestDescriptor(
                method="POST",
                path="/event/events",
                headers=(("Accept", "application/json"),),
                params=(("type", "a"), ("type", "b")),
                body=b'{"text": "hi"}',
            )
        )

        envelope = await adapter.send(request)

        assert envelope.status_code == 201
        assert envelope.body == b'{"id": "1"}'
        assert envelope.header("content-type") == "application/json"
        assert envelope.request is request
        assert adapter.is_connected is True

        sent = seen[0]
        assert sent.method == "POST"
        assert sent.url.path == "/event/events"
        assert sent.url.params.get_list("type") == ["a", "b"]
        assert sent.headers["Accept"] == "application/json"
        assert sent.headers["Authorization"].startswith("Basic ")
        assert sent.content == b'{"text": "hi"}'
        await adapter.close()

    @pytest.mark.asyncio
    async def test_send_without_adapt_uses_base_url(self):
        transport, seen = recording_transport()
        adapter = HttpAdapter(base_url=BASE_URL, transport=transport)
        await adapter.send(RequestDescriptor(method="GET", path="/tenant/currentTenant"))
        assert str(seen[0].url) == BASE_URL + "/tenant/currentTenant"
        await adapter.close()

    @pytest.mark.asyncio
    async def test_path_characters_are_encoded_by_httpx(self):
        transport, seen = recording_transport()
        adapter = HttpAdapter(base_url=BASE_URL, transport=transport)
        await adapter.send(RequestDescriptor(method="GET", path="/user/t100/userByName/j doe"))
        assert seen[0].url.raw_path == b"/user/t100/userByName/j%20doe"
        await adapter.close()

    @pytest.mark.asyncio
    async def test_error_status_is_not_raised(self):
        transport, _ = recording_transport(status_code=500, content=b"oops")
        adapter = HttpAdapter(base_url=BASE_URL, transport=transport)
        envelope = await adapter.send(RequestDescriptor(method="GET", path="/x"))
        assert envelope.status_code == 500
        assert envelope.body == b"oops"
        await adapter.close()

    @pytest.mark.asyncio
    async def test_connection_failure_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter = HttpAdapter(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        with pytest.raises(TransportError) as exc_info:
            await adapter.send(RequestDescriptor(method="GET", path="/x"))
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        await adapter.close()

    @pytest.mark.asyncio
    async def test_close_resets_connection(self):
        transport, _ = recording_transport()
        adapter = HttpAdapter(base_url=BASE_URL, transport=transport)
        assert adapter.is_connected is False
        await adapter.send(RequestDescriptor(method="GET", path="/x"))
        await adapter.close()
        assert adapter.is_connected is False


class TestMockAdapter:
    @pytest.mark.asyncio
    async def test_send_returns_matched_response(self):
        expected = ResponseEnvelope(status_code=200, body=b'{"ok": true}')
        adapter = MockAdapter(responses={("POST", "/event/events"): expected})

        request = RequestDescriptor(method="POST", path="/event/events", body=b"{}")
        result = await adapter.send(request)

        assert result.status_code == 200
        assert result.body == b'{"ok": true}'
        assert result.request is request

    @pytest.mark.asyncio
    async def test_send_returns_404_for_unmocked(self):
        adapter = MockAdapter()
        result = await adapter.send(RequestDescriptor(method="GET", path="/unknown"))
        assert result.status_code == 404
        assert result.body == b'{"error": "not mocked"}'

    @pytest.mark.asyncio
    async def test_add_response_serializes_json(self):
        adapter = MockAdapter().add_response("get", "/x", json_body={"id": "1"})
        result = await adapter.send(RequestDescriptor(method="GET", path="/x"))
        assert result.body == b'{"id": "1"}'

    @pytest.mark.asyncio
    async def test_tracks_sent_requests(self):
        adapter = MockAdapter()
        assert adapter.last_request is None
        await adapter.send(RequestDescriptor(method="DELETE", path="/alarm/alarms/1"))
        assert len(adapter.sent_requests) == 1
        assert adapter.last_request.path == "/alarm/alarms/1"

    @pytest.mark.asyncio
    async def test_close_clears_state(self):
        adapter = MockAdapter().add_response("GET", "/x")
        await adapter.send(RequestDescriptor(method="GET", path="/x"))
        await adapter.close()
        assert adapter.sent_requests == []
        assert adapter.is_connected is True

    def test_adapt_is_identity(self):
        request = RequestDescriptor(method="GET", path="/x")
        assert MockAdapter().adapt(request) is request
