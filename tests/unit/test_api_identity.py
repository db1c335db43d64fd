"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for the external ID endpoints.
"""

import json

import pytest

from cumulocity.api.base import JSON_MEDIA_TYPE, vnd
from cumulocity.exceptions import StructuredApiError, UnstructuredApiError
from cumulocity.models import ExternalId, SourceReference


class TestExternalIdsApi:
    @pytest.mark.asyncio
    async def test_create_external_id(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST",
            "/identity/globalIds/42/externalIds",
            status_code=201,
            json_body={"externalId": "SN-001", "type": "c8y_Serial", "managedObject": {"id": "42"}},
        )

        created = await client.identity.create_external_id(
            ExternalId(
                external_id="SN-001",
                type="c8y_Serial",
                self_="s",
                managed_object=SourceReference(id="42"),
            ),
            "42",
        )

        assert created.managed_object.id == "42"
        sent = mock_adapter.last_request
        assert json.loads(sent.body) == {"externalId": "SN-001", "type": "c8y_Serial"}
        assert sent.header_values("Content-Type") == [vnd("externalid")]

    @pytest.mark.asyncio
    async def test_duplicate_identity_has_fixed_reason(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST",
            "/identity/globalIds/42/externalIds",
            status_code=409,
            json_body={"error": "identity/Conflict"},
        )

        with pytest.raises(UnstructuredApiError) as exc_info:
            await client.identity.create_external_id(ExternalId(external_id="SN", type="t"), "42")

        assert exc_info.value.status_code == 409
        assert exc_info.value.reason == "Duplicate - Identity already bound to a different Global ID."

    @pytest.mark.asyncio
    async def test_get_external_id_substitutes_segments(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET",
            "/identity/externalIds/c8y_Serial/SN/001",
            json_body={"externalId": "SN/001", "type": "c8y_Serial", "managedObject": {"id": "42"}},
        )

        external_id = await client.identity.get_external_id("c8y_Serial", "SN/001")

        assert external_id.external_id == "SN/001"

    @pytest.mark.asyncio
    async def test_get_external_id_not_found_empty_body(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/identity/externalIds/c8y_Serial/none", status_code=404)
        with pytest.raises(UnstructuredApiError) as exc_info:
            await client.identity.get_external_id("c8y_Serial", "none")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_get_external_ids(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET",
            "/identity/globalIds/42/externalIds",
            json_body={"externalIds": [{"externalId": "a", "type": "t"}, {"externalId": "b", "type": "t"}]},
        )
        ids = await client.identity.get_external_ids("42")
        assert [e.external_id for e in ids.external_ids] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_delete_external_id(self, client, mock_adapter):
        mock_adapter.add_response("DELETE", "/identity/externalIds/c8y_Serial/a", status_code=204)
        assert await client.identity.delete_external_id("c8y_Serial", "a") == b""
        assert mock_adapter.last_request.header_values("Accept") == [JSON_MEDIA_TYPE]

    @pytest.mark.asyncio
    async def test_unauthorized(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET", "/identity/globalIds/1/externalIds", status_code=401, json_body={"message": "Bad credentials"}
        )
        with pytest.raises(StructuredApiError, match="Bad credentials"):
            await client.identity.get_external_ids("1")
