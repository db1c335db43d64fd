"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for the managed object and inventory binary endpoints.
"""

import json

import pytest

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, TEXT_MEDIA_TYPE, accepts, vnd
from cumulocity.client import CumulocityClient
from cumulocity.exceptions import DecodeError, UnstructuredApiError
from cumulocity.models import BinaryInfo, ManagedObject, ManagedObjectUser


class TestManagedObjectsApi:
    @pytest.mark.asyncio
    async def test_create_managed_object(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST",
            "/inventory/managedObjects",
            status_code=201,
            json_body={"id": "42", "name": "Pump", "c8y_IsDevice": {}, "c8y_Hardware": {"serialNumber": "SN"}},
        )
        device = ManagedObject(
            id="1",
            owner="admin",
            creation_time="x",
            name="Pump",
            c8y_is_device={},
            custom_fragments={"c8y_Hardware": {"serialNumber": "SN"}},
        )

        created = await client.inventory.managed_objects.create_managed_object(device)

        assert created.id == "42"
        assert created.custom_fragments == {"c8y_Hardware": {"serialNumber": "SN"}}
        sent = mock_adapter.last_request
        assert json.loads(sent.body) == {
            "name": "Pump",
            "c8y_IsDevice": {},
            "c8y_Hardware": {"serialNumber": "SN"},
        }
        assert sent.header_values("Content-Type") == [vnd("managedobject")]

    @pytest.mark.asyncio
    async def test_get_managed_objects_joins_ids(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/inventory/managedObjects", json_body={"managedObjects": []})

        await client.inventory.managed_objects.get_managed_objects(
            ids=["1", "2", "3"], with_total_pages=True
        )

        assert mock_adapter.last_request.params == (("ids", "1,2,3"), ("withTotalPages", "true"))

    @pytest.mark.asyncio
    async def test_get_number_of_managed_objects(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/inventory/managedObjects/count", body=b"128")

        count = await client.inventory.managed_objects.get_number_of_managed_objects(type="c8y_Pump")

        assert count == 128
        assert mock_adapter.last_request.header_values("Accept") == [
            accepts(ERROR_MEDIA_TYPE, TEXT_MEDIA_TYPE, JSON_MEDIA_TYPE)
        ]

    @pytest.mark.asyncio
    async def test_count_with_non_numeric_body(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/inventory/managedObjects/count", body=b"lots")
        with pytest.raises(DecodeError):
            await client.inventory.managed_objects.get_number_of_managed_objects()

    @pytest.mark.asyncio
    async def test_update_managed_object(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/inventory/managedObjects/42", json_body={"id": "42", "name": "New"})

        await client.inventory.managed_objects.update_managed_object(
            ManagedObject(id="42", self_="s", last_updated="x", name="New"), "42"
        )

        assert json.loads(mock_adapter.last_request.body) == {"name": "New"}

    @pytest.mark.asyncio
    async def test_delete_managed_object_flags(self, client, mock_adapter):
        mock_adapter.add_response("DELETE", "/inventory/managedObjects/42", status_code=204)

        await client.inventory.managed_objects.delete_managed_object(
            "42", cascade=True, with_device_user=False
        )

        assert mock_adapter.last_request.params == (("cascade", "true"), ("withDeviceUser", "false"))

    @pytest.mark.asyncio
    async def test_get_latest_availability(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET", "/inventory/managedObjects/42/availability", body=b'"2024-05-01T10:00:00.000Z"'
        )
        result = await client.inventory.managed_objects.get_latest_availability("42")
        assert result == "2024-05-01T10:00:00.000Z"

    @pytest.mark.asyncio
    async def test_supported_measurements_and_series(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET",
            "/inventory/managedObjects/42/supportedMeasurements",
            json_body={"c8y_SupportedMeasurements": ["c8y_Temperature"]},
        )
        mock_adapter.add_response(
            "GET",
            "/inventory/managedObjects/42/supportedSeries",
            json_body={"c8y_SupportedSeries": ["c8y_Temperature.T"]},
        )

        measurements = await client.inventory.managed_objects.get_supported_measurements("42")
        series = await client.inventory.managed_objects.get_supported_series("42")

        assert measurements.c8y_supported_measurements == ["c8y_Temperature"]
        assert series.c8y_supported_series == ["c8y_Temperature.T"]

    @pytest.mark.asyncio
    async def test_update_managed_object_user(self, client, mock_adapter):
        mock_adapter.add_response(
            "PUT", "/inventory/managedObjects/42/user", json_body={"userName": "device_42", "enabled": False}
        )

        user = await client.inventory.managed_objects.update_managed_object_user(
            ManagedObjectUser(self_="s", user_name="device_42", enabled=False), "42"
        )

        assert user.enabled is False
        assert json.loads(mock_adapter.last_request.body) == {"enabled": False}


class TestBinariesApi:
    @pytest.mark.asyncio
    async def test_upload_binary_multipart(self, mock_adapter):
        client = CumulocityClient(adapter=mock_adapter, multipart_boundary="binary-upload")
        mock_adapter.add_response(
            "POST",
            "/inventory/binaries",
            status_code=201,
            json_body={"id": "77", "name": "config.txt", "contentType": "text/plain", "length": 5},
        )

        binary = await client.inventory.binaries.upload_binary(
            BinaryInfo(name="config.txt", type="text/plain"), b"a=b\n"
        )

        assert binary.id == "77"
        assert binary.length == 5
        body = mock_adapter.last_request.body
        assert body.count(b"--binary-upload\r\n") == 2
        assert b'name="file"; filename="config.txt"' in body

    @pytest.mark.asyncio
    async def test_upload_binary_forbidden(self, client, mock_adapter):
        mock_adapter.add_response("POST", "/inventory/binaries", status_code=403)
        with pytest.raises(UnstructuredApiError, match="Not authorized"):
            await client.inventory.binaries.upload_binary(BinaryInfo(name="a", type="t"), b"x")

    @pytest.mark.asyncio
    async def test_get_binaries_repeats_ids(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/inventory/binaries", json_body={"managedObjects": [{"id": "1"}]})

        page = await client.inventory.binaries.get_binaries(ids=["1", "2"])

        assert page.managed_objects[0].id == "1"
        assert mock_adapter.last_request.params == (("ids", "1"), ("ids", "2"))

    @pytest.mark.asyncio
    async def test_download_replace_remove(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/inventory/binaries/77", body=b"a=b\n")
        mock_adapter.add_response("PUT", "/inventory/binaries/77", json_body={"id": "77", "length": 4})
        mock_adapter.add_response("DELETE", "/inventory/binaries/77", status_code=204)

        assert await client.inventory.binaries.get_binary("77") == b"a=b\n"
        replaced = await client.inventory.binaries.replace_binary(b"c=d\n", "77")
        assert replaced.length == 4
        assert mock_adapter.last_request.body == b"c=d\n"
        assert await client.inventory.binaries.remove_binary("77") == b""
