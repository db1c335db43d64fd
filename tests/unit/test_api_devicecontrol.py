"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for operations, bulk operations and new device requests.
"""

import json

import pytest

from cumulocity.api.base import vnd
from cumulocity.models import BulkOperation, NewDeviceRequest, Operation, OperationStatus
from cumulocity.models.devicecontrol import BulkOperationGeneralStatus, NewDeviceRequestStatus


class TestOperationsApi:
    @pytest.mark.asyncio
    async def test_create_operation(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST", "/devicecontrol/operations", json_body={"id": "op1", "status": "PENDING", "deviceId": "42"}
        )

        operation = await client.device_control.operations.create_operation(
            Operation(
                id="x",
                status=OperationStatus.SUCCESSFUL,
                device_id="42",
                custom_fragments={"c8y_Restart": {}},
            )
        )

        assert operation.status is OperationStatus.PENDING
        sent = mock_adapter.last_request
        assert json.loads(sent.body) == {"deviceId": "42", "c8y_Restart": {}}
        assert sent.header_values("Content-Type") == [vnd("operation")]

    @pytest.mark.asyncio
    async def test_update_operation_sends_status_only(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/devicecontrol/operations/op1", json_body={"id": "op1"})

        await client.device_control.operations.update_operation(
            Operation(device_id="42", status=OperationStatus.EXECUTING, failure_reason="none"), "op1"
        )

        assert json.loads(mock_adapter.last_request.body) == {"status": "EXECUTING"}

    @pytest.mark.asyncio
    async def test_get_operations_query(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET", "/devicecontrol/operations", json_body={"operations": [{"id": "op1"}]}
        )

        page = await client.device_control.operations.get_operations(
            device_id="42", status="PENDING", revert=True
        )

        assert page.operations[0].id == "op1"
        assert mock_adapter.last_request.params == (
            ("deviceId", "42"),
            ("revert", "true"),
            ("status", "PENDING"),
        )

    @pytest.mark.asyncio
    async def test_delete_operations(self, client, mock_adapter):
        mock_adapter.add_response("DELETE", "/devicecontrol/operations", status_code=204)
        assert await client.device_control.operations.delete_operations(device_id="42") == b""

    @pytest.mark.asyncio
    async def test_get_operation(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET", "/devicecontrol/operations/op1", json_body={"id": "op1", "status": "FAILED", "failureReason": "timeout"}
        )
        operation = await client.device_control.operations.get_operation("op1")
        assert operation.failure_reason == "timeout"


class TestBulkOperationsApi:
    @pytest.mark.asyncio
    async def test_create_bulk_operation(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST",
            "/devicecontrol/bulkoperations",
            json_body={"id": "b1", "generalStatus": "SCHEDULED", "progress": {"all": 3}},
        )

        bulk = await client.device_control.bulk_operations.create_bulk_operation(
            BulkOperation(
                id="x",
                group_id="g1",
                start_date="2024-05-01T10:00:00Z",
                creation_ramp=1.5,
                operation_prototype={"c8y_Restart": {}},
                general_status=BulkOperationGeneralStatus.FAILED,
            )
        )

        assert bulk.general_status is BulkOperationGeneralStatus.SCHEDULED
        assert bulk.progress.all == 3
        assert json.loads(mock_adapter.last_request.body) == {
            "groupId": "g1",
            "startDate": "2024-05-01T10:00:00Z",
            "creationRamp": 1.5,
            "operationPrototype": {"c8y_Restart": {}},
        }

    @pytest.mark.asyncio
    async def test_update_bulk_operation_keeps_ramp_only(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/devicecontrol/bulkoperations/b1", json_body={"id": "b1"})

        await client.device_control.bulk_operations.update_bulk_operation(
            BulkOperation(group_id="g1", start_date="s", creation_ramp=2.0, operation_prototype={}),
            "b1",
        )

        assert json.loads(mock_adapter.last_request.body) == {"creationRamp": 2.0}

    @pytest.mark.asyncio
    async def test_list_get_delete(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/devicecontrol/bulkoperations", json_body={"bulkOperations": []})
        mock_adapter.add_response("GET", "/devicecontrol/bulkoperations/b1", json_body={"id": "b1"})
        mock_adapter.add_response("DELETE", "/devicecontrol/bulkoperations/b1", status_code=204)

        api = client.device_control.bulk_operations
        assert (await api.get_bulk_operations()).bulk_operations == []
        assert (await api.get_bulk_operation("b1")).id == "b1"
        assert await api.delete_bulk_operation("b1") == b""


class TestNewDeviceRequestsApi:
    @pytest.mark.asyncio
    async def test_create_new_device_request(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST",
            "/devicecontrol/newDeviceRequests",
            json_body={"id": "SN-9", "status": "WAITING_FOR_CONNECTION"},
        )

        request = await client.device_control.new_device_requests.create_new_device_request(
            NewDeviceRequest(id="SN-9", self_="s", status=NewDeviceRequestStatus.ACCEPTED)
        )

        assert request.status is NewDeviceRequestStatus.WAITING_FOR_CONNECTION
        assert json.loads(mock_adapter.last_request.body) == {"id": "SN-9"}
        assert mock_adapter.last_request.header_values("Content-Type") == [vnd("newdevicerequest")]

    @pytest.mark.asyncio
    async def test_accept_new_device_request(self, client, mock_adapter):
        mock_adapter.add_response(
            "PUT", "/devicecontrol/newDeviceRequests/SN-9", json_body={"id": "SN-9", "status": "ACCEPTED"}
        )

        await client.device_control.new_device_requests.update_new_device_request(
            NewDeviceRequest(id="SN-9", status=NewDeviceRequestStatus.ACCEPTED), "SN-9"
        )

        assert json.loads(mock_adapter.last_request.body) == {"status": "ACCEPTED"}

    @pytest.mark.asyncio
    async def test_list_get_delete(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET", "/devicecontrol/newDeviceRequests", json_body={"newDeviceRequests": [{"id": "SN-9"}]}
        )
        mock_adapter.add_response("GET", "/devicecontrol/newDeviceRequests/SN-9", json_body={"id": "SN-9"})
        mock_adapter.add_response("DELETE", "/devicecontrol/newDeviceRequests/SN-9", status_code=204)

        api = client.device_control.new_device_requests
        assert (await api.get_new_device_requests()).new_device_requests[0].id == "SN-9"
        assert (await api.get_new_device_request("SN-9")).id == "SN-9"
        assert await api.delete_new_device_request("SN-9") == b""
