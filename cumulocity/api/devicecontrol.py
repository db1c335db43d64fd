"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Device control API: operations, bulk operations and new device requests
(``/devicecontrol``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment, vnd
from cumulocity.models.devicecontrol import (
    BulkOperation,
    BulkOperationCollection,
    NewDeviceRequest,
    NewDeviceRequestCollection,
    Operation,
    OperationCollection,
)

Timestamp = Union[str, datetime]

CREATE_OPERATION_CLEAR = (
    "creationTime",
    "deviceExternalIDs",
    "bulkOperationId",
    "failureReason",
    "self",
    "id",
    "status",
)
UPDATE_OPERATION_CLEAR = (
    "creationTime",
    "deviceExternalIDs",
    "com_cumulocity_model_WebCamDevice",
    "bulkOperationId",
    "failureReason",
    "self",
    "id",
    "deviceId",
)

CREATE_BULK_OPERATION_CLEAR = ("generalStatus", "failedParentId", "self", "progress", "id", "status")
UPDATE_BULK_OPERATION_CLEAR = CREATE_BULK_OPERATION_CLEAR + (
    "groupId",
    "operationPrototype",
    "startDate",
)

CREATE_NEW_DEVICE_REQUEST_CLEAR = ("self", "status")
UPDATE_NEW_DEVICE_REQUEST_CLEAR = ("self", "id")


class OperationsApi(BaseApi):
    """Commands sent to devices and their execution status."""

    async def get_operations(
        self,
        agent_id: Optional[str] = None,
        bulk_operation_id: Optional[str] = None,
        current_page: Optional[int] = None,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        device_id: Optional[str] = None,
        fragment_type: Optional[str] = None,
        page_size: Optional[int] = None,
        revert: Optional[bool] = None,
        status: Optional[str] = None,
        with_total_pages: Optional[bool] = None,
    ) -> OperationCollection:
        request = (
            self._request(
                "GET",
                "/devicecontrol/operations",
                accepts(ERROR_MEDIA_TYPE, vnd("operationcollection")),
            )
            .add_query_param("agentId", agent_id)
            .add_query_param("deviceId", device_id)
            .add_query_param("status", status)
            .add_query_param("fragmentType", fragment_type)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("revert", revert)
            .add_query_param("bulkOperationId", bulk_operation_id)
            .add_query_param("pageSize", page_size)
            .add_query_param("currentPage", current_page)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=OperationCollection)

    async def create_operation(self, operation: Operation) -> Operation:
        request = (
            self._request(
                "POST", "/devicecontrol/operations", accepts(ERROR_MEDIA_TYPE, vnd("operation"))
            )
            .add_header("Content-Type", vnd("operation"))
        )
        return await self._pipeline.execute(
            request, result_type=Operation, body=operation, clear=CREATE_OPERATION_CLEAR
        )

    async def delete_operations(
        self,
        agent_id: Optional[str] = None,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        device_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> bytes:
        request = (
            self._request("DELETE", "/devicecontrol/operations", JSON_MEDIA_TYPE)
            .add_query_param("agentId", agent_id)
            .add_query_param("deviceId", device_id)
            .add_query_param("status", status)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
        )
        return await self._pipeline.execute(request, result_type=bytes)

    async def get_operation(self, operation_id: str) -> Operation:
        request = self._request(
            "GET",
            f"/devicecontrol/operations/{segment(operation_id)}",
            accepts(ERROR_MEDIA_TYPE, vnd("operation")),
        )
        return await self._pipeline.execute(request, result_type=Operation)

    async def update_operation(self, operation: Operation, operation_id: str) -> Operation:
        """Report progress of an operation, typically its ``status``."""
        request = (
            self._request(
                "PUT",
                f"/devicecontrol/operations/{segment(operation_id)}",
                accepts(ERROR_MEDIA_TYPE, vnd("operation")),
            )
            .add_header("Content-Type", vnd("operation"))
        )
        return await self._pipeline.execute(
            request, result_type=Operation, body=operation, clear=UPDATE_OPERATION_CLEAR
        )


class BulkOperationsApi(BaseApi):
    """Operations fanned out to every device of a group."""

    async def get_bulk_operations(self) -> BulkOperationCollection:
        request = self._request(
            "GET",
            "/devicecontrol/bulkoperations",
            accepts(vnd("bulkoperationcollection"), ERROR_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=BulkOperationCollection)

    async def create_bulk_operation(self, bulk_operation: BulkOperation) -> BulkOperation:
        request = (
            self._request(
                "POST",
                "/devicecontrol/bulkoperations",
                accepts(ERROR_MEDIA_TYPE, vnd("bulkoperation")),
            )
            .add_header("Content-Type", vnd("bulkoperation"))
        )
        return await self._pipeline.execute(
            request,
            result_type=BulkOperation,
            body=bulk_operation,
            clear=CREATE_BULK_OPERATION_CLEAR,
        )

    async def get_bulk_operation(self, bulk_operation_id: str) -> BulkOperation:
        request = self._request(
            "GET",
            f"/devicecontrol/bulkoperations/{segment(bulk_operation_id)}",
            accepts(ERROR_MEDIA_TYPE, vnd("bulkoperation")),
        )
        return await self._pipeline.execute(request, result_type=BulkOperation)

    async def update_bulk_operation(
        self, bulk_operation: BulkOperation, bulk_operation_id: str
    ) -> BulkOperation:
        request = (
            self._request(
                "PUT",
                f"/devicecontrol/bulkoperations/{segment(bulk_operation_id)}",
                accepts(ERROR_MEDIA_TYPE, vnd("bulkoperation")),
            )
            .add_header("Content-Type", vnd("bulkoperation"))
        )
        return await self._pipeline.execute(
            request,
            result_type=BulkOperation,
            body=bulk_operation,
            clear=UPDATE_BULK_OPERATION_CLEAR,
        )

    async def delete_bulk_operation(self, bulk_operation_id: str) -> bytes:
        request = self._request(
            "DELETE", f"/devicecontrol/bulkoperations/{segment(bulk_operation_id)}", JSON_MEDIA_TYPE
        )
        return await self._pipeline.execute(request, result_type=bytes)


class NewDeviceRequestsApi(BaseApi):
    """Registration requests of devices that are not yet connected."""

    async def get_new_device_requests(self) -> NewDeviceRequestCollection:
        request = self._request(
            "GET",
            "/devicecontrol/newDeviceRequests",
            accepts(ERROR_MEDIA_TYPE, vnd("newdevicerequestcollection")),
        )
        return await self._pipeline.execute(request, result_type=NewDeviceRequestCollection)

    async def create_new_device_request(self, new_device_request: NewDeviceRequest) -> NewDeviceRequest:
        request = (
            self._request(
                "POST",
                "/devicecontrol/newDeviceRequests",
                accepts(vnd("newdevicerequest"), ERROR_MEDIA_TYPE),
            )
            .add_header("Content-Type", vnd("newdevicerequest"))
        )
        return await self._pipeline.execute(
            request,
            result_type=NewDeviceRequest,
            body=new_device_request,
            clear=CREATE_NEW_DEVICE_REQUEST_CLEAR,
        )

    async def get_new_device_request(self, request_id: str) -> NewDeviceRequest:
        request = self._request(
            "GET",
            f"/devicecontrol/newDeviceRequests/{segment(request_id)}",
            accepts(vnd("newdevicerequest"), ERROR_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=NewDeviceRequest)

    async def update_new_device_request(
        self, new_device_request: NewDeviceRequest, request_id: str
    ) -> NewDeviceRequest:
        """Accept a device registration by setting ``status`` to ``ACCEPTED``."""
        request = (
            self._request(
                "PUT",
                f"/devicecontrol/newDeviceRequests/{segment(request_id)}",
                accepts(vnd("newdevicerequest"), ERROR_MEDIA_TYPE),
            )
            .add_header("Content-Type", vnd("newdevicerequest"))
        )
        return await self._pipeline.execute(
            request,
            result_type=NewDeviceRequest,
            body=new_device_request,
            clear=UPDATE_NEW_DEVICE_REQUEST_CLEAR,
        )

    async def delete_new_device_request(self, request_id: str) -> bytes:
        request = self._request(
            "DELETE", f"/devicecontrol/newDeviceRequests/{segment(request_id)}", JSON_MEDIA_TYPE
        )
        return await self._pipeline.execute(request, result_type=bytes)
