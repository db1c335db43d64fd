"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Device control models: operations, bulk operations and new device requests.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, fragments_field, json_field
from cumulocity.models.common import PagedCollection
from cumulocity.models.identity import ExternalIds


class OperationStatus(str, Enum):
    PENDING = "PENDING"
    EXECUTING = "EXECUTING"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"


@dataclass
class Operation(C8yModel):
    """An operation sent to a device; command fragments are custom fragments."""

    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    device_id: Optional[str] = None
    status: Optional[OperationStatus] = None
    failure_reason: Optional[str] = None
    creation_time: Optional[str] = None
    bulk_operation_id: Optional[str] = None
    device_external_ids: Optional[ExternalIds] = json_field("deviceExternalIDs")
    custom_fragments: Dict[str, Any] = fragments_field()


@dataclass
class OperationCollection(PagedCollection):
    operations: Optional[List[Operation]] = None


class BulkOperationStatus(str, Enum):
    ACTIVE = "ACTIVE"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    DELETED = "DELETED"


class BulkOperationGeneralStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    EXECUTING = "EXECUTING"
    EXECUTING_WITH_ERRORS = "EXECUTING_WITH_ERRORS"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"
    CANCELED = "CANCELED"


@dataclass
class BulkOperationProgress(C8yModel):
    pending: Optional[int] = None
    failed: Optional[int] = None
    executing: Optional[int] = None
    successful: Optional[int] = None
    all: Optional[int] = None


@dataclass
class BulkOperation(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    group_id: Optional[str] = None
    failed_parent_id: Optional[str] = None
    start_date: Optional[str] = None
    creation_ramp: Optional[float] = None
    operation_prototype: Optional[Dict[str, Any]] = None
    status: Optional[BulkOperationStatus] = None
    general_status: Optional[BulkOperationGeneralStatus] = None
    progress: Optional[BulkOperationProgress] = None


@dataclass
class BulkOperationCollection(PagedCollection):
    bulk_operations: Optional[List[BulkOperation]] = None


class NewDeviceRequestStatus(str, Enum):
    WAITING_FOR_CONNECTION = "WAITING_FOR_CONNECTION"
    PENDING_ACCEPTANCE = "PENDING_ACCEPTANCE"
    ACCEPTED = "ACCEPTED"


@dataclass
class NewDeviceRequest(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    group_id: Optional[str] = None
    type: Optional[str] = None
    tenant_id: Optional[str] = None
    status: Optional[NewDeviceRequestStatus] = None
    owner: Optional[str] = None
    creation_time: Optional[str] = None
    security_token: Optional[str] = None


@dataclass
class NewDeviceRequestCollection(PagedCollection):
    new_device_requests: Optional[List[NewDeviceRequest]] = None
