"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Usage and device statistics models.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.common import PagedCollection


@dataclass
class UsageStatisticsResourcesUsedBy(C8yModel):
    """Microservice resources consumed by one application."""

    name: Optional[str] = None
    cpu: Optional[int] = None
    memory: Optional[int] = None
    cause: Optional[str] = None


@dataclass
class UsageStatisticsResources(C8yModel):
    cpu: Optional[int] = None
    memory: Optional[int] = None
    used_by: Optional[List[UsageStatisticsResourcesUsedBy]] = None


@dataclass
class UsageCounters(C8yModel):
    """Counters shared by daily and summary usage statistics."""

    alarms_created_count: Optional[int] = None
    alarms_updated_count: Optional[int] = None
    device_count: Optional[int] = None
    device_endpoint_count: Optional[int] = None
    device_request_count: Optional[int] = None
    device_with_children_count: Optional[int] = None
    events_created_count: Optional[int] = None
    events_updated_count: Optional[int] = None
    inventories_created_count: Optional[int] = None
    inventories_updated_count: Optional[int] = None
    measurements_created_count: Optional[int] = None
    request_count: Optional[int] = None
    resources: Optional[UsageStatisticsResources] = None
    storage_size: Optional[int] = None
    subscribed_applications: Optional[List[str]] = None
    total_resource_create_and_update_count: Optional[int] = None


@dataclass
class DailyUsageStatistics(UsageCounters):
    self_: Optional[str] = json_field("self")
    day: Optional[str] = None


@dataclass
class TenantUsageStatisticsCollection(PagedCollection):
    usage_statistics: Optional[List[DailyUsageStatistics]] = None


@dataclass
class TenantUsageStatisticsSummary(UsageCounters):
    """Usage of one tenant summed over a date range."""

    peak_device_count: Optional[int] = None
    peak_device_with_children_count: Optional[int] = None
    peak_storage_size: Optional[int] = None


@dataclass
class AllTenantsUsageStatisticsSummary(TenantUsageStatisticsSummary):
    """Usage summary of one subtenant, with the tenant's identity."""

    creation_time: Optional[str] = None
    external_reference: Optional[str] = None
    parent_tenant_id: Optional[str] = None
    tenant_company: Optional[str] = None
    tenant_custom_properties: Optional[Dict[str, Any]] = None
    tenant_domain: Optional[str] = None
    tenant_id: Optional[str] = None


@dataclass
class DeviceStatistics(C8yModel):
    """Number of requests one device made in a day or month."""

    count: Optional[int] = None
    device_id: Optional[str] = None
    device_parents: Optional[List[str]] = None
    device_type: Optional[str] = None


@dataclass
class DeviceStatisticsCollection(C8yModel):
    self_: Optional[str] = json_field("self")
    next: Optional[str] = None
    prev: Optional[str] = None
    statistics: Optional[List[DeviceStatistics]] = None
