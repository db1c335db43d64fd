"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Resource API classes, one per platform API group.
"""

from cumulocity.api.alarms import AlarmsApi
from cumulocity.api.applications import (
    ApplicationBinariesApi,
    ApplicationsApi,
    ApplicationVersionsApi,
    BootstrapUserApi,
    CurrentApplicationApi,
)
from cumulocity.api.attachments import AttachmentsApi
from cumulocity.api.audits import AuditsApi
from cumulocity.api.base import ApiPipeline, BaseApi
from cumulocity.api.certificates import TrustedCertificatesApi
from cumulocity.api.devicecontrol import BulkOperationsApi, NewDeviceRequestsApi, OperationsApi
from cumulocity.api.events import EventsApi
from cumulocity.api.features import FeatureTogglesApi
from cumulocity.api.identity import ExternalIdsApi
from cumulocity.api.inventory import BinariesApi, ChildOperationsApi, ManagedObjectsApi
from cumulocity.api.measurements import MeasurementsApi
from cumulocity.api.notifications import RealtimeNotificationApi, SubscriptionsApi, TokensApi
from cumulocity.api.platform import PlatformApi
from cumulocity.api.retention import RetentionRulesApi
from cumulocity.api.statistics import DeviceStatisticsApi, UsageStatisticsApi
from cumulocity.api.tenants import OptionsApi, SystemOptionsApi, TenantApplicationsApi, TenantsApi
from cumulocity.api.users import (
    CurrentUserApi,
    DevicePermissionsApi,
    GroupsApi,
    InventoryRolesApi,
    RolesApi,
    UsersApi,
)

__all__ = [
    "AlarmsApi",
    "ApiPipeline",
    "ApplicationBinariesApi",
    "ApplicationVersionsApi",
    "ApplicationsApi",
    "AttachmentsApi",
    "AuditsApi",
    "BaseApi",
    "BinariesApi",
    "BootstrapUserApi",
    "BulkOperationsApi",
    "ChildOperationsApi",
    "CurrentApplicationApi",
    "CurrentUserApi",
    "DevicePermissionsApi",
    "DeviceStatisticsApi",
    "EventsApi",
    "ExternalIdsApi",
    "FeatureTogglesApi",
    "GroupsApi",
    "InventoryRolesApi",
    "ManagedObjectsApi",
    "MeasurementsApi",
    "NewDeviceRequestsApi",
    "OperationsApi",
    "OptionsApi",
    "PlatformApi",
    "RealtimeNotificationApi",
    "RetentionRulesApi",
    "RolesApi",
    "SubscriptionsApi",
    "SystemOptionsApi",
    "TenantApplicationsApi",
    "TenantsApi",
    "TokensApi",
    "TrustedCertificatesApi",
    "UsageStatisticsApi",
    "UsersApi",
]
