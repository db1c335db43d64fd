"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Typed request and response models.
"""

from cumulocity.models.alarms import Alarm, AlarmCollection, AlarmSeverity, AlarmStatus
from cumulocity.models.applications import (
    Application,
    ApplicationAttachment,
    ApplicationBinaries,
    ApplicationCollection,
    ApplicationSettings,
    ApplicationUserCollection,
    ApplicationVersion,
    ApplicationVersionCollection,
    ApplicationVersionTag,
    BootstrapUser,
)
from cumulocity.models.audits import AuditChange, AuditRecord, AuditRecordCollection, AuditSeverity
from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.certificates import (
    SignedVerificationCode,
    TrustedCertificate,
    TrustedCertificateCollection,
    TrustedCertificateStatus,
)
from cumulocity.models.common import (
    ApiResource,
    C8yError,
    PageStatistics,
    PagedCollection,
    PlatformApiResource,
    SourceReference,
)
from cumulocity.models.devicecontrol import (
    BulkOperation,
    BulkOperationCollection,
    NewDeviceRequest,
    NewDeviceRequestCollection,
    Operation,
    OperationCollection,
    OperationStatus,
)
from cumulocity.models.events import BinaryInfo, Event, EventBinary, EventCollection
from cumulocity.models.features import (
    FeaturePhase,
    FeatureStrategy,
    FeatureToggle,
    FeatureToggleValue,
    TenantFeatureToggleValue,
)
from cumulocity.models.identity import ExternalId, ExternalIds
from cumulocity.models.inventory import (
    Binary,
    BinaryCollection,
    ChildAssignment,
    ChildAssignments,
    ChildReference,
    ManagedObject,
    ManagedObjectCollection,
    ManagedObjectReferenceCollection,
    ManagedObjectUser,
    SupportedMeasurements,
    SupportedSeries,
)
from cumulocity.models.measurements import Measurement, MeasurementCollection, MeasurementSeries
from cumulocity.models.notifications import (
    NotificationSubscription,
    NotificationSubscriptionCollection,
    NotificationToken,
    NotificationTokenClaims,
    RealtimeNotification,
)
from cumulocity.models.retention import RetentionRule, RetentionRuleCollection
from cumulocity.models.statistics import (
    AllTenantsUsageStatisticsSummary,
    DailyUsageStatistics,
    DeviceStatistics,
    DeviceStatisticsCollection,
    TenantUsageStatisticsCollection,
    TenantUsageStatisticsSummary,
)
from cumulocity.models.tenants import (
    ApplicationReferenceCollection,
    CategoryKeyOption,
    CurrentTenant,
    Option,
    OptionCollection,
    SubscribedApplicationReference,
    Tenant,
    TenantCollection,
    TenantTfaData,
)
from cumulocity.models.users import (
    CurrentUser,
    DevicePermissionOwners,
    Group,
    GroupCollection,
    GroupDevicePermissions,
    GroupReferenceCollection,
    InventoryAssignment,
    InventoryAssignmentCollection,
    InventoryRole,
    InventoryRoleCollection,
    InventoryRolePermission,
    Link,
    Role,
    RoleCollection,
    RoleReference,
    RoleReferenceCollection,
    SubscribedRole,
    SubscribedUser,
    UpdatedDevicePermissions,
    User,
    UserCollection,
    UserDevicePermissions,
    UserReference,
    UserReferenceCollection,
)

__all__ = [
    "Alarm",
    "AlarmCollection",
    "AlarmSeverity",
    "AlarmStatus",
    "AllTenantsUsageStatisticsSummary",
    "ApiResource",
    "Application",
    "ApplicationAttachment",
    "ApplicationBinaries",
    "ApplicationCollection",
    "ApplicationReferenceCollection",
    "ApplicationSettings",
    "ApplicationUserCollection",
    "ApplicationVersion",
    "ApplicationVersionCollection",
    "ApplicationVersionTag",
    "AuditChange",
    "AuditRecord",
    "AuditRecordCollection",
    "AuditSeverity",
    "Binary",
    "BinaryCollection",
    "BinaryInfo",
    "BootstrapUser",
    "BulkOperation",
    "BulkOperationCollection",
    "C8yError",
    "C8yModel",
    "CategoryKeyOption",
    "ChildAssignment",
    "ChildAssignments",
    "ChildReference",
    "CurrentTenant",
    "CurrentUser",
    "DailyUsageStatistics",
    "DevicePermissionOwners",
    "DeviceStatistics",
    "DeviceStatisticsCollection",
    "Event",
    "EventBinary",
    "EventCollection",
    "ExternalId",
    "ExternalIds",
    "FeaturePhase",
    "FeatureStrategy",
    "FeatureToggle",
    "FeatureToggleValue",
    "Group",
    "GroupCollection",
    "GroupDevicePermissions",
    "GroupReferenceCollection",
    "InventoryAssignment",
    "InventoryAssignmentCollection",
    "InventoryRole",
    "InventoryRoleCollection",
    "InventoryRolePermission",
    "Link",
    "ManagedObject",
    "ManagedObjectCollection",
    "ManagedObjectReferenceCollection",
    "ManagedObjectUser",
    "Measurement",
    "MeasurementCollection",
    "MeasurementSeries",
    "NewDeviceRequest",
    "NewDeviceRequestCollection",
    "NotificationSubscription",
    "NotificationSubscriptionCollection",
    "NotificationToken",
    "NotificationTokenClaims",
    "Operation",
    "OperationCollection",
    "OperationStatus",
    "Option",
    "OptionCollection",
    "PageStatistics",
    "PagedCollection",
    "PlatformApiResource",
    "RealtimeNotification",
    "RetentionRule",
    "RetentionRuleCollection",
    "Role",
    "RoleCollection",
    "RoleReference",
    "RoleReferenceCollection",
    "SignedVerificationCode",
    "SourceReference",
    "SubscribedApplicationReference",
    "SubscribedRole",
    "SubscribedUser",
    "SupportedMeasurements",
    "SupportedSeries",
    "Tenant",
    "TenantCollection",
    "TenantFeatureToggleValue",
    "TenantTfaData",
    "TenantUsageStatisticsCollection",
    "TenantUsageStatisticsSummary",
    "TrustedCertificate",
    "TrustedCertificateCollection",
    "TrustedCertificateStatus",
    "UpdatedDevicePermissions",
    "User",
    "UserCollection",
    "UserDevicePermissions",
    "UserReference",
    "UserReferenceCollection",
    "json_field",
]
