"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Cumulocity Client & Builder.

Provides two entry points to initialize the client:
    - ``CumulocityClient(base_url=..., tenant=..., username=..., password=...)``
      for the common case
    - ``CumulocityBuilder().set_base_url(...).set_credentials(...).use(...).build()``
      for custom transports and extensions
"""

from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Any, List, Optional

from cumulocity.adapters.base import BaseAdapter
from cumulocity.adapters.http import HttpAdapter
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
from cumulocity.api.base import ApiPipeline
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
from cumulocity.api.tenants import (
    OptionsApi,
    SystemOptionsApi,
    TenantApplicationsApi,
    TenantsApi,
)
from cumulocity.api.users import (
    CurrentUserApi,
    DevicePermissionsApi,
    GroupsApi,
    InventoryRolesApi,
    RolesApi,
    UsersApi,
)
from cumulocity.config.settings import load_config
from cumulocity.exceptions import SDKConfigurationError
from cumulocity.extensions import CumulocityExtension
from cumulocity.hooks import HookRegistry
from cumulocity.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Resource groups
# ---------------------------------------------------------------------------

class InventoryGroup:
    """Managed objects, their child hierarchy and stored binaries."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    @cached_property
    def managed_objects(self) -> ManagedObjectsApi:
        return ManagedObjectsApi(self._pipeline)

    @cached_property
    def binaries(self) -> BinariesApi:
        return BinariesApi(self._pipeline)

    @cached_property
    def child_operations(self) -> ChildOperationsApi:
        return ChildOperationsApi(self._pipeline)


class DeviceControlGroup:
    """Operations, bulk operations and device registration."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    @cached_property
    def operations(self) -> OperationsApi:
        return OperationsApi(self._pipeline)

    @cached_property
    def bulk_operations(self) -> BulkOperationsApi:
        return BulkOperationsApi(self._pipeline)

    @cached_property
    def new_device_requests(self) -> NewDeviceRequestsApi:
        return NewDeviceRequestsApi(self._pipeline)


class ApplicationsGroup:
    """Applications with their binaries, versions and bootstrap users."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    @cached_property
    def applications(self) -> ApplicationsApi:
        return ApplicationsApi(self._pipeline)

    @cached_property
    def binaries(self) -> ApplicationBinariesApi:
        return ApplicationBinariesApi(self._pipeline)

    @cached_property
    def versions(self) -> ApplicationVersionsApi:
        return ApplicationVersionsApi(self._pipeline)

    @cached_property
    def current_application(self) -> CurrentApplicationApi:
        return CurrentApplicationApi(self._pipeline)

    @cached_property
    def bootstrap_user(self) -> BootstrapUserApi:
        return BootstrapUserApi(self._pipeline)


class NotificationsGroup:
    """Notification 2.0 subscriptions and tokens, and realtime notifications."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    @cached_property
    def subscriptions(self) -> SubscriptionsApi:
        return SubscriptionsApi(self._pipeline)

    @cached_property
    def tokens(self) -> TokensApi:
        return TokensApi(self._pipeline)

    @cached_property
    def realtime(self) -> RealtimeNotificationApi:
        return RealtimeNotificationApi(self._pipeline)


class TenantsGroup:
    """Tenants, options, subscriptions, trusted certificates and statistics."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    @cached_property
    def tenants(self) -> TenantsApi:
        return TenantsApi(self._pipeline)

    @cached_property
    def options(self) -> OptionsApi:
        return OptionsApi(self._pipeline)

    @cached_property
    def applications(self) -> TenantApplicationsApi:
        """Application subscriptions of a tenant."""
        return TenantApplicationsApi(self._pipeline)

    @cached_property
    def system_options(self) -> SystemOptionsApi:
        return SystemOptionsApi(self._pipeline)

    @cached_property
    def trusted_certificates(self) -> TrustedCertificatesApi:
        return TrustedCertificatesApi(self._pipeline)

    @cached_property
    def usage_statistics(self) -> UsageStatisticsApi:
        return UsageStatisticsApi(self._pipeline)

    @cached_property
    def device_statistics(self) -> DeviceStatisticsApi:
        return DeviceStatisticsApi(self._pipeline)


class UsersGroup:
    """Users, groups, roles, inventory roles and device permissions."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    @cached_property
    def users(self) -> UsersApi:
        return UsersApi(self._pipeline)

    @cached_property
    def current_user(self) -> CurrentUserApi:
        return CurrentUserApi(self._pipeline)

    @cached_property
    def groups(self) -> GroupsApi:
        return GroupsApi(self._pipeline)

    @cached_property
    def roles(self) -> RolesApi:
        return RolesApi(self._pipeline)

    @cached_property
    def inventory_roles(self) -> InventoryRolesApi:
        return InventoryRolesApi(self._pipeline)

    @cached_property
    def device_permissions(self) -> DevicePermissionsApi:
        return DevicePermissionsApi(self._pipeline)


# ---------------------------------------------------------------------------
# CumulocityClient
# ---------------------------------------------------------------------------

class CumulocityClient:
    """Client for the Cumulocity core REST API.

    Quick start::

        async with CumulocityClient(
            base_url="https://example.cumulocity.com",
            tenant="t100",
            username="admin",
            password="secret",
        ) as client:
            alarms = await client.alarms.get_alarms(severity="MAJOR")

    Args:
        base_url: Root URL of the tenant.
        tenant: Tenant id used in the basic-auth user name.
        username: Basic-auth user name.
        password: Basic-auth password.
        token: Bearer token; mutually exclusive with username/password.
        application_key: Sent as ``X-Cumulocity-Application-Key``.
        adapter: Custom transport adapter (overrides the default HTTP adapter).
        timeout: Request timeout in seconds for the default adapter.
        verify_ssl: Verify server certificates in the default adapter.
        multipart_boundary: Fixed boundary for multipart uploads.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        tenant: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        application_key: Optional[str] = None,
        adapter: Optional[BaseAdapter] = None,
        timeout: float = 30,
        verify_ssl: bool = True,
        multipart_boundary: Optional[str] = None,
    ) -> None:
        if base_url is None and adapter is None:
            raise SDKConfigurationError(
                "CumulocityClient requires either base_url or a custom adapter."
            )

        self._hooks = HookRegistry()
        self._adapter = adapter or HttpAdapter(
            base_url=base_url,
            tenant=tenant,
            username=username,
            password=password,
            token=token,
            application_key=application_key,
            timeout=timeout,
            verify_ssl=verify_ssl,
        )
        self._pipeline = ApiPipeline(
            adapter=self._adapter,
            hooks=self._hooks,
            multipart_boundary=multipart_boundary,
        )
        self._extensions: List[CumulocityExtension] = []
        logger.info("CumulocityClient initialized", adapter=type(self._adapter).__name__)

    @classmethod
    def from_config(
        cls,
        config_path: Optional[str] = None,
        configure_logging: bool = True,
    ) -> CumulocityClient:
        """Build a client from a YAML configuration file.

        Args:
            config_path: Path to the file; defaults to ``~/.cumulocity/config.yaml``.
            configure_logging: Apply the file's ``logging`` section.

        Raises:
            InvalidConfigurationError: If the file is malformed or invalid.
            ConfigurationLoadError: If the file exists but cannot be read.
            SDKConfigurationError: If the file names no base URL.
        """
        config = load_config(config_path)
        if configure_logging:
            setup_logging(
                level=config.logging.level,
                log_file=Path(config.logging.file) if config.logging.file else None,
                json_format=config.logging.json_format,
            )
        connection = config.connection
        if not connection.base_url:
            raise SDKConfigurationError("Configuration has no connection.base_url.")
        return cls(
            base_url=connection.base_url,
            tenant=connection.tenant or None,
            username=connection.username or None,
            password=connection.password or None,
            token=connection.token or None,
            application_key=connection.application_key or None,
            timeout=connection.timeout,
            verify_ssl=connection.verify_ssl,
            multipart_boundary=config.multipart.boundary or None,
        )

    # -- Extension registration --------------------------------------------

    def use(self, extension: CumulocityExtension) -> CumulocityClient:
        """Register an extension plugin.

        Args:
            extension: Extension implementing :class:`CumulocityExtension`.

        Returns:
            ``self`` for method chaining.
        """
        extension.install(self._hooks)
        self._extensions.append(extension)
        logger.info(f"Extension installed: {extension.name} v{extension.version}")
        return self

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    @property
    def adapter(self) -> BaseAdapter:
        return self._adapter

    @property
    def extensions(self) -> List[CumulocityExtension]:
        return list(self._extensions)

    # -- Resource accessors ------------------------------------------------

    @cached_property
    def platform(self) -> PlatformApi:
        return PlatformApi(self._pipeline)

    @cached_property
    def alarms(self) -> AlarmsApi:
        return AlarmsApi(self._pipeline)

    @cached_property
    def audits(self) -> AuditsApi:
        return AuditsApi(self._pipeline)

    @cached_property
    def events(self) -> EventsApi:
        return EventsApi(self._pipeline)

    @cached_property
    def attachments(self) -> AttachmentsApi:
        """Binaries attached to events."""
        return AttachmentsApi(self._pipeline)

    @cached_property
    def identity(self) -> ExternalIdsApi:
        return ExternalIdsApi(self._pipeline)

    @cached_property
    def inventory(self) -> InventoryGroup:
        return InventoryGroup(self._pipeline)

    @cached_property
    def measurements(self) -> MeasurementsApi:
        return MeasurementsApi(self._pipeline)

    @cached_property
    def device_control(self) -> DeviceControlGroup:
        return DeviceControlGroup(self._pipeline)

    @cached_property
    def applications(self) -> ApplicationsGroup:
        return ApplicationsGroup(self._pipeline)

    @cached_property
    def notifications(self) -> NotificationsGroup:
        return NotificationsGroup(self._pipeline)

    @cached_property
    def tenants(self) -> TenantsGroup:
        return TenantsGroup(self._pipeline)

    @cached_property
    def users(self) -> UsersGroup:
        return UsersGroup(self._pipeline)

    @cached_property
    def retention(self) -> RetentionRulesApi:
        return RetentionRulesApi(self._pipeline)

    @cached_property
    def features(self) -> FeatureTogglesApi:
        return FeatureTogglesApi(self._pipeline)

    # -- Lifecycle ---------------------------------------------------------

    async def close(self) -> None:
        """Release all resources."""
        await self._adapter.close()
        logger.info("CumulocityClient closed")

    async def __aenter__(self) -> CumulocityClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


# ---------------------------------------------------------------------------
# CumulocityBuilder (advanced initialization)
# ---------------------------------------------------------------------------

class CumulocityBuilder:
    """Fluent builder for advanced CumulocityClient configuration.

    Example::

        client = (
            CumulocityBuilder()
            .set_base_url("https://example.cumulocity.com")
            .set_tenant("t100")
            .set_credentials("admin", "secret")
            .use(ProcessingModeExtension())
            .build()
        )
    """

    def __init__(self) -> None:
        self._base_url: Optional[str] = None
        self._tenant: Optional[str] = None
        self._username: Optional[str] = None
        self._password: Optional[str] = None
        self._token: Optional[str] = None
        self._application_key: Optional[str] = None
        self._timeout: float = 30
        self._adapter: Optional[BaseAdapter] = None
        self._extensions: List[CumulocityExtension] = []

    def set_base_url(self, url: str) -> CumulocityBuilder:
        """Set the tenant's root URL."""
        self._base_url = url
        return self

    def set_tenant(self, tenant: str) -> CumulocityBuilder:
        self._tenant = tenant
        return self

    def set_credentials(self, username: str, password: str) -> CumulocityBuilder:
        """Authenticate with basic auth."""
        self._username = username
        self._password = password
        return self

    def set_token(self, token: str) -> CumulocityBuilder:
        """Authenticate with a bearer token."""
        self._token = token
        return self

    def set_application_key(self, key: str) -> CumulocityBuilder:
        self._application_key = key
        return self

    def set_timeout(self, seconds: float) -> CumulocityBuilder:
        self._timeout = seconds
        return self

    def set_transport(self, adapter: BaseAdapter) -> CumulocityBuilder:
        """Override the default HTTP adapter with a custom transport."""
        self._adapter = adapter
        return self

    def use(self, extension: CumulocityExtension) -> CumulocityBuilder:
        """Queue an extension for installation after build."""
        self._extensions.append(extension)
        return self

    def build(self) -> CumulocityClient:
        """Construct the CumulocityClient and install all queued extensions.

        Raises:
            SDKConfigurationError: If neither a base URL nor a transport was set,
                or the credentials conflict.
        """
        if self._base_url is None and self._adapter is None:
            raise SDKConfigurationError(
                "CumulocityBuilder.build() requires either set_base_url() or set_transport()."
            )

        client = CumulocityClient(
            base_url=self._base_url,
            tenant=self._tenant,
            username=self._username,
            password=self._password,
            token=self._token,
            application_key=self._application_key,
            adapter=self._adapter,
            timeout=self._timeout,
        )

        for ext in self._extensions:
            client.use(ext)

        # Fire initialize hooks after all extensions are installed
        client.hooks.fire_initialize(client=client)

        logger.info(
            f"CumulocityBuilder: built client with {len(self._extensions)} extension(s)"
        )
        return client
