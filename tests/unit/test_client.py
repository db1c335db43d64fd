"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for CumulocityClient and CumulocityBuilder.
"""

import pytest

from cumulocity import __version__
from cumulocity.adapters.http import HttpAdapter, basic_authorization
from cumulocity.adapters.mock import MockAdapter
from cumulocity.api import (
    AlarmsApi,
    ApplicationVersionsApi,
    BinariesApi,
    BootstrapUserApi,
    ChildOperationsApi,
    CurrentUserApi,
    DevicePermissionsApi,
    DeviceStatisticsApi,
    ExternalIdsApi,
    FeatureTogglesApi,
    InventoryRolesApi,
    ManagedObjectsApi,
    OperationsApi,
    OptionsApi,
    RealtimeNotificationApi,
    RetentionRulesApi,
    SystemOptionsApi,
    TenantApplicationsApi,
    TrustedCertificatesApi,
    UsageStatisticsApi,
)
from cumulocity.client import CumulocityBuilder, CumulocityClient
from cumulocity.core.request import RequestDescriptor
from cumulocity.exceptions import InvalidConfigurationError, SDKConfigurationError
from cumulocity.extensions import CumulocityExtension
from cumulocity.hooks import HookRegistry


class RecordingExtension(CumulocityExtension):
    def __init__(self):
        self.installed_with = None
        self.initialized_client = None

    @property
    def name(self) -> str:
        return "recording"

    @property
    def version(self) -> str:
        return "0.1.0"

    def install(self, hooks: HookRegistry) -> None:
        self.installed_with = hooks
        hooks.on_initialize(self._on_initialize)

    def _on_initialize(self, client=None, **kwargs):
        self.initialized_client = client


class TestCumulocityClient:
    def test_version_is_exposed(self):
        assert isinstance(__version__, str)

    def test_requires_base_url_or_adapter(self):
        with pytest.raises(SDKConfigurationError):
            CumulocityClient()

    def test_default_adapter_is_http(self):
        client = CumulocityClient(base_url="https://example.cumulocity.com", username="u", password="p")
        assert isinstance(client.adapter, HttpAdapter)
        assert client.adapter.base_url == "https://example.cumulocity.com"

    def test_conflicting_credentials_raise(self):
        with pytest.raises(SDKConfigurationError):
            CumulocityClient(base_url="https://h", username="u", password="p", token="t")

    def test_custom_adapter(self):
        adapter = MockAdapter()
        assert CumulocityClient(adapter=adapter).adapter is adapter

    def test_accessors_return_api_objects(self, client):
        assert isinstance(client.alarms, AlarmsApi)
        assert isinstance(client.identity, ExternalIdsApi)
        assert isinstance(client.inventory.managed_objects, ManagedObjectsApi)
        assert isinstance(client.inventory.binaries, BinariesApi)
        assert isinstance(client.device_control.operations, OperationsApi)
        assert isinstance(client.applications.versions, ApplicationVersionsApi)
        assert isinstance(client.notifications.realtime, RealtimeNotificationApi)
        assert isinstance(client.tenants.options, OptionsApi)
        assert isinstance(client.users.current_user, CurrentUserApi)
        assert isinstance(client.retention, RetentionRulesApi)

    def test_hierarchy_and_administration_accessors(self, client):
        assert isinstance(client.inventory.child_operations, ChildOperationsApi)
        assert isinstance(client.applications.bootstrap_user, BootstrapUserApi)
        assert isinstance(client.tenants.applications, TenantApplicationsApi)
        assert isinstance(client.tenants.system_options, SystemOptionsApi)
        assert isinstance(client.tenants.trusted_certificates, TrustedCertificatesApi)
        assert isinstance(client.tenants.usage_statistics, UsageStatisticsApi)
        assert isinstance(client.tenants.device_statistics, DeviceStatisticsApi)
        assert isinstance(client.users.inventory_roles, InventoryRolesApi)
        assert isinstance(client.users.device_permissions, DevicePermissionsApi)
        assert isinstance(client.features, FeatureTogglesApi)

    def test_accessors_are_cached(self, client):
        assert client.alarms is client.alarms
        assert client.inventory.managed_objects is client.inventory.managed_objects

    def test_use_installs_extension(self, client):
        ext = RecordingExtension()
        assert client.use(ext) is client
        assert ext.installed_with is client.hooks
        assert client.extensions == [ext]

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_adapter(self):
        adapter = MockAdapter().add_response("GET", "/x")
        async with CumulocityClient(adapter=adapter) as client:
            await client.adapter.send(RequestDescriptor(method="GET", path="/x"))
            assert len(adapter.sent_requests) == 1
        assert adapter.sent_requests == []


class TestFromConfig:
    def test_builds_http_client(self, make_config_yaml):
        path = make_config_yaml(
            connection={
                "base_url": "https://example.cumulocity.com",
                "tenant": "t100",
                "username": "admin",
                "password": "secret",
            },
            multipart={"boundary": "fixed"},
            logging={"level": "WARNING"},
        )

        client = CumulocityClient.from_config(str(path), configure_logging=False)

        assert isinstance(client.adapter, HttpAdapter)
        assert client.adapter.base_url == "https://example.cumulocity.com"
        assert client.alarms._pipeline.multipart_boundary == "fixed"

    def test_null_tenant_is_left_out_of_credentials(self, make_config_yaml):
        path = make_config_yaml(
            connection={
                "base_url": "https://example.cumulocity.com",
                "tenant": None,
                "username": "admin",
                "password": "secret",
            }
        )

        client = CumulocityClient.from_config(str(path), configure_logging=False)
        adapted = client.adapter.adapt(RequestDescriptor(method="GET", path="/x"))

        assert adapted.header_values("Authorization") == [basic_authorization("admin", "secret")]

    def test_missing_base_url_raises(self, make_config_yaml):
        path = make_config_yaml(logging={"level": "INFO"})
        with pytest.raises(SDKConfigurationError, match="base_url"):
            CumulocityClient.from_config(str(path), configure_logging=False)

    def test_invalid_file_raises(self, make_config_yaml):
        path = make_config_yaml(connection={"base_url": "https://h", "timeout": -1})
        with pytest.raises(InvalidConfigurationError):
            CumulocityClient.from_config(str(path), configure_logging=False)

    def test_configures_logging_file(self, make_config_yaml, temp_dir):
        log_file = temp_dir / "logs" / "client.log"
        path = make_config_yaml(
            connection={"base_url": "https://h"},
            logging={"level": "INFO", "file": str(log_file)},
        )

        CumulocityClient.from_config(str(path))

        assert log_file.exists()


class TestCumulocityBuilder:
    def test_build_requires_base_url_or_transport(self):
        with pytest.raises(SDKConfigurationError):
            CumulocityBuilder().build()

    def test_build_with_transport_and_extension(self):
        adapter = MockAdapter()
        ext = RecordingExtension()

        client = CumulocityBuilder().set_transport(adapter).use(ext).build()

        assert client.adapter is adapter
        assert client.extensions == [ext]
        assert ext.initialized_client is client

    def test_build_with_credentials(self):
        client = (
            CumulocityBuilder()
            .set_base_url("https://example.cumulocity.com")
            .set_tenant("t100")
            .set_credentials("admin", "secret")
            .set_application_key("key")
            .set_timeout(5)
            .build()
        )
        assert isinstance(client.adapter, HttpAdapter)

    def test_build_with_token_and_credentials_raises(self):
        builder = (
            CumulocityBuilder()
            .set_base_url("https://h")
            .set_credentials("admin", "secret")
            .set_token("jwt")
        )
        with pytest.raises(SDKConfigurationError):
            builder.build()
