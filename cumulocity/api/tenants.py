"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tenant API (``/tenant``): subtenants, tenant options, application
subscriptions and system options.
"""

from __future__ import annotations

from typing import Dict, Optional

from cumulocity.api.base import (
    ERROR_MEDIA_TYPE,
    JSON_MEDIA_TYPE,
    PROCESSING_MODE_HEADER,
    BaseApi,
    accepts,
    segment,
    vnd,
)
from cumulocity.core.response import (
    FORBIDDEN,
    NOT_FOUND,
    UNAUTHORIZED,
    UNPROCESSABLE,
    fixed_error,
)
from cumulocity.models.applications import Application
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

TENANT_EXISTS = fixed_error(409, "Conflict - The tenant domain/ID already exists.")

CREATE_TENANT_CLEAR = (
    "allowCreateTenants",
    "parent",
    "creationTime",
    "self",
    "id",
    "ownedApplications",
    "applications",
    "status",
)
UPDATE_TENANT_CLEAR = CREATE_TENANT_CLEAR + ("adminName",)
CREATE_OPTION_CLEAR = ("self",)


def _tenant_path(tenant_id: str) -> str:
    return f"/tenant/tenants/{segment(tenant_id)}"


class TenantsApi(BaseApi):
    """Subtenants of the current tenant, and the current tenant itself."""

    async def get_tenants(
        self,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> TenantCollection:
        request = (
            self._request("GET", "/tenant/tenants", accepts(ERROR_MEDIA_TYPE, vnd("tenantcollection")))
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED], result_type=TenantCollection
        )

    async def create_tenant(self, tenant: Tenant) -> Tenant:
        request = (
            self._request("POST", "/tenant/tenants", accepts(ERROR_MEDIA_TYPE, vnd("tenant")))
            .add_header("Content-Type", vnd("tenant"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, FORBIDDEN, TENANT_EXISTS, UNPROCESSABLE],
            result_type=Tenant,
            body=tenant,
            clear=CREATE_TENANT_CLEAR,
        )

    async def get_current_tenant(self) -> CurrentTenant:
        request = self._request(
            "GET", "/tenant/currentTenant", accepts(ERROR_MEDIA_TYPE, vnd("currenttenant"))
        )
        return await self._pipeline.execute(request, rules=[UNAUTHORIZED], result_type=CurrentTenant)

    async def get_tenant(self, tenant_id: str) -> Tenant:
        request = self._request("GET", _tenant_path(tenant_id), accepts(ERROR_MEDIA_TYPE, vnd("tenant")))
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, FORBIDDEN, NOT_FOUND], result_type=Tenant
        )

    async def update_tenant(self, tenant: Tenant, tenant_id: str) -> Tenant:
        request = (
            self._request("PUT", _tenant_path(tenant_id), accepts(ERROR_MEDIA_TYPE, vnd("tenant")))
            .add_header("Content-Type", vnd("tenant"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, FORBIDDEN, NOT_FOUND, UNPROCESSABLE],
            result_type=Tenant,
            body=tenant,
            clear=UPDATE_TENANT_CLEAR,
        )

    async def delete_tenant(self, tenant_id: str) -> bytes:
        request = self._request("DELETE", _tenant_path(tenant_id), JSON_MEDIA_TYPE)
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, FORBIDDEN, NOT_FOUND], result_type=bytes
        )

    async def get_tenant_tfa_settings(self, tenant_id: str) -> TenantTfaData:
        request = self._request(
            "GET", f"{_tenant_path(tenant_id)}/tfa", accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, NOT_FOUND], result_type=TenantTfaData
        )


def _option_path(category: str, key: Optional[str] = None) -> str:
    path = f"/tenant/options/{segment(category)}"
    return path if key is None else f"{path}/{segment(key)}"


class OptionsApi(BaseApi):
    """Tenant options: string values addressed by category and key."""

    async def get_options(
        self,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
    ) -> OptionCollection:
        request = (
            self._request("GET", "/tenant/options", accepts(ERROR_MEDIA_TYPE, vnd("optioncollection")))
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=OptionCollection)

    async def create_option(self, option: Option, processing_mode: Optional[str] = None) -> Option:
        request = (
            self._request("POST", "/tenant/options", accepts(ERROR_MEDIA_TYPE, vnd("option")))
            .add_header(PROCESSING_MODE_HEADER, processing_mode)
            .add_header("Content-Type", vnd("option"))
        )
        return await self._pipeline.execute(
            request, result_type=Option, body=option, clear=CREATE_OPTION_CLEAR
        )

    async def get_options_by_category(self, category: str) -> Dict[str, str]:
        """All options of a category as a key to value mapping."""
        request = self._request("GET", _option_path(category), accepts(ERROR_MEDIA_TYPE, vnd("option")))
        return await self._pipeline.execute(request, result_type=dict)

    async def update_options_by_category(
        self,
        options: Dict[str, str],
        category: str,
        processing_mode: Optional[str] = None,
    ) -> Dict[str, str]:
        request = (
            self._request("PUT", _option_path(category), accepts(ERROR_MEDIA_TYPE, vnd("option")))
            .add_header(PROCESSING_MODE_HEADER, processing_mode)
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=dict, body=dict(options))

    async def get_option(self, category: str, key: str) -> Option:
        request = self._request(
            "GET", _option_path(category, key), accepts(ERROR_MEDIA_TYPE, vnd("option"))
        )
        return await self._pipeline.execute(request, result_type=Option)

    async def update_option(
        self,
        option: CategoryKeyOption,
        category: str,
        key: str,
        processing_mode: Optional[str] = None,
    ) -> Option:
        request = (
            self._request("PUT", _option_path(category, key), accepts(ERROR_MEDIA_TYPE, vnd("option")))
            .add_header(PROCESSING_MODE_HEADER, processing_mode)
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=Option, body=option)

    async def delete_option(
        self, category: str, key: str, processing_mode: Optional[str] = None
    ) -> bytes:
        request = (
            self._request("DELETE", _option_path(category, key), JSON_MEDIA_TYPE)
            .add_header(PROCESSING_MODE_HEADER, processing_mode)
        )
        return await self._pipeline.execute(request, result_type=bytes)


class TenantApplicationsApi(BaseApi):
    """Applications a tenant is subscribed to."""

    async def get_tenant_applications(
        self,
        tenant_id: str,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
    ) -> ApplicationReferenceCollection:
        request = (
            self._request(
                "GET",
                f"{_tenant_path(tenant_id)}/applications",
                accepts(ERROR_MEDIA_TYPE, vnd("applicationreferencecollection")),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=ApplicationReferenceCollection)

    async def subscribe_application(
        self, reference: SubscribedApplicationReference, tenant_id: str
    ) -> Application:
        request = (
            self._request(
                "POST",
                f"{_tenant_path(tenant_id)}/applications",
                accepts(ERROR_MEDIA_TYPE, vnd("application")),
            )
            .add_header("Content-Type", vnd("applicationreference"))
        )
        return await self._pipeline.execute(request, result_type=Application, body=reference)

    async def unsubscribe_application(self, tenant_id: str, application_id: str) -> bytes:
        request = self._request(
            "DELETE",
            f"{_tenant_path(tenant_id)}/applications/{segment(application_id)}",
            JSON_MEDIA_TYPE,
        )
        return await self._pipeline.execute(request, result_type=bytes)


class SystemOptionsApi(BaseApi):
    """Read-only options set by the platform operator for all tenants."""

    async def get_system_options(self) -> OptionCollection:
        request = self._request(
            "GET", "/tenant/system/options", accepts(ERROR_MEDIA_TYPE, vnd("optioncollection"))
        )
        return await self._pipeline.execute(request, result_type=OptionCollection)

    async def get_system_option(self, category: str, key: str) -> Option:
        request = self._request(
            "GET",
            f"/tenant/system/options/{segment(category)}/{segment(key)}",
            accepts(ERROR_MEDIA_TYPE, vnd("option")),
        )
        return await self._pipeline.execute(request, result_type=Option)
