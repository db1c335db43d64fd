"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

API entry points: the platform resource and the per-group API resources.
"""

from __future__ import annotations

from typing import Type, TypeVar

from cumulocity.api.base import ERROR_MEDIA_TYPE, BaseApi, accepts, vnd
from cumulocity.models.common import ApiResource, PlatformApiResource

R = TypeVar("R")


class PlatformApi(BaseApi):
    """Discovery resources listing the collections and URI templates of each API."""

    async def _get_resource(self, path: str, accept: str, result_type: Type[R]) -> R:
        request = self._request("GET", path, accept)
        return await self._pipeline.execute(request, result_type=result_type)

    async def get_platform_api_resource(self) -> PlatformApiResource:
        """Retrieve the links to all API groups (``GET /platform``)."""
        return await self._get_resource("/platform", vnd("platformapi"), PlatformApiResource)

    async def get_identity_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/identity", accepts(vnd("identityapi"), ERROR_MEDIA_TYPE), ApiResource
        )

    async def get_inventory_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/inventory", accepts(ERROR_MEDIA_TYPE, vnd("inventoryapi")), ApiResource
        )

    async def get_alarms_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/alarm", accepts(ERROR_MEDIA_TYPE, vnd("alarmapi")), ApiResource
        )

    async def get_events_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/event", accepts(ERROR_MEDIA_TYPE, vnd("eventapi")), ApiResource
        )

    async def get_audit_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/audit", accepts(ERROR_MEDIA_TYPE, vnd("auditapi")), ApiResource
        )

    async def get_measurement_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/measurement", accepts(ERROR_MEDIA_TYPE, vnd("measurementApi")), ApiResource
        )

    async def get_device_control_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/devicecontrol", accepts(vnd("devicecontrolapi"), ERROR_MEDIA_TYPE), ApiResource
        )

    async def get_tenant_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/tenant", accepts(ERROR_MEDIA_TYPE, vnd("tenantapi")), ApiResource
        )

    async def get_user_api_resource(self) -> ApiResource:
        return await self._get_resource(
            "/user", accepts(vnd("userapi"), ERROR_MEDIA_TYPE), ApiResource
        )
