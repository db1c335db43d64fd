"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Feature toggles API (``/features``).
"""

from __future__ import annotations

from typing import List

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment
from cumulocity.models.features import FeatureToggle, FeatureToggleValue, TenantFeatureToggleValue


def _feature_path(feature_key: str) -> str:
    return f"/features/{segment(feature_key)}"


class FeatureTogglesApi(BaseApi):
    """Platform features and their per-tenant overrides."""

    async def list_current_tenant_features(self) -> List[FeatureToggle]:
        request = self._request("GET", "/features", accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE))
        return await self._pipeline.execute(request, result_type=List[FeatureToggle])

    async def get_current_tenant_feature(self, feature_key: str) -> FeatureToggle:
        request = self._request("GET", _feature_path(feature_key), accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE))
        return await self._pipeline.execute(request, result_type=FeatureToggle)

    async def list_tenant_feature_toggle_values(self, feature_key: str) -> List[TenantFeatureToggleValue]:
        """Overrides of one feature for every tenant that has one."""
        request = self._request(
            "GET", f"{_feature_path(feature_key)}/by-tenant", accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=List[TenantFeatureToggleValue])

    async def set_current_tenant_feature_toggle_value(
        self, value: FeatureToggleValue, feature_key: str
    ) -> bytes:
        request = (
            self._request("PUT", f"{_feature_path(feature_key)}/by-tenant", JSON_MEDIA_TYPE)
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=bytes, body=value)

    async def unset_current_tenant_feature_toggle_value(self, feature_key: str) -> bytes:
        """Drop the current tenant's override so the feature's default applies again."""
        request = self._request("DELETE", f"{_feature_path(feature_key)}/by-tenant", JSON_MEDIA_TYPE)
        return await self._pipeline.execute(request, result_type=bytes)

    async def set_given_tenant_feature_toggle_value(
        self, value: FeatureToggleValue, feature_key: str, tenant_id: str
    ) -> bytes:
        request = (
            self._request(
                "PUT", f"{_feature_path(feature_key)}/by-tenant/{segment(tenant_id)}", JSON_MEDIA_TYPE
            )
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=bytes, body=value)

    async def unset_given_tenant_feature_toggle_value(self, feature_key: str, tenant_id: str) -> bytes:
        request = self._request(
            "DELETE", f"{_feature_path(feature_key)}/by-tenant/{segment(tenant_id)}", JSON_MEDIA_TYPE
        )
        return await self._pipeline.execute(request, result_type=bytes)
