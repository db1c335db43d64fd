"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for feature toggle endpoints.
"""

import json

import pytest

from cumulocity.api.base import JSON_MEDIA_TYPE
from cumulocity.models import FeaturePhase, FeatureStrategy, FeatureToggleValue


class TestFeatureTogglesApi:
    @pytest.mark.asyncio
    async def test_list_current_tenant_features(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET",
            "/features",
            json_body=[
                {"key": "dm.bulk", "phase": "PUBLIC_PREVIEW", "active": True, "strategy": "TENANT"},
                {"key": "ui.dark", "phase": "IN_DEVELOPMENT", "active": False, "strategy": "DEFAULT"},
            ],
        )

        features = await client.features.list_current_tenant_features()

        assert [f.key for f in features] == ["dm.bulk", "ui.dark"]
        assert features[0].phase is FeaturePhase.PUBLIC_PREVIEW
        assert features[1].strategy is FeatureStrategy.DEFAULT

    @pytest.mark.asyncio
    async def test_get_one_feature(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/features/dm.bulk", json_body={"key": "dm.bulk", "active": True})

        feature = await client.features.get_current_tenant_feature("dm.bulk")

        assert feature.active is True

    @pytest.mark.asyncio
    async def test_values_by_tenant(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET", "/features/dm.bulk/by-tenant", json_body=[{"tenantId": "t200", "active": False}]
        )

        values = await client.features.list_tenant_feature_toggle_values("dm.bulk")

        assert (values[0].tenant_id, values[0].active) == ("t200", False)

    @pytest.mark.asyncio
    async def test_set_and_unset_for_current_tenant(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/features/dm.bulk/by-tenant", status_code=200)
        mock_adapter.add_response("DELETE", "/features/dm.bulk/by-tenant", status_code=204)

        await client.features.set_current_tenant_feature_toggle_value(FeatureToggleValue(active=True), "dm.bulk")
        await client.features.unset_current_tenant_feature_toggle_value("dm.bulk")

        put, delete = mock_adapter.sent_requests
        assert json.loads(put.body) == {"active": True}
        assert put.header_values("Content-Type") == [JSON_MEDIA_TYPE]
        assert delete.method == "DELETE"

    @pytest.mark.asyncio
    async def test_set_and_unset_for_given_tenant(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/features/dm.bulk/by-tenant/t200", status_code=200)
        mock_adapter.add_response("DELETE", "/features/dm.bulk/by-tenant/t200", status_code=204)

        await client.features.set_given_tenant_feature_toggle_value(
            FeatureToggleValue(active=False), "dm.bulk", "t200"
        )
        await client.features.unset_given_tenant_feature_toggle_value("dm.bulk", "t200")

        put, delete = mock_adapter.sent_requests
        assert json.loads(put.body) == {"active": False}
        assert delete.path == "/features/dm.bulk/by-tenant/t200"
