"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for retention rule endpoints.
"""

import json

import pytest

from cumulocity.exceptions import DecodeError, StructuredApiError
from cumulocity.models import RetentionRule
from cumulocity.models.retention import RetentionDataType


class TestRetentionRulesApi:
    @pytest.mark.asyncio
    async def test_create_rule(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST",
            "/retention/retentions",
            json_body={"id": "5", "dataType": "*", "maximumAge": 30, "editable": True},
        )

        rule = await client.retention.create_retention_rule(
            RetentionRule(id="9", self_="https://x/9", data_type=RetentionDataType.ALL, maximum_age=30)
        )

        assert rule.data_type is RetentionDataType.ALL
        assert rule.editable is True
        assert json.loads(mock_adapter.last_request.body) == {"dataType": "*", "maximumAge": 30}

    @pytest.mark.asyncio
    async def test_update_rule(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/retention/retentions/5", json_body={"id": "5", "maximumAge": 7})

        rule = await client.retention.update_retention_rule(
            RetentionRule(id="5", data_type=RetentionDataType.ALARM, fragment_type="c8y_Overheat", maximum_age=7),
            "5",
        )

        assert rule.maximum_age == 7
        assert json.loads(mock_adapter.last_request.body) == {
            "dataType": "ALARM",
            "fragmentType": "c8y_Overheat",
            "maximumAge": 7,
        }

    @pytest.mark.asyncio
    async def test_list_get_delete(self, client, mock_adapter):
        mock_adapter.add_response(
            "GET",
            "/retention/retentions",
            json_body={"retentionRules": [{"id": "5", "dataType": "EVENT"}], "statistics": {"currentPage": 1}},
        )
        mock_adapter.add_response("GET", "/retention/retentions/5", json_body={"id": "5", "dataType": "EVENT"})
        mock_adapter.add_response("DELETE", "/retention/retentions/5", status_code=204)

        api = client.retention
        rules = await api.get_retention_rules(page_size=1, with_total_pages=True)
        assert rules.retention_rules[0].data_type is RetentionDataType.EVENT
        assert rules.statistics.current_page == 1
        assert mock_adapter.last_request.params == (("pageSize", "1"), ("withTotalPages", "true"))
        assert (await api.get_retention_rule("5")).id == "5"
        assert await api.delete_retention_rule("5") == b""

    @pytest.mark.asyncio
    async def test_unknown_data_type_fails_decoding(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/retention/retentions/5", json_body={"id": "5", "dataType": "LOGS"})

        with pytest.raises(DecodeError, match="RetentionRule.dataType"):
            await client.retention.get_retention_rule("5")

    @pytest.mark.asyncio
    async def test_missing_rule(self, client, mock_adapter):
        with pytest.raises(StructuredApiError) as exc_info:
            await client.retention.get_retention_rule("404")

        assert exc_info.value.status_code == 404
        assert exc_info.value.path == "/retention/retentions/404"
