"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Retention rules API (``/retention/retentions``).
"""

from __future__ import annotations

from typing import Optional

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment, vnd
from cumulocity.models.retention import RetentionRule, RetentionRuleCollection

RETENTION_RULE_CLEAR = ("self", "id")


def _rule_path(rule_id: str) -> str:
    return f"/retention/retentions/{segment(rule_id)}"


class RetentionRulesApi(BaseApi):
    """Rules deciding how long the platform keeps alarms, events, measurements and more."""

    async def get_retention_rules(
        self,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> RetentionRuleCollection:
        request = (
            self._request(
                "GET", "/retention/retentions", accepts(ERROR_MEDIA_TYPE, vnd("retentionrulecollection"))
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=RetentionRuleCollection)

    async def create_retention_rule(self, rule: RetentionRule) -> RetentionRule:
        request = (
            self._request("POST", "/retention/retentions", accepts(ERROR_MEDIA_TYPE, vnd("retentionrule")))
            .add_header("Content-Type", vnd("retentionrule"))
        )
        return await self._pipeline.execute(
            request, result_type=RetentionRule, body=rule, clear=RETENTION_RULE_CLEAR
        )

    async def get_retention_rule(self, rule_id: str) -> RetentionRule:
        request = self._request("GET", _rule_path(rule_id), accepts(ERROR_MEDIA_TYPE, vnd("retentionrule")))
        return await self._pipeline.execute(request, result_type=RetentionRule)

    async def update_retention_rule(self, rule: RetentionRule, rule_id: str) -> RetentionRule:
        request = (
            self._request("PUT", _rule_path(rule_id), accepts(ERROR_MEDIA_TYPE, vnd("retentionrule")))
            .add_header("Content-Type", vnd("retentionrule"))
        )
        return await self._pipeline.execute(
            request, result_type=RetentionRule, body=rule, clear=RETENTION_RULE_CLEAR
        )

    async def delete_retention_rule(self, rule_id: str) -> bytes:
        request = self._request("DELETE", _rule_path(rule_id), JSON_MEDIA_TYPE)
        return await self._pipeline.execute(request, result_type=bytes)
