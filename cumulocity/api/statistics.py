"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Statistics API (``/tenant/statistics``): tenant usage and per-device
request counts.

Dates are sent as ``YYYY-MM-DD``; :class:`datetime.date` values are
formatted that way, strings are sent unchanged.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Union

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment, vnd
from cumulocity.core.request import render_query_value
from cumulocity.models.statistics import (
    AllTenantsUsageStatisticsSummary,
    DeviceStatisticsCollection,
    TenantUsageStatisticsCollection,
    TenantUsageStatisticsSummary,
)

Day = Union[str, date]


class UsageStatisticsApi(BaseApi):
    """Request, storage and device counters of the current tenant and its subtenants."""

    async def get_tenant_usage_statistics(
        self,
        current_page: Optional[int] = None,
        date_from: Optional[Day] = None,
        date_to: Optional[Day] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
    ) -> TenantUsageStatisticsCollection:
        """Daily usage of the current tenant."""
        request = (
            self._request(
                "GET",
                "/tenant/statistics",
                accepts(ERROR_MEDIA_TYPE, vnd("tenantusagestatisticscollection")),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=TenantUsageStatisticsCollection)

    async def get_summary_usage_statistics(
        self,
        date_from: Optional[Day] = None,
        date_to: Optional[Day] = None,
        tenant: Optional[str] = None,
    ) -> TenantUsageStatisticsSummary:
        """Usage of one tenant summed over a date range; the current tenant by default."""
        request = (
            self._request(
                "GET",
                "/tenant/statistics/summary",
                accepts(ERROR_MEDIA_TYPE, vnd("tenantusagestatisticssummary")),
            )
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("tenant", tenant)
        )
        return await self._pipeline.execute(request, result_type=TenantUsageStatisticsSummary)

    async def get_all_tenants_usage_summary(
        self,
        date_from: Optional[Day] = None,
        date_to: Optional[Day] = None,
    ) -> List[AllTenantsUsageStatisticsSummary]:
        request = (
            self._request(
                "GET",
                "/tenant/statistics/allTenantsSummary",
                accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
            )
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
        )
        return await self._pipeline.execute(
            request, result_type=List[AllTenantsUsageStatisticsSummary]
        )


class DeviceStatisticsApi(BaseApi):
    """Requests made by each device of a tenant, per month or per day."""

    async def _get_device_statistics(
        self,
        period: str,
        tenant_id: str,
        day: Day,
        current_page: Optional[int],
        device_id: Optional[str],
        page_size: Optional[int],
        with_total_pages: Optional[bool],
    ) -> DeviceStatisticsCollection:
        request = (
            self._request(
                "GET",
                f"/tenant/statistics/device/{segment(tenant_id)}/{period}/{segment(render_query_value(day))}",
                accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("deviceId", device_id)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=DeviceStatisticsCollection)

    async def get_monthly_device_statistics(
        self,
        tenant_id: str,
        day: Day,
        current_page: Optional[int] = None,
        device_id: Optional[str] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
    ) -> DeviceStatisticsCollection:
        """Statistics of the month containing ``day``; the day itself is ignored."""
        return await self._get_device_statistics(
            "monthly", tenant_id, day, current_page, device_id, page_size, with_total_pages
        )

    async def get_daily_device_statistics(
        self,
        tenant_id: str,
        day: Day,
        current_page: Optional[int] = None,
        device_id: Optional[str] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
    ) -> DeviceStatisticsCollection:
        return await self._get_device_statistics(
            "daily", tenant_id, day, current_page, device_id, page_size, with_total_pages
        )
