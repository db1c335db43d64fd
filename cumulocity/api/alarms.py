"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Alarms API (``/alarm/alarms``).

Alarm queries can be narrowed by time window, severity, status, source and
type. Bulk updates and deletes apply the same filters to every matching
alarm, so callers should always pass at least one of them.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from cumulocity.api.base import (
    ERROR_MEDIA_TYPE,
    JSON_MEDIA_TYPE,
    TEXT_MEDIA_TYPE,
    BaseApi,
    accepts,
    segment,
    vnd,
)
from cumulocity.models.alarms import Alarm, AlarmCollection

Timestamp = Union[str, datetime]

CREATE_ALARM_CLEAR = (
    "firstOccurrenceTime",
    "lastUpdated",
    "creationTime",
    "count",
    "self",
    "id",
    "source.self",
)
UPDATE_ALARM_CLEAR = CREATE_ALARM_CLEAR + ("source", "time", "type")
UPDATE_ALARMS_CLEAR = UPDATE_ALARM_CLEAR + ("severity", "text")


class AlarmsApi(BaseApi):
    """Create, query, update and delete alarms."""

    async def get_alarms(
        self,
        created_from: Optional[Timestamp] = None,
        created_to: Optional[Timestamp] = None,
        current_page: Optional[int] = None,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        last_updated_from: Optional[Timestamp] = None,
        last_updated_to: Optional[Timestamp] = None,
        page_size: Optional[int] = None,
        resolved: Optional[bool] = None,
        severity: Optional[str] = None,
        source: Optional[str] = None,
        status: Optional[str] = None,
        type: Optional[List[str]] = None,
        with_source_assets: Optional[bool] = None,
        with_source_devices: Optional[bool] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> AlarmCollection:
        """Retrieve a page of alarms.

        ``type`` accepts several alarm types; each is sent as its own
        ``type`` query parameter.
        """
        request = (
            self._request("GET", "/alarm/alarms", accepts(ERROR_MEDIA_TYPE, vnd("alarmcollection")))
            .add_query_param("createdFrom", created_from)
            .add_query_param("createdTo", created_to)
            .add_query_param("currentPage", current_page)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("lastUpdatedFrom", last_updated_from)
            .add_query_param("lastUpdatedTo", last_updated_to)
            .add_query_param("pageSize", page_size)
            .add_query_param("resolved", resolved)
            .add_query_param("severity", severity)
            .add_query_param("source", source)
            .add_query_param("status", status)
            .add_query_param("type", type)
            .add_query_param("withSourceAssets", with_source_assets)
            .add_query_param("withSourceDevices", with_source_devices)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=AlarmCollection)

    async def update_alarms(
        self,
        alarm: Alarm,
        created_from: Optional[Timestamp] = None,
        created_to: Optional[Timestamp] = None,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        resolved: Optional[bool] = None,
        severity: Optional[str] = None,
        source: Optional[str] = None,
        status: Optional[str] = None,
        with_source_assets: Optional[bool] = None,
        with_source_devices: Optional[bool] = None,
    ) -> bytes:
        """Update every alarm matching the filters; only ``status`` is applied.

        The platform processes the update asynchronously and answers with an
        empty body.
        """
        request = (
            self._request("PUT", "/alarm/alarms", JSON_MEDIA_TYPE)
            .add_header("Content-Type", vnd("alarm"))
            .add_query_param("createdFrom", created_from)
            .add_query_param("createdTo", created_to)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("resolved", resolved)
            .add_query_param("severity", severity)
            .add_query_param("source", source)
            .add_query_param("status", status)
            .add_query_param("withSourceAssets", with_source_assets)
            .add_query_param("withSourceDevices", with_source_devices)
        )
        return await self._pipeline.execute(
            request, result_type=bytes, body=alarm, clear=UPDATE_ALARMS_CLEAR
        )

    async def create_alarm(self, alarm: Alarm) -> Alarm:
        request = (
            self._request("POST", "/alarm/alarms", accepts(ERROR_MEDIA_TYPE, vnd("alarm")))
            .add_header("Content-Type", vnd("alarm"))
        )
        return await self._pipeline.execute(
            request, result_type=Alarm, body=alarm, clear=CREATE_ALARM_CLEAR
        )

    async def delete_alarms(
        self,
        created_from: Optional[Timestamp] = None,
        created_to: Optional[Timestamp] = None,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        resolved: Optional[bool] = None,
        severity: Optional[str] = None,
        source: Optional[str] = None,
        status: Optional[str] = None,
        type: Optional[List[str]] = None,
        with_source_assets: Optional[bool] = None,
        with_source_devices: Optional[bool] = None,
    ) -> bytes:
        """Delete every alarm matching the filters."""
        request = (
            self._request("DELETE", "/alarm/alarms", JSON_MEDIA_TYPE)
            .add_query_param("createdFrom", created_from)
            .add_query_param("createdTo", created_to)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("resolved", resolved)
            .add_query_param("severity", severity)
            .add_query_param("source", source)
            .add_query_param("status", status)
            .add_query_param("type", type)
            .add_query_param("withSourceAssets", with_source_assets)
            .add_query_param("withSourceDevices", with_source_devices)
        )
        return await self._pipeline.execute(request, result_type=bytes)

    async def get_alarm(self, alarm_id: str) -> Alarm:
        request = self._request(
            "GET", f"/alarm/alarms/{segment(alarm_id)}", accepts(ERROR_MEDIA_TYPE, vnd("alarm"))
        )
        return await self._pipeline.execute(request, result_type=Alarm)

    async def update_alarm(self, alarm: Alarm, alarm_id: str) -> Alarm:
        """Update one alarm. Source, time and type cannot change and are not sent."""
        request = (
            self._request(
                "PUT", f"/alarm/alarms/{segment(alarm_id)}", accepts(ERROR_MEDIA_TYPE, vnd("alarm"))
            )
            .add_header("Content-Type", vnd("alarm"))
        )
        return await self._pipeline.execute(
            request, result_type=Alarm, body=alarm, clear=UPDATE_ALARM_CLEAR
        )

    async def get_number_of_alarms(
        self,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        resolved: Optional[bool] = None,
        severity: Optional[str] = None,
        source: Optional[str] = None,
        status: Optional[str] = None,
        type: Optional[List[str]] = None,
        with_source_assets: Optional[bool] = None,
        with_source_devices: Optional[bool] = None,
    ) -> int:
        """Count the alarms matching the filters."""
        request = (
            self._request(
                "GET",
                "/alarm/alarms/count",
                accepts(ERROR_MEDIA_TYPE, TEXT_MEDIA_TYPE, JSON_MEDIA_TYPE),
            )
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("resolved", resolved)
            .add_query_param("severity", severity)
            .add_query_param("source", source)
            .add_query_param("status", status)
            .add_query_param("type", type)
            .add_query_param("withSourceAssets", with_source_assets)
            .add_query_param("withSourceDevices", with_source_devices)
        )
        return await self._pipeline.execute(request, result_type=int)
