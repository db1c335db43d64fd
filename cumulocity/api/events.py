"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Events API (``/event/events``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment, vnd
from cumulocity.core.response import FORBIDDEN, NOT_FOUND, UNAUTHORIZED, UNPROCESSABLE
from cumulocity.models.events import Event, EventCollection

Timestamp = Union[str, datetime]

CREATE_EVENT_CLEAR = ("lastUpdated", "creationTime", "self", "id", "source.self")
UPDATE_EVENT_CLEAR = ("lastUpdated", "creationTime", "self", "id", "source", "time", "type")


class EventsApi(BaseApi):
    """Create, query, update and delete events."""

    async def get_events(
        self,
        created_from: Optional[Timestamp] = None,
        created_to: Optional[Timestamp] = None,
        current_page: Optional[int] = None,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        fragment_type: Optional[str] = None,
        fragment_value: Optional[str] = None,
        last_updated_from: Optional[Timestamp] = None,
        last_updated_to: Optional[Timestamp] = None,
        page_size: Optional[int] = None,
        revert: Optional[bool] = None,
        source: Optional[str] = None,
        type: Optional[str] = None,
        with_source_assets: Optional[bool] = None,
        with_source_devices: Optional[bool] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> EventCollection:
        request = (
            self._request("GET", "/event/events", accepts(ERROR_MEDIA_TYPE, vnd("eventcollection")))
            .add_query_param("createdFrom", created_from)
            .add_query_param("createdTo", created_to)
            .add_query_param("currentPage", current_page)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("fragmentType", fragment_type)
            .add_query_param("fragmentValue", fragment_value)
            .add_query_param("lastUpdatedFrom", last_updated_from)
            .add_query_param("lastUpdatedTo", last_updated_to)
            .add_query_param("pageSize", page_size)
            .add_query_param("revert", revert)
            .add_query_param("source", source)
            .add_query_param("type", type)
            .add_query_param("withSourceAssets", with_source_assets)
            .add_query_param("withSourceDevices", with_source_devices)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED], result_type=EventCollection
        )

    async def create_event(self, event: Event) -> Event:
        request = (
            self._request("POST", "/event/events", accepts(ERROR_MEDIA_TYPE, vnd("event")))
            .add_header("Content-Type", vnd("event"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, FORBIDDEN, UNPROCESSABLE],
            result_type=Event,
            body=event,
            clear=CREATE_EVENT_CLEAR,
        )

    async def delete_events(
        self,
        created_from: Optional[Timestamp] = None,
        created_to: Optional[Timestamp] = None,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        fragment_type: Optional[str] = None,
        source: Optional[str] = None,
        type: Optional[str] = None,
    ) -> bytes:
        """Delete every event matching the filters."""
        request = (
            self._request("DELETE", "/event/events", JSON_MEDIA_TYPE)
            .add_query_param("createdFrom", created_from)
            .add_query_param("createdTo", created_to)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("fragmentType", fragment_type)
            .add_query_param("source", source)
            .add_query_param("type", type)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, FORBIDDEN], result_type=bytes
        )

    async def get_event(self, event_id: str) -> Event:
        request = self._request(
            "GET", f"/event/events/{segment(event_id)}", accepts(ERROR_MEDIA_TYPE, vnd("event"))
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, NOT_FOUND], result_type=Event
        )

    async def update_event(self, event: Event, event_id: str) -> Event:
        """Update one event. Source, time and type cannot change and are not sent."""
        request = (
            self._request(
                "PUT", f"/event/events/{segment(event_id)}", accepts(ERROR_MEDIA_TYPE, vnd("event"))
            )
            .add_header("Content-Type", vnd("event"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, NOT_FOUND, UNPROCESSABLE],
            result_type=Event,
            body=event,
            clear=UPDATE_EVENT_CLEAR,
        )

    async def delete_event(self, event_id: str) -> bytes:
        request = self._request("DELETE", f"/event/events/{segment(event_id)}", JSON_MEDIA_TYPE)
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, FORBIDDEN, NOT_FOUND], result_type=bytes
        )
