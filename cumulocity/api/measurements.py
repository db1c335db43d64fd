"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Measurements API (``/measurement/measurements``).
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment, vnd
from cumulocity.core.response import FORBIDDEN, NOT_FOUND, UNAUTHORIZED, UNPROCESSABLE
from cumulocity.models.measurements import Measurement, MeasurementCollection, MeasurementSeries

Timestamp = Union[str, datetime]

CREATE_MEASUREMENT_CLEAR = ("self", "id", "source.self")
CREATE_MEASUREMENTS_CLEAR = ("next", "prev", "self", "statistics")

_CREATE_ACCEPT = accepts(ERROR_MEDIA_TYPE, vnd("measurement"), vnd("measurementcollection"))


class MeasurementsApi(BaseApi):
    """Store and query sensor readings."""

    async def get_measurements(
        self,
        current_page: Optional[int] = None,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        page_size: Optional[int] = None,
        revert: Optional[bool] = None,
        source: Optional[str] = None,
        type: Optional[str] = None,
        value_fragment_series: Optional[str] = None,
        value_fragment_type: Optional[str] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> MeasurementCollection:
        request = (
            self._request(
                "GET",
                "/measurement/measurements",
                accepts(ERROR_MEDIA_TYPE, vnd("measurementcollection")),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("pageSize", page_size)
            .add_query_param("revert", revert)
            .add_query_param("source", source)
            .add_query_param("type", type)
            .add_query_param("valueFragmentSeries", value_fragment_series)
            .add_query_param("valueFragmentType", value_fragment_type)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED], result_type=MeasurementCollection
        )

    async def create_measurement(self, measurement: Measurement) -> Measurement:
        request = (
            self._request("POST", "/measurement/measurements", _CREATE_ACCEPT)
            .add_header("Content-Type", vnd("measurement"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, FORBIDDEN, UNPROCESSABLE],
            result_type=Measurement,
            body=measurement,
            clear=CREATE_MEASUREMENT_CLEAR,
        )

    async def create_measurements(
        self, measurements: Union[MeasurementCollection, List[Measurement]]
    ) -> MeasurementCollection:
        """Store several measurements in one request."""
        if not isinstance(measurements, MeasurementCollection):
            measurements = MeasurementCollection(measurements=list(measurements))
        request = (
            self._request("POST", "/measurement/measurements", _CREATE_ACCEPT)
            .add_header("Content-Type", vnd("measurementcollection"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, FORBIDDEN, UNPROCESSABLE],
            result_type=MeasurementCollection,
            body=measurements,
            clear=CREATE_MEASUREMENTS_CLEAR,
        )

    async def delete_measurements(
        self,
        date_from: Optional[Timestamp] = None,
        date_to: Optional[Timestamp] = None,
        fragment_type: Optional[str] = None,
        source: Optional[str] = None,
        type: Optional[str] = None,
    ) -> bytes:
        request = (
            self._request("DELETE", "/measurement/measurements", JSON_MEDIA_TYPE)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("fragmentType", fragment_type)
            .add_query_param("source", source)
            .add_query_param("type", type)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, FORBIDDEN], result_type=bytes
        )

    async def get_measurement(self, measurement_id: str) -> Measurement:
        request = self._request(
            "GET",
            f"/measurement/measurements/{segment(measurement_id)}",
            accepts(ERROR_MEDIA_TYPE, vnd("measurement")),
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, NOT_FOUND], result_type=Measurement
        )

    async def delete_measurement(self, measurement_id: str) -> bytes:
        request = self._request(
            "DELETE", f"/measurement/measurements/{segment(measurement_id)}", JSON_MEDIA_TYPE
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, FORBIDDEN, NOT_FOUND], result_type=bytes
        )

    async def get_measurement_series(
        self,
        source: str,
        date_from: Timestamp,
        date_to: Timestamp,
        aggregation_type: Optional[str] = None,
        revert: Optional[bool] = None,
        series: Optional[List[str]] = None,
    ) -> MeasurementSeries:
        """Aggregated values of one or more series of a source.

        Each entry of ``series`` (``<fragment>.<series>``) is sent as its own
        ``series`` parameter.
        """
        request = (
            self._request(
                "GET",
                "/measurement/measurements/series",
                accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
            )
            .add_query_param("aggregationType", aggregation_type)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("revert", revert)
            .add_query_param("series", series)
            .add_query_param("source", source)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED], result_type=MeasurementSeries
        )
