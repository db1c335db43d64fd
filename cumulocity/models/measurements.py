"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Measurement models.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, fragments_field, json_field
from cumulocity.models.common import PagedCollection, SourceReference


@dataclass
class Measurement(C8yModel):
    """A measurement; the value fragments (``c8y_Temperature`` etc.) are custom fragments."""

    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    type: Optional[str] = None
    time: Optional[str] = None
    source: Optional[SourceReference] = None
    custom_fragments: Dict[str, Any] = fragments_field()


@dataclass
class MeasurementCollection(PagedCollection):
    measurements: Optional[List[Measurement]] = None


@dataclass
class MeasurementFragmentSeries(C8yModel):
    name: Optional[str] = None
    type: Optional[str] = None
    unit: Optional[str] = None


@dataclass
class MeasurementSeries(C8yModel):
    """Aggregated series; ``values`` maps timestamps to per-series min/max pairs."""

    values: Optional[Dict[str, Any]] = None
    series: Optional[List[MeasurementFragmentSeries]] = None
    truncated: Optional[bool] = None
