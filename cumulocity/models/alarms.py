"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Alarm models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, fragments_field, json_field
from cumulocity.models.common import PagedCollection, SourceReference


class AlarmSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    WARNING = "WARNING"


class AlarmStatus(str, Enum):
    ACTIVE = "ACTIVE"
    ACKNOWLEDGED = "ACKNOWLEDGED"
    CLEARED = "CLEARED"


@dataclass
class Alarm(C8yModel):
    """An alarm raised for a managed object.

    Custom fragments such as ``c8y_Position`` are carried through
    ``custom_fragments``.
    """

    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    type: Optional[str] = None
    text: Optional[str] = None
    time: Optional[str] = None
    severity: Optional[AlarmSeverity] = None
    status: Optional[AlarmStatus] = None
    source: Optional[SourceReference] = None
    count: Optional[int] = None
    creation_time: Optional[str] = None
    first_occurrence_time: Optional[str] = None
    last_updated: Optional[str] = None
    custom_fragments: Dict[str, Any] = fragments_field()


@dataclass
class AlarmCollection(PagedCollection):
    alarms: Optional[List[Alarm]] = None
