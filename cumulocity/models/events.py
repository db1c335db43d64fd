"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Event and event attachment models.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, fragments_field, json_field
from cumulocity.models.common import PagedCollection, SourceReference


@dataclass
class Event(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    type: Optional[str] = None
    text: Optional[str] = None
    time: Optional[str] = None
    source: Optional[SourceReference] = None
    creation_time: Optional[str] = None
    last_updated: Optional[str] = None
    custom_fragments: Dict[str, Any] = fragments_field()


@dataclass
class EventCollection(PagedCollection):
    events: Optional[List[Event]] = None


@dataclass
class EventBinary(C8yModel):
    """Metadata of a binary attached to an event."""

    name: Optional[str] = None
    self_: Optional[str] = json_field("self")
    source: Optional[str] = None
    type: Optional[str] = None


@dataclass
class BinaryInfo(C8yModel):
    """Name and content type sent as the ``object`` part of a binary upload."""

    name: Optional[str] = None
    type: Optional[str] = None
