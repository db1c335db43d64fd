"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Models shared across resource groups.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from cumulocity.models.base import C8yModel, fragments_field, json_field


@dataclass
class C8yError(C8yModel):
    """Error body returned by the platform for failed requests."""

    error: Optional[str] = None
    message: Optional[str] = None
    info: Optional[str] = None


@dataclass
class PageStatistics(C8yModel):
    current_page: Optional[int] = None
    page_size: Optional[int] = None
    total_elements: Optional[int] = None
    total_pages: Optional[int] = None


@dataclass
class PagedCollection(C8yModel):
    """Common members of every paged collection response."""

    self_: Optional[str] = json_field("self")
    next: Optional[str] = None
    prev: Optional[str] = None
    statistics: Optional[PageStatistics] = None


@dataclass
class SourceReference(C8yModel):
    """Reference to the managed object an alarm, event or measurement belongs to."""

    id: Optional[str] = None
    name: Optional[str] = None
    self_: Optional[str] = json_field("self")


@dataclass
class ApiResource(C8yModel):
    """Entry point of one API group.

    The platform lists the collection links and URI templates of the group;
    they are kept as-is in ``custom_fragments``.
    """

    self_: Optional[str] = json_field("self")
    custom_fragments: Dict[str, Any] = fragments_field()


@dataclass
class PlatformApiResource(C8yModel):
    self_: Optional[str] = json_field("self")
    alarm: Optional[ApiResource] = None
    audit: Optional[ApiResource] = None
    device_control: Optional[ApiResource] = None
    event: Optional[ApiResource] = None
    identity: Optional[ApiResource] = None
    inventory: Optional[ApiResource] = None
    measurement: Optional[ApiResource] = None
    tenant: Optional[ApiResource] = None
    user: Optional[ApiResource] = None
