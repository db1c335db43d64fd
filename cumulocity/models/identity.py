"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

External identity models.
"""

from dataclasses import dataclass
from typing import List, Optional

from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.common import SourceReference


@dataclass
class ExternalId(C8yModel):
    """An identifier from a foreign system bound to a managed object."""

    external_id: Optional[str] = None
    type: Optional[str] = None
    self_: Optional[str] = json_field("self")
    managed_object: Optional[SourceReference] = None


@dataclass
class ExternalIds(C8yModel):
    self_: Optional[str] = json_field("self")
    external_ids: Optional[List[ExternalId]] = None
