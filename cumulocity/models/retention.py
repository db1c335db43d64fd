"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Retention rule models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.common import PagedCollection


class RetentionDataType(str, Enum):
    ALARM = "ALARM"
    AUDIT = "AUDIT"
    BULK_OPERATION = "BULK_OPERATION"
    EVENT = "EVENT"
    MEASUREMENT = "MEASUREMENT"
    OPERATION = "OPERATION"
    ALL = "*"


@dataclass
class RetentionRule(C8yModel):
    """How long data of one kind is kept; ``*`` matches any value."""

    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    data_type: Optional[RetentionDataType] = None
    fragment_type: Optional[str] = None
    type: Optional[str] = None
    source: Optional[str] = None
    maximum_age: Optional[int] = None
    editable: Optional[bool] = None


@dataclass
class RetentionRuleCollection(PagedCollection):
    retention_rules: Optional[List[RetentionRule]] = None
