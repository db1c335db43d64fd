"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Audit record models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, fragments_field, json_field
from cumulocity.models.common import PagedCollection, SourceReference


class AuditSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    WARNING = "WARNING"
    INFORMATION = "INFORMATION"


class ChangeType(str, Enum):
    ADDED = "ADDED"
    REPLACED = "REPLACED"


@dataclass
class AuditChange(C8yModel):
    attribute: Optional[str] = None
    change_type: Optional[ChangeType] = None
    new_value: Any = None
    previous_value: Any = None
    type: Optional[str] = None


@dataclass
class AuditMetadata(C8yModel):
    action: Optional[str] = None


@dataclass
class AuditRecord(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    type: Optional[str] = None
    activity: Optional[str] = None
    text: Optional[str] = None
    time: Optional[str] = None
    user: Optional[str] = None
    application: Optional[str] = None
    severity: Optional[AuditSeverity] = None
    source: Optional[SourceReference] = None
    changes: Optional[List[AuditChange]] = None
    creation_time: Optional[str] = None
    c8y_metadata: Optional[AuditMetadata] = json_field("c8y_Metadata")
    custom_fragments: Dict[str, Any] = fragments_field()


@dataclass
class AuditRecordCollection(PagedCollection):
    audit_records: Optional[List[AuditRecord]] = None
