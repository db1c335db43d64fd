"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Inventory models: managed objects and binaries.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, fragments_field, json_field
from cumulocity.models.common import PagedCollection, SourceReference


@dataclass
class ManagedObjectReference(C8yModel):
    self_: Optional[str] = json_field("self")
    managed_object: Optional[SourceReference] = None


@dataclass
class ObjectReferences(C8yModel):
    """Child or parent references of a managed object."""

    self_: Optional[str] = json_field("self")
    references: Optional[List[ManagedObjectReference]] = None


@dataclass
class ManagedObject(C8yModel):
    """A device, asset or any other inventory item.

    Device fragments outside the declared members live in
    ``custom_fragments``.
    """

    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    name: Optional[str] = None
    type: Optional[str] = None
    owner: Optional[str] = None
    creation_time: Optional[str] = None
    last_updated: Optional[str] = None
    child_additions: Optional[ObjectReferences] = None
    child_assets: Optional[ObjectReferences] = None
    child_devices: Optional[ObjectReferences] = None
    addition_parents: Optional[ObjectReferences] = None
    asset_parents: Optional[ObjectReferences] = None
    device_parents: Optional[ObjectReferences] = None
    c8y_is_device: Optional[Dict[str, Any]] = json_field("c8y_IsDevice")
    c8y_device_types: Optional[List[str]] = json_field("c8y_DeviceTypes")
    c8y_supported_operations: Optional[List[str]] = json_field("c8y_SupportedOperations")
    custom_fragments: Dict[str, Any] = fragments_field()


@dataclass
class ManagedObjectCollection(PagedCollection):
    managed_objects: Optional[List[ManagedObject]] = None


@dataclass
class ManagedObjectUser(C8yModel):
    """Device user bound to a managed object."""

    self_: Optional[str] = json_field("self")
    user_name: Optional[str] = None
    enabled: Optional[bool] = None


@dataclass
class SupportedMeasurements(C8yModel):
    c8y_supported_measurements: Optional[List[str]] = json_field("c8y_SupportedMeasurements")


@dataclass
class SupportedSeries(C8yModel):
    c8y_supported_series: Optional[List[str]] = json_field("c8y_SupportedSeries")


@dataclass
class Binary(C8yModel):
    """Managed object describing an uploaded file."""

    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    name: Optional[str] = None
    type: Optional[str] = None
    owner: Optional[str] = None
    content_type: Optional[str] = None
    length: Optional[int] = None
    last_updated: Optional[str] = None
    c8y_is_binary: Optional[Dict[str, Any]] = json_field("c8y_IsBinary")


@dataclass
class BinaryCollection(PagedCollection):
    managed_objects: Optional[List[Binary]] = None


@dataclass
class ChildAssignment(C8yModel):
    """Body assigning one existing managed object as a child."""

    managed_object: Optional[SourceReference] = None


@dataclass
class ChildAssignments(C8yModel):
    """Body assigning or unassigning several existing managed objects at once."""

    references: Optional[List[ChildAssignment]] = None


@dataclass
class ChildReference(C8yModel):
    """A child device, asset or addition of a managed object."""

    self_: Optional[str] = json_field("self")
    managed_object: Optional[ManagedObject] = None


@dataclass
class ManagedObjectReferenceCollection(PagedCollection):
    references: Optional[List[ChildReference]] = None
