"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

User, group and role models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from cumulocity.models.applications import Application
from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.common import PagedCollection


class PasswordStrength(str, Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


@dataclass
class Link(C8yModel):
    """Bare ``{"self": ...}`` reference used when assigning users and roles."""

    self_: Optional[str] = json_field("self")


@dataclass
class Role(C8yModel):
    id: Optional[str] = None
    name: Optional[str] = None
    self_: Optional[str] = json_field("self")


@dataclass
class RoleReference(C8yModel):
    self_: Optional[str] = json_field("self")
    role: Optional[Role] = None


@dataclass
class RoleReferences(C8yModel):
    self_: Optional[str] = json_field("self")
    references: Optional[List[RoleReference]] = None


@dataclass
class RoleCollection(PagedCollection):
    roles: Optional[List[Role]] = None


@dataclass
class RoleReferenceCollection(PagedCollection):
    references: Optional[List[RoleReference]] = None


@dataclass
class SubscribedRole(C8yModel):
    role: Optional[Link] = None


@dataclass
class SubscribedUser(C8yModel):
    user: Optional[Link] = None


@dataclass
class UserReference(C8yModel):
    self_: Optional[str] = json_field("self")
    user: Optional["User"] = None


@dataclass
class UserReferences(C8yModel):
    self_: Optional[str] = json_field("self")
    references: Optional[List[UserReference]] = None


@dataclass
class Group(C8yModel):
    id: Optional[int] = None
    self_: Optional[str] = json_field("self")
    name: Optional[str] = None
    description: Optional[str] = None
    applications: Optional[List[Application]] = None
    custom_properties: Optional[Dict[str, Any]] = None
    device_permissions: Optional[Dict[str, Any]] = None
    roles: Optional[RoleReferences] = None
    users: Optional[UserReferences] = None


@dataclass
class GroupReference(C8yModel):
    self_: Optional[str] = json_field("self")
    group: Optional[Group] = None


@dataclass
class GroupReferences(C8yModel):
    self_: Optional[str] = json_field("self")
    references: Optional[List[GroupReference]] = None


@dataclass
class User(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    user_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    enabled: Optional[bool] = None
    newsletter: Optional[bool] = None
    last_password_change: Optional[str] = None
    should_reset_password: Optional[bool] = None
    send_password_reset_email: Optional[bool] = None
    password_strength: Optional[PasswordStrength] = None
    custom_properties: Optional[Dict[str, Any]] = None
    device_permissions: Optional[Dict[str, Any]] = None
    groups: Optional[GroupReferences] = None
    roles: Optional[RoleReferences] = None
    applications: Optional[List[Application]] = None


@dataclass
class UserCollection(PagedCollection):
    users: Optional[List[User]] = None


@dataclass
class UserReferenceCollection(PagedCollection):
    references: Optional[List[UserReference]] = None


@dataclass
class GroupCollection(PagedCollection):
    groups: Optional[List[Group]] = None


@dataclass
class GroupReferenceCollection(PagedCollection):
    references: Optional[List[GroupReference]] = None


@dataclass
class CurrentUser(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    user_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    enabled: Optional[bool] = None
    last_password_change: Optional[str] = None
    should_reset_password: Optional[bool] = None
    effective_roles: Optional[List[Role]] = None
    device_permissions: Optional[Dict[str, Any]] = None


@dataclass
class InventoryRolePermission(C8yModel):
    """One permission of an inventory role.

    ``permission`` is ``ADMIN``, ``READ`` or ``*``; ``type`` and ``scope``
    narrow it to a fragment type and a data scope such as ``ALARM``.
    """

    id: Optional[Union[int, str]] = None
    permission: Optional[str] = None
    scope: Optional[str] = None
    type: Optional[str] = None


@dataclass
class InventoryRole(C8yModel):
    id: Optional[Union[int, str]] = None
    self_: Optional[str] = json_field("self")
    name: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[InventoryRolePermission]] = None


@dataclass
class InventoryRoleCollection(PagedCollection):
    roles: Optional[List[InventoryRole]] = None


@dataclass
class InventoryAssignment(C8yModel):
    """Inventory roles granted to a user on one group of managed objects."""

    id: Optional[Union[int, str]] = None
    self_: Optional[str] = json_field("self")
    managed_object: Optional[str] = None
    roles: Optional[List[InventoryRole]] = None


@dataclass
class InventoryAssignmentCollection(C8yModel):
    self_: Optional[str] = json_field("self")
    inventory_assignments: Optional[List[InventoryAssignment]] = None


@dataclass
class DevicePermissionOwners(C8yModel):
    """Users and groups holding device permissions on a managed object."""

    users: Optional[List[User]] = None
    groups: Optional[List[Group]] = None


@dataclass
class UserDevicePermissions(C8yModel):
    user_name: Optional[str] = None
    device_permissions: Optional[Dict[str, List[str]]] = None


@dataclass
class GroupDevicePermissions(C8yModel):
    id: Optional[Union[int, str]] = None
    device_permissions: Optional[Dict[str, List[str]]] = None


@dataclass
class UpdatedDevicePermissions(C8yModel):
    """Body of a device permission update.

    Permissions are keyed by managed object id; each value lists entries of
    the form ``API:fragment:permission``, for example ``ALARM:*:READ``.
    """

    users: Optional[List[UserDevicePermissions]] = None
    groups: Optional[List[GroupDevicePermissions]] = None
