"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

User API (``/user``): users, the current user, user groups, roles, inventory
roles and device permissions.

Most resources are scoped to a tenant through the ``/user/{tenantId}``
path prefix.
"""

from __future__ import annotations

from typing import Optional, Union

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment, vnd
from cumulocity.core.response import UNAUTHORIZED, UNPROCESSABLE
from cumulocity.models.users import (
    CurrentUser,
    DevicePermissionOwners,
    Group,
    GroupCollection,
    GroupReferenceCollection,
    InventoryAssignment,
    InventoryAssignmentCollection,
    InventoryRole,
    InventoryRoleCollection,
    Role,
    RoleCollection,
    RoleReference,
    RoleReferenceCollection,
    SubscribedRole,
    SubscribedUser,
    UpdatedDevicePermissions,
    User,
    UserCollection,
    UserReference,
    UserReferenceCollection,
)

USER_CLEAR = (
    "newsletter",
    "passwordStrength",
    "customProperties",
    "displayName",
    "roles",
    "self",
    "groups",
    "shouldResetPassword",
    "id",
    "lastPasswordChange",
    "applications",
)
CURRENT_USER_CLEAR = (
    "self",
    "effectiveRoles",
    "shouldResetPassword",
    "id",
    "lastPasswordChange",
    "devicePermissions",
)
GROUP_CLEAR = ("roles", "self", "id", "devicePermissions", "users", "applications")
INVENTORY_ROLE_CLEAR = ("self", "id")
CREATE_INVENTORY_ASSIGNMENT_CLEAR = ("self", "id")
UPDATE_INVENTORY_ASSIGNMENT_CLEAR = ("managedObject", "self", "id")

GroupId = Union[int, str]
RoleId = Union[int, str]


def _users_path(tenant_id: str, user_id: Optional[str] = None) -> str:
    path = f"/user/{segment(tenant_id)}/users"
    return path if user_id is None else f"{path}/{segment(user_id)}"


def _groups_path(tenant_id: str, group_id: Optional[GroupId] = None) -> str:
    path = f"/user/{segment(tenant_id)}/groups"
    return path if group_id is None else f"{path}/{segment(group_id)}"


def _inventory_role_path(role_id: RoleId) -> str:
    return f"/user/inventoryroles/{segment(role_id)}"


def _inventory_assignment_path(
    tenant_id: str, user_id: str, assignment_id: Optional[RoleId] = None
) -> str:
    path = f"{_users_path(tenant_id, user_id)}/roles/inventory"
    return path if assignment_id is None else f"{path}/{segment(assignment_id)}"


class UsersApi(BaseApi):
    """Users of a tenant and their group memberships."""

    async def get_users(
        self,
        tenant_id: str,
        current_page: Optional[int] = None,
        groups: Optional[str] = None,
        only_devices: Optional[bool] = None,
        owner: Optional[str] = None,
        page_size: Optional[int] = None,
        username: Optional[str] = None,
        with_subusers_count: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> UserCollection:
        request = (
            self._request("GET", _users_path(tenant_id), accepts(ERROR_MEDIA_TYPE, vnd("usercollection")))
            .add_query_param("currentPage", current_page)
            .add_query_param("groups", groups)
            .add_query_param("onlyDevices", only_devices)
            .add_query_param("owner", owner)
            .add_query_param("pageSize", page_size)
            .add_query_param("username", username)
            .add_query_param("withSubusersCount", with_subusers_count)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=UserCollection)

    async def create_user(self, user: User, tenant_id: str) -> User:
        request = (
            self._request("POST", _users_path(tenant_id), accepts(ERROR_MEDIA_TYPE, vnd("user")))
            .add_header("Content-Type", vnd("user"))
        )
        return await self._pipeline.execute(request, result_type=User, body=user, clear=USER_CLEAR)

    async def get_user(self, tenant_id: str, user_id: str) -> User:
        request = self._request(
            "GET", _users_path(tenant_id, user_id), accepts(ERROR_MEDIA_TYPE, vnd("user"))
        )
        return await self._pipeline.execute(request, result_type=User)

    async def update_user(self, user: User, tenant_id: str, user_id: str) -> User:
        request = (
            self._request("PUT", _users_path(tenant_id, user_id), accepts(ERROR_MEDIA_TYPE, vnd("user")))
            .add_header("Content-Type", vnd("user"))
        )
        return await self._pipeline.execute(request, result_type=User, body=user, clear=USER_CLEAR)

    async def delete_user(self, tenant_id: str, user_id: str) -> bytes:
        request = self._request("DELETE", _users_path(tenant_id, user_id), JSON_MEDIA_TYPE)
        return await self._pipeline.execute(request, result_type=bytes)

    async def get_user_by_username(self, tenant_id: str, username: str) -> User:
        request = self._request(
            "GET",
            f"/user/{segment(tenant_id)}/userByName/{segment(username)}",
            accepts(ERROR_MEDIA_TYPE, vnd("user")),
        )
        return await self._pipeline.execute(request, result_type=User)

    async def get_users_from_user_group(
        self,
        tenant_id: str,
        group_id: GroupId,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
    ) -> UserReferenceCollection:
        request = (
            self._request(
                "GET",
                f"{_groups_path(tenant_id, group_id)}/users",
                accepts(ERROR_MEDIA_TYPE, vnd("usercollection")),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=UserReferenceCollection)

    async def assign_user_to_user_group(
        self, user: SubscribedUser, tenant_id: str, group_id: GroupId
    ) -> UserReference:
        """Add a user, referenced by its ``self`` link, to a group."""
        request = (
            self._request(
                "POST",
                f"{_groups_path(tenant_id, group_id)}/users",
                accepts(ERROR_MEDIA_TYPE, vnd("userreference")),
            )
            .add_header("Content-Type", vnd("userreference"))
        )
        return await self._pipeline.execute(request, result_type=UserReference, body=user)

    async def remove_user_from_user_group(
        self, tenant_id: str, group_id: GroupId, user_id: str
    ) -> bytes:
        request = self._request(
            "DELETE",
            f"{_groups_path(tenant_id, group_id)}/users/{segment(user_id)}",
            JSON_MEDIA_TYPE,
        )
        return await self._pipeline.execute(request, result_type=bytes)


class CurrentUserApi(BaseApi):
    """The user the client authenticates as."""

    async def get_current_user(self) -> CurrentUser:
        request = self._request(
            "GET", "/user/currentUser", accepts(ERROR_MEDIA_TYPE, vnd("currentuser"))
        )
        return await self._pipeline.execute(request, rules=[UNAUTHORIZED], result_type=CurrentUser)

    async def update_current_user(self, user: CurrentUser) -> CurrentUser:
        request = (
            self._request("PUT", "/user/currentUser", accepts(ERROR_MEDIA_TYPE, vnd("currentuser")))
            .add_header("Content-Type", vnd("currentuser"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, UNPROCESSABLE],
            result_type=CurrentUser,
            body=user,
            clear=CURRENT_USER_CLEAR,
        )


class GroupsApi(BaseApi):
    """User groups, which grant roles to their members."""

    async def get_user_groups(
        self,
        tenant_id: str,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> GroupCollection:
        request = (
            self._request(
                "GET", _groups_path(tenant_id), accepts(ERROR_MEDIA_TYPE, vnd("groupcollection"))
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=GroupCollection)

    async def create_user_group(self, group: Group, tenant_id: str) -> Group:
        request = (
            self._request("POST", _groups_path(tenant_id), accepts(ERROR_MEDIA_TYPE, vnd("group")))
            .add_header("Content-Type", vnd("group"))
        )
        return await self._pipeline.execute(request, result_type=Group, body=group, clear=GROUP_CLEAR)

    async def get_user_group(self, tenant_id: str, group_id: GroupId) -> Group:
        request = self._request(
            "GET", _groups_path(tenant_id, group_id), accepts(ERROR_MEDIA_TYPE, vnd("group"))
        )
        return await self._pipeline.execute(request, result_type=Group)

    async def update_user_group(self, group: Group, tenant_id: str, group_id: GroupId) -> Group:
        request = (
            self._request(
                "PUT", _groups_path(tenant_id, group_id), accepts(ERROR_MEDIA_TYPE, vnd("group"))
            )
            .add_header("Content-Type", vnd("group"))
        )
        return await self._pipeline.execute(request, result_type=Group, body=group, clear=GROUP_CLEAR)

    async def delete_user_group(self, tenant_id: str, group_id: GroupId) -> bytes:
        request = self._request("DELETE", _groups_path(tenant_id, group_id), JSON_MEDIA_TYPE)
        return await self._pipeline.execute(request, result_type=bytes)

    async def get_user_group_by_name(self, tenant_id: str, group_name: str) -> Group:
        request = self._request(
            "GET",
            f"/user/{segment(tenant_id)}/groupByName/{segment(group_name)}",
            accepts(ERROR_MEDIA_TYPE, vnd("group")),
        )
        return await self._pipeline.execute(request, result_type=Group)

    async def get_user_groups_of_user(
        self,
        tenant_id: str,
        user_id: str,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> GroupReferenceCollection:
        request = (
            self._request(
                "GET",
                f"{_users_path(tenant_id, user_id)}/groups",
                accepts(ERROR_MEDIA_TYPE, vnd("groupreferencecollection")),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=GroupReferenceCollection)


class RolesApi(BaseApi):
    """Roles and their assignment to users and groups."""

    async def get_user_roles(
        self,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_pages: Optional[bool] = None,
    ) -> RoleCollection:
        request = (
            self._request("GET", "/user/roles", accepts(ERROR_MEDIA_TYPE, vnd("rolecollection")))
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=RoleCollection)

    async def get_user_role(self, name: str) -> Role:
        request = self._request(
            "GET", f"/user/roles/{segment(name)}", accepts(ERROR_MEDIA_TYPE, vnd("role"))
        )
        return await self._pipeline.execute(request, result_type=Role)

    async def get_group_roles(
        self,
        tenant_id: str,
        group_id: GroupId,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> RoleReferenceCollection:
        request = (
            self._request(
                "GET",
                f"{_groups_path(tenant_id, group_id)}/roles",
                accepts(ERROR_MEDIA_TYPE, vnd("rolereferencecollection")),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
        )
        return await self._pipeline.execute(request, result_type=RoleReferenceCollection)

    async def assign_group_role(
        self, role: SubscribedRole, tenant_id: str, group_id: GroupId
    ) -> RoleReference:
        request = (
            self._request(
                "POST",
                f"{_groups_path(tenant_id, group_id)}/roles",
                accepts(ERROR_MEDIA_TYPE, vnd("rolereference")),
            )
            .add_header("Content-Type", vnd("rolereference"))
        )
        return await self._pipeline.execute(request, result_type=RoleReference, body=role)

    async def unassign_group_role(self, tenant_id: str, group_id: GroupId, role_id: str) -> bytes:
        request = self._request(
            "DELETE",
            f"{_groups_path(tenant_id, group_id)}/roles/{segment(role_id)}",
            JSON_MEDIA_TYPE,
        )
        return await self._pipeline.execute(request, result_type=bytes)

    async def assign_user_role(
        self, role: SubscribedRole, tenant_id: str, user_id: str
    ) -> RoleReference:
        request = (
            self._request(
                "POST",
                f"{_users_path(tenant_id, user_id)}/roles",
                accepts(ERROR_MEDIA_TYPE, vnd("rolereference")),
            )
            .add_header("Content-Type", vnd("rolereference"))
        )
        return await self._pipeline.execute(request, result_type=RoleReference, body=role)

    async def unassign_user_role(self, tenant_id: str, user_id: str, role_id: str) -> bytes:
        request = self._request(
            "DELETE",
            f"{_users_path(tenant_id, user_id)}/roles/{segment(role_id)}",
            JSON_MEDIA_TYPE,
        )
        return await self._pipeline.execute(request, result_type=bytes)


class InventoryRolesApi(BaseApi):
    """Inventory roles and their assignment to users on groups of managed objects."""

    async def get_inventory_roles(self) -> InventoryRoleCollection:
        request = self._request(
            "GET", "/user/inventoryroles", accepts(ERROR_MEDIA_TYPE, vnd("inventoryrolecollection"))
        )
        return await self._pipeline.execute(request, result_type=InventoryRoleCollection)

    async def create_inventory_role(self, role: InventoryRole) -> InventoryRole:
        request = (
            self._request("POST", "/user/inventoryroles", accepts(vnd("inventoryrole"), ERROR_MEDIA_TYPE))
            .add_header("Content-Type", vnd("inventoryrole"))
        )
        return await self._pipeline.execute(
            request, result_type=InventoryRole, body=role, clear=INVENTORY_ROLE_CLEAR
        )

    async def get_inventory_role(self, role_id: RoleId) -> InventoryRole:
        request = self._request(
            "GET", _inventory_role_path(role_id), accepts(vnd("inventoryrole"), ERROR_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=InventoryRole)

    async def update_inventory_role(self, role: InventoryRole, role_id: RoleId) -> InventoryRole:
        request = (
            self._request("PUT", _inventory_role_path(role_id), accepts(vnd("inventoryrole"), ERROR_MEDIA_TYPE))
            .add_header("Content-Type", vnd("inventoryrole"))
        )
        return await self._pipeline.execute(
            request, result_type=InventoryRole, body=role, clear=INVENTORY_ROLE_CLEAR
        )

    async def delete_inventory_role(self, role_id: RoleId) -> bytes:
        request = self._request("DELETE", _inventory_role_path(role_id), JSON_MEDIA_TYPE)
        return await self._pipeline.execute(request, result_type=bytes)

    async def get_inventory_assignments(self, tenant_id: str, user_id: str) -> InventoryAssignmentCollection:
        request = self._request(
            "GET",
            _inventory_assignment_path(tenant_id, user_id),
            accepts(ERROR_MEDIA_TYPE, vnd("inventoryassignmentcollection")),
        )
        return await self._pipeline.execute(request, result_type=InventoryAssignmentCollection)

    async def assign_inventory_roles(
        self, assignment: InventoryAssignment, tenant_id: str, user_id: str
    ) -> InventoryAssignment:
        """Grant inventory roles to a user on the group named in ``assignment.managed_object``."""
        request = (
            self._request(
                "POST",
                _inventory_assignment_path(tenant_id, user_id),
                accepts(ERROR_MEDIA_TYPE, vnd("inventoryassignment")),
            )
            .add_header("Content-Type", vnd("inventoryassignment"))
        )
        return await self._pipeline.execute(
            request,
            result_type=InventoryAssignment,
            body=assignment,
            clear=CREATE_INVENTORY_ASSIGNMENT_CLEAR,
        )

    async def get_inventory_assignment(
        self, tenant_id: str, user_id: str, assignment_id: RoleId
    ) -> InventoryAssignment:
        request = self._request(
            "GET",
            _inventory_assignment_path(tenant_id, user_id, assignment_id),
            accepts(ERROR_MEDIA_TYPE, vnd("inventoryassignment")),
        )
        return await self._pipeline.execute(request, result_type=InventoryAssignment)

    async def update_inventory_assignment(
        self, assignment: InventoryAssignment, tenant_id: str, user_id: str, assignment_id: RoleId
    ) -> InventoryAssignment:
        """Replace the roles of an assignment; its managed object cannot change."""
        request = (
            self._request(
                "PUT",
                _inventory_assignment_path(tenant_id, user_id, assignment_id),
                accepts(ERROR_MEDIA_TYPE, vnd("inventoryassignment")),
            )
            .add_header("Content-Type", vnd("inventoryassignment"))
        )
        return await self._pipeline.execute(
            request,
            result_type=InventoryAssignment,
            body=assignment,
            clear=UPDATE_INVENTORY_ASSIGNMENT_CLEAR,
        )

    async def unassign_inventory_roles(self, tenant_id: str, user_id: str, assignment_id: RoleId) -> bytes:
        request = self._request(
            "DELETE", _inventory_assignment_path(tenant_id, user_id, assignment_id), JSON_MEDIA_TYPE
        )
        return await self._pipeline.execute(request, result_type=bytes)


class DevicePermissionsApi(BaseApi):
    """Device permissions users and groups hold on a single managed object."""

    async def get_device_permission_assignments(self, managed_object_id: str) -> DevicePermissionOwners:
        request = self._request(
            "GET",
            f"/user/devicePermissions/{segment(managed_object_id)}",
            accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=DevicePermissionOwners)

    async def update_device_permission_assignments(
        self, permissions: UpdatedDevicePermissions, managed_object_id: str
    ) -> bytes:
        request = (
            self._request("PUT", f"/user/devicePermissions/{segment(managed_object_id)}", JSON_MEDIA_TYPE)
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=bytes, body=permissions)
