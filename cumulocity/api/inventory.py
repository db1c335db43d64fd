"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Inventory API: managed objects (``/inventory/managedObjects``), their child
hierarchy, and binaries (``/inventory/binaries``).
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from cumulocity.api.base import (
    ERROR_MEDIA_TYPE,
    JSON_MEDIA_TYPE,
    OCTET_STREAM_MEDIA_TYPE,
    TEXT_MEDIA_TYPE,
    BaseApi,
    accepts,
    segment,
    vnd,
)
from cumulocity.core.response import BAD_REQUEST, FORBIDDEN, UNAUTHORIZED
from cumulocity.models.events import BinaryInfo
from cumulocity.models.inventory import (
    Binary,
    BinaryCollection,
    ChildAssignment,
    ChildAssignments,
    ChildReference,
    ManagedObject,
    ManagedObjectCollection,
    ManagedObjectReferenceCollection,
    ManagedObjectUser,
    SupportedMeasurements,
    SupportedSeries,
)

MANAGED_OBJECT_CLEAR = (
    "owner",
    "additionParents",
    "lastUpdated",
    "childDevices",
    "childAssets",
    "creationTime",
    "childAdditions",
    "self",
    "assetParents",
    "deviceParents",
    "id",
)
MANAGED_OBJECT_USER_CLEAR = ("self", "userName")


def _managed_object_path(managed_object_id: str) -> str:
    return f"/inventory/managedObjects/{segment(managed_object_id)}"


class ManagedObjectsApi(BaseApi):
    """Devices, groups, assets and any other object in the inventory."""

    async def get_managed_objects(
        self,
        child_addition_id: Optional[str] = None,
        child_asset_id: Optional[str] = None,
        child_device_id: Optional[str] = None,
        current_page: Optional[int] = None,
        fragment_type: Optional[str] = None,
        ids: Optional[List[str]] = None,
        only_roots: Optional[bool] = None,
        owner: Optional[str] = None,
        page_size: Optional[int] = None,
        q: Optional[str] = None,
        query: Optional[str] = None,
        skip_children_names: Optional[bool] = None,
        text: Optional[str] = None,
        type: Optional[str] = None,
        with_children: Optional[bool] = None,
        with_groups: Optional[bool] = None,
        with_parents: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> ManagedObjectCollection:
        """Retrieve a page of managed objects.

        ``ids`` is sent as one comma-separated ``ids`` parameter. ``query``
        takes the inventory query language, ``q`` its legacy form.
        """
        request = (
            self._request(
                "GET",
                "/inventory/managedObjects",
                accepts(ERROR_MEDIA_TYPE, vnd("managedobjectcollection")),
            )
            .add_query_param("childAdditionId", child_addition_id)
            .add_query_param("childAssetId", child_asset_id)
            .add_query_param("childDeviceId", child_device_id)
            .add_query_param("currentPage", current_page)
            .add_query_param("fragmentType", fragment_type)
            .add_query_param("ids", ",".join(ids) if ids else None)
            .add_query_param("onlyRoots", only_roots)
            .add_query_param("owner", owner)
            .add_query_param("pageSize", page_size)
            .add_query_param("q", q)
            .add_query_param("query", query)
            .add_query_param("skipChildrenNames", skip_children_names)
            .add_query_param("text", text)
            .add_query_param("type", type)
            .add_query_param("withChildren", with_children)
            .add_query_param("withGroups", with_groups)
            .add_query_param("withParents", with_parents)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=ManagedObjectCollection)

    async def create_managed_object(self, managed_object: ManagedObject) -> ManagedObject:
        request = (
            self._request(
                "POST", "/inventory/managedObjects", accepts(ERROR_MEDIA_TYPE, vnd("managedobject"))
            )
            .add_header("Content-Type", vnd("managedobject"))
        )
        return await self._pipeline.execute(
            request, result_type=ManagedObject, body=managed_object, clear=MANAGED_OBJECT_CLEAR
        )

    async def get_number_of_managed_objects(
        self,
        child_addition_id: Optional[str] = None,
        child_asset_id: Optional[str] = None,
        child_device_id: Optional[str] = None,
        fragment_type: Optional[str] = None,
        ids: Optional[List[str]] = None,
        owner: Optional[str] = None,
        text: Optional[str] = None,
        type: Optional[str] = None,
    ) -> int:
        request = (
            self._request(
                "GET",
                "/inventory/managedObjects/count",
                accepts(ERROR_MEDIA_TYPE, TEXT_MEDIA_TYPE, JSON_MEDIA_TYPE),
            )
            .add_query_param("childAdditionId", child_addition_id)
            .add_query_param("childAssetId", child_asset_id)
            .add_query_param("childDeviceId", child_device_id)
            .add_query_param("fragmentType", fragment_type)
            .add_query_param("ids", ",".join(ids) if ids else None)
            .add_query_param("owner", owner)
            .add_query_param("text", text)
            .add_query_param("type", type)
        )
        return await self._pipeline.execute(request, result_type=int)

    async def get_managed_object(
        self,
        managed_object_id: str,
        skip_children_names: Optional[bool] = None,
        with_children: Optional[bool] = None,
        with_parents: Optional[bool] = None,
    ) -> ManagedObject:
        request = (
            self._request(
                "GET",
                _managed_object_path(managed_object_id),
                accepts(ERROR_MEDIA_TYPE, vnd("managedobject")),
            )
            .add_query_param("skipChildrenNames", skip_children_names)
            .add_query_param("withChildren", with_children)
            .add_query_param("withParents", with_parents)
        )
        return await self._pipeline.execute(request, result_type=ManagedObject)

    async def update_managed_object(
        self, managed_object: ManagedObject, managed_object_id: str
    ) -> ManagedObject:
        request = (
            self._request(
                "PUT",
                _managed_object_path(managed_object_id),
                accepts(ERROR_MEDIA_TYPE, vnd("managedobject")),
            )
            .add_header("Content-Type", vnd("managedobject"))
        )
        return await self._pipeline.execute(
            request, result_type=ManagedObject, body=managed_object, clear=MANAGED_OBJECT_CLEAR
        )

    async def delete_managed_object(
        self,
        managed_object_id: str,
        cascade: Optional[bool] = None,
        force_cascade: Optional[bool] = None,
        with_device_user: Optional[bool] = None,
    ) -> bytes:
        request = (
            self._request("DELETE", _managed_object_path(managed_object_id), JSON_MEDIA_TYPE)
            .add_query_param("cascade", cascade)
            .add_query_param("forceCascade", force_cascade)
            .add_query_param("withDeviceUser", with_device_user)
        )
        return await self._pipeline.execute(request, result_type=bytes)

    async def get_latest_availability(self, managed_object_id: str) -> str:
        """Latest availability date of a device, as sent by the platform."""
        request = self._request(
            "GET",
            f"{_managed_object_path(managed_object_id)}/availability",
            accepts(ERROR_MEDIA_TYPE, TEXT_MEDIA_TYPE, JSON_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=str)

    async def get_supported_measurements(self, managed_object_id: str) -> SupportedMeasurements:
        request = self._request(
            "GET",
            f"{_managed_object_path(managed_object_id)}/supportedMeasurements",
            accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=SupportedMeasurements)

    async def get_supported_series(self, managed_object_id: str) -> SupportedSeries:
        request = self._request(
            "GET",
            f"{_managed_object_path(managed_object_id)}/supportedSeries",
            accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=SupportedSeries)

    async def get_managed_object_user(self, managed_object_id: str) -> ManagedObjectUser:
        """Device user of a device managed object."""
        request = self._request(
            "GET",
            f"{_managed_object_path(managed_object_id)}/user",
            accepts(vnd("managedobjectuser"), ERROR_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=ManagedObjectUser)

    async def update_managed_object_user(
        self, user: ManagedObjectUser, managed_object_id: str
    ) -> ManagedObjectUser:
        """Enable or disable the device user of a device managed object."""
        request = (
            self._request(
                "PUT",
                f"{_managed_object_path(managed_object_id)}/user",
                accepts(vnd("managedobjectuser"), ERROR_MEDIA_TYPE),
            )
            .add_header("Content-Type", vnd("managedobjectuser"))
        )
        return await self._pipeline.execute(
            request, result_type=ManagedObjectUser, body=user, clear=MANAGED_OBJECT_USER_CLEAR
        )


class BinariesApi(BaseApi):
    """Files stored in the inventory as binary managed objects."""

    async def get_binaries(
        self,
        child_addition_id: Optional[str] = None,
        child_asset_id: Optional[str] = None,
        child_device_id: Optional[str] = None,
        current_page: Optional[int] = None,
        ids: Optional[List[str]] = None,
        owner: Optional[str] = None,
        page_size: Optional[int] = None,
        text: Optional[str] = None,
        type: Optional[str] = None,
        with_total_pages: Optional[bool] = None,
    ) -> BinaryCollection:
        """Retrieve metadata of stored files; each of ``ids`` is its own parameter."""
        request = (
            self._request(
                "GET",
                "/inventory/binaries",
                accepts(ERROR_MEDIA_TYPE, vnd("managedobjectcollection")),
            )
            .add_query_param("childAdditionId", child_addition_id)
            .add_query_param("childAssetId", child_asset_id)
            .add_query_param("childDeviceId", child_device_id)
            .add_query_param("currentPage", current_page)
            .add_query_param("ids", ids)
            .add_query_param("owner", owner)
            .add_query_param("pageSize", page_size)
            .add_query_param("text", text)
            .add_query_param("type", type)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED], result_type=BinaryCollection
        )

    async def upload_binary(
        self, info: BinaryInfo, data: bytes, filename: Optional[str] = None
    ) -> Binary:
        """Store a file; ``info`` gives its name and content type."""
        multipart = self._pipeline.multipart()
        multipart.add_part("object", info, JSON_MEDIA_TYPE)
        multipart.add_part("file", data, TEXT_MEDIA_TYPE, filename=filename or info.name)
        request = self._request(
            "POST", "/inventory/binaries", accepts(ERROR_MEDIA_TYPE, vnd("managedobject"))
        )
        return await self._pipeline.execute(
            request,
            rules=[BAD_REQUEST, UNAUTHORIZED, FORBIDDEN],
            result_type=Binary,
            multipart=multipart,
        )

    async def get_binary(self, binary_id: str) -> bytes:
        """Download the content of a stored file."""
        request = self._request(
            "GET",
            f"/inventory/binaries/{segment(binary_id)}",
            accepts(ERROR_MEDIA_TYPE, OCTET_STREAM_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, rules=[UNAUTHORIZED], result_type=bytes)

    async def replace_binary(self, data: bytes, binary_id: str) -> Binary:
        request = (
            self._request(
                "PUT",
                f"/inventory/binaries/{segment(binary_id)}",
                accepts(ERROR_MEDIA_TYPE, vnd("managedobject")),
            )
            .add_header("Content-Type", TEXT_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED], result_type=Binary, body=data
        )

    async def remove_binary(self, binary_id: str) -> bytes:
        request = self._request("DELETE", f"/inventory/binaries/{segment(binary_id)}", JSON_MEDIA_TYPE)
        return await self._pipeline.execute(request, rules=[UNAUTHORIZED], result_type=bytes)


CHILD_DEVICES = "childDevices"
CHILD_ASSETS = "childAssets"
CHILD_ADDITIONS = "childAdditions"


class ChildOperationsApi(BaseApi):
    """The inventory hierarchy: child devices, child assets and child additions.

    Each relation offers the same seven calls. A child is either assigned
    from an existing managed object (:class:`ChildAssignment`, or
    :class:`ChildAssignments` for several at once) or created and assigned
    in one request from a :class:`ManagedObject`.
    """

    async def _get_children(
        self,
        relation: str,
        managed_object_id: str,
        current_page: Optional[int],
        page_size: Optional[int],
        query: Optional[str],
        with_children: Optional[bool],
        with_total_pages: Optional[bool],
    ) -> ManagedObjectReferenceCollection:
        request = (
            self._request(
                "GET",
                f"{_managed_object_path(managed_object_id)}/{relation}",
                accepts(ERROR_MEDIA_TYPE, vnd("managedobjectreferencecollection")),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("query", query)
            .add_query_param("withChildren", with_children)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=ManagedObjectReferenceCollection)

    async def _assign(
        self,
        relation: str,
        managed_object_id: str,
        body: Any,
        content_type: str,
        clear: Iterable[str] = (),
    ) -> bytes:
        request = (
            self._request("POST", f"{_managed_object_path(managed_object_id)}/{relation}", JSON_MEDIA_TYPE)
            .add_header("Content-Type", content_type)
        )
        return await self._pipeline.execute(request, result_type=bytes, body=body, clear=clear)

    async def _unassign_many(
        self, relation: str, managed_object_id: str, children: ChildAssignments
    ) -> bytes:
        request = (
            self._request("DELETE", f"{_managed_object_path(managed_object_id)}/{relation}", JSON_MEDIA_TYPE)
            .add_header("Content-Type", vnd("managedobjectreferencecollection"))
        )
        return await self._pipeline.execute(request, result_type=bytes, body=children)

    async def _get_child(self, relation: str, managed_object_id: str, child_id: str) -> ChildReference:
        request = self._request(
            "GET",
            f"{_managed_object_path(managed_object_id)}/{relation}/{segment(child_id)}",
            accepts(vnd("managedobjectreference"), ERROR_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=ChildReference)

    async def _unassign(self, relation: str, managed_object_id: str, child_id: str) -> bytes:
        request = self._request(
            "DELETE",
            f"{_managed_object_path(managed_object_id)}/{relation}/{segment(child_id)}",
            JSON_MEDIA_TYPE,
        )
        return await self._pipeline.execute(request, result_type=bytes)

    # Child devices

    async def get_child_devices(
        self,
        managed_object_id: str,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        query: Optional[str] = None,
        with_children: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> ManagedObjectReferenceCollection:
        return await self._get_children(
            CHILD_DEVICES, managed_object_id, current_page, page_size, query, with_children, with_total_pages
        )

    async def assign_child_device(self, child: ChildAssignment, managed_object_id: str) -> bytes:
        return await self._assign(CHILD_DEVICES, managed_object_id, child, vnd("managedobjectreference"))

    async def assign_child_devices(self, children: ChildAssignments, managed_object_id: str) -> bytes:
        return await self._assign(
            CHILD_DEVICES, managed_object_id, children, vnd("managedobjectreferencecollection")
        )

    async def create_child_device(self, managed_object: ManagedObject, managed_object_id: str) -> bytes:
        """Create a managed object and assign it as a child device in one request."""
        return await self._assign(
            CHILD_DEVICES, managed_object_id, managed_object, vnd("managedobject"), MANAGED_OBJECT_CLEAR
        )

    async def unassign_child_devices(self, children: ChildAssignments, managed_object_id: str) -> bytes:
        return await self._unassign_many(CHILD_DEVICES, managed_object_id, children)

    async def get_child_device(self, managed_object_id: str, child_id: str) -> ChildReference:
        return await self._get_child(CHILD_DEVICES, managed_object_id, child_id)

    async def unassign_child_device(self, managed_object_id: str, child_id: str) -> bytes:
        return await self._unassign(CHILD_DEVICES, managed_object_id, child_id)

    # Child assets

    async def get_child_assets(
        self,
        managed_object_id: str,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        query: Optional[str] = None,
        with_children: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> ManagedObjectReferenceCollection:
        return await self._get_children(
            CHILD_ASSETS, managed_object_id, current_page, page_size, query, with_children, with_total_pages
        )

    async def assign_child_asset(self, child: ChildAssignment, managed_object_id: str) -> bytes:
        return await self._assign(CHILD_ASSETS, managed_object_id, child, vnd("managedobjectreference"))

    async def assign_child_assets(self, children: ChildAssignments, managed_object_id: str) -> bytes:
        return await self._assign(
            CHILD_ASSETS, managed_object_id, children, vnd("managedobjectreferencecollection")
        )

    async def create_child_asset(self, managed_object: ManagedObject, managed_object_id: str) -> bytes:
        return await self._assign(
            CHILD_ASSETS, managed_object_id, managed_object, vnd("managedobject"), MANAGED_OBJECT_CLEAR
        )

    async def unassign_child_assets(self, children: ChildAssignments, managed_object_id: str) -> bytes:
        return await self._unassign_many(CHILD_ASSETS, managed_object_id, children)

    async def get_child_asset(self, managed_object_id: str, child_id: str) -> ChildReference:
        return await self._get_child(CHILD_ASSETS, managed_object_id, child_id)

    async def unassign_child_asset(self, managed_object_id: str, child_id: str) -> bytes:
        return await self._unassign(CHILD_ASSETS, managed_object_id, child_id)

    # Child additions

    async def get_child_additions(
        self,
        managed_object_id: str,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        query: Optional[str] = None,
        with_children: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> ManagedObjectReferenceCollection:
        return await self._get_children(
            CHILD_ADDITIONS, managed_object_id, current_page, page_size, query, with_children, with_total_pages
        )

    async def assign_child_addition(self, child: ChildAssignment, managed_object_id: str) -> bytes:
        return await self._assign(CHILD_ADDITIONS, managed_object_id, child, vnd("managedobjectreference"))

    async def assign_child_additions(self, children: ChildAssignments, managed_object_id: str) -> bytes:
        return await self._assign(
            CHILD_ADDITIONS, managed_object_id, children, vnd("managedobjectreferencecollection")
        )

    async def create_child_addition(self, managed_object: ManagedObject, managed_object_id: str) -> bytes:
        return await self._assign(
            CHILD_ADDITIONS, managed_object_id, managed_object, vnd("managedobject"), MANAGED_OBJECT_CLEAR
        )

    async def unassign_child_additions(self, children: ChildAssignments, managed_object_id: str) -> bytes:
        return await self._unassign_many(CHILD_ADDITIONS, managed_object_id, children)

    async def get_child_addition(self, managed_object_id: str, child_id: str) -> ChildReference:
        return await self._get_child(CHILD_ADDITIONS, managed_object_id, child_id)

    async def unassign_child_addition(self, managed_object_id: str, child_id: str) -> bytes:
        return await self._unassign(CHILD_ADDITIONS, managed_object_id, child_id)
