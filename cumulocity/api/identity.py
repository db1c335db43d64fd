"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

External IDs API (``/identity``).
"""

from __future__ import annotations

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment, vnd
from cumulocity.core.response import NOT_FOUND, UNAUTHORIZED, fixed_error
from cumulocity.models.identity import ExternalId, ExternalIds

DUPLICATE_IDENTITY = fixed_error(
    409, "Duplicate - Identity already bound to a different Global ID."
)

CREATE_EXTERNAL_ID_CLEAR = ("managedObject", "self")


class ExternalIdsApi(BaseApi):
    """Bind identifiers from foreign systems to managed objects."""

    async def get_external_ids(self, managed_object_id: str) -> ExternalIds:
        """List the external IDs bound to a managed object (its global ID)."""
        request = self._request(
            "GET",
            f"/identity/globalIds/{segment(managed_object_id)}/externalIds",
            accepts(ERROR_MEDIA_TYPE, vnd("externalidcollection")),
        )
        return await self._pipeline.execute(request, rules=[UNAUTHORIZED], result_type=ExternalIds)

    async def create_external_id(self, external_id: ExternalId, managed_object_id: str) -> ExternalId:
        request = (
            self._request(
                "POST",
                f"/identity/globalIds/{segment(managed_object_id)}/externalIds",
                accepts(ERROR_MEDIA_TYPE, vnd("externalid")),
            )
            .add_header("Content-Type", vnd("externalid"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, DUPLICATE_IDENTITY],
            result_type=ExternalId,
            body=external_id,
            clear=CREATE_EXTERNAL_ID_CLEAR,
        )

    async def get_external_id(self, type: str, external_id: str) -> ExternalId:
        """Resolve an external ID of the given type to its managed object."""
        request = self._request(
            "GET",
            f"/identity/externalIds/{segment(type)}/{segment(external_id)}",
            accepts(ERROR_MEDIA_TYPE, vnd("externalid")),
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, NOT_FOUND], result_type=ExternalId
        )

    async def delete_external_id(self, type: str, external_id: str) -> bytes:
        request = self._request(
            "DELETE",
            f"/identity/externalIds/{segment(type)}/{segment(external_id)}",
            JSON_MEDIA_TYPE,
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, NOT_FOUND], result_type=bytes
        )
