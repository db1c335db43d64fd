"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Event attachments API (``/event/events/{id}/binaries``).

An event carries at most one binary. Uploading to an event that already has
one fails with 409; use :meth:`AttachmentsApi.replace_event_attachment`.
"""

from __future__ import annotations

from typing import Optional

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
from cumulocity.core.response import CONFLICT, NOT_FOUND, UNAUTHORIZED
from cumulocity.models.events import BinaryInfo, EventBinary


def _binaries_path(event_id: str) -> str:
    return f"/event/events/{segment(event_id)}/binaries"


class AttachmentsApi(BaseApi):
    """Download, upload, replace and delete the binary attached to an event."""

    async def get_event_attachment(self, event_id: str) -> bytes:
        request = self._request(
            "GET", _binaries_path(event_id), accepts(ERROR_MEDIA_TYPE, OCTET_STREAM_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, NOT_FOUND], result_type=bytes
        )

    async def replace_event_attachment(self, data: bytes, event_id: str) -> EventBinary:
        request = (
            self._request("PUT", _binaries_path(event_id), accepts(ERROR_MEDIA_TYPE, vnd("event")))
            .add_header("Content-Type", TEXT_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, NOT_FOUND], result_type=EventBinary, body=data
        )

    async def upload_event_attachment(self, data: bytes, event_id: str) -> EventBinary:
        """Attach ``data`` as the request body itself."""
        request = (
            self._request("POST", _binaries_path(event_id), accepts(ERROR_MEDIA_TYPE, vnd("event")))
            .add_header("Content-Type", TEXT_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, NOT_FOUND, CONFLICT],
            result_type=EventBinary,
            body=data,
        )

    async def upload_event_attachment_multipart(
        self,
        info: BinaryInfo,
        data: bytes,
        event_id: str,
        filename: Optional[str] = None,
    ) -> EventBinary:
        """Attach ``data`` as a multipart upload with its name and content type.

        Args:
            info: Name and content type stored with the binary.
            data: File content.
            event_id: Event to attach to.
            filename: Filename of the ``file`` part; defaults to ``info.name``.
        """
        multipart = self._pipeline.multipart()
        multipart.add_part("object", info, JSON_MEDIA_TYPE)
        multipart.add_part("file", data, TEXT_MEDIA_TYPE, filename=filename or info.name)
        request = self._request(
            "POST", _binaries_path(event_id), accepts(ERROR_MEDIA_TYPE, vnd("event"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED, NOT_FOUND, CONFLICT],
            result_type=EventBinary,
            multipart=multipart,
        )

    async def delete_event_attachment(self, event_id: str) -> bytes:
        request = self._request("DELETE", _binaries_path(event_id), JSON_MEDIA_TYPE)
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED, NOT_FOUND], result_type=bytes
        )
