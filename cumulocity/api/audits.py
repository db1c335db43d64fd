"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Audit records API (``/audit/auditRecords``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from cumulocity.api.base import ERROR_MEDIA_TYPE, BaseApi, accepts, segment, vnd
from cumulocity.core.response import UNAUTHORIZED
from cumulocity.models.audits import AuditRecord, AuditRecordCollection

CREATE_AUDIT_RECORD_CLEAR = (
    "severity",
    "application",
    "creationTime",
    "c8y_Metadata",
    "changes",
    "self",
    "id",
    "source.self",
)


class AuditsApi(BaseApi):
    """Read and write the tenant's audit log."""

    async def get_audit_records(
        self,
        application: Optional[str] = None,
        current_page: Optional[int] = None,
        date_from: Optional[Union[str, datetime]] = None,
        date_to: Optional[Union[str, datetime]] = None,
        page_size: Optional[int] = None,
        source: Optional[str] = None,
        type: Optional[str] = None,
        user: Optional[str] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> AuditRecordCollection:
        request = (
            self._request(
                "GET", "/audit/auditRecords", accepts(ERROR_MEDIA_TYPE, vnd("auditrecordcollection"))
            )
            .add_query_param("application", application)
            .add_query_param("currentPage", current_page)
            .add_query_param("dateFrom", date_from)
            .add_query_param("dateTo", date_to)
            .add_query_param("pageSize", page_size)
            .add_query_param("source", source)
            .add_query_param("type", type)
            .add_query_param("user", user)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(
            request, rules=[UNAUTHORIZED], result_type=AuditRecordCollection
        )

    async def create_audit_record(self, audit_record: AuditRecord) -> AuditRecord:
        request = (
            self._request("POST", "/audit/auditRecords", accepts(ERROR_MEDIA_TYPE, vnd("auditrecord")))
            .add_header("Content-Type", vnd("auditrecord"))
        )
        return await self._pipeline.execute(
            request,
            rules=[UNAUTHORIZED],
            result_type=AuditRecord,
            body=audit_record,
            clear=CREATE_AUDIT_RECORD_CLEAR,
        )

    async def get_audit_record(self, audit_record_id: str) -> AuditRecord:
        request = self._request(
            "GET",
            f"/audit/auditRecords/{segment(audit_record_id)}",
            accepts(ERROR_MEDIA_TYPE, vnd("auditrecord")),
        )
        return await self._pipeline.execute(request, rules=[UNAUTHORIZED], result_type=AuditRecord)
