"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Mock transport adapter for local testing.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, List, Optional, Tuple

from cumulocity.adapters.base import BaseAdapter
from cumulocity.core.request import RequestDescriptor
from cumulocity.core.response import ResponseEnvelope


class MockAdapter(BaseAdapter):
    """In-memory mock adapter for unit tests.

    Args:
        responses: Mapping from ``(method, path)`` tuples to
            ``ResponseEnvelope`` instances. Unknown routes answer 404.

    Example::

        adapter = MockAdapter({
            ("GET", "/alarm/alarms/1"): ResponseEnvelope(status_code=200, body=b'{"id": "1"}'),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], ResponseEnvelope]] = None,
    ) -> None:
        self._responses: Dict[Tuple[str, str], ResponseEnvelope] = dict(responses or {})
        self._sent: List[RequestDescriptor] = []

    def add_response(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        body: Optional[bytes] = None,
        json_body: Any = None,
        headers: Tuple[Tuple[str, str], ...] = (),
    ) -> MockAdapter:
        """Register a canned response; ``json_body`` is serialized for you."""
        if json_body is not None:
            body = json.dumps(json_body).encode("utf-8")
        self._responses[(method.upper(), path)] = ResponseEnvelope(
            status_code=status_code, body=body or b"", headers=headers
        )
        return self

    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        self._sent.append(request)
        key = (request.method.upper(), request.path)
        if key in self._responses:
            return dataclasses.replace(self._responses[key], request=request)
        return ResponseEnvelope(
            status_code=404,
            body=b'{"error": "not mocked"}',
            request=request,
        )

    async def close(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def is_connected(self) -> bool:
        return True

    @property
    def sent_requests(self) -> List[RequestDescriptor]:
        """All requests that have been sent through this adapter."""
        return list(self._sent)

    @property
    def last_request(self) -> Optional[RequestDescriptor]:
        return self._sent[-1] if self._sent else None
