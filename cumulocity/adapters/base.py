"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Transport adapter base class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cumulocity.core.request import RequestDescriptor
from cumulocity.core.response import ResponseEnvelope


class BaseAdapter(ABC):
    """Abstract base for all transport adapters.

    ``adapt`` applies cross-cutting request changes (base URL, credentials,
    tenant headers). It must be idempotent and must not touch the path,
    method, query or body. ``send`` performs exactly one exchange.
    """

    def adapt(self, request: RequestDescriptor) -> RequestDescriptor:
        """Return the request with adapter-level settings applied."""
        return request

    @abstractmethod
    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        """Send a request and return the response."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release adapter resources."""
        ...

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the adapter is in a usable state."""
        ...
