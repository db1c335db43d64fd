"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Request construction.

A :class:`RequestBuilder` collects the pieces of one outgoing call and
produces an immutable :class:`RequestDescriptor`. Building is pure data
assembly; nothing touches the network until the descriptor is handed to an
adapter.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional, Tuple
from urllib.parse import urlencode

from cumulocity.exceptions import InvalidRequestError

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")

Header = Tuple[str, str]
QueryParam = Tuple[str, str]


@dataclass(frozen=True)
class RequestDescriptor:
    """Immutable description of one HTTP request.

    Headers keep insertion order and may repeat a name; query parameters
    are already rendered to strings.
    """

    method: str
    path: str
    headers: Tuple[Header, ...] = ()
    params: Tuple[QueryParam, ...] = ()
    body: Optional[bytes] = None
    base_url: Optional[str] = None

    def header_values(self, name: str) -> List[str]:
        """All values sent under ``name`` (case-insensitive), in order."""
        wanted = name.lower()
        return [value for key, value in self.headers if key.lower() == wanted]

    def has_header(self, name: str) -> bool:
        return bool(self.header_values(name))

    def with_header(self, name: str, value: str) -> RequestDescriptor:
        """Copy of this descriptor with one more header appended."""
        return dataclasses.replace(self, headers=self.headers + ((name, value),))

    def with_base_url(self, base_url: str) -> RequestDescriptor:
        return dataclasses.replace(self, base_url=base_url.rstrip("/"))

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    @property
    def url(self) -> str:
        """Base URL and path, without the query string."""
        return f"{self.base_url or ''}{self.path}"


def render_query_value(value: Any) -> str:
    """Render one scalar query value the way the platform expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class RequestBuilder:
    """Fluent accumulator for one request.

    Example::

        request = (
            RequestBuilder()
            .set_path("/alarm/alarms")
            .set_method("GET")
            .add_header("Accept", "application/vnd.com.nsn.cumulocity.alarmcollection+json")
            .add_query_param("pageSize", 50)
            .add_query_param("source", None)
            .build()
        )
    """

    def __init__(self) -> None:
        self._path: Optional[str] = None
        self._method: str = "GET"
        self._headers: List[Header] = []
        self._params: List[QueryParam] = []
        self._body: Optional[bytes] = None

    def set_path(self, path: str) -> RequestBuilder:
        """Set the resource path; path parameters must already be substituted."""
        if not path.startswith("/"):
            path = "/" + path
        self._path = path
        return self

    def set_method(self, verb: str) -> RequestBuilder:
        method = verb.upper()
        if method not in HTTP_METHODS:
            raise InvalidRequestError(
                f"Unsupported HTTP method '{verb}', expected one of {HTTP_METHODS}"
            )
        self._method = method
        return self

    def add_header(self, name: str, value: Optional[str]) -> RequestBuilder:
        """Append a header. Repeated names are kept; empty values are skipped."""
        if value is None or value == "":
            return self
        self._headers.append((name, value))
        return self

    def add_query_param(self, name: str, value: Any) -> RequestBuilder:
        """Append a query parameter.

        ``None`` omits the parameter. Lists and tuples repeat ``name`` once
        per element; ``None`` elements are dropped.
        """
        if value is None:
            return self
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is not None:
                    self._params.append((name, render_query_value(item)))
            return self
        self._params.append((name, render_query_value(value)))
        return self

    def set_body(self, body: Optional[bytes]) -> RequestBuilder:
        self._body = body
        return self

    def build(self) -> RequestDescriptor:
        if self._path is None:
            raise InvalidRequestError("Request path is not set")
        return RequestDescriptor(
            method=self._method,
            path=self._path,
            headers=tuple(self._headers),
            params=tuple(self._params),
            body=self._body,
        )
