"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Multipart form-data bodies for binary uploads.

Bodies are fully buffered. Each part is laid out as::

    --<boundary>\\r\\n
    Content-Disposition: form-data; name="<name>"[; filename="<filename>"]\\r\\n
    Content-Type: <mime>\\r\\n
    \\r\\n
    <data>\\r\\n

and the body ends with ``--<boundary>--\\r\\n``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, List, Optional

from cumulocity.core.codec import encode
from cumulocity.exceptions import EncodeError
from cumulocity.models.base import C8yModel

CRLF = b"\r\n"
MAX_BOUNDARY_ATTEMPTS = 8


@dataclass(frozen=True)
class BodyPart:
    name: str
    data: bytes
    mime_type: str
    filename: Optional[str] = None

    def header_block(self) -> bytes:
        disposition = f'Content-Disposition: form-data; name="{_quote(self.name)}"'
        if self.filename is not None:
            disposition += f'; filename="{_quote(self.filename)}"'
        return (
            disposition.encode("utf-8") + CRLF
            + f"Content-Type: {self.mime_type}".encode("utf-8") + CRLF
            + CRLF
        )


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\r", "").replace("\n", "")


def _new_boundary() -> str:
    return f"c8y-boundary-{uuid.uuid4().hex}"


class MultipartFormDataBuilder:
    """Collects named parts and renders a ``multipart/form-data`` body.

    Args:
        boundary: Fixed boundary string. When omitted a random one is
            generated and replaced if it happens to occur inside a part.

    Example::

        builder = MultipartFormDataBuilder()
        builder.add_part("object", BinaryInfo(name="log.txt", type="text/plain"), "application/json")
        builder.add_part("file", data, "text/plain", filename="log.txt")
        body = builder.build()
        content_type = builder.content_type
    """

    def __init__(self, boundary: Optional[str] = None) -> None:
        if boundary is not None and not boundary:
            raise EncodeError("Multipart boundary must not be empty")
        self._fixed_boundary = boundary is not None
        self._boundary = boundary or _new_boundary()
        self._parts: List[BodyPart] = []

    @property
    def boundary(self) -> str:
        return self._boundary

    @property
    def content_type(self) -> str:
        """Value for the request's ``Content-Type`` header.

        Read it after :meth:`build`, which may replace a generated boundary.
        """
        return f"multipart/form-data; boundary={self._boundary}"

    @property
    def parts(self) -> List[BodyPart]:
        return list(self._parts)

    def add_part(
        self,
        name: str,
        data: Any,
        mime_type: str,
        filename: Optional[str] = None,
    ) -> MultipartFormDataBuilder:
        """Append a part.

        ``data`` may be bytes, text (sent as UTF-8) or a model / JSON value
        (sent as JSON).
        """
        if isinstance(data, (bytes, bytearray, memoryview)):
            payload = bytes(data)
        elif isinstance(data, str):
            payload = data.encode("utf-8")
        elif isinstance(data, (C8yModel, dict, list)):
            payload = encode(data)
        else:
            raise EncodeError(
                f"Unsupported data for multipart part '{name}': {type(data).__name__}"
            )
        self._parts.append(BodyPart(name=name, data=payload, mime_type=mime_type, filename=filename))
        return self

    def _collides(self, boundary: str) -> bool:
        marker = boundary.encode("utf-8")
        return any(marker in part.data or marker in part.header_block() for part in self._parts)

    def build(self) -> bytes:
        """Render the body.

        Raises:
            EncodeError: If a configured boundary occurs inside a part, or
                no collision-free boundary could be generated.
        """
        attempts = 0
        while self._collides(self._boundary):
            if self._fixed_boundary:
                raise EncodeError(
                    f"Configured multipart boundary '{self._boundary}' occurs in the part content"
                )
            attempts += 1
            if attempts >= MAX_BOUNDARY_ATTEMPTS:
                raise EncodeError("Could not generate a multipart boundary absent from the content")
            self._boundary = _new_boundary()

        delimiter = b"--" + self._boundary.encode("utf-8")
        chunks: List[bytes] = []
        for part in self._parts:
            chunks.append(delimiter + CRLF)
            chunks.append(part.header_block())
            chunks.append(part.data + CRLF)
        chunks.append(delimiter + b"--" + CRLF)
        return b"".join(chunks)
