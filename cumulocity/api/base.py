"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Shared request pipeline for the resource API classes.

Every endpoint method builds a :class:`RequestBuilder` and hands it to
:meth:`ApiPipeline.execute`, which encodes the body, lets the adapter apply
credentials, fires lifecycle hooks, sends the request, interprets the
status code against the endpoint's rules and decodes the result.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from cumulocity.adapters.base import BaseAdapter
from cumulocity.core.codec import decode, encode
from cumulocity.core.multipart import MultipartFormDataBuilder
from cumulocity.core.request import RequestBuilder
from cumulocity.core.response import ResponseInterpreter, StatusRule
from cumulocity.exceptions import CumulocityError, InvalidRequestError
from cumulocity.hooks import HookRegistry
from cumulocity.logging_config import get_logger, log_api_error

logger = get_logger(__name__)

VND = "application/vnd.com.nsn.cumulocity."
ERROR_MEDIA_TYPE = VND + "error+json"
JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain"
OCTET_STREAM_MEDIA_TYPE = "application/octet-stream"
ZIP_MEDIA_TYPE = "application/zip"
PROCESSING_MODE_HEADER = "X-Cumulocity-Processing-Mode"


def vnd(name: str) -> str:
    """``vnd("alarm")`` -> ``application/vnd.com.nsn.cumulocity.alarm+json``."""
    return f"{VND}{name}+json"


def segment(value: Any) -> str:
    """Render one path parameter.

    Values are substituted as they are. httpx percent-encodes characters that
    are not valid in a URL path (a space becomes ``%20``); a ``/`` inside a
    value is sent unchanged and splits the segment.
    """
    return str(value)


def accepts(*media_types: str) -> str:
    """Combine several media types into one ``Accept`` value."""
    return ", ".join(media_types)


class ApiPipeline:
    """Adapter, hooks and codec settings shared by all API classes of a client.

    Args:
        adapter: Transport adapter that applies credentials and sends requests.
        hooks: Lifecycle hook registry of the owning client.
        multipart_boundary: Fixed multipart boundary; a random one per upload
            when omitted.
    """

    def __init__(
        self,
        adapter: BaseAdapter,
        hooks: Optional[HookRegistry] = None,
        multipart_boundary: Optional[str] = None,
    ) -> None:
        self.adapter = adapter
        self.hooks = hooks or HookRegistry()
        self.multipart_boundary = multipart_boundary or None

    def multipart(self) -> MultipartFormDataBuilder:
        return MultipartFormDataBuilder(boundary=self.multipart_boundary)

    async def execute(
        self,
        request: RequestBuilder,
        rules: Iterable[StatusRule] = (),
        result_type: Any = None,
        body: Any = None,
        clear: Iterable[str] = (),
        multipart: Optional[MultipartFormDataBuilder] = None,
    ) -> Any:
        """Run one endpoint call to completion.

        Args:
            request: Builder with path, method, headers and query set.
            rules: Endpoint status rules, checked before the generic band rule.
            result_type: What to decode a successful body into (see
                :func:`cumulocity.core.codec.decode`).
            body: Request body. Bytes are sent as-is; models and JSON data are
                encoded with ``clear`` applied.
            clear: Server-managed JSON member paths dropped from ``body``.
            multipart: Multipart body; sets ``Content-Type`` with its boundary.

        Raises:
            ApiError: For error statuses.
            TransportError: When no response was received.
            EncodeError, DecodeError, InvalidRequestError: For local failures.
        """
        try:
            if multipart is not None:
                payload = multipart.build()
                request.add_header("Content-Type", multipart.content_type)
                request.set_body(payload)
            elif isinstance(body, (bytes, bytearray)):
                request.set_body(bytes(body))
            elif body is not None:
                request.set_body(encode(body, clear))

            descriptor = self.adapter.adapt(request.build())
            descriptor = self.hooks.fire_before_request(descriptor)
            envelope = await self.adapter.send(descriptor)
            self.hooks.fire_after_response(envelope)

            raw = ResponseInterpreter(rules).interpret(envelope)
            return decode(raw, result_type)
        except CumulocityError as exc:
            log_api_error(logger, exc)
            self.hooks.fire_error(exc)
            raise


class BaseApi:
    """Base for the resource API classes; holds the shared pipeline."""

    def __init__(self, pipeline: ApiPipeline) -> None:
        self._pipeline = pipeline

    def _invalid(self, message: str) -> InvalidRequestError:
        """Argument error for the caller to raise, reported to the error hooks first."""
        error = InvalidRequestError(message)
        log_api_error(logger, error)
        self._pipeline.hooks.fire_error(error)
        return error

    @staticmethod
    def _request(method: str, path: str, accept: str) -> RequestBuilder:
        return RequestBuilder().set_method(method).set_path(path).add_header("Accept", accept)
