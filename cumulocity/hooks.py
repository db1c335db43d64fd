"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Lifecycle Hook Registry.

Provides a centralized registry of lifecycle hooks that extensions
can subscribe to in order to observe or augment endpoint calls
without modifying the request pipeline.

Available hooks:
- on_initialize: Fired once when the client finishes setup
- on_before_request: Fired before every outbound request (after adaptation)
- on_after_response: Fired after every response, before interpretation
- on_error: Fired on any error raised by an endpoint method
"""

from __future__ import annotations

from typing import Any, Callable, List

from cumulocity.core.request import RequestDescriptor
from cumulocity.core.response import ResponseEnvelope
from cumulocity.logging_config import get_logger

logger = get_logger(__name__)


InitializeCallback = Callable[..., None]
BeforeRequestCallback = Callable[[RequestDescriptor], RequestDescriptor]
AfterResponseCallback = Callable[[ResponseEnvelope], None]
ErrorCallback = Callable[[Exception], None]


class HookRegistry:
    """
    Manages lifecycle hooks for the client.

    Extensions register callbacks via the ``on_*`` methods.  The request
    pipeline fires hooks at the appropriate points of every call.  Multiple
    callbacks per hook are supported and executed in registration order.
    A failing callback is logged and reported to ``on_error``; it never
    fails the call itself.
    """

    def __init__(self) -> None:
        self._initialize_callbacks: List[InitializeCallback] = []
        self._before_request_callbacks: List[BeforeRequestCallback] = []
        self._after_response_callbacks: List[AfterResponseCallback] = []
        self._error_callbacks: List[ErrorCallback] = []

    # -- Registration methods ------------------------------------------------

    def on_initialize(self, callback: InitializeCallback) -> None:
        """Register a callback fired once when the client finishes setup."""
        self._initialize_callbacks.append(callback)
        logger.debug("Registered on_initialize hook")

    def on_before_request(self, callback: BeforeRequestCallback) -> None:
        """Register a callback fired before every outbound request.

        The callback receives the adapted ``RequestDescriptor`` and **must**
        return a descriptor (the same one, or a copy built with
        ``with_header``).
        """
        self._before_request_callbacks.append(callback)
        logger.debug("Registered on_before_request hook")

    def on_after_response(self, callback: AfterResponseCallback) -> None:
        """Register a callback fired after every response."""
        self._after_response_callbacks.append(callback)
        logger.debug("Registered on_after_response hook")

    def on_error(self, callback: ErrorCallback) -> None:
        """Register a callback fired on any endpoint error."""
        self._error_callbacks.append(callback)
        logger.debug("Registered on_error hook")

    # -- Firing methods (called by the request pipeline) ---------------------

    def fire_initialize(self, **kwargs: Any) -> None:
        """Fire all registered on_initialize callbacks."""
        for cb in self._initialize_callbacks:
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error(f"on_initialize hook error: {exc}", exc_info=True)
                self.fire_error(exc)

    def fire_before_request(self, request: RequestDescriptor) -> RequestDescriptor:
        """Fire all on_before_request callbacks in order.

        Each callback receives the descriptor returned by the previous one,
        forming a pipeline. A callback that fails or returns something other
        than a descriptor is skipped.
        """
        current = request
        for cb in self._before_request_callbacks:
            try:
                result = cb(current)
            except Exception as exc:
                logger.error(f"on_before_request hook error: {exc}", exc_info=True)
                self.fire_error(exc)
                continue
            if isinstance(result, RequestDescriptor):
                current = result
            else:
                logger.warning(
                    "on_before_request hook returned no RequestDescriptor; ignoring it",
                    returned=type(result).__name__,
                )
        return current

    def fire_after_response(self, response: ResponseEnvelope) -> None:
        """Fire all on_after_response callbacks."""
        for cb in self._after_response_callbacks:
            try:
                cb(response)
            except Exception as exc:
                logger.error(f"on_after_response hook error: {exc}", exc_info=True)
                self.fire_error(exc)

    def fire_error(self, error: Exception) -> None:
        """Fire all on_error callbacks."""
        for cb in self._error_callbacks:
            try:
                cb(error)
            except Exception:
                # Never re-enter fire_error from here
                logger.error("on_error hook itself raised an exception", exc_info=True)
