"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Client extension base class.

Extensions register callbacks on the :class:`HookRegistry` during
:meth:`install` and are activated via ``client.use(extension)``.

Example::

    from cumulocity.extensions import CumulocityExtension
    from cumulocity.hooks import HookRegistry

    class ProcessingModeExtension(CumulocityExtension):
        @property
        def name(self) -> str:
            return "processing-mode"

        @property
        def version(self) -> str:
            return "1.0.0"

        def install(self, hooks: HookRegistry) -> None:
            hooks.on_before_request(self._transient)

        def _transient(self, request):
            return request.with_header("X-Cumulocity-Processing-Mode", "TRANSIENT")
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cumulocity.hooks import HookRegistry


class CumulocityExtension(ABC):
    """Base class for all client extensions.

    The client never imports concrete extensions; users register them
    explicitly via ``client.use(extension)``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique, human-readable extension name (e.g. ``"processing-mode"``)."""
        ...

    @property
    @abstractmethod
    def version(self) -> str:
        """SemVer version string (e.g. ``"1.0.0"``)."""
        ...

    @abstractmethod
    def install(self, hooks: HookRegistry) -> None:
        """Register callbacks on lifecycle hooks.

        Called exactly once when the extension is attached to a
        :class:`CumulocityClient` via ``.use()``.

        Args:
            hooks: The client's hook registry.
        """
        ...
