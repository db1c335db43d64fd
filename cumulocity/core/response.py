"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Response envelope and status-code interpretation.

Every endpoint declares an ordered list of status rules. The interpreter
walks them top-down; the first rule whose predicate matches decides the
error. When no rule matches, the generic band check applies: 2xx yields the
raw body, anything else becomes a structured error if the body is
error-shaped and an unstructured error otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from cumulocity.core.codec import decode_error
from cumulocity.core.request import Header, RequestDescriptor
from cumulocity.exceptions import ApiError, StructuredApiError, UnstructuredApiError
from cumulocity.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResponseEnvelope:
    """Raw outcome of one exchange, tied to the request that produced it."""

    status_code: int
    body: bytes = b""
    headers: Tuple[Header, ...] = ()
    request: Optional[RequestDescriptor] = None
    elapsed_ms: float = 0.0

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None


StatusPredicate = Callable[[int], bool]
ErrorFactory = Callable[[ResponseEnvelope], ApiError]
StatusRule = Tuple[StatusPredicate, ErrorFactory]


def _origin(envelope: ResponseEnvelope) -> Tuple[Optional[str], Optional[str]]:
    if envelope.request is None:
        return None, None
    return envelope.request.method, envelope.request.path


def structured_or_unstructured(envelope: ResponseEnvelope) -> ApiError:
    """Structured error when the body is error-shaped, unstructured otherwise."""
    method, path = _origin(envelope)
    error = decode_error(envelope.body)
    if error is not None:
        return StructuredApiError(envelope.status_code, error, method=method, path=path)
    return UnstructuredApiError(envelope.status_code, method=method, path=path)


def structured_error(status: int) -> StatusRule:
    """Rule decoding the body of ``status`` responses as a platform error."""
    return (lambda code: code == status, structured_or_unstructured)


def fixed_error(status: int, reason: str) -> StatusRule:
    """Rule mapping ``status`` to a fixed reason, whatever the body says."""

    def factory(envelope: ResponseEnvelope) -> ApiError:
        method, path = _origin(envelope)
        return UnstructuredApiError(envelope.status_code, reason=reason, method=method, path=path)

    return (lambda code: code == status, factory)


BAD_REQUEST = structured_error(400)
UNAUTHORIZED = structured_error(401)
FORBIDDEN = fixed_error(403, "Not authorized to perform this operation.")
NOT_FOUND = structured_error(404)
CONFLICT = structured_error(409)
UNPROCESSABLE = fixed_error(422, "Unprocessable Entity - invalid payload.")


class ResponseInterpreter:
    """Turns a :class:`ResponseEnvelope` into a body or an :class:`ApiError`.

    Args:
        rules: Status rules evaluated in order before the generic band check.
    """

    def __init__(self, rules: Iterable[StatusRule] = ()) -> None:
        self._rules: Sequence[StatusRule] = tuple(rules)

    def interpret(self, envelope: ResponseEnvelope) -> bytes:
        """Return the raw success body, or raise the matching ``ApiError``."""
        for predicate, factory in self._rules:
            if predicate(envelope.status_code):
                raise factory(envelope)

        if envelope.is_success:
            return envelope.body

        raise structured_or_unstructured(envelope)
