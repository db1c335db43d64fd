"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Request/response pipeline shared by every endpoint method.
"""

from cumulocity.core.codec import clear_fields, decode, decode_error, encode
from cumulocity.core.multipart import BodyPart, MultipartFormDataBuilder
from cumulocity.core.request import RequestBuilder, RequestDescriptor
from cumulocity.core.response import (
    BAD_REQUEST,
    CONFLICT,
    FORBIDDEN,
    NOT_FOUND,
    UNAUTHORIZED,
    UNPROCESSABLE,
    ResponseEnvelope,
    ResponseInterpreter,
    fixed_error,
    structured_error,
)

__all__ = [
    "BAD_REQUEST",
    "CONFLICT",
    "FORBIDDEN",
    "NOT_FOUND",
    "UNAUTHORIZED",
    "UNPROCESSABLE",
    "BodyPart",
    "MultipartFormDataBuilder",
    "RequestBuilder",
    "RequestDescriptor",
    "ResponseEnvelope",
    "ResponseInterpreter",
    "clear_fields",
    "decode",
    "decode_error",
    "encode",
    "fixed_error",
    "structured_error",
]
