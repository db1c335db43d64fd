"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Asynchronous client for the Cumulocity IoT core REST API.
"""

from cumulocity._version import get_version
from cumulocity.adapters import BaseAdapter, HttpAdapter, MockAdapter
from cumulocity.client import CumulocityBuilder, CumulocityClient
from cumulocity.exceptions import (
    ApiError,
    CumulocityError,
    DecodeError,
    EncodeError,
    InvalidRequestError,
    SDKConfigurationError,
    StructuredApiError,
    TransportError,
    UnstructuredApiError,
)
from cumulocity.extensions import CumulocityExtension
from cumulocity.hooks import HookRegistry

__version__ = get_version()

__all__ = [
    "ApiError",
    "BaseAdapter",
    "CumulocityBuilder",
    "CumulocityClient",
    "CumulocityError",
    "CumulocityExtension",
    "DecodeError",
    "EncodeError",
    "HookRegistry",
    "HttpAdapter",
    "InvalidRequestError",
    "MockAdapter",
    "SDKConfigurationError",
    "StructuredApiError",
    "TransportError",
    "UnstructuredApiError",
    "__version__",
]
