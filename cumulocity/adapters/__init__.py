"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Transport adapters.
"""

from cumulocity.adapters.base import BaseAdapter
from cumulocity.adapters.http import HttpAdapter, basic_authorization
from cumulocity.adapters.mock import MockAdapter

__all__ = [
    "BaseAdapter",
    "HttpAdapter",
    "MockAdapter",
    "basic_authorization",
]
