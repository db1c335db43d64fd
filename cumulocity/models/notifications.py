"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Notification models: notification 2.0 subscriptions and tokens, realtime messages.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.common import PagedCollection, SourceReference


class SubscriptionContext(str, Enum):
    MANAGED_OBJECT = "mo"
    TENANT = "tenant"


@dataclass
class SubscriptionFilter(C8yModel):
    apis: Optional[List[str]] = None
    type_filter: Optional[str] = None


@dataclass
class NotificationSubscription(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    context: Optional[SubscriptionContext] = None
    subscription: Optional[str] = None
    source: Optional[SourceReference] = None
    subscription_filter: Optional[SubscriptionFilter] = None
    fragments_to_copy: Optional[List[str]] = None


@dataclass
class NotificationSubscriptionCollection(PagedCollection):
    subscriptions: Optional[List[NotificationSubscription]] = None


@dataclass
class NotificationTokenClaims(C8yModel):
    subscriber: Optional[str] = None
    subscription: Optional[str] = None
    expires_in_minutes: Optional[int] = None
    shared: Optional[bool] = None
    type: Optional[str] = None
    signed: Optional[bool] = None
    non_persistent: Optional[bool] = None


@dataclass
class NotificationToken(C8yModel):
    token: Optional[str] = None


@dataclass
class RealtimeAdvice(C8yModel):
    interval: Optional[int] = None
    timeout: Optional[int] = None
    reconnect: Optional[str] = None


@dataclass
class RealtimeNotification(C8yModel):
    """One Bayeux message exchanged with the realtime endpoint.

    A long-polling consumer sends a ``/meta/connect`` message, waits for the
    response and issues the next request itself.
    """

    id: Optional[str] = None
    channel: Optional[str] = None
    client_id: Optional[str] = None
    connection_type: Optional[str] = None
    subscription: Optional[str] = None
    version: Optional[str] = None
    minimum_version: Optional[str] = None
    supported_connection_types: Optional[List[str]] = None
    advice: Optional[RealtimeAdvice] = None
    ext: Optional[Dict[str, Any]] = None
    data: Optional[Dict[str, Any]] = None
    successful: Optional[bool] = None
    error: Optional[str] = None
