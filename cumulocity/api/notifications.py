"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Notification APIs: Notification 2.0 subscriptions and tokens
(``/notification2``) and the long-polling realtime endpoint
(``/notification/realtime``).

Consuming notifications is up to the caller; these classes only manage
subscriptions, obtain tokens and perform single realtime requests.
"""

from __future__ import annotations

from typing import List, Optional, Union

from cumulocity.api.base import (
    ERROR_MEDIA_TYPE,
    JSON_MEDIA_TYPE,
    PROCESSING_MODE_HEADER,
    BaseApi,
    accepts,
    segment,
    vnd,
)
from cumulocity.models.notifications import (
    NotificationSubscription,
    NotificationSubscriptionCollection,
    NotificationToken,
    NotificationTokenClaims,
    RealtimeNotification,
    SubscriptionContext,
)

CREATE_SUBSCRIPTION_CLEAR = ("self", "id", "source.self")
REALTIME_NOTIFICATION_CLEAR = ("data", "error", "successful")

Context = Union[str, SubscriptionContext]


class SubscriptionsApi(BaseApi):
    """Notification 2.0 subscriptions on managed objects or the whole tenant."""

    async def get_subscriptions(
        self,
        context: Optional[Context] = None,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        source: Optional[str] = None,
        with_total_pages: Optional[bool] = None,
    ) -> NotificationSubscriptionCollection:
        request = (
            self._request(
                "GET",
                "/notification2/subscriptions",
                accepts(ERROR_MEDIA_TYPE, vnd("subscriptioncollection")),
            )
            .add_query_param("context", context)
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("source", source)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=NotificationSubscriptionCollection)

    async def create_subscription(
        self,
        subscription: NotificationSubscription,
        processing_mode: Optional[str] = None,
    ) -> NotificationSubscription:
        request = (
            self._request(
                "POST",
                "/notification2/subscriptions",
                accepts(ERROR_MEDIA_TYPE, vnd("subscription")),
            )
            .add_header(PROCESSING_MODE_HEADER, processing_mode)
            .add_header("Content-Type", vnd("subscription"))
        )
        return await self._pipeline.execute(
            request,
            result_type=NotificationSubscription,
            body=subscription,
            clear=CREATE_SUBSCRIPTION_CLEAR,
        )

    async def delete_subscriptions(
        self,
        context: Optional[Context] = None,
        source: Optional[str] = None,
        processing_mode: Optional[str] = None,
    ) -> bytes:
        """Delete all subscriptions of a context, or of one source."""
        request = (
            self._request("DELETE", "/notification2/subscriptions", JSON_MEDIA_TYPE)
            .add_header(PROCESSING_MODE_HEADER, processing_mode)
            .add_query_param("context", context)
            .add_query_param("source", source)
        )
        return await self._pipeline.execute(request, result_type=bytes)

    async def get_subscription(self, subscription_id: str) -> NotificationSubscription:
        request = self._request(
            "GET",
            f"/notification2/subscriptions/{segment(subscription_id)}",
            accepts(ERROR_MEDIA_TYPE, vnd("subscription")),
        )
        return await self._pipeline.execute(request, result_type=NotificationSubscription)

    async def delete_subscription(
        self, subscription_id: str, processing_mode: Optional[str] = None
    ) -> bytes:
        request = (
            self._request(
                "DELETE", f"/notification2/subscriptions/{segment(subscription_id)}", JSON_MEDIA_TYPE
            )
            .add_header(PROCESSING_MODE_HEADER, processing_mode)
        )
        return await self._pipeline.execute(request, result_type=bytes)


class TokensApi(BaseApi):
    """Tokens authorizing a consumer to read a subscription."""

    async def create_token(self, claims: NotificationTokenClaims) -> NotificationToken:
        request = (
            self._request("POST", "/notification2/token", accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE))
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=NotificationToken, body=claims)


class RealtimeNotificationApi(BaseApi):
    """Bayeux messages of the realtime notification protocol.

    Each call performs one request; handshake, subscribe and connect cycles
    are driven by the caller. Every message after the handshake must carry
    the ``clientId`` the handshake returned; it is sent as given.
    """

    async def create_realtime_notification(
        self,
        notification: RealtimeNotification,
        processing_mode: Optional[str] = None,
    ) -> List[RealtimeNotification]:
        """Send one message and return the messages the platform answers with."""
        request = (
            self._request(
                "POST", "/notification/realtime", accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE)
            )
            .add_header(PROCESSING_MODE_HEADER, processing_mode)
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request,
            result_type=List[RealtimeNotification],
            body=notification,
            clear=REALTIME_NOTIFICATION_CLEAR,
        )
