from __future__ import annotations

from enum import Enum
from typing import Optional

from ecwid_sdk.api_client.schema import ID, EcwidModel


class Event(str, Enum):
    """Webhook event types."""

    UNFINISHED_ORDER_CREATED = "unfinished_order.created"
    UNFINISHED_ORDER_UPDATED = "unfinished_order.updated"
    UNFINISHED_ORDER_DELETED = "unfinished_order.deleted"
    ORDER_CREATED = "order.created"
    ORDER_UPDATED = "order.updated"
    ORDER_DELETED = "order.deleted"
    PRODUCT_CREATED = "product.created"
    PRODUCT_UPDATED = "product.updated"
    PRODUCT_DELETED = "product.deleted"
    CATEGORY_CREATED = "category.created"
    CATEGORY_UPDATED = "category.updated"
    CATEGORY_DELETED = "category.deleted"
    APPLICATION_INSTALLED = "application.installed"
    APPLICATION_UNINSTALLED = "application.uninstalled"
    APPLICATION_SUBSCRIPTION_STATUS_CHANGED = "application.subscriptionStatusChanged"
    PROFILE_UPDATED = "profile.updated"
    PROFILE_SUBSCRIPTION_STATUS_CHANGED = "profile.subscriptionStatusChanged"
    CUSTOMER_CREATED = "customer.created"
    CUSTOMER_UPDATED = "customer.updated"
    CUSTOMER_DELETED = "customer.deleted"


class WebhookData(EcwidModel):
    """
    Optional change details, sent with order.* and
    application.subscriptionStatusChanged events.
    """

    old_payment_status: Optional[str] = None
    new_payment_status: Optional[str] = None
    old_fulfillment_status: Optional[str] = None
    new_fulfillment_status: Optional[str] = None
    old_subscription_name: Optional[str] = None
    new_subscription_name: Optional[str] = None
    old_subscription_status: Optional[str] = None
    new_subscription_status: Optional[str] = None
    customer_email: Optional[str] = None


class WebhookBody(EcwidModel):
    event_id: str = ""  # unique webhook id
    event_type: str = ""  # kept as text so unknown events still parse
    event_created: int = 0  # unix timestamp
    store_id: ID = 0
    entity_id: ID = 0  # productId, categoryId, orderNumber or storeId, depending on event_type
    data: Optional[WebhookData] = None
