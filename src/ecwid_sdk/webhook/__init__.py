"""
Ecwid SDK - Webhook Module

Receives store webhooks and dispatches them by event type.

Usage:
------
    from ecwid_sdk.webhook import Event, Webhook

    webhook = Webhook(client_secret="...").add(
        Event.ORDER_CREATED, lambda body: print(body.entity_id)
    )

    # Any WSGI server
    from wsgiref.simple_server import make_server
    make_server("", 8080, webhook).serve_forever()
"""

from .dispatcher import (
    SIGNATURE_HEADER,
    Webhook,
    WebhookError,
    WebhookSignatureError,
    compute_signature,
    verify_signature,
)
from .schema import Event, WebhookBody, WebhookData


__all__ = [
    "SIGNATURE_HEADER",
    "Webhook",
    "WebhookError",
    "WebhookSignatureError",
    "compute_signature",
    "verify_signature",
    "Event",
    "WebhookBody",
    "WebhookData",
]
