from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from http import HTTPStatus
from typing import Any, BinaryIO, Callable, Dict, Iterable, Mapping, Optional, Union

from pydantic import ValidationError

from .schema import Event, WebhookBody


logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Ecwid-Webhook-Signature"

Handler = Callable[[WebhookBody], Any]


class WebhookError(RuntimeError):
    """Base error for webhook processing."""


class WebhookSignatureError(WebhookError):
    """Raised when a webhook signature does not match."""


def compute_signature(secret: str, event_created: int, event_id: str) -> str:
    """base64(HMAC-SHA256(secret, "{eventCreated}.{eventId}"))"""
    message = f"{event_created}.{event_id}".encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_signature(secret: str, body: WebhookBody, signature: Optional[str]) -> None:
    """
    Raises:
        WebhookSignatureError: signature is missing or does not match
    """
    if not signature:
        raise WebhookSignatureError(f"Missing {SIGNATURE_HEADER} header")

    expected = compute_signature(secret, body.event_created, body.event_id)
    if not hmac.compare_digest(expected, signature.strip()):
        raise WebhookSignatureError(f"Bad signature for webhook {body.event_id}")


class Webhook:
    """
    Dispatches incoming webhook requests to per-event handlers.

    Response codes:
    - 405 for anything but POST
    - 500 if the body cannot be read or the handler raises
    - 406 if the body is not a webhook JSON object
    - 401 if signatures are enforced and the signature does not match
    - 404 if no handler is registered for the event type
    - 200 otherwise

    With a client secret the signature header is always checked, but a
    mismatch only rejects the request when ``enforce_signature`` is set.
    """

    def __init__(self, client_secret: str = "", enforce_signature: bool = False) -> None:
        self.client_secret = client_secret
        self.enforce_signature = enforce_signature
        self._handlers: Dict[str, Handler] = {}

    def add(self, event: Union[Event, str], handler: Handler) -> "Webhook":
        """Register ``handler`` for ``event``; returns self for chaining."""
        key = event.value if isinstance(event, Event) else str(event)
        if key in self._handlers:
            logger.warning(f"Replacing webhook handler for {key}")
        self._handlers[key] = handler
        return self

    def handle(
        self,
        method: str,
        headers: Mapping[str, str],
        body: Union[bytes, BinaryIO],
    ) -> int:
        """Process one request and return the HTTP status code to answer with."""
        if method.upper() != "POST":
            return HTTPStatus.METHOD_NOT_ALLOWED

        if not isinstance(body, (bytes, bytearray)):
            try:
                body = body.read()
            except OSError as e:
                logger.error(f"Failed to read webhook body: {e}")
                return HTTPStatus.INTERNAL_SERVER_ERROR

        try:
            webhook_body = WebhookBody.model_validate_json(body)
        except ValidationError as e:
            logger.warning(f"Rejected webhook body: {e}")
            return HTTPStatus.NOT_ACCEPTABLE

        if self.client_secret:
            lowered = {k.lower(): v for k, v in headers.items()}
            try:
                verify_signature(
                    self.client_secret,
                    webhook_body,
                    lowered.get(SIGNATURE_HEADER.lower()),
                )
            except WebhookSignatureError as e:
                logger.warning(str(e))
                if self.enforce_signature:
                    return HTTPStatus.UNAUTHORIZED

        handler = self._handlers.get(webhook_body.event_type)
        if handler is None:
            logger.info(f"No handler for webhook event {webhook_body.event_type}")
            return HTTPStatus.NOT_FOUND

        logger.info(
            f"Dispatching webhook {webhook_body.event_id} ({webhook_body.event_type})"
        )
        try:
            handler(webhook_body)
        except Exception:
            logger.exception(f"Webhook handler for {webhook_body.event_type} failed")
            return HTTPStatus.INTERNAL_SERVER_ERROR

        return HTTPStatus.OK

    # -------------------------------------------------
    # WSGI
    # -------------------------------------------------
    def __call__(
        self, environ: Dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        headers = {
            key[5:].replace("_", "-").title(): value
            for key, value in environ.items()
            if key.startswith("HTTP_")
        }
        if environ.get("CONTENT_TYPE"):
            headers["Content-Type"] = environ["CONTENT_TYPE"]

        status = self._handle_wsgi(environ, headers)
        start_response(f"{status.value} {status.phrase}", [("Content-Length", "0")])
        return [b""]

    def _handle_wsgi(self, environ: Dict[str, Any], headers: Dict[str, str]) -> HTTPStatus:
        method = environ.get("REQUEST_METHOD", "GET")
        if method.upper() != "POST":
            return HTTPStatus.METHOD_NOT_ALLOWED

        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0

        try:
            stream = environ["wsgi.input"]
            body = stream.read(length) if length > 0 else stream.read()
        except (KeyError, OSError) as e:
            logger.error(f"Failed to read webhook body: {e}")
            return HTTPStatus.INTERNAL_SERVER_ERROR

        return HTTPStatus(self.handle(method, headers, body))
