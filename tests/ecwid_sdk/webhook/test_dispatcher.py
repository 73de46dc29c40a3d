import base64
import hashlib
import hmac
import io
import json

import pytest

from ecwid_sdk.webhook import (
    SIGNATURE_HEADER,
    Event,
    Webhook,
    WebhookBody,
    WebhookSignatureError,
    compute_signature,
    verify_signature,
)


SECRET = "client-secret"


def order_created(**overrides):
    body = {
        "eventId": "80aece08-40e8-4145-8764-6c2f0d38678",
        "eventCreated": 1470901200,
        "storeId": 1003,
        "entityId": 28,
        "eventType": "order.created",
        "data": {"newPaymentStatus": "PAID", "newFulfillmentStatus": "AWAITING_PROCESSING"},
    }
    body.update(overrides)
    return json.dumps(body).encode("utf-8")


def signed_headers(raw):
    body = json.loads(raw)
    return {SIGNATURE_HEADER: compute_signature(SECRET, body["eventCreated"], body["eventId"])}


class Recorder:
    def __init__(self):
        self.bodies = []

    def __call__(self, body):
        self.bodies.append(body)


class TestSignature:
    @pytest.mark.unit
    def test_compute_signature(self):
        expected = base64.b64encode(
            hmac.new(b"secret", b"1470901200.abc", hashlib.sha256).digest()
        ).decode("ascii")

        assert compute_signature("secret", 1470901200, "abc") == expected

    @pytest.mark.unit
    def test_verify_signature(self):
        body = WebhookBody.model_validate_json(order_created())
        signature = compute_signature(SECRET, body.event_created, body.event_id)

        verify_signature(SECRET, body, signature)

        with pytest.raises(WebhookSignatureError):
            verify_signature("other-secret", body, signature)
        with pytest.raises(WebhookSignatureError):
            verify_signature(SECRET, body, None)


class TestHandle:
    @pytest.mark.unit
    def test_dispatches_to_handler(self):
        recorder = Recorder()
        webhook = Webhook().add(Event.ORDER_CREATED, recorder)

        status = webhook.handle("POST", {}, order_created())

        assert status == 200
        body = recorder.bodies[0]
        assert body.event_type == "order.created"
        assert body.entity_id == 28
        assert body.store_id == 1003
        assert body.data.new_payment_status == "PAID"

    @pytest.mark.unit
    def test_reads_file_like_body(self):
        recorder = Recorder()
        webhook = Webhook().add("order.created", recorder)

        assert webhook.handle("post", {}, io.BytesIO(order_created())) == 200
        assert len(recorder.bodies) == 1

    @pytest.mark.unit
    def test_only_post_is_allowed(self):
        webhook = Webhook().add(Event.ORDER_CREATED, Recorder())

        assert webhook.handle("GET", {}, order_created()) == 405

    @pytest.mark.unit
    def test_unreadable_body(self):
        class Broken:
            def read(self):
                raise OSError("connection reset")

        assert Webhook().handle("POST", {}, Broken()) == 500

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [b"not json", b"[]", b'"order.created"'])
    def test_malformed_body(self, raw):
        webhook = Webhook().add(Event.ORDER_CREATED, Recorder())

        assert webhook.handle("POST", {}, raw) == 406

    @pytest.mark.unit
    def test_body_without_event_fields_has_no_handler(self):
        recorder = Recorder()
        webhook = Webhook().add(Event.ORDER_CREATED, recorder)

        assert webhook.handle("POST", {}, b'{"storeId": 1003, "entityId": 28}') == 404
        assert recorder.bodies == []

    @pytest.mark.unit
    def test_no_handler_for_event(self):
        webhook = Webhook().add(Event.PRODUCT_UPDATED, Recorder())

        assert webhook.handle("POST", {}, order_created()) == 404

    @pytest.mark.unit
    def test_unknown_event_type_parses(self):
        recorder = Recorder()
        webhook = Webhook().add("discount.created", recorder)

        status = webhook.handle("POST", {}, order_created(eventType="discount.created"))

        assert status == 200
        assert recorder.bodies[0].event_type == "discount.created"

    @pytest.mark.unit
    def test_failing_handler(self):
        def handler(body):
            raise ValueError("boom")

        webhook = Webhook().add(Event.ORDER_CREATED, handler)

        assert webhook.handle("POST", {}, order_created()) == 500

    @pytest.mark.unit
    def test_add_chains_and_replaces(self):
        first, second = Recorder(), Recorder()
        webhook = Webhook()

        assert webhook.add(Event.ORDER_CREATED, first) is webhook
        webhook.add(Event.ORDER_CREATED, second)
        webhook.handle("POST", {}, order_created())

        assert first.bodies == []
        assert len(second.bodies) == 1


class TestSignatureEnforcement:
    @pytest.mark.unit
    def test_valid_signature_accepted(self):
        recorder = Recorder()
        webhook = Webhook(SECRET, enforce_signature=True).add(Event.ORDER_CREATED, recorder)
        raw = order_created()

        assert webhook.handle("POST", signed_headers(raw), raw) == 200

    @pytest.mark.unit
    def test_header_name_is_case_insensitive(self):
        webhook = Webhook(SECRET, enforce_signature=True).add(Event.ORDER_CREATED, Recorder())
        raw = order_created()
        headers = {k.lower(): v for k, v in signed_headers(raw).items()}

        assert webhook.handle("POST", headers, raw) == 200

    @pytest.mark.unit
    def test_bad_signature_rejected_when_enforced(self):
        recorder = Recorder()
        webhook = Webhook(SECRET, enforce_signature=True).add(Event.ORDER_CREATED, recorder)

        assert webhook.handle("POST", {SIGNATURE_HEADER: "forged"}, order_created()) == 401
        assert webhook.handle("POST", {}, order_created()) == 401
        assert recorder.bodies == []

    @pytest.mark.unit
    def test_bad_signature_only_logged_by_default(self, caplog):
        recorder = Recorder()
        webhook = Webhook(SECRET).add(Event.ORDER_CREATED, recorder)

        with caplog.at_level("WARNING"):
            status = webhook.handle("POST", {SIGNATURE_HEADER: "forged"}, order_created())

        assert status == 200
        assert len(recorder.bodies) == 1
        assert "Bad signature" in caplog.text


class TestWSGI:
    @staticmethod
    def call(webhook, method, raw=b"", headers=None):
        environ = {
            "REQUEST_METHOD": method,
            "CONTENT_LENGTH": str(len(raw)),
            "CONTENT_TYPE": "application/json",
            "wsgi.input": io.BytesIO(raw),
        }
        for name, value in (headers or {}).items():
            environ["HTTP_" + name.upper().replace("-", "_")] = value

        started = []
        result = webhook(environ, lambda status, headers: started.append(status))
        return started[0], b"".join(result)

    @pytest.mark.unit
    def test_post(self):
        recorder = Recorder()
        webhook = Webhook(SECRET, enforce_signature=True).add(Event.ORDER_CREATED, recorder)
        raw = order_created()

        status, payload = self.call(webhook, "POST", raw, signed_headers(raw))

        assert status == "200 OK"
        assert payload == b""
        assert recorder.bodies[0].entity_id == 28

    @pytest.mark.unit
    def test_get(self):
        status, _ = self.call(Webhook(), "GET")

        assert status == "405 Method Not Allowed"

    @pytest.mark.unit
    def test_signature_rejected(self):
        webhook = Webhook(SECRET, enforce_signature=True).add(Event.ORDER_CREATED, Recorder())

        status, _ = self.call(webhook, "POST", order_created(), {SIGNATURE_HEADER: "forged"})

        assert status == "401 Unauthorized"
