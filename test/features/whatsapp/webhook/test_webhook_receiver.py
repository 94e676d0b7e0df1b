import hashlib
import hmac
import json
import unittest
from concurrent.futures import Future
from unittest.mock import Mock

from pydantic import SecretStr

from features.whatsapp.model.update import Update
from features.whatsapp.webhook.webhook_dispatcher import WebhookDispatcher
from features.whatsapp.webhook.webhook_receiver import WebhookReceiver
from util.config import Config
from util.errors import WebhookError
from util.log import Logger

APP_SECRET = "app-secret"
BODY = json.dumps({"object": "whatsapp_business_account", "entry": []}).encode()


def sign(body: bytes) -> str:
    return "sha256=" + hmac.new(APP_SECRET.encode(), body, hashlib.sha256).hexdigest()


def make_config(app_secret: str = APP_SECRET, validate_signature: bool = True) -> Config:
    return Config(
        def_phone_number_id = "phone-1",
        def_access_token = SecretStr("token"),
        def_webhook_verify_token = SecretStr("verify-me"),
        def_app_secret = SecretStr(app_secret),
        def_webhook_validate_signature = validate_signature,
    )


class WebhookReceiverTest(unittest.TestCase):

    mock_dispatcher: Mock

    def setUp(self):
        self.mock_dispatcher = Mock(spec = WebhookDispatcher)
        self.mock_dispatcher.submit.return_value = Future()

    def receiver(self, config: Config | None = None) -> WebhookReceiver:
        return WebhookReceiver(config or make_config(), Mock(spec = Logger), self.mock_dispatcher)

    def test_verify_accepts_subscribe_with_token(self):
        self.assertEqual(self.receiver().verify("subscribe", "verify-me", "1158201444"), "1158201444")

    def test_verify_rejects_wrong_token(self):
        with self.assertRaises(WebhookError) as context:
            self.receiver().verify("subscribe", "wrong", "1158201444")
        self.assertEqual(context.exception.http_status, 403)

    def test_verify_rejects_wrong_mode(self):
        for mode in ("unsubscribe", "", None):
            with self.assertRaises(WebhookError):
                self.receiver().verify(mode, "verify-me", "1158201444")

    def test_receive_valid_signature(self):
        self.receiver().receive(BODY, sign(BODY))

        self.mock_dispatcher.submit.assert_called_once()
        self.assertIsInstance(self.mock_dispatcher.submit.call_args.args[0], Update)

    def test_receive_batch_with_non_message_change(self):
        body = json.dumps(
            {
                "object": "whatsapp_business_account",
                "entry": [
                    {
                        "id": "WABA_ID",
                        "changes": [
                            {"field": "account_update", "value": {"event": "VERIFIED_ACCOUNT"}},
                            {
                                "field": "messages",
                                "value": {
                                    "metadata": {"display_phone_number": "15550000000", "phone_number_id": "phone-1"},
                                    "messages": [
                                        {"from": "1555", "id": "wamid.1", "timestamp": 1700000000, "type": "text", "text": {"body": "Hi"}},
                                    ],
                                },
                            },
                        ],
                    },
                ],
            },
        ).encode()

        self.receiver().receive(body, sign(body))

        update: Update = self.mock_dispatcher.submit.call_args.args[0]
        self.assertEqual(update.entry[0].changes[1].value.messages[0].text.body, "Hi")

    def test_receive_signature_mismatch(self):
        tampered = BODY.replace(b"[]", b"[ ]")

        with self.assertRaises(WebhookError) as context:
            self.receiver().receive(tampered, sign(BODY))
        self.assertEqual(context.exception.http_status, 403)
        self.mock_dispatcher.submit.assert_not_called()

    def test_receive_missing_signature(self):
        with self.assertRaises(WebhookError) as context:
            self.receiver().receive(BODY, None)
        self.assertEqual(context.exception.http_status, 403)

    def test_receive_skips_signature_without_app_secret(self):
        self.receiver(make_config(app_secret = "")).receive(BODY, None)

        self.mock_dispatcher.submit.assert_called_once()

    def test_receive_skips_signature_when_disabled(self):
        self.receiver(make_config(validate_signature = False)).receive(BODY, "sha256=bogus")

        self.mock_dispatcher.submit.assert_called_once()

    def test_receive_invalid_json(self):
        body = b"{not json"

        with self.assertRaises(WebhookError) as context:
            self.receiver().receive(body, sign(body))
        self.assertEqual(context.exception.http_status, 400)
        self.mock_dispatcher.submit.assert_not_called()

    def test_receive_wrong_shape(self):
        body = json.dumps({"entry": "nope"}).encode()

        with self.assertRaises(WebhookError) as context:
            self.receiver().receive(body, sign(body))
        self.assertEqual(context.exception.http_status, 400)
