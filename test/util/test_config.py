import os
import unittest

from util.config import Config
from util.errors import ConfigurationError


class ConfigTest(unittest.TestCase):

    # noinspection PyTypeHints
    original_env: dict

    def setUp(self):
        self.original_env = os.environ.copy()
        os.environ.clear()

    def tearDown(self):
        os.environ.clear()
        os.environ.update(self.original_env)

    def test_default_config(self):
        config = Config()

        self.assertEqual(config.business_account_id, "")
        self.assertEqual(config.phone_number_id, "")
        self.assertEqual(config.api_version, "v23.0")
        self.assertEqual(config.base_url, "https://graph.facebook.com")
        self.assertEqual(config.webhook_host, "0.0.0.0")
        self.assertEqual(config.webhook_port, 8080)
        self.assertEqual(config.webhook_path, "/webhook")
        self.assertEqual(config.webhook_validate_signature, True)
        self.assertEqual(config.webhook_workers, 8)
        self.assertEqual(config.webhook_drain_timeout_s, 10)
        self.assertEqual(config.web_timeout_s, 30)
        self.assertEqual(config.log_level, "info")
        self.assertEqual(config.log_whatsapp_update, False)
        self.assertEqual(config.access_token.get_secret_value(), "")
        self.assertEqual(config.webhook_verify_token.get_secret_value(), "")
        self.assertEqual(config.app_secret.get_secret_value(), "")
        self.assertFalse(config.has_app_secret)

    def test_custom_config(self):
        os.environ["WHATSAPP_BUSINESS_ACCOUNT_ID"] = "waba-1"
        os.environ["WHATSAPP_PHONE_NUMBER_ID"] = " phone-1 "
        os.environ["WHATSAPP_ACCESS_TOKEN"] = "token"
        os.environ["WHATSAPP_WEBHOOK_VERIFY_TOKEN"] = "verify"
        os.environ["WHATSAPP_APP_SECRET"] = "secret"
        os.environ["WHATSAPP_API_VERSION"] = "v18.0"
        os.environ["WHATSAPP_API_BASE_URL"] = "http://localhost:9999/"
        os.environ["WEBHOOK_PORT"] = "9090"
        os.environ["WEBHOOK_VALIDATE_SIGNATURE"] = "false"
        os.environ["WEBHOOK_WORKERS"] = "2"
        os.environ["LOG_LEVEL"] = "DEBUG"
        os.environ["LOG_WA_UPDATE"] = "true"

        config = Config()

        self.assertEqual(config.business_account_id, "waba-1")
        self.assertEqual(config.phone_number_id, "phone-1")
        self.assertEqual(config.access_token.get_secret_value(), "token")
        self.assertEqual(config.webhook_verify_token.get_secret_value(), "verify")
        self.assertEqual(config.app_secret.get_secret_value(), "secret")
        self.assertEqual(config.api_version, "v18.0")
        self.assertEqual(config.base_url, "http://localhost:9999")
        self.assertEqual(config.webhook_port, 9090)
        self.assertEqual(config.webhook_validate_signature, False)
        self.assertEqual(config.webhook_workers, 2)
        self.assertEqual(config.log_level, "debug")
        self.assertEqual(config.log_whatsapp_update, True)
        self.assertTrue(config.has_app_secret)

    def test_urls(self):
        os.environ["WHATSAPP_BUSINESS_ACCOUNT_ID"] = "waba-1"
        os.environ["WHATSAPP_PHONE_NUMBER_ID"] = "phone-1"
        config = Config()

        self.assertEqual(config.api_url("media-1"), "https://graph.facebook.com/v23.0/media-1")
        self.assertEqual(config.messages_url, "https://graph.facebook.com/v23.0/phone-1/messages")
        self.assertEqual(config.media_url, "https://graph.facebook.com/v23.0/phone-1/media")
        self.assertEqual(
            config.business_profile_url,
            "https://graph.facebook.com/v23.0/phone-1/whatsapp_business_profile",
        )
        self.assertEqual(config.phone_number_url, "https://graph.facebook.com/v23.0/phone-1")
        self.assertEqual(
            config.business_account_url("message_templates"),
            "https://graph.facebook.com/v23.0/waba-1/message_templates",
        )

    def test_validate_requires_phone_number_id(self):
        os.environ["WHATSAPP_ACCESS_TOKEN"] = "token"

        with self.assertRaises(ConfigurationError):
            Config().validate()

    def test_validate_requires_access_token(self):
        os.environ["WHATSAPP_PHONE_NUMBER_ID"] = "phone-1"

        with self.assertRaises(ConfigurationError):
            Config().validate()

    def test_validate_passes_without_verify_token(self):
        os.environ["WHATSAPP_PHONE_NUMBER_ID"] = "phone-1"
        os.environ["WHATSAPP_ACCESS_TOKEN"] = "token"

        Config().validate()

    def test_validate_for_webhook_requires_verify_token(self):
        os.environ["WHATSAPP_PHONE_NUMBER_ID"] = "phone-1"
        os.environ["WHATSAPP_ACCESS_TOKEN"] = "token"

        with self.assertRaises(ConfigurationError):
            Config().validate_for_webhook()

        os.environ["WHATSAPP_WEBHOOK_VERIFY_TOKEN"] = "verify"
        Config().validate_for_webhook()

    def test_all_secrets(self):
        config = Config()

        self.assertEqual(
            config.all_secrets(),
            [config.access_token, config.webhook_verify_token, config.app_secret],
        )
