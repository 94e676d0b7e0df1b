import unittest
from unittest.mock import Mock

from pydantic import SecretStr

from di.di import DI
from features.whatsapp.sdk.graph_api_transport import GraphAPITransport
from features.whatsapp.sdk.whatsapp_business_api import WhatsAppBusinessAPI
from features.whatsapp.sdk.whatsapp_media_api import WhatsAppMediaAPI
from features.whatsapp.sdk.whatsapp_messages_api import WhatsAppMessagesAPI
from features.whatsapp.webhook.event_handlers import EventHandlers
from features.whatsapp.webhook.webhook_dispatcher import WebhookDispatcher
from features.whatsapp.webhook.webhook_receiver import WebhookReceiver
from util.config import Config
from util.log import Logger


class DITest(unittest.TestCase):

    di: DI

    def setUp(self):
        config = Config(def_phone_number_id = "phone-1", def_access_token = SecretStr("token"), def_webhook_workers = 1)
        self.di = DI(config, Mock(spec = Logger), EventHandlers(on_text = Mock()))

    def tearDown(self):
        if self.di._webhook_dispatcher is not None:
            self.di.webhook_dispatcher.shutdown(timeout_s = 1)

    def test_nothing_built_eagerly(self):
        self.assertIsNone(self.di._graph_transport)
        self.assertIsNone(self.di._messages_api)
        self.assertIsNone(self.di._webhook_dispatcher)

    def test_sdks(self):
        self.assertIsInstance(self.di.graph_transport, GraphAPITransport)
        self.assertIsInstance(self.di.messages_api, WhatsAppMessagesAPI)
        self.assertIsInstance(self.di.media_api, WhatsAppMediaAPI)
        self.assertIsInstance(self.di.business_api, WhatsAppBusinessAPI)

    def test_sdks_share_transport(self):
        self.assertIs(self.di.graph_transport, self.di.graph_transport)
        self.assertIs(self.di.messages_api, self.di.messages_api)

    def test_webhooks(self):
        self.assertIsInstance(self.di.webhook_dispatcher, WebhookDispatcher)
        self.assertIsInstance(self.di.webhook_receiver, WebhookReceiver)
        self.assertIsNotNone(self.di.webhook_dispatcher.handlers.on_text)

    def test_default_log_follows_config(self):
        di = DI(Config(def_log_level = "WARNING"))

        self.assertEqual(di.log.level, "warning")
