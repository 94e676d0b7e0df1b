from __future__ import annotations

from typing import TYPE_CHECKING

from util.config import Config
from util.log import Logger

if TYPE_CHECKING:
    from features.whatsapp.sdk.graph_api_transport import GraphAPITransport
    from features.whatsapp.sdk.whatsapp_business_api import WhatsAppBusinessAPI
    from features.whatsapp.sdk.whatsapp_media_api import WhatsAppMediaAPI
    from features.whatsapp.sdk.whatsapp_messages_api import WhatsAppMessagesAPI
    from features.whatsapp.webhook.event_handlers import EventHandlers
    from features.whatsapp.webhook.webhook_dispatcher import WebhookDispatcher
    from features.whatsapp.webhook.webhook_receiver import WebhookReceiver


class DI:

    # Static dependencies
    _config: Config
    _log: Logger
    _handlers: "EventHandlers | None"
    # SDKs
    _graph_transport: "GraphAPITransport | None"
    _messages_api: "WhatsAppMessagesAPI | None"
    _media_api: "WhatsAppMediaAPI | None"
    _business_api: "WhatsAppBusinessAPI | None"
    # Webhooks
    _webhook_dispatcher: "WebhookDispatcher | None"
    _webhook_receiver: "WebhookReceiver | None"

    def __init__(
        self,
        config: Config | None = None,
        log: Logger | None = None,
        handlers: "EventHandlers | None" = None,
    ):
        # Static dependencies
        self._config = config or Config()
        self._log = log or Logger(self._config.log_level)
        self._handlers = handlers
        # SDKs
        self._graph_transport = None
        self._messages_api = None
        self._media_api = None
        self._business_api = None
        # Webhooks
        self._webhook_dispatcher = None
        self._webhook_receiver = None

    # === Static dependencies ===

    @property
    def config(self) -> Config:
        return self._config

    @property
    def log(self) -> Logger:
        return self._log

    # === SDKs ===

    @property
    def graph_transport(self) -> "GraphAPITransport":
        if self._graph_transport is None:
            from features.whatsapp.sdk.graph_api_transport import GraphAPITransport
            self._graph_transport = GraphAPITransport(self.config, self.log)
        return self._graph_transport

    @property
    def messages_api(self) -> "WhatsAppMessagesAPI":
        if self._messages_api is None:
            from features.whatsapp.sdk.whatsapp_messages_api import WhatsAppMessagesAPI
            self._messages_api = WhatsAppMessagesAPI(self.config, self.log, self.graph_transport)
        return self._messages_api

    @property
    def media_api(self) -> "WhatsAppMediaAPI":
        if self._media_api is None:
            from features.whatsapp.sdk.whatsapp_media_api import WhatsAppMediaAPI
            self._media_api = WhatsAppMediaAPI(self.config, self.log, self.graph_transport)
        return self._media_api

    @property
    def business_api(self) -> "WhatsAppBusinessAPI":
        if self._business_api is None:
            from features.whatsapp.sdk.whatsapp_business_api import WhatsAppBusinessAPI
            self._business_api = WhatsAppBusinessAPI(self.config, self.log, self.graph_transport)
        return self._business_api

    # === Webhooks ===

    @property
    def webhook_dispatcher(self) -> "WebhookDispatcher":
        if self._webhook_dispatcher is None:
            from features.whatsapp.webhook.webhook_dispatcher import WebhookDispatcher
            self._webhook_dispatcher = WebhookDispatcher(
                self.log,
                handlers = self._handlers,
                max_workers = self.config.webhook_workers,
            )
        return self._webhook_dispatcher

    @property
    def webhook_receiver(self) -> "WebhookReceiver":
        if self._webhook_receiver is None:
            from features.whatsapp.webhook.webhook_receiver import WebhookReceiver
            self._webhook_receiver = WebhookReceiver(self.config, self.log, self.webhook_dispatcher)
        return self._webhook_receiver
