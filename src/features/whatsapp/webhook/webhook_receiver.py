from concurrent.futures import Future

from pydantic import ValidationError as PydanticValidationError

from features.whatsapp.model.update import Update
from features.whatsapp.webhook.signature import verify_signature, verify_token
from features.whatsapp.webhook.webhook_dispatcher import WebhookDispatcher
from util.config import Config
from util.error_codes import WEBHOOK_VERIFICATION_FAILED
from util.errors import WebhookError
from util.log import Logger

SUBSCRIBE_MODE = "subscribe"


class WebhookReceiver:
    """
    Authenticates and decodes inbound webhook requests, then hands deliveries to the dispatcher.
    https://developers.facebook.com/docs/graph-api/webhooks/getting-started
    """
    __config: Config
    __log: Logger
    __dispatcher: WebhookDispatcher

    def __init__(self, config: Config, log: Logger, dispatcher: WebhookDispatcher):
        self.__config = config
        self.__log = log
        self.__dispatcher = dispatcher

    def verify(self, mode: str | None, token: str | None, challenge: str | None) -> str:
        expected_token = self.__config.webhook_verify_token.get_secret_value()
        if mode != SUBSCRIBE_MODE or not verify_token(token, expected_token):
            self.__log.w(f"Webhook verification rejected (mode '{mode}')")
            raise WebhookError("Webhook verification failed", WEBHOOK_VERIFICATION_FAILED, http_status = 403)
        self.__log.i("Webhook verified")
        return challenge or ""

    def receive(self, body: bytes, signature: str | None) -> Future:
        if self.__config.webhook_validate_signature and self.__config.has_app_secret:
            app_secret = self.__config.app_secret.get_secret_value()
            if not verify_signature(body, signature, app_secret):
                self.__log.w("Webhook signature mismatch, delivery dropped")
                raise WebhookError.signature_mismatch()
        try:
            update = Update.model_validate_json(body)
        except PydanticValidationError as e:
            reason = f"{e.error_count()} validation errors"
            self.__log.w(f"Webhook payload could not be decoded: {reason}")
            raise WebhookError.invalid_payload(reason) from e
        if self.__config.log_whatsapp_update:
            self.__log.t("Received WhatsApp update", update)
        return self.__dispatcher.submit(update)
