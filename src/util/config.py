# ruff: noqa: E501

import os
from typing import Callable

from pydantic import SecretStr

from util.error_codes import MISSING_ACCESS_TOKEN, MISSING_PHONE_NUMBER_ID, MISSING_VERIFY_TOKEN
from util.errors import ConfigurationError


class Config:

    business_account_id: str
    phone_number_id: str
    api_version: str
    base_url: str
    webhook_host: str
    webhook_port: int
    webhook_path: str
    webhook_validate_signature: bool
    webhook_workers: int
    webhook_drain_timeout_s: int
    web_timeout_s: int
    log_level: str
    log_whatsapp_update: bool

    access_token: SecretStr
    webhook_verify_token: SecretStr
    app_secret: SecretStr

    def all_secrets(self) -> list[SecretStr]:
        return [
            self.access_token,
            self.webhook_verify_token,
            self.app_secret,
        ]

    def __init__(
        self,
        def_business_account_id: str = "",
        def_phone_number_id: str = "",
        def_api_version: str = "v23.0",
        def_base_url: str = "https://graph.facebook.com",
        def_webhook_host: str = "0.0.0.0",
        def_webhook_port: int = 8080,
        def_webhook_path: str = "/webhook",
        def_webhook_validate_signature: bool = True,
        def_webhook_workers: int = 8,
        def_webhook_drain_timeout_s: int = 10,
        def_web_timeout_s: int = 30,
        def_log_level: str = "INFO",
        def_log_whatsapp_update: bool = False,

        def_access_token: SecretStr = SecretStr(""),
        def_webhook_verify_token: SecretStr = SecretStr(""),
        def_app_secret: SecretStr = SecretStr(""),
    ):
        # @formatter:off
        self.business_account_id = self.__env("WHATSAPP_BUSINESS_ACCOUNT_ID", lambda: def_business_account_id)
        self.phone_number_id = self.__env("WHATSAPP_PHONE_NUMBER_ID", lambda: def_phone_number_id)
        self.api_version = self.__env("WHATSAPP_API_VERSION", lambda: def_api_version)
        self.base_url = self.__env("WHATSAPP_API_BASE_URL", lambda: def_base_url).rstrip("/")
        self.webhook_host = self.__env("WEBHOOK_HOST", lambda: def_webhook_host)
        self.webhook_port = int(self.__env("WEBHOOK_PORT", lambda: str(def_webhook_port)))
        self.webhook_path = self.__env("WEBHOOK_PATH", lambda: def_webhook_path)
        self.webhook_validate_signature = self.__env("WEBHOOK_VALIDATE_SIGNATURE", lambda: str(def_webhook_validate_signature)).lower() == "true"
        self.webhook_workers = int(self.__env("WEBHOOK_WORKERS", lambda: str(def_webhook_workers)))
        self.webhook_drain_timeout_s = int(self.__env("WEBHOOK_DRAIN_TIMEOUT_S", lambda: str(def_webhook_drain_timeout_s)))
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_whatsapp_update = self.__env("LOG_WA_UPDATE", lambda: str(def_log_whatsapp_update)).lower() == "true"

        self.access_token = self.__senv("WHATSAPP_ACCESS_TOKEN", lambda: def_access_token)
        self.webhook_verify_token = self.__senv("WHATSAPP_WEBHOOK_VERIFY_TOKEN", lambda: def_webhook_verify_token)
        self.app_secret = self.__senv("WHATSAPP_APP_SECRET", lambda: def_app_secret)
        # @formatter:on

    def validate(self):
        if not self.phone_number_id:
            raise ConfigurationError("WHATSAPP_PHONE_NUMBER_ID is required", MISSING_PHONE_NUMBER_ID)
        if not self.access_token.get_secret_value():
            raise ConfigurationError("WHATSAPP_ACCESS_TOKEN is required", MISSING_ACCESS_TOKEN)

    def validate_for_webhook(self):
        self.validate()
        if not self.webhook_verify_token.get_secret_value():
            raise ConfigurationError("WHATSAPP_WEBHOOK_VERIFY_TOKEN is required for webhooks", MISSING_VERIFY_TOKEN)

    @property
    def has_app_secret(self) -> bool:
        return bool(self.app_secret.get_secret_value())

    def api_url(self, path: str) -> str:
        return f"{self.base_url}/{self.api_version}/{path.lstrip('/')}"

    @property
    def messages_url(self) -> str:
        return self.api_url(f"{self.phone_number_id}/messages")

    @property
    def media_url(self) -> str:
        return self.api_url(f"{self.phone_number_id}/media")

    @property
    def business_profile_url(self) -> str:
        return self.api_url(f"{self.phone_number_id}/whatsapp_business_profile")

    @property
    def phone_number_url(self) -> str:
        return self.api_url(self.phone_number_id)

    def business_account_url(self, edge: str) -> str:
        return self.api_url(f"{self.business_account_id}/{edge}")

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()
