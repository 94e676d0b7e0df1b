import json
from typing import Any

from util.error_codes import WEBHOOK_PAYLOAD_INVALID, WEBHOOK_SIGNATURE_MISMATCH, Upstream


class ServiceError(Exception):
    error_code: int
    http_status: int
    emoji: str

    def __init__(
        self,
        message: str,
        error_code: int,
        http_status: int = 500,
        emoji: str = "⚠️",
    ):
        super().__init__(message)
        self.error_code = error_code
        self.http_status = http_status
        self.emoji = emoji

    def __str__(self) -> str:
        return self.to_log_string()

    def to_log_string(self) -> str:
        cause_str = f" # Caused by: {self.__cause__}" if self.__cause__ else ""
        return f"[{self.emoji} E{self.error_code}] {super().__str__()}{cause_str}"

    def to_api_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": str(self),
            "emoji": self.emoji,
        }


class ValidationError(ServiceError):
    """Raised locally, before any network call, when a request is missing or has an invalid field."""
    field: str
    reason: str

    def __init__(self, field: str, reason: str, error_code: int, emoji: str = "✏️"):
        super().__init__(f"Invalid '{field}': {reason}", error_code, http_status = 422, emoji = emoji)
        self.field = field
        self.reason = reason


class NotFoundError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "🔍"):
        super().__init__(message, error_code, http_status = 404, emoji = emoji)


class ExternalServiceError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "🌐"):
        super().__init__(message, error_code, http_status = 502, emoji = emoji)


class ConfigurationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "⚙️"):
        super().__init__(message, error_code, http_status = 500, emoji = emoji)


class InternalError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "⚠️"):
        super().__init__(message, error_code, http_status = 500, emoji = emoji)


class APIError(ServiceError):
    """
    An error reported by the Graph API. The upstream code is kept as the error code,
    and the HTTP status is the literal status the API answered with.
    https://developers.facebook.com/docs/graph-api/guides/error-handling
    """
    type: str | None
    subcode: int | None
    fbtrace_id: str | None
    details: str | None

    def __init__(
        self,
        message: str,
        error_code: int,
        http_status: int,
        type: str | None = None,
        subcode: int | None = None,
        fbtrace_id: str | None = None,
        details: str | None = None,
        emoji: str = "📡",
    ):
        super().__init__(message, error_code, http_status = http_status, emoji = emoji)
        self.type = type
        self.subcode = subcode
        self.fbtrace_id = fbtrace_id
        self.details = details

    @property
    def is_rate_limit(self) -> bool:
        return self.error_code in Upstream.RATE_LIMIT_CODES

    @property
    def is_auth_error(self) -> bool:
        return self.error_code == Upstream.ACCESS_TOKEN_EXPIRED or self.type == Upstream.AUTH_ERROR_TYPE

    @property
    def is_permission_error(self) -> bool:
        return self.error_code in Upstream.PERMISSION_CODES

    def to_log_string(self) -> str:
        base = super().to_log_string()
        extras = [
            f"HTTP_{self.http_status}",
            f"type={self.type}" if self.type else None,
            f"subcode={self.subcode}" if self.subcode else None,
            f"details={self.details}" if self.details else None,
            f"fbtrace_id={self.fbtrace_id}" if self.fbtrace_id else None,
        ]
        return f"{base} ({', '.join(extra for extra in extras if extra)})"

    @classmethod
    def from_response(cls, http_status: int, body: bytes | str | None) -> "APIError":
        raw = body.decode("utf-8", errors = "replace") if isinstance(body, bytes) else (body or "")
        try:
            error = json.loads(raw).get("error")
        except (ValueError, AttributeError):
            error = None
        if not isinstance(error, dict):
            # unparseable body: the status stands in for the code
            return cls(raw or f"HTTP_{http_status}", error_code = http_status, http_status = http_status)
        error_data = error.get("error_data") or {}
        return cls(
            error.get("message") or f"HTTP_{http_status}",
            error_code = int(error.get("code") or http_status),
            http_status = http_status,
            type = error.get("type"),
            subcode = error.get("error_subcode"),
            fbtrace_id = error.get("fbtrace_id"),
            details = error_data.get("details") if isinstance(error_data, dict) else None,
        )


class WebhookError(ServiceError):
    """Rejection of an inbound webhook request; only the HTTP status is ever exposed to the caller."""

    def __init__(self, message: str, error_code: int, http_status: int, emoji: str = "🪝"):
        super().__init__(message, error_code, http_status = http_status, emoji = emoji)

    @classmethod
    def signature_mismatch(cls) -> "WebhookError":
        return cls("Webhook signature does not match the payload", WEBHOOK_SIGNATURE_MISMATCH, http_status = 403)

    @classmethod
    def invalid_payload(cls, reason: str) -> "WebhookError":
        return cls(f"Webhook payload could not be decoded: {reason}", WEBHOOK_PAYLOAD_INVALID, http_status = 400)
