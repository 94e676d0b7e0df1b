from typing import Any, Literal

from pydantic import BaseModel

from util.error_codes import MISSING_TEMPLATE_FIELDS
from util.errors import ValidationError


class MessageTemplate(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/business-management-api/message-templates"""
    id: str | None = None
    name: str
    language: str | None = None
    status: str | None = None
    category: str | None = None
    components: list[dict[str, Any]] = []


class TemplateCreateRequest(BaseModel):
    name: str
    category: Literal["AUTHENTICATION", "MARKETING", "UTILITY"]
    language: str
    components: list[dict[str, Any]] = []
    allow_category_change: bool | None = None

    def validate_request(self):
        for field in ("name", "language"):
            if not getattr(self, field):
                raise ValidationError(field, "must not be empty", MISSING_TEMPLATE_FIELDS)


class TemplateCreateResponse(BaseModel):
    id: str
    status: str | None = None
    category: str | None = None
