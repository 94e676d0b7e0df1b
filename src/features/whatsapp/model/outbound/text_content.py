from typing import ClassVar

from pydantic import BaseModel

from util.error_codes import MISSING_TEXT_BODY
from util.errors import ValidationError


class TextContent(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#text-object"""
    TYPE: ClassVar[str] = "text"

    body: str
    preview_url: bool = False

    def validate_content(self):
        if not self.body:
            raise ValidationError("text.body", "body must not be empty", MISSING_TEXT_BODY)
