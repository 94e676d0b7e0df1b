from typing import ClassVar

from pydantic import BaseModel

from util.error_codes import MISSING_REACTION_MESSAGE_ID
from util.errors import ValidationError


class ReactionContent(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#reaction-object"""
    TYPE: ClassVar[str] = "reaction"

    message_id: str
    emoji: str = ""  # empty removes a previous reaction

    def validate_content(self):
        if not self.message_id:
            raise ValidationError("reaction.message_id", "message ID must not be empty", MISSING_REACTION_MESSAGE_ID)
