from typing import Any

from pydantic import BaseModel

from features.whatsapp.model.outbound.contacts_content import ContactsContent
from features.whatsapp.model.outbound.interactive_content import InteractiveContent
from features.whatsapp.model.outbound.location_content import LocationContent
from features.whatsapp.model.outbound.media_content import (
    AudioContent,
    DocumentContent,
    ImageContent,
    StickerContent,
    VideoContent,
)
from features.whatsapp.model.outbound.reaction_content import ReactionContent
from features.whatsapp.model.outbound.template_content import TemplateContent
from features.whatsapp.model.outbound.text_content import TextContent
from util.error_codes import MISSING_RECIPIENT
from util.errors import ValidationError

MESSAGING_PRODUCT = "whatsapp"

MessageContent = (
    TextContent | ImageContent | AudioContent | VideoContent | DocumentContent | StickerContent
    | LocationContent | ContactsContent | InteractiveContent | TemplateContent | ReactionContent
)


class ReplyContext(BaseModel):
    message_id: str


class OutboundMessageRequest(BaseModel):
    """
    A message to send to a single recipient. The request holds exactly one content object,
    and the wire 'type' is always derived from it.
    https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages
    """
    to: str
    content: MessageContent
    context: ReplyContext | None = None

    @property
    def type(self) -> str:
        return self.content.TYPE

    def validate_request(self):
        if not self.to:
            raise ValidationError("to", "recipient must not be empty", MISSING_RECIPIENT)
        self.content.validate_content()

    def to_payload(self) -> dict[str, Any]:
        if isinstance(self.content, (ContactsContent, InteractiveContent)):
            content = self.content.to_wire()
        else:
            content = self.content.model_dump(exclude_none = True)
        payload: dict[str, Any] = {
            "messaging_product": MESSAGING_PRODUCT,
            "recipient_type": "individual",
            "to": self.to,
            "type": self.type,
            self.type: content,
        }
        if self.context:
            payload["context"] = self.context.model_dump()
        return payload
