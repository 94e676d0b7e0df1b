from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from features.whatsapp.model.contact_card import ContactCard
from features.whatsapp.model.context import Context
from features.whatsapp.model.error import Error
from features.whatsapp.model.metadata import Metadata
from features.whatsapp.model.unix_timestamp import UnixTimestamp


def _parse_timestamp(timestamp: str) -> datetime | None:
    try:
        return datetime.fromtimestamp(int(timestamp), tz = timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return None


class BaseMessageEvent(BaseModel):
    """Fields shared by every inbound message event."""

    model_config = ConfigDict(frozen = True, populate_by_name = True)

    message_id: str
    from_: str = Field(alias = "from")
    contact_name: str = ""
    timestamp: UnixTimestamp = ""
    phone_number: str = ""
    phone_id: str = ""
    context: Context | None = None

    @property
    def is_reply(self) -> bool:
        return bool(self.context and self.context.id)

    @property
    def sent_at(self) -> datetime | None:
        return _parse_timestamp(self.timestamp)


class TextEvent(BaseMessageEvent):
    body: str


class MediaEvent(BaseMessageEvent):
    """Image, video, audio and sticker messages; audio and stickers carry no caption."""
    media_id: str
    mime_type: str | None = None
    sha256: str | None = None
    caption: str | None = None


class DocumentEvent(MediaEvent):
    filename: str | None = None


class LocationEvent(BaseMessageEvent):
    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None


class ContactsEvent(BaseMessageEvent):
    contacts: list[ContactCard]


class ButtonReplyEvent(BaseMessageEvent):
    button_id: str
    button_title: str


class ListReplyEvent(BaseMessageEvent):
    row_id: str
    row_title: str
    row_description: str | None = None


class ReactionEvent(BaseMessageEvent):
    reacted_message_id: str
    emoji: str = ""


class TemplateButtonEvent(BaseMessageEvent):
    """Quick-reply button pressed on a template message."""
    text: str
    payload: str | None = None


class StatusEvent(BaseModel):

    model_config = ConfigDict(frozen = True)

    message_id: str
    status: str
    timestamp: UnixTimestamp = ""
    recipient_id: str = ""
    phone_number: str = ""
    phone_id: str = ""
    conversation_id: str | None = None
    conversation_type: str | None = None
    billable: bool | None = None
    pricing_category: str | None = None
    errors: list[Error] = []  # filled for failed deliveries only

    @property
    def sent_at(self) -> datetime | None:
        return _parse_timestamp(self.timestamp)


class WebhookErrorEvent(BaseModel):
    """An error reported by the platform inside a webhook change."""

    model_config = ConfigDict(frozen = True)

    error: Error
    metadata: Metadata
