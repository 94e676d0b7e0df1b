from typing import Any

from pydantic import BaseModel, Field

from features.whatsapp.model.attachment.button import Button
from features.whatsapp.model.attachment.interactive import Interactive
from features.whatsapp.model.attachment.location import Location
from features.whatsapp.model.attachment.media_attachment import MediaAttachment
from features.whatsapp.model.attachment.reaction import Reaction
from features.whatsapp.model.attachment.system import System
from features.whatsapp.model.attachment.text import Text
from features.whatsapp.model.contact_card import ContactCard
from features.whatsapp.model.context import Context
from features.whatsapp.model.error import Error
from features.whatsapp.model.referral import Referral
from features.whatsapp.model.unix_timestamp import UnixTimestamp


class Message(BaseModel):
    """
    An inbound message. The type is kept open so that message types unknown to this
    library still decode; the payload field matching the type may be absent.
    https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages
    """
    from_: str = Field(alias = "from")
    id: str
    timestamp: UnixTimestamp = ""
    type: str
    text: Text | None = None
    image: MediaAttachment | None = None
    video: MediaAttachment | None = None
    audio: MediaAttachment | None = None
    document: MediaAttachment | None = None
    sticker: MediaAttachment | None = None
    location: Location | None = None
    contacts: list[ContactCard] | None = None
    interactive: Interactive | None = None
    button: Button | None = None
    reaction: Reaction | None = None
    system: System | None = None
    referral: Referral | None = None
    context: Context | None = None
    errors: list[Error] | None = None

    @property
    def content(self) -> Any | None:
        """The payload matching this message's type, or None when absent or unknown."""
        if self.type not in CONTENT_TYPES:
            return None
        return getattr(self, self.type)


CONTENT_TYPES = (
    "text", "image", "video", "audio", "document", "sticker",
    "location", "contacts", "interactive", "button", "reaction", "system",
)
