from pydantic import BaseModel, Field

from features.whatsapp.model.contact import Contact
from features.whatsapp.model.error import Error
from features.whatsapp.model.message import Message
from features.whatsapp.model.metadata import Metadata
from features.whatsapp.model.status import Status


class Value(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages"""
    messaging_product: str | None = None
    metadata: Metadata = Field(default_factory = Metadata)  # absent outside "messages" changes
    contacts: list[Contact] | None = None
    messages: list[Message] | None = None
    statuses: list[Status] | None = None
    errors: list[Error] | None = None

    def find_contact(self, wa_id: str) -> Contact | None:
        for contact in self.contacts or []:
            if contact.wa_id == wa_id:
                return contact
        return None
