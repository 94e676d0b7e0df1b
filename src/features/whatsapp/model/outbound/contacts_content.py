from typing import Any, ClassVar

from pydantic import BaseModel

from features.whatsapp.model.contact_card import ContactCard
from util.error_codes import MISSING_CONTACT_NAME, MISSING_CONTACTS
from util.errors import ValidationError


class ContactsContent(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#contacts-object"""
    TYPE: ClassVar[str] = "contacts"

    contacts: list[ContactCard]

    def validate_content(self):
        if not self.contacts:
            raise ValidationError("contacts", "at least one contact is required", MISSING_CONTACTS)
        for index, contact in enumerate(self.contacts):
            if not contact.name.formatted_name:
                raise ValidationError(f"contacts[{index}].name.formatted_name", "must not be empty", MISSING_CONTACT_NAME)

    def to_wire(self) -> Any:
        # contacts go on the wire as a bare list
        return [contact.model_dump(exclude_none = True) for contact in self.contacts]
