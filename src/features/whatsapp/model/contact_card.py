from pydantic import BaseModel


class ContactName(BaseModel):
    formatted_name: str = ""
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(BaseModel):
    phone: str | None = None
    type: str | None = None
    wa_id: str | None = None


class ContactEmail(BaseModel):
    email: str | None = None
    type: str | None = None


class ContactUrl(BaseModel):
    url: str | None = None
    type: str | None = None


class ContactAddress(BaseModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = None


class ContactOrg(BaseModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactCard(BaseModel):
    """
    Contact card, shared by inbound contacts messages and outbound contacts requests.
    https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#contacts-object
    """
    name: ContactName
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    urls: list[ContactUrl] | None = None
    addresses: list[ContactAddress] | None = None
    org: ContactOrg | None = None
    birthday: str | None = None
