from features.whatsapp.model.contact_card import (
    ContactAddress,
    ContactCard,
    ContactEmail,
    ContactName,
    ContactOrg,
    ContactPhone,
    ContactUrl,
)


class ContactBuilder:
    __first_name: str | None
    __last_name: str | None
    __formatted_name: str | None
    __phones: list[ContactPhone]
    __emails: list[ContactEmail]
    __urls: list[ContactUrl]
    __addresses: list[ContactAddress]
    __org: ContactOrg | None
    __birthday: str | None

    def __init__(self, formatted_name: str | None = None):
        self.__formatted_name = formatted_name
        self.__first_name = None
        self.__last_name = None
        self.__phones = []
        self.__emails = []
        self.__urls = []
        self.__addresses = []
        self.__org = None
        self.__birthday = None

    def first_name(self, name: str) -> "ContactBuilder":
        self.__first_name = name
        return self

    def last_name(self, name: str) -> "ContactBuilder":
        self.__last_name = name
        return self

    def add_phone(self, phone: str, type: str | None = None, wa_id: str | None = None) -> "ContactBuilder":
        self.__phones.append(ContactPhone(phone = phone, type = type, wa_id = wa_id))
        return self

    def add_email(self, email: str, type: str | None = None) -> "ContactBuilder":
        self.__emails.append(ContactEmail(email = email, type = type))
        return self

    def add_url(self, url: str, type: str | None = None) -> "ContactBuilder":
        self.__urls.append(ContactUrl(url = url, type = type))
        return self

    def add_address(self, address: ContactAddress) -> "ContactBuilder":
        self.__addresses.append(address)
        return self

    def organization(self, company: str, department: str | None = None, title: str | None = None) -> "ContactBuilder":
        self.__org = ContactOrg(company = company, department = department, title = title)
        return self

    def birthday(self, birthday: str) -> "ContactBuilder":
        """Birthday in YYYY-MM-DD format."""
        self.__birthday = birthday
        return self

    def build(self) -> ContactCard:
        # the formatted name falls back to the given names
        formatted_name = self.__formatted_name or " ".join(
            part for part in (self.__first_name, self.__last_name) if part
        )
        return ContactCard(
            name = ContactName(
                formatted_name = formatted_name,
                first_name = self.__first_name,
                last_name = self.__last_name,
            ),
            phones = self.__phones or None,
            emails = self.__emails or None,
            urls = self.__urls or None,
            addresses = self.__addresses or None,
            org = self.__org,
            birthday = self.__birthday,
        )
