from pydantic import BaseModel

DEFAULT_PROFILE_FIELDS = [
    "about",
    "address",
    "description",
    "email",
    "profile_picture_url",
    "websites",
    "vertical",
]


class BusinessProfile(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/business-profiles"""
    about: str | None = None
    address: str | None = None
    description: str | None = None
    email: str | None = None
    profile_picture_url: str | None = None
    websites: list[str] | None = None
    vertical: str | None = None
    messaging_product: str | None = None


class BusinessProfileUpdate(BaseModel):
    about: str | None = None
    address: str | None = None
    description: str | None = None
    email: str | None = None
    profile_picture_handle: str | None = None
    websites: list[str] | None = None
    vertical: str | None = None
