from pydantic import BaseModel


class PhoneNumber(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/business-management-api/manage-phone-numbers"""
    id: str
    display_phone_number: str | None = None
    verified_name: str | None = None
    quality_rating: str | None = None
    code_verification_status: str | None = None
    platform_type: str | None = None
    name_status: str | None = None
    messaging_limit_tier: str | None = None
