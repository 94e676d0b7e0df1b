from pydantic import BaseModel

from features.whatsapp.model.profile import Profile


class Contact(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages"""
    profile: Profile | None = None
    wa_id: str

    @property
    def display_name(self) -> str:
        return (self.profile.name if self.profile else None) or ""
