from pydantic import BaseModel


class Pricing(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#statuses"""
    pricing_model: str | None = None
    billable: bool | None = None
    category: str | None = None
