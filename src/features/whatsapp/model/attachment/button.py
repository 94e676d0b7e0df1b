from pydantic import BaseModel


class Button(BaseModel):
    """Quick-reply button press on a template message: https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#button-messages"""
    payload: str | None = None
    text: str
