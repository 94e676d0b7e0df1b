from pydantic import BaseModel


class ListReply(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#interactive-messages"""
    id: str
    title: str
    description: str | None = None


class ButtonReply(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#interactive-messages"""
    id: str
    title: str


class Interactive(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#interactive-messages"""
    type: str
    list_reply: ListReply | None = None
    button_reply: ButtonReply | None = None
