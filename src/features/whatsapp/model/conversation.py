from pydantic import BaseModel


class ConversationOrigin(BaseModel):
    type: str | None = None


class Conversation(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#statuses"""
    id: str | None = None
    origin: ConversationOrigin | None = None
    expiration_timestamp: str | None = None
