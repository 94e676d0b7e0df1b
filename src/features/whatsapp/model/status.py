from pydantic import BaseModel

from features.whatsapp.model.conversation import Conversation
from features.whatsapp.model.error import Error
from features.whatsapp.model.pricing import Pricing
from features.whatsapp.model.unix_timestamp import UnixTimestamp


class Status(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#statuses"""
    id: str
    status: str
    timestamp: UnixTimestamp = ""
    recipient_id: str = ""
    conversation: Conversation | None = None
    pricing: Pricing | None = None
    errors: list[Error] | None = None
