from pydantic import BaseModel


class ResponseContact(BaseModel):
    input: str
    wa_id: str


class SentMessage(BaseModel):
    id: str
    message_status: str | None = None


class MessageResponse(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#response"""
    messaging_product: str | None = None
    contacts: list[ResponseContact] = []
    messages: list[SentMessage] = []

    @property
    def message_id(self) -> str | None:
        # one recipient per call, so there is at most one assigned ID
        return self.messages[0].id if self.messages else None


class MediaUploadResponse(BaseModel):
    id: str


class SuccessResponse(BaseModel):
    success: bool
