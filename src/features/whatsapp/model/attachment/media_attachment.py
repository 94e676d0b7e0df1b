from pydantic import BaseModel


class MediaAttachment(BaseModel):
    """
    Inbound media payload shared by image, video, audio, sticker and document messages.
    https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#media-messages
    """
    id: str
    mime_type: str | None = None
    sha256: str | None = None
    caption: str | None = None  # image, video and document only
    filename: str | None = None  # document only
    voice: bool | None = None  # audio only
    animated: bool | None = None  # sticker only
