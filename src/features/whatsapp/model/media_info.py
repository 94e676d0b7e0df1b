from pydantic import BaseModel


class MediaInfo(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/media#retrieve-media-url"""
    id: str
    url: str
    mime_type: str | None = None
    sha256: str | None = None
    file_size: int | None = None
    messaging_product: str | None = None
