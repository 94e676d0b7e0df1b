from typing import ClassVar

from features.whatsapp.model.outbound.media_source import MediaSource


class MediaContent(MediaSource):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#media-object"""
    TYPE: ClassVar[str]

    def validate_content(self):
        self.validate_source(f"{self.TYPE}.id")


class ImageContent(MediaContent):
    TYPE: ClassVar[str] = "image"

    caption: str | None = None


class VideoContent(MediaContent):
    TYPE: ClassVar[str] = "video"

    caption: str | None = None


class AudioContent(MediaContent):
    TYPE: ClassVar[str] = "audio"


class StickerContent(MediaContent):
    TYPE: ClassVar[str] = "sticker"


class DocumentContent(MediaContent):
    TYPE: ClassVar[str] = "document"

    caption: str | None = None
    filename: str | None = None
