# Media formats accepted by the Cloud API, per message type
# https://developers.facebook.com/docs/whatsapp/cloud-api/reference/media#supported-media-types

SUPPORTED_IMAGE_FORMATS = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
}

SUPPORTED_STICKER_FORMATS = {
    "webp": "image/webp",
}

SUPPORTED_DOCUMENT_FORMATS = {
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "txt": "text/plain",
}

SUPPORTED_AUDIO_FORMATS = {
    "aac": "audio/aac",
    "mp3": "audio/mpeg",
    "m4a": "audio/mp4",
    "amr": "audio/amr",
    "ogg": "audio/ogg",
    "opus": "audio/ogg",
}

SUPPORTED_VIDEO_FORMATS = {
    "mp4": "video/mp4",
    "3gp": "video/3gpp",
    "3gpp": "video/3gpp",
}

# File extension -> MIME type
KNOWN_MEDIA_FORMATS = (
    SUPPORTED_IMAGE_FORMATS
    | SUPPORTED_STICKER_FORMATS
    | SUPPORTED_DOCUMENT_FORMATS
    | SUPPORTED_AUDIO_FORMATS
    | SUPPORTED_VIDEO_FORMATS
)

# Message type -> maximum size in bytes
MAX_MEDIA_SIZE_BYTES = {
    "image": 5 * 1024 * 1024,
    "document": 100 * 1024 * 1024,
    "audio": 16 * 1024 * 1024,
    "video": 16 * 1024 * 1024,
    "sticker": 100 * 1024,
}


def mime_type_for_extension(extension: str) -> str | None:
    return KNOWN_MEDIA_FORMATS.get(extension.lower().lstrip("."))


def message_type_for_mime(mime_type: str) -> str:
    base_type = mime_type.split(";")[0].strip().lower()
    if base_type == "image/webp":
        return "sticker"
    if base_type.startswith("image/"):
        return "image"
    if base_type.startswith("audio/"):
        return "audio"
    if base_type.startswith("video/"):
        return "video"
    return "document"
