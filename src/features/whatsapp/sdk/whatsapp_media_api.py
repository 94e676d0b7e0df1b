import os
from pathlib import Path
from typing import IO

from features.whatsapp.media_types import MAX_MEDIA_SIZE_BYTES, message_type_for_mime, mime_type_for_extension
from features.whatsapp.model.media_info import MediaInfo
from features.whatsapp.model.outbound.message_request import MESSAGING_PRODUCT
from features.whatsapp.model.response import MediaUploadResponse, SuccessResponse
from features.whatsapp.sdk.graph_api_transport import GraphAPITransport
from util.config import Config
from util.error_codes import (
    EXTERNAL_OPERATION_REJECTED,
    MEDIA_FILE_NOT_FOUND,
    MEDIA_TOO_LARGE,
    MISSING_MEDIA_CONTENT,
    MISSING_MEDIA_ID,
    UNSUPPORTED_MEDIA_TYPE,
)
from util.errors import ExternalServiceError, NotFoundError, ValidationError
from util.log import Logger


class WhatsAppMediaAPI:
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/media"""
    __config: Config
    __log: Logger
    __transport: GraphAPITransport

    def __init__(self, config: Config, log: Logger, transport: GraphAPITransport):
        self.__config = config
        self.__log = log
        self.__transport = transport

    def upload_media(self, content: bytes | IO[bytes], filename: str, mime_type: str) -> MediaUploadResponse:
        if not content:
            raise ValidationError("file", "media content must not be empty", MISSING_MEDIA_CONTENT)
        if not mime_type:
            raise ValidationError("type", "MIME type must not be empty", UNSUPPORTED_MEDIA_TYPE)
        if isinstance(content, bytes):
            self.__check_size(len(content), mime_type)
        self.__log.t(f"Uploading media '{filename}' ({mime_type})")
        data = {"messaging_product": MESSAGING_PRODUCT, "type": mime_type}
        files = {"file": (filename, content, mime_type)}
        response = self.__transport.post_multipart(self.__config.media_url, data = data, files = files)
        return MediaUploadResponse.model_validate(response)

    def upload_media_file(self, path: str | Path, mime_type: str | None = None) -> MediaUploadResponse:
        path = Path(path)
        if not path.is_file():
            raise NotFoundError(f"Media file not found: {path}", MEDIA_FILE_NOT_FOUND)
        resolved_mime_type = mime_type or mime_type_for_extension(path.suffix)
        if not resolved_mime_type:
            raise ValidationError("type", f"unsupported file extension '{path.suffix}'", UNSUPPORTED_MEDIA_TYPE)
        self.__check_size(path.stat().st_size, resolved_mime_type)
        with path.open("rb") as file:
            return self.upload_media(file, path.name, resolved_mime_type)

    def get_media_info(self, media_id: str) -> MediaInfo:
        self.__require_media_id(media_id)
        self.__log.t(f"Getting media info for #{media_id}")
        response = self.__transport.get(self.__config.api_url(media_id))
        return MediaInfo.model_validate(response)

    def download_media(self, url: str) -> bytes:
        self.__log.t("Downloading media bytes from URL")
        content, _ = self.__transport.download(url)
        return content

    def download_media_by_id(self, media_id: str) -> tuple[bytes, str | None]:
        media_info = self.get_media_info(media_id)
        content, content_type = self.__transport.download(media_info.url)
        return content, media_info.mime_type or content_type

    def download_media_to_file(self, media_id: str, destination: str | Path | IO[bytes]) -> MediaInfo:
        media_info = self.get_media_info(media_id)
        if isinstance(destination, (str, os.PathLike)):
            with open(destination, "wb") as file:
                written = self.__transport.stream_to(media_info.url, file)
        else:
            written = self.__transport.stream_to(media_info.url, destination)
        self.__log.d(f"Media #{media_id} saved ({written} bytes)")
        return media_info

    def delete_media(self, media_id: str) -> SuccessResponse:
        self.__require_media_id(media_id)
        self.__log.t(f"Deleting media #{media_id}")
        response = SuccessResponse.model_validate(self.__transport.delete(self.__config.api_url(media_id)))
        if not response.success:
            raise ExternalServiceError(f"Media #{media_id} was not deleted", EXTERNAL_OPERATION_REJECTED)
        return response

    @staticmethod
    def __require_media_id(media_id: str):
        if not media_id:
            raise ValidationError("media_id", "media ID must not be empty", MISSING_MEDIA_ID)

    @staticmethod
    def __check_size(size: int, mime_type: str):
        message_type = message_type_for_mime(mime_type)
        limit = MAX_MEDIA_SIZE_BYTES[message_type]
        if size > limit:
            raise ValidationError("file", f"{message_type} exceeds {limit} bytes ({size})", MEDIA_TOO_LARGE)
