import io
import os
import tempfile
import unittest
from unittest.mock import Mock

import requests_mock
from pydantic import SecretStr
from requests_mock import Mocker

from features.whatsapp.sdk.graph_api_transport import GraphAPITransport
from features.whatsapp.sdk.whatsapp_media_api import WhatsAppMediaAPI
from util.config import Config
from util.errors import ExternalServiceError, NotFoundError, ValidationError
from util.log import Logger

BASE_URL = "https://graph.facebook.com/v23.0"
MEDIA_URL = "https://lookaside.fbsbx.com/whatsapp_business/attachments/?mid=1"
MEDIA_INFO = {
    "messaging_product": "whatsapp",
    "url": MEDIA_URL,
    "mime_type": "image/jpeg",
    "sha256": "abc",
    "file_size": 4,
    "id": "media-1",
}


class WhatsAppMediaAPITest(unittest.TestCase):

    api: WhatsAppMediaAPI

    def setUp(self):
        config = Config(def_phone_number_id = "phone-1", def_access_token = SecretStr("token"), def_web_timeout_s = 1)
        log = Mock(spec = Logger)
        self.api = WhatsAppMediaAPI(config, log, GraphAPITransport(config, log))

    @requests_mock.Mocker()
    def test_upload_media(self, m: Mocker):
        m.post(f"{BASE_URL}/phone-1/media", json = {"id": "media-1"})

        response = self.api.upload_media(b"\xff\xd8\xff\xe0", "photo.jpg", "image/jpeg")

        self.assertEqual(response.id, "media-1")
        body = m.last_request.body
        self.assertIn(b'name="messaging_product"', body)
        self.assertIn(b"whatsapp", body)
        self.assertIn(b'name="type"', body)
        self.assertIn(b"image/jpeg", body)
        self.assertIn(b'filename="photo.jpg"', body)

    def test_upload_media_empty_content(self):
        with self.assertRaises(ValidationError):
            self.api.upload_media(b"", "photo.jpg", "image/jpeg")

    def test_upload_media_too_large_sticker(self):
        with self.assertRaises(ValidationError) as context:
            self.api.upload_media(b"x" * (100 * 1024 + 1), "sticker.webp", "image/webp")
        self.assertEqual(context.exception.field, "file")

    @requests_mock.Mocker()
    def test_upload_media_file_resolves_mime_type(self, m: Mocker):
        m.post(f"{BASE_URL}/phone-1/media", json = {"id": "media-2"})
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "report.pdf")
            with open(path, "wb") as file:
                file.write(b"%PDF-1.7")

            response = self.api.upload_media_file(path)

        self.assertEqual(response.id, "media-2")
        self.assertIn(b"application/pdf", m.last_request.body)

    def test_upload_media_file_unknown_extension(self):
        with tempfile.NamedTemporaryFile(suffix = ".xyz") as file:
            with self.assertRaises(ValidationError):
                self.api.upload_media_file(file.name)

    def test_upload_media_file_missing(self):
        with self.assertRaises(NotFoundError):
            self.api.upload_media_file("/nonexistent/photo.jpg")

    @requests_mock.Mocker()
    def test_get_media_info(self, m: Mocker):
        m.get(f"{BASE_URL}/media-1", json = MEDIA_INFO)

        info = self.api.get_media_info("media-1")

        self.assertEqual(info.url, MEDIA_URL)
        self.assertEqual(info.mime_type, "image/jpeg")
        self.assertEqual(info.file_size, 4)

    def test_get_media_info_requires_id(self):
        with self.assertRaises(ValidationError):
            self.api.get_media_info("")

    @requests_mock.Mocker()
    def test_download_media_by_id(self, m: Mocker):
        m.get(f"{BASE_URL}/media-1", json = MEDIA_INFO)
        m.get(MEDIA_URL, content = b"\xff\xd8\xff\xe0", headers = {"Content-Type": "application/octet-stream"})

        content, mime_type = self.api.download_media_by_id("media-1")

        self.assertEqual(content, b"\xff\xd8\xff\xe0")
        self.assertEqual(mime_type, "image/jpeg")
        self.assertEqual(m.last_request.headers["Authorization"], "Bearer token")

    @requests_mock.Mocker()
    def test_download_media_to_stream(self, m: Mocker):
        m.get(f"{BASE_URL}/media-1", json = MEDIA_INFO)
        m.get(MEDIA_URL, content = b"\xff\xd8\xff\xe0")
        destination = io.BytesIO()

        info = self.api.download_media_to_file("media-1", destination)

        self.assertEqual(info.id, "media-1")
        self.assertEqual(destination.getvalue(), b"\xff\xd8\xff\xe0")

    @requests_mock.Mocker()
    def test_download_media_to_path(self, m: Mocker):
        m.get(f"{BASE_URL}/media-1", json = MEDIA_INFO)
        m.get(MEDIA_URL, content = b"\xff\xd8\xff\xe0")
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "photo.jpg")

            self.api.download_media_to_file("media-1", path)

            with open(path, "rb") as file:
                self.assertEqual(file.read(), b"\xff\xd8\xff\xe0")

    @requests_mock.Mocker()
    def test_delete_media(self, m: Mocker):
        m.delete(f"{BASE_URL}/media-1", json = {"success": True})

        self.assertTrue(self.api.delete_media("media-1").success)

    @requests_mock.Mocker()
    def test_delete_media_rejected(self, m: Mocker):
        m.delete(f"{BASE_URL}/media-1", json = {"success": False})

        with self.assertRaises(ExternalServiceError):
            self.api.delete_media("media-1")
