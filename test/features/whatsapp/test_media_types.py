import unittest

from features.whatsapp.media_types import (
    KNOWN_MEDIA_FORMATS,
    MAX_MEDIA_SIZE_BYTES,
    message_type_for_mime,
    mime_type_for_extension,
)


class MediaTypesTest(unittest.TestCase):

    def test_mime_type_for_extension(self):
        self.assertEqual(mime_type_for_extension("jpg"), "image/jpeg")
        self.assertEqual(mime_type_for_extension(".PDF"), "application/pdf")
        self.assertEqual(mime_type_for_extension("opus"), "audio/ogg")
        self.assertIsNone(mime_type_for_extension("exe"))

    def test_message_type_for_mime(self):
        self.assertEqual(message_type_for_mime("image/png"), "image")
        self.assertEqual(message_type_for_mime("image/webp"), "sticker")
        self.assertEqual(message_type_for_mime("audio/ogg; codecs=opus"), "audio")
        self.assertEqual(message_type_for_mime("VIDEO/MP4"), "video")
        self.assertEqual(message_type_for_mime("application/pdf"), "document")

    def test_every_known_format_has_a_size_limit(self):
        for mime_type in KNOWN_MEDIA_FORMATS.values():
            self.assertIn(message_type_for_mime(mime_type), MAX_MEDIA_SIZE_BYTES)
