import unittest

from features.whatsapp.builders.button_message_builder import ButtonMessageBuilder
from features.whatsapp.builders.contact_builder import ContactBuilder
from features.whatsapp.builders.list_message_builder import ListMessageBuilder, row
from features.whatsapp.builders.template_message_builder import TemplateMessageBuilder
from features.whatsapp.builders.text_message_builder import TextMessageBuilder
from features.whatsapp.model.contact_card import ContactAddress
from util.errors import ValidationError


class TextMessageBuilderTest(unittest.TestCase):

    def test_build(self):
        request = TextMessageBuilder("15551234567").body("Check https://example.com").preview_url().reply_to("wamid.0").build()

        request.validate_request()
        payload = request.to_payload()
        self.assertEqual(payload["text"], {"body": "Check https://example.com", "preview_url": True})
        self.assertEqual(payload["context"], {"message_id": "wamid.0"})

    def test_build_without_body_fails_validation(self):
        with self.assertRaises(ValidationError):
            TextMessageBuilder("15551234567").build().validate_request()


class ButtonMessageBuilderTest(unittest.TestCase):

    def test_build(self):
        content = (
            ButtonMessageBuilder("Confirm your booking?")
            .header_text("Booking")
            .footer("Reply within 24h")
            .add_button("yes", "Yes")
            .add_button("no", "No")
            .build()
        )

        content.validate_content()
        wire = content.to_wire()
        self.assertEqual(wire["type"], "button")
        self.assertEqual(wire["header"], {"type": "text", "text": "Booking"})
        self.assertEqual(wire["footer"], {"text": "Reply within 24h"})
        self.assertEqual([button["reply"]["id"] for button in wire["action"]["buttons"]], ["yes", "no"])

    def test_extra_buttons_are_ignored(self):
        builder = ButtonMessageBuilder("Pick")
        for index in range(5):
            builder.add_button(f"b{index}", f"B{index}")

        content = builder.build()

        self.assertEqual(len(content.action.buttons), 3)
        content.validate_content()

    def test_image_header(self):
        content = ButtonMessageBuilder("Pick").header_image(link = "https://x/y.png").add_button("a", "A").build()

        self.assertEqual(content.to_wire()["header"], {"type": "image", "image": {"link": "https://x/y.png"}})

    def test_no_buttons_fails_validation(self):
        with self.assertRaises(ValidationError):
            ButtonMessageBuilder("Pick").build().validate_content()


class ListMessageBuilderTest(unittest.TestCase):

    def test_build(self):
        content = (
            ListMessageBuilder("Choose a room")
            .header("Rooms")
            .footer("Prices per night")
            .button_text("See rooms")
            .add_section("Standard", [row("s1", "Single"), row("s2", "Double", "Two beds")])
            .add_section("Suites", [row("x1", "Suite")])
            .build()
        )

        content.validate_content()
        wire = content.to_wire()
        self.assertEqual(wire["type"], "list")
        self.assertEqual(wire["action"]["button"], "See rooms")
        self.assertEqual(len(wire["action"]["sections"]), 2)
        self.assertEqual(wire["action"]["sections"][0]["rows"][1], {"id": "s2", "title": "Double", "description": "Two beds"})

    def test_missing_button_text_fails_validation(self):
        content = ListMessageBuilder("Choose").add_section(None, [row("1", "One")]).build()

        with self.assertRaises(ValidationError):
            content.validate_content()


class TemplateMessageBuilderTest(unittest.TestCase):

    def test_build(self):
        template = (
            TemplateMessageBuilder("order_update", "en_US")
            .add_header_image(media_id = "media-1")
            .add_body_params("Ana", "#1234")
            .add_body_currency("$10.99", "USD", 10990)
            .add_body_date_time("May 1, 2025")
            .add_button_payload(0, "TRACK_1234")
            .build()
        )

        template.validate_content()
        components = template.model_dump(exclude_none = True)["components"]
        self.assertEqual([component["type"] for component in components], ["header", "body", "button"])
        self.assertEqual(components[0]["parameters"], [{"type": "image", "image": {"id": "media-1"}}])
        self.assertEqual(len(components[1]["parameters"]), 4)
        self.assertEqual(components[1]["parameters"][2]["currency"]["amount_1000"], 10990)
        self.assertEqual(
            components[2],
            {"type": "button", "sub_type": "quick_reply", "index": "0", "parameters": [{"type": "payload", "payload": "TRACK_1234"}]},
        )

    def test_build_without_parameters(self):
        template = TemplateMessageBuilder("hello_world", "en_US").build()

        self.assertEqual(template.components, [])


class ContactBuilderTest(unittest.TestCase):

    def test_build(self):
        card = (
            ContactBuilder()
            .first_name("Ana")
            .last_name("Petrovic")
            .add_phone("+15551234567", type = "CELL", wa_id = "15551234567")
            .add_email("ana@example.com", type = "WORK")
            .add_url("https://example.com")
            .add_address(ContactAddress(city = "Belgrade", country_code = "RS"))
            .organization("Tea Shop", title = "Owner")
            .birthday("1990-05-01")
            .build()
        )

        self.assertEqual(card.name.formatted_name, "Ana Petrovic")
        self.assertEqual(card.phones[0].wa_id, "15551234567")
        self.assertEqual(card.emails[0].email, "ana@example.com")
        self.assertEqual(card.urls[0].url, "https://example.com")
        self.assertEqual(card.addresses[0].city, "Belgrade")
        self.assertEqual(card.org.company, "Tea Shop")
        self.assertEqual(card.birthday, "1990-05-01")

    def test_explicit_formatted_name(self):
        card = ContactBuilder("Dr. Ana").first_name("Ana").build()

        self.assertEqual(card.name.formatted_name, "Dr. Ana")
        self.assertIsNone(card.phones)
