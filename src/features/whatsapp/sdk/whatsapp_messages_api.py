from features.whatsapp.model.contact_card import ContactCard
from features.whatsapp.model.outbound.contacts_content import ContactsContent
from features.whatsapp.model.outbound.interactive_content import (
    ButtonAction,
    CTAURLAction,
    CTAURLParameters,
    InteractiveContent,
    InteractiveHeader,
    InteractiveText,
    ListAction,
    ListSection,
    ReplyButton,
)
from features.whatsapp.model.outbound.location_content import LocationContent
from features.whatsapp.model.outbound.media_content import (
    AudioContent,
    DocumentContent,
    ImageContent,
    StickerContent,
    VideoContent,
)
from features.whatsapp.model.outbound.message_request import (
    MESSAGING_PRODUCT,
    MessageContent,
    OutboundMessageRequest,
    ReplyContext,
)
from features.whatsapp.model.outbound.reaction_content import ReactionContent
from features.whatsapp.model.outbound.template_content import TemplateContent, TemplateLanguage
from features.whatsapp.model.outbound.text_content import TextContent
from features.whatsapp.model.response import MessageResponse, SuccessResponse
from features.whatsapp.sdk.graph_api_transport import GraphAPITransport
from util.config import Config
from util.error_codes import MISSING_MESSAGE_ID, MISSING_REPLY_MESSAGE_ID
from util.errors import ValidationError
from util.log import Logger


class WhatsAppMessagesAPI:
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages"""
    __config: Config
    __log: Logger
    __transport: GraphAPITransport

    def __init__(self, config: Config, log: Logger, transport: GraphAPITransport):
        self.__config = config
        self.__log = log
        self.__transport = transport

    def send_message(self, request: OutboundMessageRequest) -> MessageResponse:
        request.validate_request()
        self.__log.t(f"Sending '{request.type}' message to recipient #{request.to}")
        response = self.__transport.post(self.__config.messages_url, request.to_payload())
        return MessageResponse.model_validate(response)

    def send_text(self, to: str, body: str, preview_url: bool = False) -> MessageResponse:
        return self.__send(to, TextContent(body = body, preview_url = preview_url))

    def send_text_reply(self, to: str, body: str, reply_to_message_id: str) -> MessageResponse:
        if not reply_to_message_id:
            raise ValidationError("context.message_id", "reply message ID must not be empty", MISSING_REPLY_MESSAGE_ID)
        return self.__send(to, TextContent(body = body), reply_to = reply_to_message_id)

    def send_image(self, to: str, image: ImageContent, reply_to: str | None = None) -> MessageResponse:
        return self.__send(to, image, reply_to)

    def send_video(self, to: str, video: VideoContent, reply_to: str | None = None) -> MessageResponse:
        return self.__send(to, video, reply_to)

    def send_audio(self, to: str, audio: AudioContent, reply_to: str | None = None) -> MessageResponse:
        return self.__send(to, audio, reply_to)

    def send_sticker(self, to: str, sticker: StickerContent, reply_to: str | None = None) -> MessageResponse:
        return self.__send(to, sticker, reply_to)

    def send_document(self, to: str, document: DocumentContent, reply_to: str | None = None) -> MessageResponse:
        return self.__send(to, document, reply_to)

    def send_location(self, to: str, location: LocationContent) -> MessageResponse:
        return self.__send(to, location)

    def send_contacts(self, to: str, contacts: list[ContactCard]) -> MessageResponse:
        return self.__send(to, ContactsContent(contacts = contacts))

    def send_reaction(self, to: str, message_id: str, emoji: str) -> MessageResponse:
        return self.__send(to, ReactionContent(message_id = message_id, emoji = emoji))

    def remove_reaction(self, to: str, message_id: str) -> MessageResponse:
        return self.send_reaction(to, message_id, "")

    def send_interactive(self, to: str, interactive: InteractiveContent, reply_to: str | None = None) -> MessageResponse:
        return self.__send(to, interactive, reply_to)

    def send_interactive_buttons(
        self,
        to: str,
        body_text: str,
        buttons: list[ReplyButton],
        header: InteractiveHeader | None = None,
        footer: str | None = None,
    ) -> MessageResponse:
        interactive = InteractiveContent(
            action = ButtonAction(buttons = buttons),
            body = InteractiveText(text = body_text),
            header = header,
            footer = InteractiveText(text = footer) if footer else None,
        )
        return self.__send(to, interactive)

    def send_interactive_list(
        self,
        to: str,
        body_text: str,
        button_text: str,
        sections: list[ListSection],
        header: str | None = None,
        footer: str | None = None,
    ) -> MessageResponse:
        interactive = InteractiveContent(
            action = ListAction(button = button_text, sections = sections),
            body = InteractiveText(text = body_text),
            header = InteractiveHeader(type = "text", text = header) if header else None,
            footer = InteractiveText(text = footer) if footer else None,
        )
        return self.__send(to, interactive)

    def send_cta_url(
        self,
        to: str,
        body_text: str,
        display_text: str,
        url: str,
        header: str | None = None,
        footer: str | None = None,
    ) -> MessageResponse:
        interactive = InteractiveContent(
            action = CTAURLAction(parameters = CTAURLParameters(display_text = display_text, url = url)),
            body = InteractiveText(text = body_text),
            header = InteractiveHeader(type = "text", text = header) if header else None,
            footer = InteractiveText(text = footer) if footer else None,
        )
        return self.__send(to, interactive)

    def send_template(self, to: str, template: TemplateContent) -> MessageResponse:
        return self.__send(to, template)

    def send_simple_template(self, to: str, name: str, language_code: str) -> MessageResponse:
        return self.__send(to, TemplateContent(name = name, language = TemplateLanguage(code = language_code)))

    def mark_as_read(self, message_id: str) -> SuccessResponse:
        if not message_id:
            raise ValidationError("message_id", "message ID must not be empty", MISSING_MESSAGE_ID)
        self.__log.t(f"Marking message #{message_id} as read")
        payload = {
            "messaging_product": MESSAGING_PRODUCT,
            "status": "read",
            "message_id": message_id,
        }
        response = self.__transport.post(self.__config.messages_url, payload)
        return SuccessResponse.model_validate(response)

    def __send(self, to: str, content: MessageContent, reply_to: str | None = None) -> MessageResponse:
        context = ReplyContext(message_id = reply_to) if reply_to else None
        return self.send_message(OutboundMessageRequest(to = to, content = content, context = context))
