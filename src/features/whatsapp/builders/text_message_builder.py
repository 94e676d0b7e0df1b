from features.whatsapp.model.outbound.message_request import OutboundMessageRequest, ReplyContext
from features.whatsapp.model.outbound.text_content import TextContent


class TextMessageBuilder:
    __to: str
    __body: str
    __preview_url: bool
    __reply_to: str | None

    def __init__(self, to: str):
        self.__to = to
        self.__body = ""
        self.__preview_url = False
        self.__reply_to = None

    def body(self, body: str) -> "TextMessageBuilder":
        self.__body = body
        return self

    def preview_url(self, enabled: bool = True) -> "TextMessageBuilder":
        self.__preview_url = enabled
        return self

    def reply_to(self, message_id: str) -> "TextMessageBuilder":
        self.__reply_to = message_id
        return self

    def build(self) -> OutboundMessageRequest:
        return OutboundMessageRequest(
            to = self.__to,
            content = TextContent(body = self.__body, preview_url = self.__preview_url),
            context = ReplyContext(message_id = self.__reply_to) if self.__reply_to else None,
        )
