from features.whatsapp.model.outbound.interactive_content import (
    MAX_REPLY_BUTTONS,
    ButtonAction,
    InteractiveContent,
    InteractiveHeader,
    InteractiveText,
    ReplyButton,
)
from features.whatsapp.model.outbound.media_source import MediaSource


class ButtonMessageBuilder:
    """Builds a reply-buttons message. Buttons past the third are ignored."""
    __body: str
    __header: InteractiveHeader | None
    __footer: str | None
    __buttons: list[ReplyButton]

    def __init__(self, body: str):
        self.__body = body
        self.__header = None
        self.__footer = None
        self.__buttons = []

    def header_text(self, text: str) -> "ButtonMessageBuilder":
        self.__header = InteractiveHeader(type = "text", text = text)
        return self

    def header_image(self, media_id: str | None = None, link: str | None = None) -> "ButtonMessageBuilder":
        self.__header = InteractiveHeader(type = "image", image = MediaSource(id = media_id, link = link))
        return self

    def footer(self, text: str) -> "ButtonMessageBuilder":
        self.__footer = text
        return self

    def add_button(self, id: str, title: str) -> "ButtonMessageBuilder":
        if len(self.__buttons) < MAX_REPLY_BUTTONS:
            self.__buttons.append(ReplyButton.of(id, title))
        return self

    def build(self) -> InteractiveContent:
        return InteractiveContent(
            action = ButtonAction(buttons = list(self.__buttons)),
            body = InteractiveText(text = self.__body),
            header = self.__header,
            footer = InteractiveText(text = self.__footer) if self.__footer else None,
        )
