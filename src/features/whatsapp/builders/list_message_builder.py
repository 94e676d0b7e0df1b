from features.whatsapp.model.outbound.interactive_content import (
    InteractiveContent,
    InteractiveHeader,
    InteractiveText,
    ListAction,
    ListRow,
    ListSection,
)


def row(id: str, title: str, description: str | None = None) -> ListRow:
    return ListRow(id = id, title = title, description = description)


class ListMessageBuilder:
    __body: str
    __button_text: str
    __header: str | None
    __footer: str | None
    __sections: list[ListSection]

    def __init__(self, body: str):
        self.__body = body
        self.__button_text = ""
        self.__header = None
        self.__footer = None
        self.__sections = []

    def header(self, text: str) -> "ListMessageBuilder":
        self.__header = text
        return self

    def footer(self, text: str) -> "ListMessageBuilder":
        self.__footer = text
        return self

    def button_text(self, text: str) -> "ListMessageBuilder":
        self.__button_text = text
        return self

    def add_section(self, title: str | None, rows: list[ListRow]) -> "ListMessageBuilder":
        self.__sections.append(ListSection(title = title, rows = rows))
        return self

    def build(self) -> InteractiveContent:
        return InteractiveContent(
            action = ListAction(button = self.__button_text, sections = list(self.__sections)),
            body = InteractiveText(text = self.__body),
            header = InteractiveHeader(type = "text", text = self.__header) if self.__header else None,
            footer = InteractiveText(text = self.__footer) if self.__footer else None,
        )
