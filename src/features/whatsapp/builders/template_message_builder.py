from features.whatsapp.model.outbound.media_source import MediaSource
from features.whatsapp.model.outbound.template_content import (
    Currency,
    CurrencyParameter,
    DateTime,
    DateTimeParameter,
    ImageParameter,
    PayloadParameter,
    TemplateComponent,
    TemplateContent,
    TemplateLanguage,
    TemplateParameter,
    TextParameter,
)


class TemplateMessageBuilder:
    """Builds a template message; body parameters accumulate into a single body component."""
    __name: str
    __language_code: str
    __header: TemplateComponent | None
    __body_parameters: list[TemplateParameter]
    __buttons: list[TemplateComponent]

    def __init__(self, name: str, language_code: str):
        self.__name = name
        self.__language_code = language_code
        self.__header = None
        self.__body_parameters = []
        self.__buttons = []

    def add_header_text(self, text: str) -> "TemplateMessageBuilder":
        self.__header = TemplateComponent(type = "header", parameters = [TextParameter(text = text)])
        return self

    def add_header_image(self, media_id: str | None = None, link: str | None = None) -> "TemplateMessageBuilder":
        parameter = ImageParameter(image = MediaSource(id = media_id, link = link))
        self.__header = TemplateComponent(type = "header", parameters = [parameter])
        return self

    def add_body_params(self, *texts: str) -> "TemplateMessageBuilder":
        self.__body_parameters.extend(TextParameter(text = text) for text in texts)
        return self

    def add_body_currency(self, fallback_value: str, code: str, amount_1000: int) -> "TemplateMessageBuilder":
        currency = Currency(fallback_value = fallback_value, code = code, amount_1000 = amount_1000)
        self.__body_parameters.append(CurrencyParameter(currency = currency))
        return self

    def add_body_date_time(self, fallback_value: str) -> "TemplateMessageBuilder":
        self.__body_parameters.append(DateTimeParameter(date_time = DateTime(fallback_value = fallback_value)))
        return self

    def add_button_payload(self, index: int, payload: str) -> "TemplateMessageBuilder":
        self.__buttons.append(
            TemplateComponent(
                type = "button",
                sub_type = "quick_reply",
                index = str(index),
                parameters = [PayloadParameter(payload = payload)],
            ),
        )
        return self

    def build(self) -> TemplateContent:
        components: list[TemplateComponent] = []
        if self.__header:
            components.append(self.__header)
        if self.__body_parameters:
            components.append(TemplateComponent(type = "body", parameters = list(self.__body_parameters)))
        components.extend(self.__buttons)
        return TemplateContent(
            name = self.__name,
            language = TemplateLanguage(code = self.__language_code),
            components = components,
        )
