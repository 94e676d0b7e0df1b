from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, Field, StrictInt

from features.whatsapp.model.outbound.media_source import MediaSource
from util.error_codes import INVALID_TEMPLATE_PARAMETER, MISSING_TEMPLATE_LANGUAGE, MISSING_TEMPLATE_NAME
from util.errors import ValidationError


class Currency(BaseModel):
    fallback_value: str
    code: str
    amount_1000: StrictInt  # amount multiplied by 1000, never a float


class DateTime(BaseModel):
    fallback_value: str


class TextParameter(BaseModel):
    type: Literal["text"] = "text"
    text: str


class CurrencyParameter(BaseModel):
    type: Literal["currency"] = "currency"
    currency: Currency


class DateTimeParameter(BaseModel):
    type: Literal["date_time"] = "date_time"
    date_time: DateTime


class ImageParameter(BaseModel):
    type: Literal["image"] = "image"
    image: MediaSource


class DocumentParameter(BaseModel):
    type: Literal["document"] = "document"
    document: MediaSource


class VideoParameter(BaseModel):
    type: Literal["video"] = "video"
    video: MediaSource


class PayloadParameter(BaseModel):
    type: Literal["payload"] = "payload"
    payload: str


TemplateParameter = Annotated[
    TextParameter | CurrencyParameter | DateTimeParameter
    | ImageParameter | DocumentParameter | VideoParameter | PayloadParameter,
    Field(discriminator = "type"),
]

# which parameter types each component slot accepts
ALLOWED_PARAMETER_TYPES = {
    "header": {"text", "currency", "date_time", "image", "document", "video"},
    "body": {"text", "currency", "date_time"},
    "button": {"payload", "text"},
}


class TemplateComponent(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#components-object"""
    type: Literal["header", "body", "button"]
    sub_type: Literal["quick_reply", "url", "copy_code"] | None = None
    index: str | None = None
    parameters: list[TemplateParameter] = []

    def validate_component(self, field: str):
        allowed = ALLOWED_PARAMETER_TYPES[self.type]
        for index, parameter in enumerate(self.parameters):
            if parameter.type not in allowed:
                raise ValidationError(
                    f"{field}.parameters[{index}].type",
                    f"'{parameter.type}' is not allowed in a {self.type} component",
                    INVALID_TEMPLATE_PARAMETER,
                )
            if isinstance(parameter, (ImageParameter, DocumentParameter, VideoParameter)):
                parameter_media: MediaSource = getattr(parameter, parameter.type)
                parameter_media.validate_source(f"{field}.parameters[{index}].{parameter.type}")
        if self.type == "button" and (not self.sub_type or self.index is None):
            raise ValidationError(field, "button components need a sub_type and an index", INVALID_TEMPLATE_PARAMETER)


class TemplateLanguage(BaseModel):
    code: str
    policy: Literal["deterministic"] = "deterministic"


class TemplateContent(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#template-object"""
    TYPE: ClassVar[str] = "template"

    name: str
    language: TemplateLanguage
    components: list[TemplateComponent] = []

    def validate_content(self):
        if not self.name:
            raise ValidationError("template.name", "template name must not be empty", MISSING_TEMPLATE_NAME)
        if not self.language.code:
            raise ValidationError("template.language.code", "language code must not be empty", MISSING_TEMPLATE_LANGUAGE)
        for index, component in enumerate(self.components):
            component.validate_component(f"template.components[{index}]")
