from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, Field

from features.whatsapp.model.outbound.media_source import MediaSource
from util.error_codes import (
    EMPTY_LIST_SECTION,
    INVALID_BUTTON_COUNT,
    MISSING_BUTTON_FIELDS,
    MISSING_CTA_FIELDS,
    MISSING_FLOW_FIELDS,
    MISSING_HEADER_CONTENT,
    MISSING_INTERACTIVE_BODY,
    MISSING_LIST_BUTTON_TEXT,
    MISSING_LIST_SECTIONS,
    MISSING_PRODUCT_FIELDS,
)
from util.errors import ValidationError

MAX_REPLY_BUTTONS = 3


class InteractiveHeader(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#header-object"""
    type: Literal["text", "image", "video", "document"]
    text: str | None = None
    image: MediaSource | None = None
    video: MediaSource | None = None
    document: MediaSource | None = None

    def validate_header(self):
        content = getattr(self, self.type)
        if not content:
            raise ValidationError(f"interactive.header.{self.type}", "header content must match its type", MISSING_HEADER_CONTENT)
        if isinstance(content, MediaSource):
            content.validate_source(f"interactive.header.{self.type}")


class InteractiveText(BaseModel):
    text: str


class ButtonReplyContent(BaseModel):
    id: str
    title: str


class ReplyButton(BaseModel):
    type: Literal["reply"] = "reply"
    reply: ButtonReplyContent

    @classmethod
    def of(cls, id: str, title: str) -> "ReplyButton":
        return cls(reply = ButtonReplyContent(id = id, title = title))


class ButtonAction(BaseModel):
    kind: Literal["button"] = Field(default = "button", exclude = True)
    buttons: list[ReplyButton]

    def validate_action(self):
        if not 1 <= len(self.buttons) <= MAX_REPLY_BUTTONS:
            raise ValidationError(
                "interactive.action.buttons",
                f"button count must be 1..{MAX_REPLY_BUTTONS}, got {len(self.buttons)}",
                INVALID_BUTTON_COUNT,
            )
        for index, button in enumerate(self.buttons):
            if not button.reply.id or not button.reply.title:
                field = f"interactive.action.buttons[{index}]"
                raise ValidationError(field, "button needs an id and a title", MISSING_BUTTON_FIELDS)


class ListRow(BaseModel):
    id: str
    title: str
    description: str | None = None


class ListSection(BaseModel):
    title: str | None = None
    rows: list[ListRow] = []


class ListAction(BaseModel):
    kind: Literal["list"] = Field(default = "list", exclude = True)
    button: str
    sections: list[ListSection]

    def validate_action(self):
        if not self.button:
            raise ValidationError("interactive.action.button", "list button text must not be empty", MISSING_LIST_BUTTON_TEXT)
        if not self.sections:
            raise ValidationError("interactive.action.sections", "at least one list section is required", MISSING_LIST_SECTIONS)
        for index, section in enumerate(self.sections):
            if not section.rows:
                field = f"interactive.action.sections[{index}].rows"
                raise ValidationError(field, "each list section needs at least one row", EMPTY_LIST_SECTION)


class CTAURLParameters(BaseModel):
    display_text: str
    url: str


class CTAURLAction(BaseModel):
    kind: Literal["cta_url"] = Field(default = "cta_url", exclude = True)
    name: Literal["cta_url"] = "cta_url"
    parameters: CTAURLParameters

    def validate_action(self):
        if not self.parameters.display_text:
            raise ValidationError("interactive.action.parameters.display_text", "must not be empty", MISSING_CTA_FIELDS)
        if not self.parameters.url:
            raise ValidationError("interactive.action.parameters.url", "must not be empty", MISSING_CTA_FIELDS)


class ProductAction(BaseModel):
    kind: Literal["product"] = Field(default = "product", exclude = True)
    catalog_id: str
    product_retailer_id: str

    def validate_action(self):
        if not self.catalog_id or not self.product_retailer_id:
            field = "interactive.action.product_retailer_id"
            raise ValidationError(field, "catalog and product IDs are required", MISSING_PRODUCT_FIELDS)


class ProductItem(BaseModel):
    product_retailer_id: str


class ProductSection(BaseModel):
    title: str | None = None
    product_items: list[ProductItem] = []


class ProductListAction(BaseModel):
    kind: Literal["product_list"] = Field(default = "product_list", exclude = True)
    catalog_id: str
    sections: list[ProductSection]

    def validate_action(self):
        if not self.catalog_id:
            raise ValidationError("interactive.action.catalog_id", "must not be empty", MISSING_PRODUCT_FIELDS)
        if not self.sections:
            raise ValidationError("interactive.action.sections", "at least one product section is required", MISSING_LIST_SECTIONS)
        for index, section in enumerate(self.sections):
            if not section.product_items:
                field = f"interactive.action.sections[{index}].product_items"
                raise ValidationError(field, "each product section needs at least one item", EMPTY_LIST_SECTION)


class FlowParameters(BaseModel):
    flow_message_version: str = "3"
    flow_id: str
    flow_cta: str
    flow_token: str | None = None
    flow_action: Literal["navigate", "data_exchange"] | None = None
    flow_action_payload: dict[str, Any] | None = None
    mode: Literal["draft", "published"] | None = None


class FlowAction(BaseModel):
    kind: Literal["flow"] = Field(default = "flow", exclude = True)
    name: Literal["flow"] = "flow"
    parameters: FlowParameters

    def validate_action(self):
        if not self.parameters.flow_id or not self.parameters.flow_cta:
            raise ValidationError("interactive.action.parameters", "flow ID and CTA text are required", MISSING_FLOW_FIELDS)


InteractiveAction = Annotated[
    ButtonAction | ListAction | CTAURLAction | ProductAction | ProductListAction | FlowAction,
    Field(discriminator = "kind"),
]


class InteractiveContent(BaseModel):
    """
    Interactive message. Its interactive type is derived from the action it carries,
    so the two can never disagree on the wire.
    https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages#interactive-object
    """
    TYPE: ClassVar[str] = "interactive"

    action: InteractiveAction
    body: InteractiveText | None = None
    header: InteractiveHeader | None = None
    footer: InteractiveText | None = None

    @property
    def interactive_type(self) -> str:
        return self.action.kind

    def validate_content(self):
        # product messages may omit the body, every other kind needs one
        if self.interactive_type != "product" and not (self.body and self.body.text):
            raise ValidationError("interactive.body.text", "body must not be empty", MISSING_INTERACTIVE_BODY)
        if self.header:
            self.header.validate_header()
        self.action.validate_action()

    def to_wire(self) -> dict[str, Any]:
        return {"type": self.interactive_type, **self.model_dump(exclude_none = True)}
