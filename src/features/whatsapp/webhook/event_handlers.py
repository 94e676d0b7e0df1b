from dataclasses import dataclass
from typing import Callable

from features.whatsapp.model.update import Update
from features.whatsapp.webhook.events import (
    ButtonReplyEvent,
    ContactsEvent,
    DocumentEvent,
    ListReplyEvent,
    LocationEvent,
    MediaEvent,
    ReactionEvent,
    StatusEvent,
    TemplateButtonEvent,
    TextEvent,
    WebhookErrorEvent,
)


@dataclass(frozen = True)
class EventHandlers:
    """
    The callbacks a dispatcher routes events to. Unset callbacks are no-ops.
    Instances are immutable; to change handlers, install a new table on the dispatcher.
    """
    on_raw: Callable[[Update], None] | None = None
    on_text: Callable[[TextEvent], None] | None = None
    on_image: Callable[[MediaEvent], None] | None = None
    on_video: Callable[[MediaEvent], None] | None = None
    on_audio: Callable[[MediaEvent], None] | None = None
    on_sticker: Callable[[MediaEvent], None] | None = None
    on_document: Callable[[DocumentEvent], None] | None = None
    on_location: Callable[[LocationEvent], None] | None = None
    on_contacts: Callable[[ContactsEvent], None] | None = None
    on_button_reply: Callable[[ButtonReplyEvent], None] | None = None
    on_list_reply: Callable[[ListReplyEvent], None] | None = None
    on_reaction: Callable[[ReactionEvent], None] | None = None
    on_template_button: Callable[[TemplateButtonEvent], None] | None = None
    on_status_sent: Callable[[StatusEvent], None] | None = None
    on_status_delivered: Callable[[StatusEvent], None] | None = None
    on_status_read: Callable[[StatusEvent], None] | None = None
    on_status_failed: Callable[[StatusEvent], None] | None = None
    on_error: Callable[[WebhookErrorEvent], None] | None = None
