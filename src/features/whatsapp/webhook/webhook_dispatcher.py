import dataclasses
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable

from features.whatsapp.model.message import Message
from features.whatsapp.model.status import Status
from features.whatsapp.model.update import Update
from features.whatsapp.model.value import Value
from features.whatsapp.webhook.event_handlers import EventHandlers
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
from util.error_codes import DISPATCHER_SHUT_DOWN
from util.errors import WebhookError
from util.log import Logger

MESSAGES_FIELD = "messages"


class WebhookDispatcher:
    """
    Turns decoded webhook deliveries into typed events and routes them to the registered handlers.

    Every delivery is processed against a single snapshot of the handler table, taken when its
    dispatch starts. Deliveries submitted through `submit` run on a bounded worker pool owned by
    the dispatcher; order is kept within a delivery, never across deliveries.
    """
    __log: Logger
    __handlers: EventHandlers
    __handlers_lock: threading.Lock
    __executor: ThreadPoolExecutor
    __in_flight: set[Future]
    __in_flight_lock: threading.Lock
    __is_shut_down: threading.Event

    def __init__(self, log: Logger, handlers: EventHandlers | None = None, max_workers: int = 8):
        self.__log = log
        self.__handlers = handlers or EventHandlers()
        self.__handlers_lock = threading.Lock()
        self.__executor = ThreadPoolExecutor(max_workers = max_workers, thread_name_prefix = "webhook-dispatch")
        self.__in_flight = set()
        self.__in_flight_lock = threading.Lock()
        self.__is_shut_down = threading.Event()

    @property
    def handlers(self) -> EventHandlers:
        with self.__handlers_lock:
            return self.__handlers

    def set_handlers(self, handlers: EventHandlers):
        with self.__handlers_lock:
            self.__handlers = handlers

    def update_handlers(self, **changes: Callable[[Any], None] | None) -> EventHandlers:
        with self.__handlers_lock:
            self.__handlers = dataclasses.replace(self.__handlers, **changes)
            return self.__handlers

    @property
    def in_flight_count(self) -> int:
        with self.__in_flight_lock:
            return len(self.__in_flight)

    def submit(self, update: Update) -> Future:
        if self.__is_shut_down.is_set():
            raise WebhookError("Dispatcher is shut down", DISPATCHER_SHUT_DOWN, http_status = 503)
        try:
            future = self.__executor.submit(self.dispatch, update)
        except RuntimeError as e:
            raise WebhookError("Dispatcher is shut down", DISPATCHER_SHUT_DOWN, http_status = 503) from e
        with self.__in_flight_lock:
            self.__in_flight.add(future)
        future.add_done_callback(self.__on_dispatch_done)
        return future

    def drain(self, timeout_s: float | None = None) -> bool:
        with self.__in_flight_lock:
            pending = set(self.__in_flight)
        if not pending:
            return True
        self.__log.d(f"Draining {len(pending)} in-flight webhook dispatches")
        _, not_done = wait(pending, timeout = timeout_s)
        if not_done:
            self.__log.w(f"{len(not_done)} webhook dispatches still running after {timeout_s}s")
        return not not_done

    def shutdown(self, timeout_s: float | None = None) -> bool:
        self.__is_shut_down.set()
        drained = self.drain(timeout_s)
        self.__executor.shutdown(wait = False)
        self.__log.i("Webhook dispatcher shut down")
        return drained

    def dispatch(self, update: Update):
        handlers = self.handlers
        self.__invoke("on_raw", handlers.on_raw, update)
        for entry in update.entry:
            self.__log.t(f"Processing entry #{entry.id}")
            for change in entry.changes:
                if change.field != MESSAGES_FIELD:
                    self.__log.t(f"  Skipping change of field '{change.field}'")
                    continue
                self.__process_value(handlers, change.value)

    def __process_value(self, handlers: EventHandlers, value: Value):
        for message in value.messages or []:
            self.__process_message(handlers, value, message)
        for status in value.statuses or []:
            self.__process_status(handlers, value, status)
        for error in value.errors or []:
            self.__invoke("on_error", handlers.on_error, WebhookErrorEvent(error = error, metadata = value.metadata))

    def __process_message(self, handlers: EventHandlers, value: Value, message: Message):
        self.__log.t(f"  Processing '{message.type}' message #{message.id}")
        contact = value.find_contact(message.from_)
        base: dict[str, Any] = {
            "message_id": message.id,
            "from_": message.from_,
            "contact_name": contact.display_name if contact else "",
            "timestamp": message.timestamp,
            "phone_number": value.metadata.display_phone_number,
            "phone_id": value.metadata.phone_number_id,
            "context": message.context,
        }
        match message.type:
            case "text" if message.text:
                self.__invoke("on_text", handlers.on_text, TextEvent(**base, body = message.text.body))
            case "image" | "video" | "audio" | "sticker":
                media = message.content
                handler = getattr(handlers, f"on_{message.type}")
                if media and handler:
                    event = MediaEvent(
                        **base,
                        media_id = media.id,
                        mime_type = media.mime_type,
                        sha256 = media.sha256,
                        caption = media.caption if message.type in ("image", "video") else None,
                    )
                    self.__invoke(f"on_{message.type}", handler, event)
            case "document" if message.document:
                document = message.document
                event = DocumentEvent(
                    **base,
                    media_id = document.id,
                    mime_type = document.mime_type,
                    sha256 = document.sha256,
                    caption = document.caption,
                    filename = document.filename,
                )
                self.__invoke("on_document", handlers.on_document, event)
            case "location" if message.location:
                location = message.location
                event = LocationEvent(
                    **base,
                    latitude = location.latitude,
                    longitude = location.longitude,
                    name = location.name,
                    address = location.address,
                )
                self.__invoke("on_location", handlers.on_location, event)
            case "contacts" if message.contacts:
                self.__invoke("on_contacts", handlers.on_contacts, ContactsEvent(**base, contacts = message.contacts))
            case "interactive" if message.interactive:
                self.__process_interactive(handlers, message, base)
            case "reaction" if message.reaction:
                reaction = message.reaction
                event = ReactionEvent(**base, reacted_message_id = reaction.message_id, emoji = reaction.emoji or "")
                self.__invoke("on_reaction", handlers.on_reaction, event)
            case "button" if message.button:
                button = message.button
                event = TemplateButtonEvent(**base, text = button.text, payload = button.payload)
                self.__invoke("on_template_button", handlers.on_template_button, event)
            case _:
                self.__log.t(f"  Nothing to dispatch for '{message.type}' message #{message.id}")

    def __process_interactive(self, handlers: EventHandlers, message: Message, base: dict[str, Any]):
        interactive = message.interactive
        if interactive.type == "button_reply" and interactive.button_reply:
            reply = interactive.button_reply
            event = ButtonReplyEvent(**base, button_id = reply.id, button_title = reply.title)
            self.__invoke("on_button_reply", handlers.on_button_reply, event)
        elif interactive.type == "list_reply" and interactive.list_reply:
            reply = interactive.list_reply
            event = ListReplyEvent(
                **base,
                row_id = reply.id,
                row_title = reply.title,
                row_description = reply.description,
            )
            self.__invoke("on_list_reply", handlers.on_list_reply, event)
        else:
            self.__log.t(f"  Nothing to dispatch for '{interactive.type}' interactive message #{message.id}")

    def __process_status(self, handlers: EventHandlers, value: Value, status: Status):
        self.__log.t(f"  Processing '{status.status}' status of message #{status.id}")
        conversation = status.conversation
        pricing = status.pricing
        event = StatusEvent(
            message_id = status.id,
            status = status.status,
            timestamp = status.timestamp,
            recipient_id = status.recipient_id,
            phone_number = value.metadata.display_phone_number,
            phone_id = value.metadata.phone_number_id,
            conversation_id = conversation.id if conversation else None,
            conversation_type = conversation.origin.type if conversation and conversation.origin else None,
            billable = pricing.billable if pricing else None,
            pricing_category = pricing.category if pricing else None,
            errors = (status.errors or []) if status.status == "failed" else [],
        )
        match status.status:
            case "sent":
                self.__invoke("on_status_sent", handlers.on_status_sent, event)
            case "delivered":
                self.__invoke("on_status_delivered", handlers.on_status_delivered, event)
            case "read":
                self.__invoke("on_status_read", handlers.on_status_read, event)
            case "failed":
                self.__invoke("on_status_failed", handlers.on_status_failed, event)
            case _:
                self.__log.t(f"  Nothing to dispatch for status '{status.status}'")

    def __invoke(self, name: str, handler: Callable[[Any], None] | None, event: Any):
        if handler is None:
            return
        try:
            handler(event)
        except Exception as e:
            # handler failures stay isolated to this invocation
            self.__log.e(f"Webhook handler '{name}' failed", e)

    def __on_dispatch_done(self, future: Future):
        with self.__in_flight_lock:
            self.__in_flight.discard(future)
        if not future.cancelled() and (error := future.exception()):
            self.__log.e("Webhook dispatch failed", error)
