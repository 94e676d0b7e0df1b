import multiprocessing
import os
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Header, Query, Request
from starlette.responses import PlainTextResponse, Response

from di.di import DI
from features.whatsapp.webhook.event_handlers import EventHandlers
from util.errors import WebhookError
from util.functions import mask_secret


def create_app(di: DI | None = None, handlers: EventHandlers | None = None) -> FastAPI:
    di = di or DI(handlers = handlers)
    if handlers and di.webhook_dispatcher.handlers is not handlers:
        di.webhook_dispatcher.set_handlers(handlers)
    config, log = di.config, di.log

    # noinspection PyUnusedLocal
    @asynccontextmanager
    async def lifespan(owner: FastAPI):
        process_name = multiprocessing.current_process().name
        worker_type = "main" if process_name == "MainProcess" else "worker"
        worker_info = f"[{worker_type}-{os.getpid()}] {process_name}"
        log.i(f"Lifecycle: Starting up {worker_info}")
        config.validate_for_webhook()
        log.d(
            "Configuration loaded",
            f"Phone number ID: {config.phone_number_id}",
            f"API: {config.base_url}/{config.api_version}",
            f"Access token: {mask_secret(config.access_token)}",
            f"Signature validation: {config.webhook_validate_signature and config.has_app_secret}",
        )
        yield  # this holds the app alive until the server is shut down
        log.i(f"Lifecycle: Shutting down {worker_info}...")
        di.webhook_dispatcher.shutdown(config.webhook_drain_timeout_s)

    app = FastAPI(
        docs_url = None,
        redoc_url = None,
        title = "WhatsApp Cloud Bridge",
        description = "Receives WhatsApp Cloud API webhooks and dispatches them to handlers.",
        debug = config.log_level in ["local", "trace", "debug"],
        lifespan = lifespan,
    )
    app.state.di = di

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "in_flight": di.webhook_dispatcher.in_flight_count}

    @app.get(config.webhook_path)
    def verify_webhook(
        mode: str | None = Query(default = None, alias = "hub.mode"),
        token: str | None = Query(default = None, alias = "hub.verify_token"),
        challenge: str | None = Query(default = None, alias = "hub.challenge"),
    ) -> Response:
        try:
            return PlainTextResponse(di.webhook_receiver.verify(mode, token, challenge))
        except WebhookError as e:
            return Response(status_code = e.http_status)

    @app.post(config.webhook_path)
    async def receive_webhook(
        request: Request,
        signature: str | None = Header(default = None, alias = "X-Hub-Signature-256"),
    ) -> Response:
        body = await request.body()
        try:
            di.webhook_receiver.receive(body, signature)
        except WebhookError as e:
            log.d(f"Webhook delivery rejected: {e}")
            return Response(status_code = e.http_status)
        return Response(status_code = 200)

    return app


app = create_app()

if __name__ == "__main__":
    default_di: DI = app.state.di
    if "--dev" in sys.argv:  # when running locally...
        reload = True
        print("INFO:     Launching in dev mode...")
    else:
        reload = False
    log_level = default_di.config.log_level
    uvicorn.run(
        "main:app",
        host = default_di.config.webhook_host,
        port = default_di.config.webhook_port,
        log_level = "debug" if log_level in ("local", "trace") else log_level,
        workers = 1,  # the dispatcher pool lives in-process
        reload = reload,
    )
