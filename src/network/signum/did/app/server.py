import asyncio
import contextlib
import logging
from time import time
from typing import Optional

import aiohttp
from aiohttp import web
import sentry_sdk
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from network.signum.did.app.config import (
    HealthGaugeAppKey,
    MetricsClientAppKey,
    ResolversAppKey,
    SessionAppKey,
    Settings,
    SettingsAppKey,
    TickHealthTaskAppKey,
)
from network.signum.did.app.cors import cors_middleware
from network.signum.did.app.handlers.identifiers import (
    handle_resolve_identifier,
    handle_resolve_options,
)
from network.signum.did.app.handlers.internal import (
    handle_internal_alive,
    handle_internal_ready,
)
from network.signum.did.app.metrics import create_metrics_client
from network.signum.did.app.tasks import tick_health_task
from network.signum.did.ledger.client import SignumLedgerClient
from network.signum.did.model.did import Network
from network.signum.did.model.health import HealthGauge
from network.signum.did.resolve.resolver import SignumDidResolver

logger = logging.getLogger(__name__)


async def background_tasks(app):
    logger.info("Starting up")
    settings: Settings = app[SettingsAppKey]

    trace_config = aiohttp.TraceConfig()

    if settings.debug:

        async def on_request_start(
            session, trace_config_ctx, params: aiohttp.TraceRequestStartParams
        ):
            logging.info("Starting ledger request: %s", params)

        async def on_request_end(session, trace_config_ctx, params):
            logging.info("Ending ledger request: %s", params)

        trace_config.on_request_start.append(on_request_start)
        trace_config.on_request_end.append(on_request_end)

    session = aiohttp.ClientSession(trace_configs=[trace_config])
    app[SessionAppKey] = session

    timeout = aiohttp.ClientTimeout(total=settings.ledger_request_timeout)
    app[ResolversAppKey] = {
        network: SignumDidResolver(
            SignumLedgerClient(session, settings.node_for(network), timeout=timeout)
        )
        for network in Network
    }

    await app[MetricsClientAppKey].connect()

    logger.info("Startup complete")

    app[TickHealthTaskAppKey] = asyncio.create_task(tick_health_task(app))

    yield

    logger.info("Shutting down background tasks")

    app[TickHealthTaskAppKey].cancel()

    with contextlib.suppress(asyncio.exceptions.CancelledError):
        await app[TickHealthTaskAppKey]

    await app[SessionAppKey].close()
    await app[MetricsClientAppKey].close()


@web.middleware
async def sentry_middleware(request: web.Request, handler):
    try:
        response = await handler(request)
        return response
    except web.HTTPException:
        raise
    except Exception as e:
        sentry_sdk.capture_exception(e)
        raise e


@web.middleware
async def statsd_middleware(request: web.Request, handler):
    metrics_client = request.app[MetricsClientAppKey]
    request_method: str = request.method
    # Route templates keep the tag cardinality independent of the DIDs requested
    resource = request.match_info.route.resource
    request_path = resource.canonical if resource is not None else request.path

    start_time: float = time()
    response_status_code = 0

    try:
        response = await handler(request)
        response_status_code = response.status
        return response
    except Exception as e:
        metrics_client.increment(
            "server.request.exception",
            1,
            tag_dict={
                "exception": type(e).__name__,
                "path": request_path,
                "method": request_method,
            },
        )
        raise e
    finally:
        metrics_client.timer(
            "server.request.time",
            time() - start_time,
            tag_dict={"path": request_path, "method": request_method},
        )
        metrics_client.increment(
            "server.request.count",
            1,
            tag_dict={
                "path": request_path,
                "method": request_method,
                "status": response_status_code,
            },
        )


def add_routes(app: web.Application) -> None:
    app.add_routes(
        [
            web.get("/1.0/identifiers/{did}", handle_resolve_identifier),
            web.options("/1.0/identifiers/{did}", handle_resolve_options),
            web.get("/api/identifiers/{did}", handle_resolve_identifier),
            web.options("/api/identifiers/{did}", handle_resolve_options),
        ]
    )

    app.add_routes(
        [
            web.get("/internal/alive", handle_internal_alive),
            web.get("/internal/ready", handle_internal_ready),
        ]
    )


async def start_web_server(settings: Optional[Settings] = None):

    if settings is None:
        settings = Settings()  # type: ignore
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            integrations=[AioHttpIntegration()],
        )
    app = web.Application(
        middlewares=[statsd_middleware, sentry_middleware, cors_middleware]
    )

    app[SettingsAppKey] = settings
    app[HealthGaugeAppKey] = HealthGauge()
    app[MetricsClientAppKey] = create_metrics_client(
        settings.metrics_backend,
        host=settings.statsd_host,
        port=settings.statsd_port,
        prefix=settings.statsd_prefix,
        debug=settings.debug,
    )

    add_routes(app)

    app.cleanup_ctx.append(background_tasks)

    return app
