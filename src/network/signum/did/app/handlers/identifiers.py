import logging
from time import time
from urllib.parse import unquote

from aiohttp import hdrs, web
import sentry_sdk

from network.signum.did.app.config import (
    HealthGaugeAppKey,
    MetricsClientAppKey,
    ResolversAppKey,
    SettingsAppKey,
)
from network.signum.did.app.handlers.helpers import (
    NO_CACHE,
    cache_headers,
    http_status,
    negotiate_content_type,
)
from network.signum.did.model.did import ResolutionError, ResolutionResult
from network.signum.did.resolve.parser import DidParseError, parse_did

logger = logging.getLogger(__name__)


async def handle_resolve_identifier(request: web.Request):
    """Resolve a DID per the DID Resolution HTTP(S) binding.

    GET /1.0/identifiers/{did}
    """
    start_time = time()
    did = unquote(request.match_info.get("did", "")).strip()

    try:
        if not did:
            result = ResolutionResult.failed(
                ResolutionError.invalid_did, "DID parameter is required"
            )
        else:
            result = await _resolve(request, did)
    except Exception as e:
        logger.exception("Unexpected error resolving %s", did)
        sentry_sdk.capture_exception(e)
        result = ResolutionResult.failed(
            ResolutionError.internal_error, str(e) or type(e).__name__
        )

    settings = request.app[SettingsAppKey]
    status = http_status(result.error)
    content_type = negotiate_content_type(request.headers.get(hdrs.ACCEPT))

    if result.error == ResolutionError.internal_error:
        await request.app[HealthGaugeAppKey].record_failure()

    request.app[MetricsClientAppKey].increment(
        "resolve.count",
        1,
        tag_dict={
            "status": status,
            "error": result.error.value if result.error else "none",
        },
    )

    logger.info(
        "Resolved %s - Status: %d - Duration: %dms",
        did,
        status,
        int((time() - start_time) * 1000),
    )

    return web.json_response(
        result.to_dict(),
        status=status,
        content_type=content_type,
        headers=cache_headers(settings, result, status),
    )


async def _resolve(request: web.Request, did: str) -> ResolutionResult:
    # The network decides which node answers, so parse before resolving
    try:
        parsed = parse_did(did)
    except DidParseError as e:
        logger.info("Invalid DID %s: %s", did, e.message)
        return ResolutionResult.failed(ResolutionError.invalid_did, e.message)

    resolver = request.app[ResolversAppKey][parsed.network]
    return await resolver.resolve(parsed.did)


async def handle_resolve_options(request: web.Request):
    return web.Response(status=200, headers={"Cache-Control": NO_CACHE})
