from typing import Dict, Optional

from network.signum.did.app.config import Settings
from network.signum.did.model.did import (
    DID_JSON,
    DID_LD_JSON,
    JSON,
    ResolutionError,
    ResolutionResult,
)

ERROR_STATUS: Dict[ResolutionError, int] = {
    ResolutionError.invalid_did: 400,
    ResolutionError.not_found: 404,
    ResolutionError.method_not_supported: 501,
    ResolutionError.representation_not_supported: 406,
}

NO_CACHE = "no-cache, no-store, must-revalidate"


def http_status(error: Optional[ResolutionError]) -> int:
    """Map a resolution error to the DID Resolution HTTP(S) binding status code."""
    if error is None:
        return 200
    return ERROR_STATUS.get(error, 500)


def negotiate_content_type(accept: Optional[str]) -> str:
    """Pick the response media type for an Accept header.

    Browsers (text/html or wildcard accepts) get plain JSON so they render it; API
    clients get the DID representation they ask for, JSON-LD by default.
    """
    if not accept:
        return DID_LD_JSON

    if "text/html" in accept or accept == "*/*" or accept.startswith("*/"):
        return JSON

    if DID_LD_JSON in accept:
        return DID_LD_JSON

    if DID_JSON in accept:
        return DID_JSON

    if JSON in accept:
        return JSON

    return DID_LD_JSON


def cache_headers(
    settings: Settings, result: ResolutionResult, status: int
) -> Dict[str, str]:
    """Cache directives for a resolution response.

    Immutable documents are cached for a long time, mutable ones briefly, and error
    responses never.
    """
    if status != 200:
        return {"Cache-Control": NO_CACHE}

    if result.did_document_metadata.immutable:
        max_age = settings.immutable_cache_max_age
        return {
            "Cache-Control": f"public, max-age={max_age}, immutable",
            "CDN-Cache-Control": f"public, max-age={max_age}",
        }

    return {
        "Cache-Control": (
            f"public, max-age={settings.mutable_cache_max_age}, "
            f"s-maxage={settings.mutable_cdn_max_age}"
        ),
        "CDN-Cache-Control": f"public, max-age={settings.mutable_cdn_max_age}",
    }
