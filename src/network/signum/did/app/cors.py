from typing import Dict

from aiohttp import web


def get_cors_headers() -> Dict[str, str]:
    """CORS headers for the public, read-only resolution API."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": (
            "Accept, Keep-Alive, User-Agent, X-Requested-With, "
            "If-Modified-Since, Cache-Control, Content-Type"
        ),
    }


@web.middleware
async def cors_middleware(request: web.Request, handler):
    try:
        response = await handler(request)
    except web.HTTPException as e:
        e.headers.update(get_cors_headers())
        raise e
    response.headers.update(get_cors_headers())
    return response
