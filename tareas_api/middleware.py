"""Permissive CORS handling applied to every route."""

import logging

from fastapi import Request, Response, status

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_middleware(request: Request, call_next):
    """Add CORS headers to every response and answer preflight requests.

    ``OPTIONS`` requests get an empty 200 without reaching the router, so
    they work for any path and never touch the store.
    """
    if request.method == "OPTIONS":
        logger.debug(f"Preflight request for {request.url.path}")
        response = Response(status_code=status.HTTP_200_OK)
    else:
        response = await call_next(request)

    response.headers.update(CORS_HEADERS)
    return response
