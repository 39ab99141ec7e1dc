import logging
from typing import Any, AsyncIterator

import httpx

from create_user_signup.signup.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["HTTP"])

SENSITIVE_HEADERS: set[str] = {"authorization", "cookie"}


def mask_headers(headers: httpx.Headers) -> dict[str, str]:
    """Return the headers with credentials replaced so they are safe to log."""
    masked: dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            scheme, _, credential = value.partition(" ")
            masked[key] = f"{scheme} ***" if credential else "***"
        else:
            masked[key] = value
    return masked


class LogResponse(httpx.Response):
    async def aiter_bytes(self, *args: Any, **kwargs: Any) -> AsyncIterator[bytes]:
        logger.debug(
            f"====== Response: {self.request.method} {self.url} {self.status_code} ====="
        )
        async for chunk in super().aiter_bytes(*args, **kwargs):
            logger.debug(chunk)
            yield chunk
        logger.debug(
            f"====== End Response: {self.request.method} {self.url} {self.status_code} ====="
        )


class LoggingTransport(httpx.AsyncBaseTransport):
    def __init__(self, transport: httpx.AsyncBaseTransport) -> None:
        self.transport = transport

    async def handle_async_request(self, request: httpx.Request) -> LogResponse:
        logger.debug(f" ====== Request: {request.method} {request.url} =====")
        logger.debug(f"Headers: {mask_headers(request.headers)}")
        # request bodies carry the password so only their size is logged
        if request.content:
            logger.debug(f"Content length: {len(request.content)} bytes")

        response = await self.transport.handle_async_request(request)

        return LogResponse(
            status_code=response.status_code,
            headers=response.headers,
            stream=response.stream,
            extensions=response.extensions,
        )

    async def aclose(self) -> None:
        await self.transport.aclose()
