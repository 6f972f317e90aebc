"""
HTTP transport for rewards requests.

Non-blocking, single attempt. Transport failures (connect, DNS, TLS,
timeout) come back as a UrlResponse with status_code 0 instead of raising.
"""

import logging
from enum import Enum
from typing import Optional

import httpx

from ..models import UrlRequest, UrlResponse

logger = logging.getLogger("url_loader")

REDACTED_HEADERS = {"signature", "authorization"}


class LogLevel(Enum):
    NONE = 0
    BASIC = 1
    DETAILED = 2


def _redact(headers: dict[str, str]) -> dict[str, str]:
    return {k: ("<redacted>" if k.lower() in REDACTED_HEADERS else v) for k, v in headers.items()}


class URLLoader:
    """
    Sends UrlRequests through httpx.

    Pass an existing AsyncClient to share a connection pool (or a mock
    transport in tests); otherwise a client is opened per request.
    """

    def __init__(self, timeout: float = 30.0, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self._client = client

    async def load(self, request: UrlRequest, log_level: LogLevel = LogLevel.BASIC) -> UrlResponse:
        """
        Send the request and wait for the response.

        Args:
            request: The request to send, signature headers already applied
            log_level: How much of the exchange to write to the log

        Returns:
            UrlResponse; status_code is 0 if no response was received
        """
        headers = dict(request.headers)
        if request.content_type:
            headers["Content-Type"] = request.content_type

        self._log_request(request, headers, log_level)

        try:
            if self._client is not None:
                response = await self._send(self._client, request, headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._send(client, request, headers)

        except httpx.TimeoutException:
            error_msg = "Request timed out"
            logger.error(f"{request.method.value} {request.url}: {error_msg}")
            return UrlResponse(url=request.url, status_code=0, error=error_msg)

        except httpx.HTTPError as e:
            error_msg = f"{type(e).__name__}: {e}"
            logger.error(f"{request.method.value} {request.url}: {error_msg}")
            return UrlResponse(url=request.url, status_code=0, error=error_msg)

        result = UrlResponse(
            url=str(response.url),
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
        self._log_response(result, log_level)
        return result

    async def _send(self, client: httpx.AsyncClient, request: UrlRequest, headers: dict[str, str]) -> httpx.Response:
        return await client.request(
            request.method.value,
            request.url,
            headers=headers,
            content=request.content.encode("utf-8") if request.content else None,
        )

    @staticmethod
    def _log_request(request: UrlRequest, headers: dict[str, str], log_level: LogLevel):
        if log_level == LogLevel.NONE:
            return
        logger.info(f"> {request.method.value} {request.url}")
        if log_level == LogLevel.DETAILED:
            logger.debug(f"> headers: {_redact(headers)}")
            if request.content:
                logger.debug(f"> body: {request.content}")

    @staticmethod
    def _log_response(response: UrlResponse, log_level: LogLevel):
        if log_level == LogLevel.NONE:
            return
        logger.info(f"< {response.status_code} {response.url}")
        if log_level == LogLevel.DETAILED and response.body:
            logger.debug(f"< body: {response.body}")
