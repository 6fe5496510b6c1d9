from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlsplit

import httpx

from .errors import TeamsException
from .text_utils import truncate

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}
DEFAULT_ERROR_BODY_MAX_CHARS = 2000


def redact_url(url: str) -> str:
    """Scheme and host only; webhook paths carry the connector secret."""
    parts = urlsplit(url)
    if not parts.netloc:
        return "<invalid url>"
    return f"{parts.scheme}://{parts.netloc}/..."


def client_kwargs(
    *,
    timeout: float,
    verify: bool,
    proxies: dict[str, str] | None = None,
    transport: Any = None,
    use_async: bool = False,
) -> dict[str, Any]:
    """Keyword arguments for httpx.Client / httpx.AsyncClient.

    Retries stay at 0: a card is posted at most once per call.
    """
    transport_cls = httpx.AsyncHTTPTransport if use_async else httpx.HTTPTransport
    kwargs: dict[str, Any] = {"timeout": timeout, "follow_redirects": False}
    if transport is not None:
        kwargs["transport"] = transport
        return kwargs

    kwargs["transport"] = transport_cls(verify=verify, retries=0)
    if proxies:
        kwargs["mounts"] = {
            f"{scheme}://": transport_cls(proxy=proxy_url, verify=verify, retries=0)
            for scheme, proxy_url in proxies.items()
        }
    return kwargs


def translate_error(exc: Exception, timeout: float) -> TeamsException:
    # ConnectTimeout is a TimeoutException, so timeouts are matched first
    if isinstance(exc, httpx.TimeoutException):
        return TeamsException(f"Request timed out after {timeout:g} seconds")
    if isinstance(exc, httpx.ConnectError):
        return TeamsException("Connection failed: unable to reach webhook URL")
    return TeamsException(f"Unexpected error: {exc}")


def check_response(response: httpx.Response, *, error_body_max_chars: int) -> httpx.Response:
    status = response.status_code
    if 200 <= status < 300:
        logger.info("teams webhook accepted card (status=%s)", status)
        return response
    body = truncate(response.text, error_body_max_chars)
    err = TeamsException(f"HTTP {status}: {body}", status_code=status, response=response)
    logger.warning("teams webhook rejected card: %s", err)
    raise err


def post_json(
    url: str,
    body: bytes,
    *,
    timeout: float,
    verify: bool = True,
    proxies: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
    error_body_max_chars: int = DEFAULT_ERROR_BODY_MAX_CHARS,
) -> httpx.Response:
    """POST a JSON body once. Any non-2xx status or transport failure raises TeamsException."""

    logger.debug("posting %d bytes to teams webhook %s", len(body), redact_url(url))
    kwargs = client_kwargs(timeout=timeout, verify=verify, proxies=proxies, transport=transport)
    try:
        with httpx.Client(**kwargs) as client:
            r = client.post(url, content=body, headers=JSON_HEADERS)
    except Exception as exc:
        err = translate_error(exc, timeout)
        logger.warning("teams webhook delivery failed: %s", err)
        raise err from exc
    return check_response(r, error_body_max_chars=error_body_max_chars)


async def apost_json(
    url: str,
    body: bytes,
    *,
    timeout: float,
    verify: bool = True,
    proxies: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    error_body_max_chars: int = DEFAULT_ERROR_BODY_MAX_CHARS,
) -> httpx.Response:
    logger.debug("posting %d bytes to teams webhook %s", len(body), redact_url(url))
    kwargs = client_kwargs(timeout=timeout, verify=verify, proxies=proxies, transport=transport, use_async=True)
    try:
        async with httpx.AsyncClient(**kwargs) as client:
            r = await client.post(url, content=body, headers=JSON_HEADERS)
    except Exception as exc:
        err = translate_error(exc, timeout)
        logger.warning("teams webhook delivery failed: %s", err)
        raise err from exc
    return check_response(r, error_body_max_chars=error_body_max_chars)
