from __future__ import annotations

import copy
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

import httpx
from pydantic import ValidationError

from . import transport as _transport
from .actions import PotentialAction, view_action
from .config import Settings, get_settings
from .errors import TeamsConfigError, TeamsException
from .json_utils import dumps_payload
from .section import CardSection

RED_HEX = "E81123"

# Background sends for send_async(); threads are created lazily by the pool.
_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="teams-send")


def _require_url(url: str | None) -> str:
    if not url:
        raise TeamsConfigError("webhook url cannot be empty")
    return url


class ConnectorCard:
    """Root MessageCard builder bound to one incoming webhook.

    Builder calls mutate ``payload`` and return the card for chaining.
    ``send()`` posts the payload once and never retries.
    """

    def __init__(
        self,
        hookurl: str,
        http_proxy: str | None = None,
        https_proxy: str | None = None,
        http_timeout: float = 60,
        verify: bool = True,
        *,
        transport: Any = None,
        error_body_max_chars: int = _transport.DEFAULT_ERROR_BODY_MAX_CHARS,
    ):
        self.hookurl = _require_url(hookurl)
        self.payload: dict[str, Any] = {
            "@type": "MessageCard",
            "@context": "https://schema.org/extensions",
        }
        self.proxies: dict[str, str] | None = None
        # Empty strings mean "no proxy", same as an unset variable
        if http_proxy or https_proxy:
            self.proxies = {}
            if http_proxy:
                self.proxies["http"] = http_proxy
            if https_proxy:
                self.proxies["https"] = https_proxy
        self.http_timeout = http_timeout
        self.verify = verify
        self.transport = transport
        self.error_body_max_chars = error_body_max_chars
        self.last_http_response: httpx.Response | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> ConnectorCard:
        if settings is None:
            try:
                settings = get_settings()
            except ValidationError as e:
                raise TeamsConfigError(f"invalid TEAMS_* environment settings: {e}") from e
        return cls(
            _require_url(settings.teams_webhook_url),
            http_proxy=settings.teams_http_proxy,
            https_proxy=settings.teams_https_proxy,
            http_timeout=settings.teams_http_timeout_seconds,
            verify=settings.teams_verify_tls,
            error_body_max_chars=settings.teams_error_body_max_chars,
            **kwargs,
        )

    def text(self, text: str) -> ConnectorCard:
        self.payload["text"] = text
        return self

    def title(self, title: str) -> ConnectorCard:
        self.payload["title"] = title
        return self

    def summary(self, summary: str) -> ConnectorCard:
        self.payload["summary"] = summary
        return self

    def color(self, color: str) -> ConnectorCard:
        if color.lower() == "red":
            self.payload["themeColor"] = RED_HEX
        elif color.startswith("#"):
            self.payload["themeColor"] = color[1:]
        else:
            self.payload["themeColor"] = color
        return self

    def add_link_button(self, text: str, url: str) -> ConnectorCard:
        # Appends, unlike CardSection.link_button which keeps a single button.
        self.payload.setdefault("potentialAction", []).append(view_action(text, url))
        return self

    def new_hook_url(self, hookurl: str) -> ConnectorCard:
        self.hookurl = _require_url(hookurl)
        return self

    def add_section(self, section: CardSection) -> ConnectorCard:
        self.payload.setdefault("sections", []).append(copy.deepcopy(section.dump()))
        return self

    def add_potential_action(self, action: PotentialAction) -> ConnectorCard:
        self.payload.setdefault("potentialAction", []).append(copy.deepcopy(action.dump()))
        return self

    def dump(self) -> dict[str, Any]:
        return self.payload

    def print(self) -> None:
        print(f"Webhook URL: {self.hookurl}")
        print("Payload:")
        print(dumps_payload(self.payload, pretty=True))

    def _body(self) -> bytes:
        return dumps_payload(self.payload).encode("utf-8")

    def send(self) -> bool:
        """Post the card. True on 2xx; every failure raises TeamsException."""
        try:
            r = _transport.post_json(
                self.hookurl,
                self._body(),
                timeout=self.http_timeout,
                verify=self.verify,
                proxies=self.proxies,
                transport=self.transport,
                error_body_max_chars=self.error_body_max_chars,
            )
        except TeamsException as e:
            self.last_http_response = e.response
            raise
        self.last_http_response = r
        return 200 <= r.status_code < 300

    def send_async(self) -> Future[bool]:
        """Run send() in the background; the future yields its bool or raises its TeamsException."""
        return _executor.submit(self.send)

    async def asend(self) -> bool:
        try:
            r = await _transport.apost_json(
                self.hookurl,
                self._body(),
                timeout=self.http_timeout,
                verify=self.verify,
                proxies=self.proxies,
                transport=self.transport,
                error_body_max_chars=self.error_body_max_chars,
            )
        except TeamsException as e:
            self.last_http_response = e.response
            raise
        self.last_http_response = r
        return 200 <= r.status_code < 300


def create_card(hookurl: str, **kwargs: Any) -> ConnectorCard:
    return ConnectorCard(hookurl, **kwargs)
