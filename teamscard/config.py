from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Incoming webhook provisioned by the Teams channel connector.
    # The URL embeds a secret token; never log it in full.
    teams_webhook_url: str | None = None

    # Transport defaults used by ConnectorCard.from_settings()
    teams_http_timeout_seconds: float = 60
    teams_verify_tls: bool = True  # set False only for intercepting proxies with private CAs
    teams_http_proxy: str | None = None  # e.g. http://proxy.local:3128
    teams_https_proxy: str | None = None

    # Upper bound on response body text embedded in delivery errors
    teams_error_body_max_chars: int = 2000


@lru_cache
def get_settings() -> Settings:
    # Read on first use only; importing the package never touches the environment.
    return Settings()
