"""Cloud Foundry connection settings loaded from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "yes", "1", "on"}
_FALSE_VALUES = {"false", "no", "0", "off", ""}


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _normalize_api_host(host: str) -> str:
    host = host.strip().rstrip("/")
    if host and "://" not in host:
        host = f"https://{host}"
    return host


@dataclass(frozen=True)
class CloudFoundrySettings:
    """Target foundation, credentials and client timing."""

    api_host: str
    username: Optional[str] = None
    password: Optional[str] = None
    organization: Optional[str] = None
    space: Optional[str] = None
    client_id: str = "cf"
    client_secret: str = ""
    skip_ssl_validation: bool = False
    http_timeout: float = 30.0
    poll_interval: float = 1.0
    operation_timeout: float = 300.0

    @property
    def is_configured(self) -> bool:
        """Whether enough is set to authenticate against the foundation."""
        return bool(self.api_host and self.username and self.password)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "CloudFoundrySettings":
        """Build settings from ``CF_*`` environment variables.

        Reads:
        - CF_API_HOST: Cloud Controller API host (``https://`` added if missing)
        - CF_USERNAME / CF_PASSWORD: UAA user credentials
        - CF_ORGANIZATION / CF_SPACE: Target org and space
        - CF_CLIENT_ID / CF_CLIENT_SECRET: UAA client (default ``cf`` / empty)
        - CF_SKIP_SSL_VALIDATION: Disable TLS verification (default false)
        - CF_HTTP_TIMEOUT: Per-request timeout in seconds (default 30)
        - CF_POLL_INTERVAL: Seconds between job/build polls (default 1)
        - CF_OPERATION_TIMEOUT: Max seconds to wait for a platform job (default 300)

        Raises:
            ValueError: If a boolean or numeric variable cannot be parsed
        """
        env = os.environ if env is None else env
        settings = cls(
            api_host=_normalize_api_host(env.get("CF_API_HOST", "")),
            username=env.get("CF_USERNAME") or None,
            password=env.get("CF_PASSWORD") or None,
            organization=env.get("CF_ORGANIZATION") or None,
            space=env.get("CF_SPACE") or None,
            client_id=env.get("CF_CLIENT_ID") or "cf",
            client_secret=env.get("CF_CLIENT_SECRET", ""),
            skip_ssl_validation=_env_bool(env, "CF_SKIP_SSL_VALIDATION", False),
            http_timeout=_env_float(env, "CF_HTTP_TIMEOUT", 30.0),
            poll_interval=_env_float(env, "CF_POLL_INTERVAL", 1.0),
            operation_timeout=_env_float(env, "CF_OPERATION_TIMEOUT", 300.0),
        )
        if not settings.is_configured:
            logger.warning(
                "Cloud Foundry target is not fully configured "
                "(CF_API_HOST, CF_USERNAME and CF_PASSWORD are required); "
                "platform calls will fail until it is"
            )
        return settings
