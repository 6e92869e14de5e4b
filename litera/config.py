"""
Configuration - Environment-provided settings.

    LITERA_BACKEND_URL       Base address of the scoring service
    LITERA_REQUEST_TIMEOUT   Per-request timeout in seconds
    LITERA_LOG_LEVEL         Log level used by the CLI
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping
import os

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"LITERA_REQUEST_TIMEOUT must be a number, got {raw!r}")
    if timeout <= 0:
        raise ValueError(f"LITERA_REQUEST_TIMEOUT must be positive, got {raw!r}")
    return timeout


@dataclass(frozen=True)
class LiteraConfig:
    """
    Settings for one engine instance.

    The backend URL is treated as an opaque value; it is only handed to
    the HTTP client as its base address.
    """
    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LiteraConfig:
        """
        Build config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (for tests)
        """
        env = os.environ if environ is None else environ
        return cls(
            backend_url=env.get("LITERA_BACKEND_URL") or DEFAULT_BACKEND_URL,
            request_timeout=_parse_timeout(env.get("LITERA_REQUEST_TIMEOUT")),
            log_level=(env.get("LITERA_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
