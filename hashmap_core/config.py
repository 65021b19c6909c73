# hashmap_core/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os

from .constants import DEFAULT_TTL
from .envelope import check_ttl

DEFAULT_TIMEOUT = 5.0


@dataclass(frozen=True)
class PayloadConfig:
    """
    Per-instance settings for a Payload.

    endpoint: base URL of the content store
    content_address: store-assigned identifier used by get()
    ttl: default ttl (seconds) for generate()
    timeout: seconds allowed for each content-store request
    """
    endpoint: Optional[str] = None
    content_address: Optional[str] = None
    ttl: int = DEFAULT_TTL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        check_ttl(self.ttl)


def load_config(config: dict | None = None) -> PayloadConfig:
    """
    Resolve a PayloadConfig from an explicit dict, falling back to
    HASHMAP_ENDPOINT, HASHMAP_CONTENT_ADDRESS, HASHMAP_TTL and HASHMAP_TIMEOUT.
    """
    config = config or {}
    ttl = config.get("ttl") or _env_number("HASHMAP_TTL", int) or DEFAULT_TTL
    timeout = config.get("timeout") or _env_number("HASHMAP_TIMEOUT", float) or DEFAULT_TIMEOUT

    return PayloadConfig(
        endpoint=config.get("endpoint") or os.getenv("HASHMAP_ENDPOINT"),
        content_address=config.get("content_address") or os.getenv("HASHMAP_CONTENT_ADDRESS"),
        ttl=ttl,
        timeout=timeout,
    )


def _env_number(var: str, cast):
    # only environment strings are converted; dict values go to PayloadConfig as-is
    raw = os.getenv(var)
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"Invalid numeric setting {var}={raw!r}") from e
