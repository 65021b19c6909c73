# hashmap_core/transport/__init__.py
import os
from hashmap_core.transport.transport_base import (
    BaseContentStore,
    TransportError,
    TransportPermanentError,
    TransportTransientError,
)
from hashmap_core.transport.transport_http import HTTPContentStore
from hashmap_core.transport.transport_local import LocalContentStore


def transport_factory(timeout: float = 5.0) -> BaseContentStore:
    """
    HASHMAP_TRANSPORT:
      - "http"  → HTTPContentStore (default)
      - "local" → LocalContentStore
    """
    mode = os.getenv("HASHMAP_TRANSPORT", "http").lower()

    if mode == "http":
        return HTTPContentStore(timeout=timeout)

    if mode == "local":
        return LocalContentStore()

    raise ValueError(f"Unknown transport: {mode}")


__all__ = [
    "BaseContentStore",
    "HTTPContentStore",
    "LocalContentStore",
    "TransportError",
    "TransportPermanentError",
    "TransportTransientError",
    "transport_factory",
]
