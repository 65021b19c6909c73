from __future__ import annotations
from typing import Any, Dict
import json

WireJSON = Dict[str, str]


class TransportError(Exception):
    pass


class TransportTransientError(TransportError):
    pass


class TransportPermanentError(TransportError):
    pass


class BaseContentStore:
    """
    Content-store contract used by Payload.get() / Payload.post().

    Stores are stateless with respect to configuration: the endpoint is passed
    on every call. The store, not the caller, assigns content addresses.
    Timeouts and retries are the store's concern.
    """
    name: str = "base"

    def fetch(self, endpoint: str, content_address: str) -> WireJSON:
        raise NotImplementedError

    def submit(self, endpoint: str, payload: WireJSON) -> Any:
        raise NotImplementedError

    @staticmethod
    def to_bytes(payload: bytes | dict) -> bytes:
        if isinstance(payload, bytes):
            return payload
        return json.dumps(payload, separators=(",", ":")).encode("utf-8")
