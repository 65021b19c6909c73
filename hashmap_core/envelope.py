"""
hashmap_core.envelope
---------------------
Defines the Envelope, the signed content of every hashmap payload, and its
codec.

Key features:
- Reproducible byte encoding: fixed field order, no whitespace
- Message bytes carried as base64 inside the envelope
- Strict decoding: a missing or mistyped field never yields a partial Envelope

The signature is computed over the exact bytes produced by ``encode``; the
receiving side verifies those bytes as received and never re-serializes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import json

from .constants import SIG_METHOD, PROTOCOL_VERSION, DEFAULT_TTL, MAX_TTL, MIN_TTL
from .errors import InvalidTTL, MalformedEnvelope
from .utils import b64e, try_b64d, compact_json, now_ns

NS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class Envelope:
    message: bytes
    timestamp: int = field(default_factory=now_ns)  # nanoseconds, opaque counter
    ttl: int = DEFAULT_TTL                           # seconds
    sig_method: str = SIG_METHOD
    version: str = PROTOCOL_VERSION

    def to_dict(self) -> Dict[str, Any]:
        # Field order is significant: it is the order of the signed bytes.
        return {
            "message": b64e(self.message),
            "timestamp": self.timestamp,
            "sigMethod": self.sig_method,
            "version": self.version,
            "ttl": self.ttl,
        }

    def to_bytes(self) -> bytes:
        return compact_json(self.to_dict())

    def expires_at_ns(self) -> int:
        return self.timestamp + self.ttl * NS_PER_SECOND

    def is_expired(self, now: Optional[int] = None) -> bool:
        """Informational only; validation does not enforce expiry."""
        if now is None:
            now = now_ns()
        return now >= self.expires_at_ns()

    @classmethod
    def from_dict(cls, data: Any) -> "Envelope":
        if not isinstance(data, dict):
            raise MalformedEnvelope("envelope must be a JSON object")

        message = try_b64d(data.get("message"))
        if message is None:
            raise MalformedEnvelope("envelope field 'message' must be a base64 string")

        for name in ("timestamp", "ttl"):
            if not _is_int(data.get(name)):
                raise MalformedEnvelope(f"envelope field '{name}' must be an integer")

        for name in ("sigMethod", "version"):
            if not isinstance(data.get(name), str):
                raise MalformedEnvelope(f"envelope field '{name}' must be a string")

        return cls(
            message=message,
            timestamp=data["timestamp"],
            ttl=data["ttl"],
            sig_method=data["sigMethod"],
            version=data["version"],
        )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_ttl(ttl: Any) -> int:
    if not _is_int(ttl) or ttl < MIN_TTL or ttl > MAX_TTL:
        raise InvalidTTL(f"ttl must be an integer in [{MIN_TTL}, {MAX_TTL}], got {ttl!r}")
    return ttl


def encode(message: bytes, ttl: int = DEFAULT_TTL, timestamp: Optional[int] = None) -> bytes:
    """Serialize a new envelope to its canonical bytes."""
    check_ttl(ttl)
    if timestamp is None:
        timestamp = now_ns()
    elif not _is_int(timestamp):
        raise MalformedEnvelope(f"timestamp must be an integer, got {timestamp!r}")
    return Envelope(message=bytes(message), timestamp=timestamp, ttl=ttl).to_bytes()


def decode(raw: bytes) -> Envelope:
    try:
        data = json.loads(raw)
    except (ValueError, TypeError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise MalformedEnvelope(f"envelope is not valid JSON: {e}") from e
    return Envelope.from_dict(data)
