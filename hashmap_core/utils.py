"""
hashmap_core.utils
------------------
Lightweight helpers for base64 fields, nanosecond timestamps and compact JSON.
The compact JSON form matches JSON.stringify output, so envelopes produced here
are byte-compatible with the existing JavaScript signers.
"""

from __future__ import annotations
import base64, json, time
from typing import Any, Dict


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s: str) -> bytes:
    # strict: reject characters outside the standard alphabet
    return base64.b64decode(s.encode("ascii"), validate=True)


def try_b64d(s: Any) -> bytes | None:
    """Decode a base64 string, returning None for anything that is not one."""
    if not isinstance(s, str):
        return None
    try:
        return b64d(s)
    except ValueError:  # binascii.Error, UnicodeEncodeError
        return None


def now_ns() -> int:
    return time.time_ns()


def compact_json(obj: Dict[str, Any]) -> bytes:
    # Insertion-ordered, no whitespace; key order is part of the signed bytes
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=True).encode("ascii")
