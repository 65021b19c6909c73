"""
hashmap core
============
Self-authenticating, time-bounded message payloads for hashmap content stores.

Provides:
- Envelope canonical encoding
- Ed25519 signing / verification (NaCl 64-byte secret key layout)
- Payload façade for generate / validate / import and content-store get / post
"""

from .envelope import Envelope
from .errors import (
    ErrorKind,
    HashmapError,
    InvalidKeyLength,
    InvalidTTL,
    MalformedEnvelope,
    MessageTooLarge,
    MissingConfiguration,
    NotValidated,
    PayloadTooLarge,
    SignatureVerificationFailed,
)
from .config import PayloadConfig, load_config
from .payload import Payload, PayloadState, WirePayload

__all__ = [
    "Envelope",
    "ErrorKind",
    "HashmapError",
    "InvalidKeyLength",
    "InvalidTTL",
    "MalformedEnvelope",
    "MessageTooLarge",
    "MissingConfiguration",
    "NotValidated",
    "PayloadTooLarge",
    "SignatureVerificationFailed",
    "PayloadConfig",
    "load_config",
    "Payload",
    "PayloadState",
    "WirePayload",
]
