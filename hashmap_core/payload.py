"""
hashmap_core.payload
--------------------
Wire payload model and the Payload façade.

A wire payload is what gets stored and transmitted:

    {"data": "<base64>", "pubkey": "<base64>", "sig": "<base64>"}

``data`` is the encoded Envelope, ``sig`` a detached Ed25519 signature over
exactly those bytes and ``pubkey`` the signer's public key.

Payload instances move through EMPTY → GENERATED / VALIDATED. A failed
generate/validate/import leaves the instance exactly as it was; accessors
raise NotValidated until one of them has succeeded. Instances are not
thread-safe; use one per caller.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union
import json

from .config import PayloadConfig
from .constants import MAX_PAYLOAD_BYTES
from .crypto import ed25519_sign, ed25519_verify, check_message_size
from .envelope import Envelope, check_ttl, decode, encode
from .errors import (
    HashmapError,
    InvalidKeyLength,
    MalformedEnvelope,
    MissingConfiguration,
    NotValidated,
    PayloadTooLarge,
    SignatureVerificationFailed,
)
from .logger import get_logger
from .transport import BaseContentStore, transport_factory
from .utils import b64e, try_b64d

log = get_logger("hashmap.payload")

WIRE_FIELDS = ("data", "pubkey", "sig")


class PayloadState(str, Enum):
    EMPTY = "empty"
    GENERATED = "generated"
    VALIDATED = "validated"


@dataclass(frozen=True)
class WirePayload:
    data: bytes
    pubkey: bytes
    sig: bytes

    def to_dict(self) -> Dict[str, str]:
        return {
            "data": b64e(self.data),
            "pubkey": b64e(self.pubkey),
            "sig": b64e(self.sig),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, p: Any) -> "WirePayload":
        if not isinstance(p, dict):
            raise MalformedEnvelope("wire payload must be a JSON object")
        fields = {}
        for name in WIRE_FIELDS:
            raw = try_b64d(p.get(name))
            if raw is None:
                raise MalformedEnvelope(f"wire field '{name}' must be a base64 string")
            fields[name] = raw
        return cls(**fields)


def verify_wire(wire: WirePayload) -> Envelope:
    """
    Run the full receive-side check and return the decoded Envelope.

    The signature is checked over the raw ``data`` bytes before anything is
    decoded, so tampered data is always reported as a signature failure.
    """
    if not ed25519_verify(wire.sig, wire.data, wire.pubkey):
        raise SignatureVerificationFailed("signature validation failed")
    env = decode(wire.data)
    check_ttl(env.ttl)
    check_message_size(env)
    return env


def _secret_key_bytes(key: Union[str, bytes]) -> bytes:
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raw = try_b64d(key)
    if raw is None:
        raise InvalidKeyLength("secret key must be base64 encoded")
    return raw


class Payload:
    def __init__(self, config: Optional[PayloadConfig] = None, store: Optional[BaseContentStore] = None):
        self.config = config or PayloadConfig()
        self._store = store
        self._state = PayloadState.EMPTY
        self._wire: Optional[WirePayload] = None
        self._envelope: Optional[Envelope] = None

    @property
    def state(self) -> PayloadState:
        return self._state

    @property
    def raw(self) -> Optional[Dict[str, str]]:
        """The held wire payload as a dict, or None before any success."""
        return self._wire.to_dict() if self._wire else None

    # ------------------------------------------------------------------
    # Construction / validation
    # ------------------------------------------------------------------
    def generate(self, key: Union[str, bytes], message: Union[str, bytes], ttl: Optional[int] = None) -> str:
        """
        Build, sign and self-check a new payload.

        key is the base64 of 64 bytes of secret key material (seed || pubkey).
        Returns the wire payload JSON; the instance then holds it.
        """
        ttl = self.config.ttl if ttl is None else ttl
        check_ttl(ttl)
        secret = _secret_key_bytes(key)
        if isinstance(message, str):
            message = message.encode("utf-8")

        data = encode(message, ttl=ttl)
        sig, pub = ed25519_sign(secret, data)
        wire = WirePayload(data=data, pubkey=pub, sig=sig)
        try:
            env = verify_wire(wire)
        except HashmapError as e:
            log.warning(f"[PAYLOAD] generated payload failed self-check: {e.kind.value}")
            raise

        self._commit(wire, env, PayloadState.GENERATED)
        log.info(f"[PAYLOAD] generated message_bytes={len(message)} ttl={ttl}")
        return wire.to_json()

    def validate(self, p: Union[Dict[str, Any], WirePayload]) -> Envelope:
        try:
            wire = p if isinstance(p, WirePayload) else WirePayload.from_dict(p)
            env = verify_wire(wire)
        except HashmapError as e:
            log.warning(f"[PAYLOAD] validation failed: {e.kind.value}")
            raise

        self._commit(wire, env, PayloadState.VALIDATED)
        log.debug(f"[PAYLOAD] validated message_bytes={len(env.message)}")
        return env

    def import_json(self, raw: Union[str, bytes]) -> Envelope:
        """Parse a wire payload JSON document and validate it."""
        size = len(raw.encode("utf-8") if isinstance(raw, str) else raw)
        if size > MAX_PAYLOAD_BYTES:
            raise PayloadTooLarge(f"raw payload is {size} bytes, max is {MAX_PAYLOAD_BYTES}")
        try:
            p = json.loads(raw)
        except ValueError as e:
            raise MalformedEnvelope(f"wire payload is not valid JSON: {e}") from e
        return self.validate(p)

    def _commit(self, wire: WirePayload, env: Envelope, state: PayloadState) -> None:
        self._wire = wire
        self._envelope = env
        self._state = state

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def get_data(self) -> Envelope:
        if self._envelope is None:
            raise NotValidated("no validated payload held")
        return self._envelope

    def get_message_bytes(self) -> bytes:
        return self.get_data().message

    def get_message(self) -> str:
        return self.get_message_bytes().decode("utf-8", errors="replace")

    def to_json(self) -> str:
        if self._wire is None:
            raise NotValidated("no validated payload held")
        return self._wire.to_json()

    # ------------------------------------------------------------------
    # Content store
    # ------------------------------------------------------------------
    def get(self, content_address: Optional[str] = None, endpoint: Optional[str] = None) -> Dict[str, str]:
        """Fetch a payload by content address and validate it into this instance."""
        content_address = content_address or self.config.content_address
        if not content_address:
            raise MissingConfiguration("missing content address")
        endpoint = self._endpoint(endpoint)

        resp = self.store.fetch(endpoint, content_address)
        self.validate(resp)
        return resp

    def post(self, endpoint: Optional[str] = None) -> Any:
        """Submit the held payload; the store decides its content address."""
        endpoint = self._endpoint(endpoint)
        if self._wire is None:
            raise NotValidated("missing payload")
        return self.store.submit(endpoint, self._wire.to_dict())

    def _endpoint(self, endpoint: Optional[str]) -> str:
        endpoint = endpoint or self.config.endpoint
        if not endpoint:
            raise MissingConfiguration("missing endpoint")
        return endpoint

    @property
    def store(self) -> BaseContentStore:
        if self._store is None:
            self._store = transport_factory(timeout=self.config.timeout)
        return self._store
