"""
hashmap_core.crypto
-------------------
Ed25519 signing and verification for hashmap payloads.

- Signer: detached signatures from 64-byte NaCl-style secret keys
  (32-byte seed followed by the 32-byte public key)
- Verifier: signature checks plus the message-size policy

The public key published with a payload is the upper half of the secret key
material, taken as-is. Existing signers rely on this layout, so it is not
recomputed from the seed.
"""

from __future__ import annotations
from typing import Tuple
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

from .constants import MAX_MESSAGE_BYTES, SECRET_KEY_BYTES, PUBLIC_KEY_BYTES, SIGNATURE_BYTES
from .envelope import Envelope
from .errors import InvalidKeyLength, MessageTooLarge


# --------- Signer ----------
def split_secret_key(secret_key: bytes) -> Tuple[bytes, bytes]:
    if len(secret_key) != SECRET_KEY_BYTES:
        raise InvalidKeyLength(
            f"secret key material must be {SECRET_KEY_BYTES} bytes, got {len(secret_key)}"
        )
    return secret_key[:32], secret_key[32:]


def ed25519_sign(secret_key: bytes, data: bytes) -> Tuple[bytes, bytes]:
    """Return (signature, public key) for ``data``. Ed25519 is deterministic."""
    seed, pub = split_secret_key(secret_key)
    sk = ed25519.Ed25519PrivateKey.from_private_bytes(seed)
    return sk.sign(data), pub


# --------- Verifier ----------
def ed25519_verify(sig: bytes, data: bytes, pub_raw: bytes) -> bool:
    if len(sig) != SIGNATURE_BYTES or len(pub_raw) != PUBLIC_KEY_BYTES:
        return False
    try:
        ed25519.Ed25519PublicKey.from_public_bytes(pub_raw).verify(sig, data)
        return True
    except (InvalidSignature, ValueError):
        return False


def check_message_size(env: Envelope) -> None:
    if len(env.message) > MAX_MESSAGE_BYTES:
        raise MessageTooLarge(
            f"message is {len(env.message)} bytes, max is {MAX_MESSAGE_BYTES}"
        )
