import pytest

from hashmap_core.crypto import ed25519_sign, ed25519_verify, check_message_size, split_secret_key
from hashmap_core.envelope import Envelope
from hashmap_core.errors import InvalidKeyLength, MessageTooLarge


def test_sign_verify(secret_key):
    sig, pub = ed25519_sign(secret_key, b"sign me, plz.")
    assert len(sig) == 64
    assert pub == secret_key[32:]
    assert ed25519_verify(sig, b"sign me, plz.", pub)
    assert not ed25519_verify(sig, b"sign me, plz!", pub)


def test_signing_is_deterministic(secret_key):
    assert ed25519_sign(secret_key, b"data") == ed25519_sign(secret_key, b"data")


def test_pubkey_is_upper_half_not_recomputed(secret_key):
    other = secret_key[:32] + bytes(32)
    _, pub = ed25519_sign(other, b"data")
    assert pub == bytes(32)


@pytest.mark.parametrize("length", [0, 32, 63, 65])
def test_invalid_key_length(length):
    with pytest.raises(InvalidKeyLength):
        ed25519_sign(bytes(length), b"data")
    with pytest.raises(InvalidKeyLength):
        split_secret_key(bytes(length))


def test_verify_never_raises_on_bad_lengths(secret_key):
    sig, pub = ed25519_sign(secret_key, b"data")
    assert not ed25519_verify(sig[:63], b"data", pub)
    assert not ed25519_verify(sig + b"\x00", b"data", pub)
    assert not ed25519_verify(sig, b"data", pub[:31])
    assert not ed25519_verify(b"", b"data", b"")


def test_message_size_boundary():
    check_message_size(Envelope(message=b"a" * 512, timestamp=1))
    with pytest.raises(MessageTooLarge):
        check_message_size(Envelope(message=b"a" * 513, timestamp=1))
