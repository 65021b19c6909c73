import json
import pytest

from hashmap_core.envelope import Envelope, encode, decode, check_ttl
from hashmap_core.errors import InvalidTTL, MalformedEnvelope


def test_encode_decode_roundtrip():
    raw = encode(b"hello", ttl=3600, timestamp=1589198203839934000)
    env = decode(raw)
    assert env == Envelope(message=b"hello", timestamp=1589198203839934000, ttl=3600)
    assert env.sig_method == "nacl-sign-ed25519"
    assert env.version == "0.0.1"


def test_encoding_is_compact_and_ordered():
    raw = encode(b"hi", ttl=86400, timestamp=42)
    assert raw == b'{"message":"aGk=","timestamp":42,"sigMethod":"nacl-sign-ed25519","version":"0.0.1","ttl":86400}'
    # re-encoding the decoded envelope reproduces the same bytes
    assert decode(raw).to_bytes() == raw


def test_empty_and_binary_messages():
    for msg in (b"", bytes(range(256))):
        assert decode(encode(msg, timestamp=1)).message == msg


def test_default_ttl_and_timestamp():
    env = decode(encode(b"x"))
    assert env.ttl == 86400
    assert env.timestamp > 0


@pytest.mark.parametrize("ttl", [1, 604800])
def test_ttl_bounds_accepted(ttl):
    assert decode(encode(b"x", ttl=ttl)).ttl == ttl


@pytest.mark.parametrize("ttl", [0, -1, 604801, True, 1.5, "60"])
def test_ttl_out_of_range_rejected(ttl):
    with pytest.raises(InvalidTTL):
        encode(b"x", ttl=ttl)
    with pytest.raises(InvalidTTL):
        check_ttl(ttl)


def test_decode_truncated_bytes():
    raw = encode(b"hello", timestamp=1)
    for cut in (0, 1, len(raw) // 2, len(raw) - 1):
        with pytest.raises(MalformedEnvelope):
            decode(raw[:cut])


def test_decode_non_utf8_bytes():
    with pytest.raises(MalformedEnvelope):
        decode(b"{\"message\": \"\x80\x81\"}")


def _fields(**overrides):
    d = {"message": "aGk=", "timestamp": 1, "sigMethod": "nacl-sign-ed25519", "version": "0.0.1", "ttl": 60}
    d.update(overrides)
    return {k: v for k, v in d.items() if v is not None}


@pytest.mark.parametrize("bad", [
    _fields(message=None),
    _fields(message="not base64!"),
    _fields(message=5),
    _fields(timestamp="1"),
    _fields(timestamp=None),
    _fields(timestamp=False),
    _fields(ttl=60.0),
    _fields(ttl=None),
    _fields(sigMethod=1),
    _fields(version=None),
])
def test_decode_missing_or_mistyped_fields(bad):
    with pytest.raises(MalformedEnvelope):
        decode(json.dumps(bad).encode())


def test_decode_non_object():
    with pytest.raises(MalformedEnvelope):
        decode(b"[1, 2, 3]")


def test_expiration_helpers():
    env = Envelope(message=b"", timestamp=1_000_000_000, ttl=10)
    assert env.expires_at_ns() == 11_000_000_000
    assert not env.is_expired(now=10_999_999_999)
    assert env.is_expired(now=11_000_000_000)


@pytest.mark.parametrize("ts", ["1", 1.0, True])
def test_encode_rejects_non_integer_timestamp(ts):
    with pytest.raises(MalformedEnvelope):
        encode(b"x", timestamp=ts)
