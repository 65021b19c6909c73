import base64
import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519

from hashmap_core.transport import LocalContentStore

SEED = bytes(range(32))


def make_secret_key(seed: bytes = SEED) -> bytes:
    pub = ed25519.Ed25519PrivateKey.from_private_bytes(seed).public_key().public_bytes_raw()
    return seed + pub


@pytest.fixture
def secret_key() -> bytes:
    return make_secret_key()


@pytest.fixture
def key_b64(secret_key) -> str:
    return base64.b64encode(secret_key).decode("ascii")


@pytest.fixture
def local_store():
    return LocalContentStore()
