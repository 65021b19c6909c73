# hashmap_core/transport/transport_local.py
import base64, hashlib, json
from hashmap_core.logger import get_logger
from hashmap_core.transport.transport_base import BaseContentStore, TransportPermanentError

log = get_logger("hashmap.transport.local")


def pubkey_address(pubkey_b64: str) -> str:
    """URL-safe base64 of the BLAKE2b-512 digest of the public key bytes."""
    digest = hashlib.blake2b(base64.b64decode(pubkey_b64), digest_size=64).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


class LocalContentStore(BaseContentStore):
    """
    In-process content store for tests and offline use.

    Entries are keyed by (endpoint, address); a submit from the same key
    replaces the previous payload, as on a hashmap server.
    """
    name = "local"

    def __init__(self):
        self._entries = {}

    def submit(self, endpoint: str, payload):
        address = pubkey_address(payload["pubkey"])
        # store a copy so later caller mutations cannot alter it
        self._entries[(endpoint, address)] = json.loads(json.dumps(payload))
        log.info(f"[LOCAL PUT] {endpoint} address={address}")
        return {"endpoint": endpoint, "address": address}

    def fetch(self, endpoint: str, content_address: str):
        try:
            payload = self._entries[(endpoint, content_address)]
        except KeyError:
            raise TransportPermanentError(f"unknown content address: {content_address}") from None
        log.info(f"[LOCAL GET] {endpoint} address={content_address}")
        return dict(payload)
