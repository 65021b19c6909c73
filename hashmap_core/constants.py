# hashmap_core/constants.py

MAX_MESSAGE_BYTES = 512
MAX_PAYLOAD_BYTES = 128 * 1024  # raw wire JSON accepted by import()

SIG_METHOD = "nacl-sign-ed25519"
PROTOCOL_VERSION = "0.0.1"

DEFAULT_TTL = 86400   # 1 day in seconds
MAX_TTL = 604800      # 1 week in seconds
MIN_TTL = 1

SECRET_KEY_BYTES = 64  # seed || public key
PUBLIC_KEY_BYTES = 32
SIGNATURE_BYTES = 64
