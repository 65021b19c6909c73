"""
hashmap_core.errors
-------------------
Closed error taxonomy for payload construction and validation.

Every failure raised by the core is a HashmapError subclass carrying an
ErrorKind tag, so callers can either catch the concrete class or branch on
``err.kind``.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_TTL = "invalid_ttl"
    INVALID_KEY_LENGTH = "invalid_key_length"
    MALFORMED_ENVELOPE = "malformed_envelope"
    MESSAGE_TOO_LARGE = "message_too_large"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    SIGNATURE_VERIFICATION_FAILED = "signature_verification_failed"
    MISSING_CONFIGURATION = "missing_configuration"
    NOT_VALIDATED = "not_validated"


class HashmapError(Exception):
    kind: Optional[ErrorKind] = None

    def __init__(self, message: str = ""):
        if not message and self.kind is not None:
            message = self.kind.value.replace("_", " ")
        super().__init__(message)


class InvalidTTL(HashmapError):
    kind = ErrorKind.INVALID_TTL


class InvalidKeyLength(HashmapError):
    kind = ErrorKind.INVALID_KEY_LENGTH


class MalformedEnvelope(HashmapError):
    kind = ErrorKind.MALFORMED_ENVELOPE


class MessageTooLarge(HashmapError):
    kind = ErrorKind.MESSAGE_TOO_LARGE


class PayloadTooLarge(HashmapError):
    kind = ErrorKind.PAYLOAD_TOO_LARGE


class SignatureVerificationFailed(HashmapError):
    kind = ErrorKind.SIGNATURE_VERIFICATION_FAILED


class MissingConfiguration(HashmapError):
    kind = ErrorKind.MISSING_CONFIGURATION


class NotValidated(HashmapError):
    kind = ErrorKind.NOT_VALIDATED
