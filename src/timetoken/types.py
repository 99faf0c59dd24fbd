"""Type definitions for the time-windowed token scheme."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Payload:
    """Plaintext carried inside one request ciphertext."""
    timestamp: int  # seconds since the Unix epoch
    token: int


# Protocol defaults
DEFAULT_WINDOW_SECONDS = 20
DEFAULT_TOKEN_MODULUS = 32767  # positive range of a 16-bit signed integer
DEFAULT_KEY_SIZE = 2048
DEFAULT_PUBLIC_EXPONENT = 65537
DEFAULT_TEXT_ENCODING = "utf-16-le"

# Payload wire format
PAYLOAD_DELIMITER = ","

# Padding schemes
PADDING_PKCS1V15 = "pkcs1v15"
PADDING_OAEP = "oaep"
SUPPORTED_PADDINGS = (PADDING_PKCS1V15, PADDING_OAEP)

MINIMUM_KEY_SIZE = 1024


# Exception types
class TimeTokenError(Exception):
    """Base exception for timetoken errors."""
    pass


class InvalidKeyError(TimeTokenError):
    """Malformed or wrong-type key material."""
    pass


class EncryptionError(TimeTokenError):
    """Encryption failed."""
    pass


class DecryptionError(TimeTokenError):
    """Decoding or decryption failed."""
    pass


class PayloadFormatError(TimeTokenError):
    """Decrypted text is not a well-formed payload."""
    pass


class StaleTokenError(TimeTokenError):
    """Payload timestamp is older than one window."""
    pass


class TokenMismatchError(TimeTokenError):
    """Payload token does not match the current window."""
    pass
