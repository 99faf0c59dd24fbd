"""
timetoken - Time-windowed encrypted authentication tokens

A client encrypts ``(timestamp, token)`` under a server's RSA public key;
the server accepts it only within the window the token was derived for.
"""

from loguru import logger

from .types import (
    Payload,
    DEFAULT_WINDOW_SECONDS,
    DEFAULT_TOKEN_MODULUS,
    DEFAULT_KEY_SIZE,
    PADDING_PKCS1V15,
    PADDING_OAEP,
    TimeTokenError,
    InvalidKeyError,
    EncryptionError,
    DecryptionError,
    PayloadFormatError,
    StaleTokenError,
    TokenMismatchError,
)
from .config import TokenConfig
from .clock import Clock, SystemClock, FixedClock
from .token import derive_token, current_token
from .keys import (
    generate_keypair,
    private_key_to_pem,
    public_key_to_pem,
    private_key_from_pem,
    public_key_from_pem,
)
from .payload import encode_payload, decode_payload
from .crypto import encrypt_payload, decrypt_payload
from .client import TokenClient, produce_request
from .server import TokenValidator, validate

# Library logging stays silent unless the host calls logger.enable("timetoken")
logger.disable("timetoken")

__version__ = "0.1.0"

__all__ = [
    # Types
    "Payload",
    # Config
    "TokenConfig",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    # Token
    "derive_token",
    "current_token",
    # Keys
    "generate_keypair",
    "private_key_to_pem",
    "public_key_to_pem",
    "private_key_from_pem",
    "public_key_from_pem",
    # Payload
    "encode_payload",
    "decode_payload",
    # Crypto
    "encrypt_payload",
    "decrypt_payload",
    # Client
    "TokenClient",
    "produce_request",
    # Server
    "TokenValidator",
    "validate",
    # Errors
    "TimeTokenError",
    "InvalidKeyError",
    "EncryptionError",
    "DecryptionError",
    "PayloadFormatError",
    "StaleTokenError",
    "TokenMismatchError",
    # Constants
    "DEFAULT_WINDOW_SECONDS",
    "DEFAULT_TOKEN_MODULUS",
    "DEFAULT_KEY_SIZE",
    "PADDING_PKCS1V15",
    "PADDING_OAEP",
]
