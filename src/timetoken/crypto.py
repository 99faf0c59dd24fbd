"""RSA encryption and decryption of request payloads."""

import base64
import binascii
from typing import Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.padding import AsymmetricPadding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .config import TokenConfig
from .payload import encode_payload, decode_payload
from .types import (
    Payload,
    PADDING_OAEP,
    InvalidKeyError,
    EncryptionError,
    DecryptionError,
    PayloadFormatError,
)


def _padding_for(config: TokenConfig) -> AsymmetricPadding:
    """Padding object for the configured scheme."""
    if config.padding == PADDING_OAEP:
        return padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None,
        )
    return padding.PKCS1v15()


def encrypt_payload(
    payload: Payload,
    public_key: RSAPublicKey,
    config: Optional[TokenConfig] = None,
) -> str:
    """
    Encrypt a payload for the holder of a private key.

    Args:
        payload: Timestamp and token to send
        public_key: Server's RSA public key
        config: Padding and text encoding settings

    Returns:
        Base64 text of the RSA ciphertext

    Raises:
        InvalidKeyError: If the key is not an RSA public key
        EncryptionError: If encryption fails
    """
    config = config or TokenConfig()

    if not isinstance(public_key, RSAPublicKey):
        raise InvalidKeyError(f"Expected an RSA public key, got {type(public_key).__name__}")

    plaintext = encode_payload(payload).encode(config.text_encoding)

    try:
        ciphertext = public_key.encrypt(plaintext, _padding_for(config))
    except ValueError as e:
        raise EncryptionError(f"RSA encryption failed: {e}")

    return base64.b64encode(ciphertext).decode("ascii")


def decrypt_payload(
    ciphertext_text: str,
    private_key: RSAPrivateKey,
    config: Optional[TokenConfig] = None,
) -> Payload:
    """
    Decrypt a request ciphertext back into its payload.

    Args:
        ciphertext_text: Base64 text produced by encrypt_payload
        private_key: Server's RSA private key
        config: Padding and text encoding settings

    Returns:
        Decoded Payload

    Raises:
        InvalidKeyError: If the key is not an RSA private key
        DecryptionError: If the text is not base64, decryption fails or the
            plaintext does not decode with the configured encoding
        PayloadFormatError: If the plaintext is not a well-formed payload
    """
    config = config or TokenConfig()

    if not isinstance(private_key, RSAPrivateKey):
        raise InvalidKeyError(f"Expected an RSA private key, got {type(private_key).__name__}")

    try:
        ciphertext = base64.b64decode(ciphertext_text, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise DecryptionError(f"Invalid base64: {e}")

    try:
        plaintext = private_key.decrypt(ciphertext, _padding_for(config))
    except ValueError as e:
        # Wrong key, wrong length and bad padding all land here
        raise DecryptionError(f"RSA decryption failed: {e}")

    try:
        text = plaintext.decode(config.text_encoding)
    except UnicodeDecodeError as e:
        raise PayloadFormatError(f"Payload is not valid {config.text_encoding}: {e}")

    return decode_payload(text)
