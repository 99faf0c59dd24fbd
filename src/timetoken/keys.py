"""RSA key generation and key string encoding."""

from typing import Optional, Tuple, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from loguru import logger

from .config import TokenConfig
from .types import DEFAULT_PUBLIC_EXPONENT, InvalidKeyError


def generate_keypair(config: Optional[TokenConfig] = None) -> Tuple[RSAPrivateKey, RSAPublicKey]:
    """
    Generate a random RSA key pair.

    Args:
        config: Supplies the key size (2048 bits by default)

    Returns:
        Tuple of (private_key, public_key)
    """
    config = config or TokenConfig()
    logger.debug("Generating {}-bit RSA key pair", config.key_size)

    private_key = rsa.generate_private_key(
        public_exponent=DEFAULT_PUBLIC_EXPONENT,
        key_size=config.key_size,
    )
    return private_key, private_key.public_key()


def private_key_to_pem(private_key: RSAPrivateKey) -> str:
    """Encode a private key as unencrypted PKCS#8 PEM text."""
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


def public_key_to_pem(public_key: RSAPublicKey) -> str:
    """Encode a public key as SubjectPublicKeyInfo PEM text."""
    return public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


def _pem_bytes(text: Union[str, bytes]) -> bytes:
    """PEM input as bytes; str must be ASCII."""
    if isinstance(text, bytes):
        return text
    if isinstance(text, str):
        return text.encode("ascii")  # UnicodeEncodeError is a ValueError
    raise TypeError(f"Expected PEM str or bytes, got {type(text).__name__}")


def private_key_from_pem(text: Union[str, bytes]) -> RSAPrivateKey:
    """
    Load an RSA private key from PEM text or bytes.

    Raises:
        InvalidKeyError: If the text is not an unencrypted RSA private key
    """
    try:
        key = serialization.load_pem_private_key(_pem_bytes(text), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError(f"Invalid private key: {e}")

    if not isinstance(key, RSAPrivateKey):
        raise InvalidKeyError(f"Expected an RSA private key, got {type(key).__name__}")
    return key


def public_key_from_pem(text: Union[str, bytes]) -> RSAPublicKey:
    """
    Load an RSA public key from PEM text or bytes.

    Raises:
        InvalidKeyError: If the text is not an RSA public key
    """
    try:
        key = serialization.load_pem_public_key(_pem_bytes(text))
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError(f"Invalid public key: {e}")

    if not isinstance(key, RSAPublicKey):
        raise InvalidKeyError(f"Expected an RSA public key, got {type(key).__name__}")
    return key
