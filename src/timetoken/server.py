"""
Server side of the token scheme.

``validate`` answers a single yes/no question per request and never raises
for untrusted input. Callers cannot tell a wrong key from an expired token;
the reason is only visible in debug logs.

There is no replay cache: a captured request validates again for as long
as its window lasts. Timestamps from the future are not rejected, only
timestamps older than one window.
"""

import binascii
from typing import Optional

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from loguru import logger

from .clock import Clock, SYSTEM_CLOCK
from .config import TokenConfig
from .crypto import decrypt_payload
from .token import derive_token
from .types import (
    Payload,
    InvalidKeyError,
    StaleTokenError,
    TimeTokenError,
    TokenMismatchError,
)


class TokenValidator:
    """Checks encrypted token requests against the current window."""

    def __init__(
        self,
        private_key: RSAPrivateKey,
        config: Optional[TokenConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize the validator.

        Args:
            private_key: The server's RSA private key.
            config: Token and encryption settings (defaults if omitted).
            clock: Time source (system clock if omitted).

        Raises:
            InvalidKeyError: If private_key is not an RSA private key.
        """
        if not isinstance(private_key, RSAPrivateKey):
            raise InvalidKeyError(f"Expected an RSA private key, got {type(private_key).__name__}")

        self._private_key = private_key
        self._config = config or TokenConfig()
        self._clock = clock or SYSTEM_CLOCK

    @property
    def config(self) -> TokenConfig:
        """Returns the validator configuration."""
        return self._config

    def check_payload(self, payload: Payload) -> None:
        """
        Check a decrypted payload against the clock.

        Args:
            payload: Decrypted payload

        Raises:
            StaleTokenError: If the timestamp is more than one window old
            TokenMismatchError: If the token is not the current window's token
        """
        now = self._clock.now()

        elapsed = now - payload.timestamp
        if elapsed > self._config.window_seconds:
            raise StaleTokenError(
                f"Payload is {elapsed}s old (window {self._config.window_seconds}s)"
            )

        if payload.token != derive_token(now, self._config):
            raise TokenMismatchError("Token does not match the current window")

    def check(self, ciphertext_text: str) -> Payload:
        """
        Decrypt and check a request, raising on the first failure.

        Args:
            ciphertext_text: Base64 ciphertext from the client

        Returns:
            The accepted Payload

        Raises:
            DecryptionError: If decoding or decryption fails
            PayloadFormatError: If the plaintext is malformed
            StaleTokenError: If the payload is too old
            TokenMismatchError: If the token does not match
        """
        payload = decrypt_payload(ciphertext_text, self._private_key, self._config)
        self.check_payload(payload)
        return payload

    def validate(self, ciphertext_text: str) -> bool:
        """
        Decide whether a request is acceptable right now.

        Args:
            ciphertext_text: Base64 ciphertext from the client

        Returns:
            True if the request decrypts, is fresh and carries the current token
        """
        try:
            self.check(ciphertext_text)
        except (TimeTokenError, binascii.Error, ValueError, TypeError) as e:
            logger.debug("Rejected token request: {}", type(e).__name__)
            return False

        return True


def validate(
    server_private_key: RSAPrivateKey,
    ciphertext_text: str,
    config: Optional[TokenConfig] = None,
    clock: Optional[Clock] = None,
) -> bool:
    """
    Validate one encrypted request.

    Never raises for malformed input or key material; every failure is
    reported as False.

    Args:
        server_private_key: Server's RSA private key
        ciphertext_text: Base64 ciphertext from the client
        config: Token and encryption settings
        clock: Time source

    Returns:
        True if the request is accepted
    """
    try:
        validator = TokenValidator(server_private_key, config, clock)
    except InvalidKeyError:
        logger.debug("Rejected token request: InvalidKeyError")
        return False

    return validator.validate(ciphertext_text)
