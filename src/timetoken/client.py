"""
Client side of the token scheme.

The client reads its clock, derives the token for the current window and
sends ``(timestamp, token)`` encrypted under the server's public key.

Example usage:
    ```python
    client = TokenClient(server_public_key)
    request = client.produce_request()
    # hand ``request`` to whatever transport reaches the server
    ```
"""

from typing import Optional

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from .clock import Clock, SYSTEM_CLOCK
from .config import TokenConfig
from .crypto import encrypt_payload
from .token import derive_token
from .types import Payload, InvalidKeyError


class TokenClient:
    """Builds encrypted token requests for one server key."""

    def __init__(
        self,
        public_key: RSAPublicKey,
        config: Optional[TokenConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            public_key: The server's RSA public key.
            config: Token and encryption settings (defaults if omitted).
            clock: Time source (system clock if omitted).

        Raises:
            InvalidKeyError: If public_key is not an RSA public key.
        """
        if not isinstance(public_key, RSAPublicKey):
            raise InvalidKeyError(f"Expected an RSA public key, got {type(public_key).__name__}")

        self._public_key = public_key
        self._config = config or TokenConfig()
        self._clock = clock or SYSTEM_CLOCK

    @property
    def config(self) -> TokenConfig:
        """Returns the client configuration."""
        return self._config

    def build_payload(self) -> Payload:
        """Returns the payload for the clock's current reading."""
        timestamp = self._clock.now()
        return Payload(timestamp=timestamp, token=derive_token(timestamp, self._config))

    def encrypt_payload(self, payload: Payload) -> str:
        """Encrypts an explicit payload under the server key."""
        return encrypt_payload(payload, self._public_key, self._config)

    def produce_request(self) -> str:
        """
        Produce one request for the current window.

        Returns:
            Base64 ciphertext text

        Raises:
            EncryptionError: If encryption fails
        """
        return self.encrypt_payload(self.build_payload())


def produce_request(
    server_public_key: RSAPublicKey,
    config: Optional[TokenConfig] = None,
    clock: Optional[Clock] = None,
) -> str:
    """
    Produce one encrypted request for the current window.

    Args:
        server_public_key: Server's RSA public key
        config: Token and encryption settings
        clock: Time source

    Returns:
        Base64 ciphertext text

    Raises:
        InvalidKeyError: If the key is not an RSA public key
        EncryptionError: If encryption fails
    """
    return TokenClient(server_public_key, config, clock).produce_request()
