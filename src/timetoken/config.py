"""Configuration for token derivation, key generation and encryption."""

import codecs
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .types import (
    DEFAULT_WINDOW_SECONDS,
    DEFAULT_TOKEN_MODULUS,
    DEFAULT_KEY_SIZE,
    DEFAULT_TEXT_ENCODING,
    MINIMUM_KEY_SIZE,
    PADDING_PKCS1V15,
    SUPPORTED_PADDINGS,
)


ENV_PREFIX = "TIMETOKEN_"


@dataclass(frozen=True)
class TokenConfig:
    """Configuration shared by the client encoder and the server validator."""

    window_seconds: int = DEFAULT_WINDOW_SECONDS
    """Width of one validity window in seconds."""

    token_modulus: int = DEFAULT_TOKEN_MODULUS
    """Upper bound (exclusive) of derived token values."""

    key_size: int = DEFAULT_KEY_SIZE
    """RSA modulus size in bits for generated key pairs."""

    padding: str = PADDING_PKCS1V15
    """RSA encryption padding, "pkcs1v15" or "oaep"."""

    text_encoding: str = DEFAULT_TEXT_ENCODING
    """Codec used to turn the payload text into bytes before encryption."""

    def __post_init__(self) -> None:
        if self.window_seconds <= 0:
            raise ValueError(f"window_seconds must be positive, got {self.window_seconds}")
        if self.token_modulus <= 0:
            raise ValueError(f"token_modulus must be positive, got {self.token_modulus}")
        if self.key_size < MINIMUM_KEY_SIZE:
            raise ValueError(f"key_size must be at least {MINIMUM_KEY_SIZE}, got {self.key_size}")
        if self.padding not in SUPPORTED_PADDINGS:
            raise ValueError(
                f"Unknown padding: {self.padding!r} (expected one of {', '.join(SUPPORTED_PADDINGS)})"
            )
        codecs.lookup(self.text_encoding)  # LookupError for unknown codecs

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "TokenConfig":
        """
        Build a configuration from environment variables.

        Reads ``<prefix>WINDOW_SECONDS``, ``<prefix>TOKEN_MODULUS``,
        ``<prefix>KEY_SIZE``, ``<prefix>PADDING`` and ``<prefix>TEXT_ENCODING``.
        Unset variables keep their defaults.

        Args:
            prefix: Variable name prefix
            environ: Mapping to read instead of ``os.environ``

        Returns:
            TokenConfig

        Raises:
            ValueError: If a numeric variable is not an integer or a value is out of range
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _int(name: str, default: int) -> int:
            raw = env.get(prefix + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{prefix}{name} must be an integer, got {raw!r}")

        return cls(
            window_seconds=_int("WINDOW_SECONDS", defaults.window_seconds),
            token_modulus=_int("TOKEN_MODULUS", defaults.token_modulus),
            key_size=_int("KEY_SIZE", defaults.key_size),
            padding=env.get(prefix + "PADDING") or defaults.padding,
            text_encoding=env.get(prefix + "TEXT_ENCODING") or defaults.text_encoding,
        )
