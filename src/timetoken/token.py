"""Token derivation from wall-clock time."""

from typing import Optional

from .clock import Clock, SYSTEM_CLOCK
from .config import TokenConfig


_DEFAULT_CONFIG = TokenConfig()


def derive_token(timestamp: int, config: Optional[TokenConfig] = None) -> int:
    """
    Derive the token for the window containing a timestamp.

    Every timestamp inside one window maps to the same token. Tokens wrap
    at ``config.token_modulus``, so two windows exactly one modulus period
    apart are indistinguishable.

    Args:
        timestamp: Seconds since the Unix epoch
        config: Window and modulus settings (defaults if omitted)

    Returns:
        Token in ``[0, token_modulus)``
    """
    if timestamp < 0:
        raise ValueError(f"Timestamp must not be negative, got {timestamp}")

    config = config or _DEFAULT_CONFIG
    return (timestamp // config.window_seconds) % config.token_modulus


def window_index(timestamp: int, config: Optional[TokenConfig] = None) -> int:
    """Index of the window containing a timestamp, before modulus reduction."""
    if timestamp < 0:
        raise ValueError(f"Timestamp must not be negative, got {timestamp}")

    config = config or _DEFAULT_CONFIG
    return timestamp // config.window_seconds


def current_token(
    clock: Optional[Clock] = None,
    config: Optional[TokenConfig] = None,
) -> int:
    """Derive the token for the clock's current window."""
    clock = clock or SYSTEM_CLOCK
    return derive_token(clock.now(), config)
