"""Tests for token derivation."""

import pytest
from timetoken.clock import FixedClock
from timetoken.config import TokenConfig
from timetoken.token import derive_token, current_token, window_index
from .test_vectors import TOKEN_VECTORS, WINDOW_START


class TestDeriveToken:
    """Test token values for known timestamps."""

    @pytest.mark.parametrize("timestamp,expected", TOKEN_VECTORS.items())
    def test_known_vectors(self, timestamp: int, expected: int) -> None:
        """Default settings produce the expected token."""
        assert derive_token(timestamp) == expected

    def test_stable_within_window(self) -> None:
        """Every second of a window derives the same token."""
        tokens = {derive_token(WINDOW_START + offset) for offset in range(20)}
        assert len(tokens) == 1

    def test_adjacent_windows_differ(self) -> None:
        """Consecutive windows derive different tokens away from the wrap."""
        for window in range(1000, 1100):
            assert derive_token(window * 20) != derive_token((window + 1) * 20)

    def test_wraps_at_modulus(self) -> None:
        """Windows one modulus period apart collide."""
        config = TokenConfig(window_seconds=10, token_modulus=7)
        assert derive_token(5, config) == derive_token(5 + 70, config)

    def test_bounded_by_modulus(self) -> None:
        """Tokens always fall in [0, modulus)."""
        config = TokenConfig(window_seconds=1, token_modulus=5)
        assert {derive_token(t, config) for t in range(100)} == {0, 1, 2, 3, 4}

    def test_custom_window(self) -> None:
        """Window width comes from the config."""
        config = TokenConfig(window_seconds=60)
        assert derive_token(59, config) == 0
        assert derive_token(60, config) == 1

    def test_negative_timestamp_rejected(self) -> None:
        """Timestamps before the epoch are refused."""
        with pytest.raises(ValueError, match="negative"):
            derive_token(-1)


class TestCurrentToken:
    """Test clock-driven token derivation."""

    def test_uses_clock(self) -> None:
        """current_token reads the injected clock."""
        clock = FixedClock(WINDOW_START)
        assert current_token(clock) == derive_token(WINDOW_START)

        clock.advance(20)
        assert current_token(clock) == derive_token(WINDOW_START + 20)

    def test_window_index(self) -> None:
        """Window index is the unreduced quotient."""
        assert window_index(WINDOW_START) == WINDOW_START // 20
        assert window_index(WINDOW_START + 19) == window_index(WINDOW_START)

    def test_window_index_negative_timestamp_rejected(self) -> None:
        """window_index refuses the same timestamps derive_token does."""
        with pytest.raises(ValueError, match="negative"):
            window_index(-1)

    def test_clock_set_jumps(self) -> None:
        """Setting the clock moves current_token to the new window."""
        clock = FixedClock(WINDOW_START)
        clock.set(WINDOW_START + 40)

        assert clock.now() == WINDOW_START + 40
        assert current_token(clock) == derive_token(WINDOW_START) + 2
