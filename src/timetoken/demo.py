"""Run the four request scenarios against a simulated clock."""

from typing import Dict, Optional

from .client import TokenClient
from .clock import FixedClock, SYSTEM_CLOCK
from .config import TokenConfig
from .keys import generate_keypair
from .server import TokenValidator
from .token import window_index


SCENARIOS = {
    "valid_request": "Client sends a valid request",
    "half_window_delay": "Client request arrives half a window late",
    "full_window_delay": "Client request arrives a full window late",
    "wrong_key": "Server decrypts with a different key pair",
}


def run_scenarios(
    config: Optional[TokenConfig] = None,
    start: Optional[int] = None,
) -> Dict[str, bool]:
    """
    Run every scenario and report whether each behaved as expected.

    The clock starts at the beginning of a window so that the half-window
    delay stays inside it.

    Args:
        config: Token settings (defaults if omitted)
        start: Starting timestamp (current window start if omitted)

    Returns:
        Mapping of scenario name to True when the outcome matched expectation
    """
    config = config or TokenConfig()
    if start is None:
        start = window_index(SYSTEM_CLOCK.now(), config) * config.window_seconds

    private_key, public_key = generate_keypair(config)
    results = {}

    clock = FixedClock(start)
    request = TokenClient(public_key, config, clock).produce_request()
    results["valid_request"] = TokenValidator(private_key, config, clock).validate(request)

    clock = FixedClock(start)
    request = TokenClient(public_key, config, clock).produce_request()
    clock.advance(config.window_seconds // 2)
    results["half_window_delay"] = TokenValidator(private_key, config, clock).validate(request)

    clock = FixedClock(start)
    request = TokenClient(public_key, config, clock).produce_request()
    clock.advance(config.window_seconds)
    results["full_window_delay"] = not TokenValidator(private_key, config, clock).validate(request)

    _, other_public_key = generate_keypair(config)
    clock = FixedClock(start)
    request = TokenClient(other_public_key, config, clock).produce_request()
    results["wrong_key"] = not TokenValidator(private_key, config, clock).validate(request)

    return results


def main() -> None:
    config = TokenConfig.from_env()
    for number, (name, passed) in enumerate(run_scenarios(config).items(), start=1):
        print(f"Case {number} ({SCENARIOS[name]}): {passed}")


if __name__ == "__main__":
    main()
