"""Tests for the scenario runner."""

from timetoken.config import TokenConfig
from timetoken.demo import SCENARIOS, run_scenarios, main
from .test_vectors import WINDOW_START


class TestScenarios:
    """Every scenario behaves as the scheme promises."""

    def test_all_scenarios_pass(self) -> None:
        """All four cases report True from a window start."""
        results = run_scenarios(TokenConfig(key_size=1024), start=WINDOW_START)

        assert list(results) == list(SCENARIOS)
        assert all(results.values()), results

    def test_half_window_crossing_boundary(self) -> None:
        """Starting late in a window pushes the half-window case into the next one."""
        results = run_scenarios(TokenConfig(key_size=1024), start=WINDOW_START + 15)

        assert results["half_window_delay"] is False
        assert results["valid_request"] is True

    def test_main_prints_cases(self, monkeypatch, capsys) -> None:
        """main prints one line per case."""
        monkeypatch.setenv("TIMETOKEN_KEY_SIZE", "1024")
        main()

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[0].startswith("Case 1 (")
        assert all(line.endswith("True") for line in lines)
