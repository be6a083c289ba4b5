import logging

import pytest
from rich.console import Console

from gridseek.__main__ import main
from gridseek.app import build_session, run_headless
from gridseek.config import FinderConfig
from gridseek.log import configure_logging
from gridseek.render.textual_app import GridSeekApp
from gridseek.search.contracts import SearchStatus


def test_run_headless_on_open_board() -> None:
    console = Console(width=120, record=True)
    config = FinderConfig(size=5, obstacle_density=0.0, seed=1)
    result = run_headless(config, console=console)

    assert result.status == SearchStatus.SUCCEEDED
    assert result.cost == 8
    assert result.route()[0] == 0
    assert result.route()[-1] == 24
    assert "succeeded" in console.export_text()


def test_run_headless_keeps_endpoints_free() -> None:
    config = FinderConfig(size=6, obstacle_density=0.9, seed=3)
    result = run_headless(
        config, start=(1, 1), end=(4, 4), console=Console(record=True)
    )
    assert result.start == 7
    assert result.end == 28


def test_build_session_is_seeded() -> None:
    config = FinderConfig(size=10, obstacle_density=0.4, seed=11)
    assert build_session(config).tiles.blocked == build_session(config).tiles.blocked


def test_interactive_app_builds_seeded_board() -> None:
    config = FinderConfig(size=6, obstacle_density=0.4, seed=5)
    app = GridSeekApp(config)
    assert app.session.size == 6
    assert app.session.tiles.blocked == build_session(config).tiles.blocked
    assert "q" in [binding[0] for binding in GridSeekApp.BINDINGS]


def test_main_headless_prints_board(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--headless", "--size", "4", "--density", "0", "--seed", "2"])
    output = capsys.readouterr().out
    assert "Grid" in output
    assert "Cost" in output


def test_main_rejects_identical_endpoints() -> None:
    with pytest.raises(SystemExit):
        main(
            [
                "--headless",
                "--size",
                "4",
                "--density",
                "0",
                "--start",
                "1,1",
                "--end",
                "1,1",
            ]
        )


def test_main_rejects_invalid_config() -> None:
    with pytest.raises(SystemExit):
        main(["--headless", "--size", "1"])


def test_main_rejects_unknown_log_level_from_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("GRIDSEEK_LOG_LEVEL", "loud")
    with pytest.raises(SystemExit, match="Log level"):
        main(["--headless", "--size", "4", "--density", "0"])


def test_configure_logging_is_idempotent() -> None:
    root = logging.getLogger()
    configure_logging("INFO")
    count = len(root.handlers)
    configure_logging("DEBUG")
    assert len(root.handlers) == count
    assert root.level == logging.DEBUG
    with pytest.raises(ValueError):
        configure_logging("LOUD")
    root.setLevel(logging.WARNING)
