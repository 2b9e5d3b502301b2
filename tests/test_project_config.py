from __future__ import annotations

import pytest

import project_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    for name in ("SUDOKU_EVENTS_ENABLED", "SUDOKU_EVENTS_DIR", "SUDOKU_CLI_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    project_config.reload()
    yield
    project_config.reload()


def _write_config(tmp_path, text: str):
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_repository_defaults_are_loaded() -> None:
    assert project_config.get_section("events.enabled") is False
    assert project_config.get_section("events.dir") == "logs/solver"
    assert project_config.get_section("cli.output") == "json"


def test_missing_key_raises_without_default() -> None:
    with pytest.raises(KeyError):
        project_config.get_section("events.nope")
    assert project_config.get_section("events.nope", "fallback") == "fallback"


def test_config_path_can_be_overridden(tmp_path, monkeypatch) -> None:
    path = _write_config(tmp_path, '[events]\nenabled = true\ndir = "elsewhere"\n')
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))
    project_config.reload()
    assert project_config.get_section("events.enabled") is True
    assert project_config.get_section("events.dir") == "elsewhere"


def test_missing_config_file_yields_empty_mapping(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_CONFIG", str(tmp_path / "absent.toml"))
    project_config.reload()
    assert project_config.get_config() == {}
    assert project_config.get_section("cli.output", "json") == "json"


def test_environment_overrides_config() -> None:
    env = {"SUDOKU_EVENTS_ENABLED": "yes", "SUDOKU_EVENTS_DIR": "/tmp/events"}
    assert project_config.resolve("events.enabled", False, env=env) is True
    assert project_config.resolve("events.dir", "logs/solver", env=env) == "/tmp/events"
    assert project_config.resolve("events.enabled", False, env={"SUDOKU_EVENTS_ENABLED": "maybe"}) is False
    assert project_config.resolve("cli.output", "json", env={}) == "json"


def test_resolve_layers_overrides_over_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_CLI_OUTPUT", "text")
    assert project_config.resolve("cli.output", "json") == "text"
    assert project_config.resolve("cli.output", "json", env={"SUDOKU_CLI_OUTPUT": "json"}) == "json"

    env = project_config.build_env({"SUDOKU_EVENTS_DIR": "x"})
    assert env["SUDOKU_CLI_OUTPUT"] == "text"
    assert env["SUDOKU_EVENTS_DIR"] == "x"
