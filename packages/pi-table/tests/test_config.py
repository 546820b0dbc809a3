"""Tests for pi.table.config -- settings file, overrides and colour detection."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pi.table.config import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    Config,
    default_config_path,
    load_config,
    should_colorize,
)
from pi.table.errors import ConfigError
from pi.table.format import FORMAT_BOX_CHARS, FORMAT_DEFAULT


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "table.json")
        assert config == Config()
        assert config.resolve_format() is FORMAT_DEFAULT
        assert config.line_terminator == "\n"

    def test_values_from_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "table.json",
            {"format": "box", "color": "never", "lineEnding": "crlf", "delimiter": ";"},
        )
        config = load_config(path)
        assert config.format_name == "box"
        assert config.color == "never"
        assert config.delimiter == ";"
        assert config.line_terminator == "\r\n"
        assert config.resolve_format() is FORMAT_BOX_CHARS

    def test_custom_format(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "table.json", {"customFormat": {"base": "clean", "indent": 2}})
        fmt = load_config(path).resolve_format()
        assert fmt.indent == 2
        assert fmt.column_separator is None

    def test_invalid_custom_format(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "table.json", {"customFormat": {"shape": "round"}})
        with pytest.raises(ConfigError):
            load_config(path).resolve_format()

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "table.json", {"theme": "dark"})
        with pytest.raises(ConfigError):
            load_config(path)

    def test_unknown_format(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "table.json", {"format": "fancy"})
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "table.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "table.json", [1, 2])
        with pytest.raises(ConfigError):
            load_config(path)

    def test_default_path(self) -> None:
        path = default_config_path()
        assert path.name == CONFIG_FILE_NAME
        assert path.parent.name == CONFIG_DIR_NAME


class TestConfig:
    def test_invalid_color(self) -> None:
        with pytest.raises(ConfigError):
            Config(color="sometimes")  # type: ignore[arg-type]

    def test_invalid_line_ending(self) -> None:
        with pytest.raises(ConfigError):
            Config(line_ending="cr")

    def test_overrides_skip_none(self) -> None:
        config = Config(color="never").apply_overrides(format_name="clean", color=None)
        assert config.format_name == "clean"
        assert config.color == "never"

    def test_overrides_are_validated(self) -> None:
        with pytest.raises(ConfigError):
            Config().apply_overrides(format_name="fancy")

    def test_named_format_override_replaces_custom_format(self) -> None:
        config = Config(custom_format={"base": "default"}).apply_overrides(format_name="box")
        assert config.custom_format is None
        assert config.resolve_format() is FORMAT_BOX_CHARS

    def test_override_without_format_keeps_custom_format(self) -> None:
        config = Config(custom_format={"indent": 2}).apply_overrides(color="never")
        assert config.resolve_format().indent == 2

    @pytest.mark.parametrize(
        "data",
        [
            {"format": ["box"]},
            {"color": 1},
            {"lineEnding": None},
            {"delimiter": 59},
            {"customFormat": 5},
            {"customFormat": ["base", "box"]},
        ],
    )
    def test_wrongly_typed_values(self, tmp_path: Path, data: dict[str, object]) -> None:
        path = _write(tmp_path / "table.json", data)
        with pytest.raises(ConfigError):
            load_config(path)

    def test_custom_format_with_list_separators(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "table.json", {"customFormat": {"separators": ["-+++"]}})
        with pytest.raises(ConfigError):
            load_config(path).resolve_format()


# ---------------------------------------------------------------------------
# Colour detection
# ---------------------------------------------------------------------------


class _Stream:
    def __init__(self, tty: bool) -> None:
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


class TestShouldColorize:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")

    def test_explicit_modes(self) -> None:
        assert should_colorize("always", _Stream(False)) is True
        assert should_colorize("never", _Stream(True)) is False

    def test_auto_follows_tty(self) -> None:
        assert should_colorize("auto", _Stream(True)) is True
        assert should_colorize("auto", _Stream(False)) is False

    def test_no_color_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert should_colorize("auto", _Stream(True)) is False

    def test_force_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert should_colorize("auto", _Stream(False)) is True

    def test_dumb_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERM", "dumb")
        assert should_colorize("auto", _Stream(True)) is False

    def test_stream_without_isatty(self) -> None:
        assert should_colorize("auto", object()) is False
