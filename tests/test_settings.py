"""Tests for dicegame.core.settings – YAML settings and env override."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from dicegame.core.rounds import Condition
from dicegame.core.settings import (
    ROLL_DELAY_ENV,
    GameSettings,
    default_settings_path,
    load_settings,
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ROLL_DELAY_ENV, raising=False)


def _write(tmp_path: Path, body: str) -> Path:
    p = tmp_path / "settings.yaml"
    p.write_text(textwrap.dedent(body), encoding="utf-8")
    return p


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

class TestLoadSettings:
    def test_packaged_file_loads(self):
        assert default_settings_path().exists()
        settings = load_settings()
        assert settings == GameSettings()

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_settings(tmp_path / "nope.yaml") == GameSettings()

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        assert load_settings(_write(tmp_path, "")) == GameSettings()

    def test_values_read(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """
            roll_delay_ms: 250
            default_threshold: 30
            default_condition: less
            """,
        )
        settings = load_settings(path)
        assert settings.roll_delay_ms == 250
        assert settings.default_threshold == "30"
        assert settings.default_condition is Condition.LESS

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        settings = load_settings(_write(tmp_path, "roll_delay_ms: 0\n"))
        assert settings.roll_delay_ms == 0
        assert settings.default_threshold == "50"


# ---------------------------------------------------------------------------
# Malformed content
# ---------------------------------------------------------------------------

class TestMalformed:
    @pytest.mark.parametrize(
        "body",
        [
            "- just\n- a list\n",
            "roll_delay_ms: -1\n",
            "roll_delay_ms: soon\n",
            "roll_delay_ms: true\n",
            "default_threshold: 0\n",
            "default_condition: equal\n",
            "roll_delay_ms: [unclosed\n",
        ],
    )
    def test_raises_value_error_naming_file(self, tmp_path: Path, body: str):
        with pytest.raises(ValueError, match="settings.yaml"):
            load_settings(_write(tmp_path, body))


# ---------------------------------------------------------------------------
# Environment override
# ---------------------------------------------------------------------------

class TestEnvOverride:
    def test_env_wins_over_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ROLL_DELAY_ENV, "10")
        settings = load_settings(_write(tmp_path, "roll_delay_ms: 500\n"))
        assert settings.roll_delay_ms == 10

    def test_bad_env_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ROLL_DELAY_ENV, "fast")
        settings = load_settings(_write(tmp_path, "roll_delay_ms: 500\n"))
        assert settings.roll_delay_ms == 500
