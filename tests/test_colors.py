"""Tests for dicegame.ui.colors – palette, outcome colors and blending."""

from __future__ import annotations

import pytest

from dicegame.ui.colors import GameColors, blend_hex, result_colors


# ===========================================================================
# GameColors
# ===========================================================================

class TestGameColors:
    @pytest.mark.parametrize("name", ["PRIMARY", "SUCCESS", "SUCCESS_LIGHT", "ERROR", "ERROR_LIGHT"])
    def test_outcome_and_primary_are_hex(self, name: str):
        value = getattr(GameColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_card_bg_is_rgba(self):
        assert GameColors.CARD_BG.startswith("rgba(")


# ===========================================================================
# result_colors
# ===========================================================================

class TestResultColors:
    def test_win_is_green(self):
        assert result_colors(True) == (GameColors.SUCCESS_LIGHT, GameColors.SUCCESS)

    def test_loss_is_red(self):
        assert result_colors(False) == (GameColors.ERROR_LIGHT, GameColors.ERROR)

    def test_badge_tint_is_valid_hex(self):
        light, _ = result_colors(True)
        tint = blend_hex(light, "#FFFFFF", 0.75)
        assert tint.startswith("#") and len(tint) == 7


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_endpoints(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_towards_white(self):
        assert blend_hex("#000000", "#FFFFFF", 0.5) == "#7F7F7F"

    def test_t_is_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    @pytest.mark.parametrize("a, b", [("FF0000", "#0000FF"), ("#FFF", "#000000"), ("#GGHHII", "#000000"), ("", "")])
    def test_invalid_input_returns_a(self, a: str, b: str):
        assert blend_hex(a, b, 0.5) == a
