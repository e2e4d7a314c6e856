import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from PySide6 import QtCore  # noqa: E402

from gui.theme import ThemeManager, ThemeMode  # noqa: E402


def reopen(mgr: ThemeManager) -> ThemeManager:
    mgr.settings.sync()
    path = mgr.settings.fileName()
    return ThemeManager(QtCore.QSettings(path, QtCore.QSettings.IniFormat))


def test_theme_mode_persists(theme):
    theme.save_theme_mode(ThemeMode.DARK)
    assert reopen(theme).current_mode == ThemeMode.DARK


def test_invalid_theme_mode_falls_back_to_system(settings):
    settings.setValue("theme_mode", "neon")
    assert ThemeManager(settings).current_mode == ThemeMode.SYSTEM


def test_rainbow_switch_persists(theme):
    assert theme.is_rainbow_on() is False
    theme.set_rainbow_on(True)
    assert theme.is_rainbow_on() is True
    assert reopen(theme).is_rainbow_on() is True


def test_gradient_has_stops_and_colors_between(theme):
    colors = theme.get_rainbow_colors()
    stops = theme.get_stop_colors()
    assert len(stops) == 5
    assert len(colors) == 5 + 4 * 4
    assert colors[::5] == stops


def test_gradient_interpolates_between_stops(theme):
    theme.set_stop_color(0, "#000000")
    theme.set_stop_color(1, "#0a0a0a")
    colors = theme.get_rainbow_colors()
    assert colors[:6] == ["#000000", "#020202", "#040404", "#060606", "#080808", "#0a0a0a"]


def test_stop_colors_are_per_mode(theme):
    theme.set_stop_color(2, "#123456")
    theme.save_theme_mode(ThemeMode.DARK)
    assert theme.get_stop_colors()[2] == ThemeManager.RAINBOW_STOPS_DARK[2]


def test_invalid_stop_color_rejected(theme):
    with pytest.raises(ValueError):
        theme.set_stop_color(0, "not a color")
    with pytest.raises(ValueError):
        theme.set_stop_color(7, "#ffffff")


def test_syntax_color_override(theme):
    assert theme.get_syntax_colors()["keyword"] == "#0057b7"
    theme.set_syntax_color("keyword", "#ff0000")
    assert theme.get_syntax_colors()["keyword"] == "#ff0000"
    assert reopen(theme).get_syntax_colors()["keyword"] == "#ff0000"


def test_syntax_color_keys_are_per_mode(theme, settings):
    theme.set_syntax_color("keyword", "#ff0000")
    assert settings.value("colors/light/keyword") == "#ff0000"
    assert settings.value("colors/dark/keyword") is None
    theme.save_theme_mode(ThemeMode.DARK)
    assert theme.get_syntax_colors()["keyword"] != "#ff0000"
