"""Colour configuration for the preview with light/dark/system modes."""

from __future__ import annotations

from enum import Enum

from PySide6 import QtCore, QtGui, QtWidgets

from rainbow.styles import RAINBOW_STOP_COUNT

# Gradient colours generated between two adjacent stop colours.
RAINBOW_COLORS_BETWEEN = 4


class ThemeMode(Enum):
    """Theme mode enumeration."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class ThemeManager:
    """Manages preview colours and the rainbow switch with persistence."""

    SYNTAX_COLORS_LIGHT = {
        "keyword": "#0057b7",
        "number": "#b71c1c",
        "string": "#2e7d32",
        "comment": "#9e9e9e",
        "operator": "#37474f",
        "identifier": "#000000",
    }
    SYNTAX_COLORS_DARK = {
        "keyword": "#569cd6",
        "number": "#ce9178",
        "string": "#6a9955",
        "comment": "#6a9955",
        "operator": "#d4d4d4",
        "identifier": "#d4d4d4",
    }

    RAINBOW_STOPS_LIGHT = ["#9b3b6a", "#114d77", "#bc8650", "#005910", "#bc5150"]
    RAINBOW_STOPS_DARK = ["#529b2f", "#be9970", "#4d8dbf", "#c49ad1", "#e07a7a"]

    EDITOR_BG_LIGHT = "#ffffff"
    EDITOR_BG_DARK = "#252526"

    def __init__(self, settings: QtCore.QSettings | None = None):
        """Initialize theme manager."""
        if settings is None:
            settings = QtCore.QSettings("RainbowPreview", "RainbowPreview")
        self.settings = settings
        self.current_mode = self._load_theme_mode()

    def _load_theme_mode(self) -> ThemeMode:
        """Load theme mode from settings."""
        saved = self.settings.value("theme_mode", "system")
        try:
            return ThemeMode(saved)
        except ValueError:
            return ThemeMode.SYSTEM

    def save_theme_mode(self, mode: ThemeMode) -> None:
        """Save theme mode to settings."""
        self.current_mode = mode
        self.settings.setValue("theme_mode", mode.value)

    def get_active_mode(self) -> ThemeMode:
        """Get the currently active theme mode."""
        if self.current_mode == ThemeMode.SYSTEM:
            # Simple heuristic: check if palette is dark
            app = QtWidgets.QApplication.instance()
            if isinstance(app, QtGui.QGuiApplication):
                return (
                    ThemeMode.DARK
                    if app.palette().color(QtGui.QPalette.Window).lightness() < 128
                    else ThemeMode.LIGHT
                )
            return ThemeMode.LIGHT
        return self.current_mode

    def is_rainbow_on(self) -> bool:
        """Whether identifiers get rainbow colours."""
        value = self.settings.value("rainbow_on", False)
        # INI-backed settings hand booleans back as strings
        if isinstance(value, str):
            return value.lower() == "true"
        return bool(value)

    def set_rainbow_on(self, enabled: bool) -> None:
        """Persist the rainbow switch."""
        self.settings.setValue("rainbow_on", bool(enabled))

    def get_stop_colors(self) -> list[str]:
        """Get the configured rainbow stop colours for the active mode."""
        mode = self.get_active_mode()
        defaults = (
            self.RAINBOW_STOPS_DARK if mode == ThemeMode.DARK else self.RAINBOW_STOPS_LIGHT
        )
        stops = []
        for i, default in enumerate(defaults[:RAINBOW_STOP_COUNT]):
            value = self.settings.value(f"rainbow/stops_{mode.value}/{i}", default)
            stops.append(value if QtGui.QColor(value).isValid() else default)
        return stops

    def set_stop_color(self, index: int, color: str) -> None:
        """Persist one stop colour for the active mode."""
        if not 0 <= index < RAINBOW_STOP_COUNT:
            raise ValueError(f"stop index out of range: {index}")
        if not QtGui.QColor(color).isValid():
            raise ValueError(f"invalid color: {color}")
        mode = self.get_active_mode()
        self.settings.setValue(f"rainbow/stops_{mode.value}/{index}", color)

    def get_rainbow_colors(self, between: int = RAINBOW_COLORS_BETWEEN) -> list[str]:
        """Get the full gradient: every stop plus ``between`` colours after it."""
        stops = [QtGui.QColor(c) for c in self.get_stop_colors()]
        colors = []
        for i, stop in enumerate(stops):
            colors.append(stop.name())
            if i == len(stops) - 1:
                break
            nxt = stops[i + 1]
            for step in range(1, between + 1):
                t = step / (between + 1)
                colors.append(
                    QtGui.QColor(
                        round(stop.red() + (nxt.red() - stop.red()) * t),
                        round(stop.green() + (nxt.green() - stop.green()) * t),
                        round(stop.blue() + (nxt.blue() - stop.blue()) * t),
                    ).name()
                )
        return colors

    def get_syntax_colors(self) -> dict[str, str]:
        """Get syntax highlighting colors for current theme."""
        active = self.get_active_mode()
        base = (
            self.SYNTAX_COLORS_DARK if active == ThemeMode.DARK else self.SYNTAX_COLORS_LIGHT
        )
        return {
            name: self.settings.value(f"colors/{active.value}/{name}", default)
            for name, default in base.items()
        }

    def set_syntax_color(self, name: str, color: str) -> None:
        """Persist a colour override for a plain style."""
        if not QtGui.QColor(color).isValid():
            raise ValueError(f"invalid color: {color}")
        self.settings.setValue(f"colors/{self.get_active_mode().value}/{name}", color)

    def get_editor_background(self) -> str:
        """Get the preview background for the current theme."""
        if self.get_active_mode() == ThemeMode.DARK:
            return self.EDITOR_BG_DARK
        return self.EDITOR_BG_LIGHT
