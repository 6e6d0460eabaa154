"""Theme primitives for the Tk shell."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    background_color: str = "#1e1e2e"
    foreground_color: str = "#cdd6f4"
    muted_color: str = "#a6adc8"
    accent_color: str = "#89b4fa"
    error_color: str = "#f38ba8"
    font_family: str = "Inter"


DEFAULT_THEME = Theme()
