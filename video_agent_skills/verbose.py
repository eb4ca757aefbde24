"""Rich diagnostics for the video-agent-skills CLI, written to standard error."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

COLORS = {
    "primary": "#7AA2F7",
    "success": "#9ECE6A",
    "warning": "#E0AF68",
    "error": "#F7768E",
    "text": "#A9B1D6",
    "muted": "#565F89",
    "accent": "#7DCFFF",
    "border": "#3B4261",
}

STYLE_SUCCESS = Style(color=COLORS["success"])
STYLE_WARNING = Style(color=COLORS["warning"])
STYLE_ERROR = Style(color=COLORS["error"])
STYLE_TEXT = Style(color=COLORS["text"])
STYLE_MUTED = Style(color=COLORS["muted"])
STYLE_ACCENT = Style(color=COLORS["accent"], bold=True)


class VideoAgentPrinter:
    """Progress and error output. Never touches stdout, which carries the model text."""

    def __init__(self, enabled: bool = True, console: Console | None = None):
        self.enabled = enabled
        self.console = console or Console(stderr=True)

    def print_header(self, command: str, config: dict[str, Any]) -> None:
        """Print a panel describing the request about to be sent."""
        if not self.enabled:
            return

        title = Text()
        title.append("◆ ", style=STYLE_ACCENT)
        title.append("video-agent-skills", style=Style(color=COLORS["primary"], bold=True))
        title.append(f" ━ {command}", style=STYLE_MUTED)

        table = Table(show_header=False, show_edge=False, box=None, padding=(0, 2))
        table.add_column("key", style=STYLE_MUTED, width=12)
        table.add_column("value", style=STYLE_TEXT)
        for key, value in config.items():
            table.add_row(key, Text(str(value), style=STYLE_ACCENT))

        self.console.print(
            Panel(
                table,
                title=title,
                title_align="left",
                border_style=COLORS["border"],
                padding=(0, 2),
            )
        )

    def print_step(self, name: str, detail: str = "") -> None:
        if not self.enabled:
            return
        text = Text()
        text.append("▸ ", style=STYLE_SUCCESS)
        text.append(name, style=Style(color=COLORS["success"], bold=True))
        if detail:
            text.append(f"  {detail}", style=STYLE_MUTED)
        self.console.print(text)

    def print_step_done(self, name: str, detail: str = "", elapsed: float | None = None) -> None:
        if not self.enabled:
            return
        text = Text()
        text.append("  ✓ ", style=STYLE_SUCCESS)
        text.append(name, style=STYLE_TEXT)
        if detail:
            text.append(f"  {detail}", style=STYLE_MUTED)
        if elapsed is not None:
            text.append(f"  ({elapsed:.2f}s)", style=STYLE_MUTED)
        self.console.print(text)

    def print_error(self, message: str) -> None:
        """Print an error panel. Errors are shown even when progress output is off."""
        title = Text()
        title.append("✗ ", style=STYLE_ERROR)
        title.append("Error", style=Style(color=COLORS["error"], bold=True))

        self.console.print(
            Panel(
                Text(message, style=STYLE_ERROR),
                title=title,
                title_align="left",
                border_style=COLORS["error"],
                padding=(0, 2),
            )
        )
