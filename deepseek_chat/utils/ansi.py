"""Colour and styling helpers built on :mod:`rich`."""

import os
from rich.console import Console


console = Console()


class Ansi:
    """Lightweight collection of style names used throughout the app."""

    BOLD = "bold"
    DIM = "dim"

    FG_GREEN = "bright_green"
    FG_BLUE = "bright_blue"
    FG_CYAN = "bright_cyan"
    FG_YELLOW = "bright_yellow"
    FG_RED = "bright_red"
    FG_WHITE = "bright_white"
    FG_GREY = "bright_black"

    @staticmethod
    def style(text: str, *codes: str) -> str:
        """Return *text* wrapped in rich markup unless ``NO_COLOR`` is set."""
        if os.getenv("NO_COLOR") is not None:
            return text
        style = " ".join(codes)
        return f"[{style}]{text}[/]"


# Common labels used throughout the application
USER_LABEL = Ansi.style("You", Ansi.FG_BLUE, Ansi.BOLD)
ASSISTANT_LABEL = Ansi.style("DeepSeek", Ansi.FG_GREEN, Ansi.BOLD)
ERROR_LABEL = Ansi.style("Error:", Ansi.FG_RED, Ansi.BOLD)
INFO_LABEL = Ansi.style("Info:", Ansi.FG_CYAN, Ansi.BOLD)
