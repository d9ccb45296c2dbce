"""Rich formatting utilities for the CLI.

Keeps all Rich rendering in one module that knows nothing about how the
clipboard is resolved.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

console = Console()
err_console = Console(stderr=True)


def error_message(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]❌ {message}[/]")


def backend_panel(kind: str, title: str = "clipp") -> None:
    """Print the bound backend in a green panel."""
    console.print(Panel(f"Clipboard backend: [bold]{kind}[/]", title=title, border_style="green"))


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )
