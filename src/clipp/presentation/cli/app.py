"""Thin CLI wrapper — Typer commands that delegate to the clipp API."""

from __future__ import annotations

import logging
import sys
from typing import Annotated, Optional

import typer

import clipp
from clipp.config import get_config
from clipp.presentation.cli.formatters import backend_panel, error_message, json_panel

app = typer.Typer(
    name="clipp",
    help="📋 Read and write the system clipboard from the shell.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log backend resolution and tool calls")
    ] = False,
) -> None:
    """clipp — one clipboard API for Windows, macOS, WSL, Wayland and X11."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ---------------------------------------------------------------------------
# clipp copy
# ---------------------------------------------------------------------------


@app.command()
def copy(
    text: Annotated[
        Optional[str], typer.Argument(help="Text to copy (read from stdin when omitted)")
    ] = None,
) -> None:
    """Copy TEXT (or standard input) to the clipboard."""
    if text is None:
        text = sys.stdin.read()
    try:
        clipp.copy(text)
    except clipp.ClippError as exc:
        error_message(f"Copy failed: {exc}")
        raise typer.Exit(code=1) from exc


# ---------------------------------------------------------------------------
# clipp paste
# ---------------------------------------------------------------------------


@app.command()
def paste() -> None:
    """Write the clipboard contents to standard output, unchanged."""
    try:
        text = clipp.paste()
    except clipp.ClippError as exc:
        error_message(f"Paste failed: {exc}")
        raise typer.Exit(code=1) from exc
    sys.stdout.write(text)
    sys.stdout.flush()


# ---------------------------------------------------------------------------
# clipp which
# ---------------------------------------------------------------------------


@app.command()
def which() -> None:
    """Show which clipboard backend this environment resolves to."""
    try:
        kind = clipp.current_backend()
    except clipp.ClippError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1) from exc
    backend_panel(kind.value)


# ---------------------------------------------------------------------------
# clipp config
# ---------------------------------------------------------------------------


@app.command()
def config() -> None:
    """Show the active configuration as JSON."""
    try:
        cfg = get_config()
    except clipp.ClippError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1) from exc
    json_panel(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
