"""macOS clipboard — implements ClipboardPort with pbcopy / pbpaste."""

from __future__ import annotations

from clipp.domain.ports.clipboard_port import ClipboardPort
from clipp.infrastructure import process


class PbcopyClipboard(ClipboardPort):
    """Clipboard adapter using the tools shipped with macOS."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def copy(self, text: str) -> None:
        process.put(["pbcopy"], process.encode("pbcopy", text, self._encoding))

    def paste(self) -> str:
        return process.eat(["pbpaste"], encoding=self._encoding)
