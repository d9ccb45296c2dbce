"""X11 clipboards — implement ClipboardPort with xsel and xclip.

Both tools are pointed at the CLIPBOARD selection, never PRIMARY.
"""

from __future__ import annotations

from clipp.domain.ports.clipboard_port import ClipboardPort
from clipp.infrastructure import process


class XselClipboard(ClipboardPort):
    """Clipboard adapter using ``xsel``."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def copy(self, text: str) -> None:
        process.put(["xsel", "-b", "-i"], process.encode("xsel", text, self._encoding))

    def paste(self) -> str:
        return process.eat(["xsel", "-b", "-o"], encoding=self._encoding)


class XclipClipboard(ClipboardPort):
    """Clipboard adapter using ``xclip``."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def copy(self, text: str) -> None:
        process.put(["xclip", "-selection", "c"], process.encode("xclip", text, self._encoding))

    def paste(self) -> str:
        # xclip complains on stderr when the selection is empty
        return process.eat(["xclip", "-selection", "c", "-o"], quiet=True, encoding=self._encoding)
