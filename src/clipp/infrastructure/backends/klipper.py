"""KDE clipboard — implements ClipboardPort by talking to Klipper over D-Bus."""

from __future__ import annotations

from clipp.domain.errors import ContractViolationError
from clipp.domain.ports.clipboard_port import ClipboardPort
from clipp.infrastructure import process

_QDBUS = ["qdbus", "org.kde.klipper", "/klipper"]


class KlipperClipboard(ClipboardPort):
    """Clipboard adapter using ``qdbus`` calls into Klipper.

    ``getClipboardContents`` prints the text followed by one newline, which
    :meth:`paste` removes.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def copy(self, text: str) -> None:
        process.run([*_QDBUS, "setClipboardContents", text])

    def paste(self) -> str:
        raw = process.eat([*_QDBUS, "getClipboardContents"], encoding=self._encoding)
        if not raw.endswith("\n"):
            raise ContractViolationError(
                "qdbus getClipboardContents output does not end with a newline"
            )
        return raw[:-1]
