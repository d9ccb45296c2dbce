"""Wayland clipboard — implements ClipboardPort with wl-clipboard."""

from __future__ import annotations

import logging

from clipp.domain.ports.clipboard_port import ClipboardPort
from clipp.infrastructure import process

logger = logging.getLogger(__name__)


class WaylandClipboard(ClipboardPort):
    """Clipboard adapter using ``wl-copy`` / ``wl-paste``.

    Piping an empty buffer to ``wl-copy`` does not give up selection
    ownership, so copying ``""`` runs ``wl-copy --clear`` instead.
    """

    def __init__(self, primary: bool = True, encoding: str = "utf-8") -> None:
        self._flags = ["-p"] if primary else []
        self._encoding = encoding

    def copy(self, text: str) -> None:
        if text == "":
            logger.debug("empty copy, clearing the selection")
            process.run(["wl-copy", *self._flags, "--clear"])
            return
        process.put(["wl-copy", *self._flags], process.encode("wl-copy", text, self._encoding))

    def paste(self) -> str:
        return process.eat(["wl-paste", "-n", *self._flags], encoding=self._encoding)
