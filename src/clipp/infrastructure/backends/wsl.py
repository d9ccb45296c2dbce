"""WSL clipboard — implements ClipboardPort with the Windows host tools."""

from __future__ import annotations

from clipp.domain.errors import ContractViolationError
from clipp.domain.ports.clipboard_port import ClipboardPort
from clipp.infrastructure import process


class WslClipboard(ClipboardPort):
    """Clipboard adapter for Linux running under WSL.

    Copies through ``clip.exe`` and pastes through PowerShell's
    ``Get-Clipboard``, whose output always ends in CRLF.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def copy(self, text: str) -> None:
        process.put(["clip.exe"], process.encode("clip.exe", text, self._encoding))

    def paste(self) -> str:
        raw = process.eat(
            ["powershell.exe", "-noprofile", "-command", "Get-Clipboard"],
            encoding=self._encoding,
        )
        if not raw.endswith("\r\n"):
            raise ContractViolationError("Get-Clipboard output does not end with CRLF")
        return raw[:-2]
