"""Windows clipboard — implements ClipboardPort with the Win32 API.

Only importable on Windows; the backend registry never loads it elsewhere.
"""

from __future__ import annotations

import pywintypes
import win32clipboard
import win32con

from clipp.domain.errors import InvocationError
from clipp.domain.ports.clipboard_port import ClipboardPort


class WindowsClipboard(ClipboardPort):
    """Clipboard adapter using ``win32clipboard`` (pywin32)."""

    def copy(self, text: str) -> None:
        try:
            win32clipboard.OpenClipboard()
            try:
                win32clipboard.EmptyClipboard()
                win32clipboard.SetClipboardText(text, win32con.CF_UNICODETEXT)
            finally:
                win32clipboard.CloseClipboard()
        except pywintypes.error as exc:
            raise InvocationError("win32clipboard", f"set clipboard failed: {exc}") from exc

    def paste(self) -> str:
        try:
            win32clipboard.OpenClipboard()
            try:
                return win32clipboard.GetClipboardData(win32con.CF_UNICODETEXT)
            finally:
                win32clipboard.CloseClipboard()
        except (pywintypes.error, TypeError) as exc:
            raise InvocationError("win32clipboard", f"get clipboard failed: {exc}") from exc
