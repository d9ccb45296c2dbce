"""clipp — simple cross platform clipboard.

::

    import clipp

    clipp.copy("wow such clipboard")
    assert clipp.paste() == "wow such clipboard"

The backend is chosen on the first call and kept for the life of the process.
"""

from __future__ import annotations

from clipp.application.binding import clipboard_binding
from clipp.domain.errors import (
    ClippError,
    ConfigurationError,
    ContractViolationError,
    InvocationError,
    ResolutionError,
)
from clipp.domain.models import BackendKind

__version__ = "0.1.0"

__all__ = [
    "BackendKind",
    "ClippError",
    "ConfigurationError",
    "ContractViolationError",
    "InvocationError",
    "ResolutionError",
    "copy",
    "current_backend",
    "paste",
]


def copy(text: object) -> None:
    """Copy the string form of *text* to the clipboard."""
    clipboard_binding.get().copy(str(text))


def paste() -> str:
    """Return the text currently on the clipboard."""
    return clipboard_binding.get().paste()


def current_backend() -> BackendKind:
    """Return which backend this process is bound to."""
    return clipboard_binding.get().kind
