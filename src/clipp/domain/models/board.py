"""Board — the bound pair of clipboard operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from clipp.domain.models.enums import BackendKind
from clipp.domain.ports.clipboard_port import ClipboardPort


@dataclass(frozen=True)
class Board:
    """Immutable binding of one backend's ``copy`` and ``paste``.

    Built once by the resolver and owned by the binding cache.
    """

    kind: BackendKind
    copy: Callable[[str], None]
    paste: Callable[[], str]

    @classmethod
    def bind(cls, kind: BackendKind, backend: ClipboardPort) -> Board:
        """Bind the operations of *backend* under *kind*."""
        return cls(kind=kind, copy=backend.copy, paste=backend.paste)
