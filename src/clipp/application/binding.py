"""Binding cache — the process-wide, write-once clipboard binding.

Resolution runs at most once per cache even when many threads make their
first call at the same moment. Once set, the binding never changes.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from clipp.application.resolver import resolve
from clipp.config.loader import get_config
from clipp.domain.models import Board
from clipp.infrastructure.probe import EnvironmentProbe

logger = logging.getLogger(__name__)


class BindingCache:
    """Holds the resolved :class:`Board`, resolving lazily on first access.

    Parameters
    ----------
    resolver : Callable[[], Board]
        Called (under a lock) to produce the binding. If it raises, the
        cache stays unset and the error reaches the caller.
    """

    def __init__(self, resolver: Callable[[], Board]) -> None:
        self._resolver = resolver
        self._lock = threading.Lock()
        self._board: Optional[Board] = None
        self._resolutions = 0

    @property
    def resolutions(self) -> int:
        """How many times the resolver has produced a binding."""
        return self._resolutions

    @property
    def is_set(self) -> bool:
        """True once a binding has been resolved."""
        return self._board is not None

    def get(self) -> Board:
        """Return the binding, resolving it first if needed."""
        board = self._board
        if board is not None:
            return board

        with self._lock:
            if self._board is None:
                logger.debug("Resolving clipboard backend")
                board = self._resolver()
                self._resolutions += 1
                self._board = board
            return self._board


def _resolve_default() -> Board:
    config = get_config()
    return resolve(EnvironmentProbe(config.environment), config)


clipboard_binding = BindingCache(_resolve_default)
