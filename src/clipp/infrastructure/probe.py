"""Environment probe — read-only facts used to pick a clipboard backend."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from clipp.config.models import EnvironmentConfig

logger = logging.getLogger(__name__)


class EnvironmentProbe:
    """Answers questions about the host without changing it.

    Parameters
    ----------
    config : EnvironmentConfig | None
        Variable names and the WSL version file to consult.
    environ : Mapping[str, str] | None
        Environment to inspect; ``os.environ`` when omitted.
    platform : str | None
        Platform identity; ``sys.platform`` when omitted.
    """

    def __init__(
        self,
        config: Optional[EnvironmentConfig] = None,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[str] = None,
    ) -> None:
        self._config = config or EnvironmentConfig()
        self._environ = os.environ if environ is None else environ
        self.platform = platform or sys.platform

    def has(self, name: str) -> bool:
        """True if an executable called *name* is on the search path."""
        found = shutil.which(name, path=self._environ.get("PATH", os.defpath)) is not None
        logger.debug("executable %s on path: %s", name, found)
        return found

    def is_wsl(self) -> bool:
        """True if the kernel version file mentions the WSL vendor marker.

        An unreadable file only means there is no evidence of WSL.
        """
        try:
            text = Path(self._config.version_file).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("cannot read %s: %s", self._config.version_file, exc)
            return False
        return self._config.wsl_marker.lower() in text.lower()

    def display_set(self, name: str) -> bool:
        """True if the environment variable *name* is set."""
        return name in self._environ
