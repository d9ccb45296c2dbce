"""Resolver — pick the one clipboard backend this process will use.

The checks run in a fixed priority order and the first match wins:

1. native platform (Windows API, macOS pbcopy), without any probing;
2. WSL, through the Windows host tools;
3. a Wayland or X display must be announced, otherwise nothing can work;
4. Wayland with ``wl-copy`` installed;
5. ``xsel``, then ``xclip``, then Klipper reachable through ``qdbus``.
"""

from __future__ import annotations

import logging

from clipp.config.models import ClippConfig
from clipp.domain.errors import ResolutionError
from clipp.domain.models import BackendKind, Board, PlatformFamily
from clipp.infrastructure.backends import create_backend
from clipp.infrastructure.probe import EnvironmentProbe

logger = logging.getLogger(__name__)

_NO_CLIPBOARD = "no clipboard available"


def choose(probe: EnvironmentProbe, config: ClippConfig) -> BackendKind:
    """Return the backend kind to bind, without instantiating it.

    Raises:
        ResolutionError: No display is announced or no usable tool is
            installed.
    """
    family = PlatformFamily.from_platform(probe.platform)
    if family is PlatformFamily.WINDOWS:
        return BackendKind.WINDOWS
    if family is PlatformFamily.MACOS:
        return BackendKind.PBCOPY

    if probe.is_wsl():
        return BackendKind.WSL

    env = config.environment
    wayland = probe.display_set(env.wayland_display_var)
    if not wayland and not probe.display_set(env.display_var):
        logger.debug("neither %s nor %s is set", env.wayland_display_var, env.display_var)
        raise ResolutionError(
            f"{_NO_CLIPBOARD}: neither {env.display_var} nor {env.wayland_display_var} is set"
        )

    if wayland and probe.has("wl-copy"):
        return BackendKind.WAYLAND
    if wayland:
        logger.debug("Wayland display without wl-copy, trying X11 tools")

    if probe.has("xsel"):
        return BackendKind.XSEL
    if probe.has("xclip"):
        return BackendKind.XCLIP
    if probe.has("klipper") and probe.has("qdbus"):
        return BackendKind.KLIPPER

    raise ResolutionError(f"{_NO_CLIPBOARD}: install wl-clipboard, xsel, xclip or klipper")


def resolve(probe: EnvironmentProbe, config: ClippConfig) -> Board:
    """Choose a backend and bind its operations into a :class:`Board`."""
    kind = choose(probe, config)
    family = PlatformFamily.from_platform(probe.platform)
    board = Board.bind(kind, create_backend(family, kind, config))
    logger.info("Using %s clipboard backend", kind.value)
    return board
