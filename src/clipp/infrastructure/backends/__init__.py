"""Clipboard backends and the per-platform capability table.

Backends that cannot exist on a platform are absent from its table, so the
resolver can never select them there.
"""

from __future__ import annotations

from typing import Callable

from clipp.config.models import ClippConfig
from clipp.domain.models.enums import BackendKind, PlatformFamily
from clipp.domain.ports.clipboard_port import ClipboardPort

BackendFactory = Callable[[ClippConfig], ClipboardPort]


def _xsel(config: ClippConfig) -> ClipboardPort:
    from clipp.infrastructure.backends.x11 import XselClipboard

    return XselClipboard(encoding=config.encoding)


def _xclip(config: ClippConfig) -> ClipboardPort:
    from clipp.infrastructure.backends.x11 import XclipClipboard

    return XclipClipboard(encoding=config.encoding)


def _wayland(config: ClippConfig) -> ClipboardPort:
    from clipp.infrastructure.backends.wayland import WaylandClipboard

    return WaylandClipboard(primary=config.wayland.primary, encoding=config.encoding)


def _klipper(config: ClippConfig) -> ClipboardPort:
    from clipp.infrastructure.backends.klipper import KlipperClipboard

    return KlipperClipboard(encoding=config.encoding)


def _wsl(config: ClippConfig) -> ClipboardPort:
    from clipp.infrastructure.backends.wsl import WslClipboard

    return WslClipboard(encoding=config.encoding)


def _pbcopy(config: ClippConfig) -> ClipboardPort:
    from clipp.infrastructure.backends.macos import PbcopyClipboard

    return PbcopyClipboard(encoding=config.encoding)


def _windows(config: ClippConfig) -> ClipboardPort:
    from clipp.infrastructure.backends.windows import WindowsClipboard

    return WindowsClipboard()


CAPABILITIES: dict[PlatformFamily, dict[BackendKind, BackendFactory]] = {
    PlatformFamily.WINDOWS: {BackendKind.WINDOWS: _windows},
    PlatformFamily.MACOS: {BackendKind.PBCOPY: _pbcopy},
    PlatformFamily.POSIX: {
        BackendKind.WSL: _wsl,
        BackendKind.WAYLAND: _wayland,
        BackendKind.XSEL: _xsel,
        BackendKind.XCLIP: _xclip,
        BackendKind.KLIPPER: _klipper,
    },
}


def available_backends(family: PlatformFamily) -> dict[BackendKind, BackendFactory]:
    """Return the backend factories that exist on *family*."""
    return CAPABILITIES[family]


def create_backend(family: PlatformFamily, kind: BackendKind, config: ClippConfig) -> ClipboardPort:
    """Instantiate backend *kind* for *family*.

    Raises:
        KeyError: *kind* does not exist on *family*.
    """
    return available_backends(family)[kind](config)
