"""Enumerations for clipboard backends."""

from enum import Enum


class BackendKind(str, Enum):
    """Clipboard mechanisms clipp knows how to drive."""

    XSEL = "xsel"  # X11, first choice
    XCLIP = "xclip"  # X11, second choice
    WAYLAND = "wayland"  # wl-clipboard
    KLIPPER = "klipper"  # KDE clipboard over D-Bus
    WINDOWS = "windows"  # native Win32 API
    WSL = "wsl"  # Windows host tools from inside WSL
    PBCOPY = "pbcopy"  # macOS pbcopy / pbpaste


class PlatformFamily(str, Enum):
    """Platform families that decide which backends exist at all."""

    WINDOWS = "windows"
    MACOS = "macos"
    POSIX = "posix"

    @classmethod
    def from_platform(cls, platform: str) -> "PlatformFamily":
        """Map a ``sys.platform`` value to its family."""
        if platform == "win32":
            return cls.WINDOWS
        if platform == "darwin":
            return cls.MACOS
        return cls.POSIX
