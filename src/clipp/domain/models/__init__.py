"""Clipboard data models."""

from clipp.domain.models.board import Board
from clipp.domain.models.enums import BackendKind, PlatformFamily

__all__ = ["BackendKind", "Board", "PlatformFamily"]
