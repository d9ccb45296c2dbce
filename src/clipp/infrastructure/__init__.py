"""Infrastructure layer — process, environment and clipboard adapters."""

from clipp.infrastructure.probe import EnvironmentProbe

__all__ = ["EnvironmentProbe"]
