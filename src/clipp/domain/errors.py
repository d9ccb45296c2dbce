"""Domain errors — custom exceptions for clipp.

Every failure is fatal for the operation that hit it: the exceptions below
propagate unchanged to the caller of ``clipp.copy`` / ``clipp.paste``.
Each class names the stage that failed.
"""


class ClippError(Exception):
    """Base exception for all clipp errors."""


class ResolutionError(ClippError):
    """Raised when no clipboard backend can be bound in this environment."""


class InvocationError(ClippError):
    """Raised when an external tool or the native API could not be driven.

    Covers launch failure, pipe I/O failure, undecodable output and a
    non-successful exit where success is required.
    """

    def __init__(self, program: str, reason: str) -> None:
        super().__init__(f"{program}: {reason}")
        self.program = program
        self.reason = reason


class ContractViolationError(ClippError):
    """Raised when a backend's output does not have its documented shape."""


class ConfigurationError(ClippError):
    """Raised when configuration is invalid."""
