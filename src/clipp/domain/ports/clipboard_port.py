"""Port: Clipboard — read and write the system clipboard as text."""

from abc import ABC, abstractmethod


class ClipboardPort(ABC):
    """Contract every clipboard backend satisfies."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Replace the system clipboard contents with *text*.

        An empty string is a meaningful call: backends whose mechanism can
        tell "clear" from "set to empty" must clear.

        Raises:
            InvocationError: The underlying tool or API failed.
        """
        ...

    @abstractmethod
    def paste(self) -> str:
        """Return the current clipboard contents.

        Raises:
            InvocationError: The underlying tool or API failed.
            ContractViolationError: The tool output had an unexpected shape.
        """
        ...
