"""Process invoker — drive external clipboard tools over pipes.

All calls block until the child is done. There are no timeouts and no
retries: a failure raises ``InvocationError`` straight to the caller.
"""

from __future__ import annotations

import contextlib
import logging
import subprocess
from typing import Sequence

from clipp.domain.errors import InvocationError

logger = logging.getLogger(__name__)


def put(argv: Sequence[str], data: bytes) -> None:
    """Feed *data* to the standard input of *argv* and wait for it to exit.

    Raises:
        InvocationError: Launch, write or wait failed, or the tool exited
            with a non-zero status.
    """
    logger.debug("put %d bytes -> %s", len(data), " ".join(argv))
    try:
        proc = subprocess.Popen(list(argv), stdin=subprocess.PIPE)
    except OSError as exc:
        raise InvocationError(argv[0], f"could not run: {exc}") from exc

    try:
        proc.stdin.write(data)
        proc.stdin.close()
    except OSError as exc:
        with contextlib.suppress(OSError):
            proc.stdin.close()
        proc.wait()
        raise InvocationError(argv[0], f"write failed: {exc}") from exc

    if proc.wait() != 0:
        raise InvocationError(argv[0], f"exited with status {proc.returncode}")


def eat(argv: Sequence[str], *, quiet: bool = False, encoding: str = "utf-8") -> str:
    """Run *argv* and return everything it writes to standard output.

    The exit status is not inspected; tools report an empty clipboard
    through it. With *quiet* the tool's standard error is discarded.

    Raises:
        InvocationError: Launch or read failed, or the output is not valid
            text in *encoding*.
    """
    logger.debug("eat <- %s", " ".join(argv))
    try:
        proc = subprocess.run(
            list(argv),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL if quiet else None,
            check=False,
        )
    except OSError as exc:
        raise InvocationError(argv[0], f"could not run: {exc}") from exc

    try:
        return proc.stdout.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise InvocationError(argv[0], f"output is not {encoding} text: {exc}") from exc


def run(argv: Sequence[str]) -> None:
    """Run *argv* without pipes and require a successful exit.

    Raises:
        InvocationError: Launch failed or the tool exited non-zero.
    """
    logger.debug("run %s", " ".join(argv))
    try:
        proc = subprocess.run(list(argv), check=False)
    except OSError as exc:
        raise InvocationError(argv[0], f"could not run: {exc}") from exc

    if proc.returncode != 0:
        raise InvocationError(argv[0], f"exited with status {proc.returncode}")


def encode(program: str, text: str, encoding: str) -> bytes:
    """Encode *text* for the standard input of *program*.

    Raises:
        InvocationError: *text* cannot be represented in *encoding*.
    """
    try:
        return text.encode(encoding)
    except (UnicodeEncodeError, LookupError) as exc:
        raise InvocationError(program, f"cannot encode text as {encoding}: {exc}") from exc
