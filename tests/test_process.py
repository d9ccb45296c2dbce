"""Tests for the process invoker, driving real child processes."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from clipp.domain.errors import InvocationError
from clipp.infrastructure import process

PY = sys.executable
MISSING = "clipp-no-such-program-3f9a"


class TestPut:
    def test_writes_bytes_to_stdin(self, tmp_path: Path):
        out = tmp_path / "out.bin"
        script = f"import sys; open({str(out)!r}, 'wb').write(sys.stdin.buffer.read())"
        process.put([PY, "-c", script], "héllo\nworld".encode("utf-8"))
        # put only returns once the child has exited
        assert out.read_bytes() == "héllo\nworld".encode("utf-8")

    def test_empty_input(self, tmp_path: Path):
        out = tmp_path / "out.bin"
        script = f"import sys; open({str(out)!r}, 'wb').write(sys.stdin.buffer.read())"
        process.put([PY, "-c", script], b"")
        assert out.read_bytes() == b""

    def test_missing_program_raises(self):
        with pytest.raises(InvocationError) as info:
            process.put([MISSING], b"data")
        assert info.value.program == MISSING

    def test_nonzero_exit_raises(self):
        with pytest.raises(InvocationError, match="status 3"):
            process.put([PY, "-c", "import sys; sys.stdin.read(); sys.exit(3)"], b"x")

    def test_unread_input_raises(self):
        """A tool that exits without consuming its input must not look like success."""
        script = "import sys; sys.stdin.close()"
        with pytest.raises(InvocationError, match="write failed"):
            process.put([PY, "-c", script], b"x" * (8 << 20))


class TestEat:
    def test_reads_stdout_verbatim(self):
        text = process.eat([PY, "-c", "import sys; sys.stdout.write('a\\nb\\n')"])
        assert text == "a\nb\n"

    def test_ignores_exit_status(self):
        text = process.eat([PY, "-c", "import sys; sys.stdout.write('partial'); sys.exit(1)"])
        assert text == "partial"

    def test_quiet_drops_stderr(self, capfd):
        script = "import sys; sys.stderr.write('noise'); sys.stdout.write('ok')"
        assert process.eat([PY, "-c", script], quiet=True) == "ok"
        assert "noise" not in capfd.readouterr().err

    def test_invalid_utf8_raises(self):
        script = "import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"
        with pytest.raises(InvocationError, match="utf-8"):
            process.eat([PY, "-c", script])

    def test_missing_program_raises(self):
        with pytest.raises(InvocationError, match="could not run"):
            process.eat([MISSING])


class TestRun:
    def test_success(self):
        process.run([PY, "-c", "pass"])

    def test_failure_raises(self):
        with pytest.raises(InvocationError, match="status 1"):
            process.run([PY, "-c", "import sys; sys.exit(1)"])

    def test_missing_program_raises(self):
        with pytest.raises(InvocationError):
            process.run([MISSING])


class TestEncode:
    def test_encodes(self):
        assert process.encode("xsel", "é", "utf-8") == "é".encode("utf-8")

    def test_unrepresentable_text_raises(self):
        with pytest.raises(InvocationError, match="cannot encode"):
            process.encode("xsel", "✓", "ascii")

    def test_unknown_codec_raises(self):
        with pytest.raises(InvocationError) as info:
            process.encode("xsel", "hi", "no-such-codec")
        assert info.value.program == "xsel"

    def test_eat_unknown_codec_raises(self):
        with pytest.raises(InvocationError):
            process.eat([PY, "-c", "print('hi')"], encoding="no-such-codec")
