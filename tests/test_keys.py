"""Tests for key decoding and key input."""

import logging
import os
import sys

import pytest

from depview.app.keys import Command, KeyReader, decode_key


class TestDecodeKey:
    """Tests for decode_key."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (b"\x11", Command.QUIT),
            (b"q", Command.QUIT),
            (b"j", Command.LINE_DOWN),
            (b"k", Command.LINE_UP),
            (b" ", Command.PAGE_DOWN),
            (b"\x02", Command.PAGE_UP),
            (b"g", Command.TOP),
            (b"G", Command.BOTTOM),
        ],
    )
    def test_single_characters(self, raw, expected):
        """Plain keys map to their commands."""
        assert decode_key(raw) is expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (b"\x1b[5~", Command.PAGE_UP),
            (b"\x1b[6~", Command.PAGE_DOWN),
            (b"\x1b[A", Command.LINE_UP),
            (b"\x1bOB", Command.LINE_DOWN),
            (b"\x1b[H", Command.TOP),
            (b"\x1b[4~", Command.BOTTOM),
        ],
    )
    def test_escape_sequences(self, raw, expected):
        """Cursor and paging keys are decoded from their escape sequences."""
        assert decode_key(raw) is expected

    def test_unknown_keys_ignored(self):
        """Unbound keys, lone escapes and empty reads decode to nothing."""
        assert decode_key(b"x") is None
        assert decode_key(b"\x1b") is None
        assert decode_key(b"\x1b[Z") is None
        assert decode_key(b"") is None


class PipeInput:
    """Stand-in for stdin backed by a file descriptor."""

    def __init__(self, fd):
        self.fd = fd

    def fileno(self):
        return self.fd


@pytest.fixture
def pipe_stdin(monkeypatch):
    """Replace stdin with the read end of a pipe; yield the write end."""
    read_fd, write_fd = os.pipe()
    monkeypatch.setattr(sys, "stdin", PipeInput(read_fd))
    yield write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.mark.skipif(sys.platform == "win32", reason="reads stdin through select")
class TestKeyReaderUnix:
    """Tests for reading keys from a Unix input stream."""

    def test_no_input_pending(self, pipe_stdin):
        """Nothing typed yet reads as no command."""
        assert KeyReader(poll_timeout=0).read() is None

    def test_single_key(self, pipe_stdin):
        os.write(pipe_stdin, b"j")
        assert KeyReader(poll_timeout=0.5).read() is Command.LINE_DOWN

    def test_escape_sequence(self, pipe_stdin):
        """The rest of an escape sequence is read along with the escape."""
        os.write(pipe_stdin, b"\x1b[5~")
        assert KeyReader(poll_timeout=0.5).read() is Command.PAGE_UP

    def test_end_of_input_quits(self, pipe_stdin):
        """A closed input stream ends the session instead of spinning."""
        os.close(pipe_stdin)
        assert KeyReader(poll_timeout=0.5).read() is Command.QUIT

    def test_unreadable_input_quits(self, monkeypatch, caplog):
        """An input that cannot be polled ends the session with a warning."""
        monkeypatch.setattr(sys, "stdin", PipeInput(-1))

        with caplog.at_level(logging.WARNING, logger="depview.app.keys"):
            assert KeyReader(poll_timeout=0).read() is Command.QUIT
        assert "cannot read keys" in caplog.text
