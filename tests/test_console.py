"""Tests for console output and the key-press halt."""

import io
from unittest.mock import MagicMock, patch

from connect4_launcher import console


class TestReport:
    def test_one_line_each(self, capsys):
        console.report("first", "second")
        assert capsys.readouterr().out == "first\nsecond\n"

    def test_nothing(self, capsys):
        console.report()
        assert capsys.readouterr().out == ""


class TestWaitForKey:
    """Test blocking behaviour for piped and interactive stdin."""

    def test_piped_stdin_consumes_one_line(self, monkeypatch):
        """Test a redirected stdin gives up one line per halt."""
        stdin = io.StringIO("first\nsecond\n")
        monkeypatch.setattr("sys.stdin", stdin)

        console.wait_for_key()

        assert stdin.readline() == "second\n"

    def test_eof_returns(self, monkeypatch):
        """Test an exhausted stdin doesn't block."""
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        console.wait_for_key()

    def test_no_stdin(self, monkeypatch):
        """Test a missing stdin (e.g. pythonw) returns immediately."""
        monkeypatch.setattr("sys.stdin", None)
        console.wait_for_key()

    @patch("connect4_launcher.console._read_key_posix")
    def test_tty_on_posix_reads_raw_key(self, mock_read, monkeypatch):
        """Test an interactive terminal reads a single raw key."""
        stdin = MagicMock(closed=False)
        stdin.isatty.return_value = True
        monkeypatch.setattr("sys.stdin", stdin)
        monkeypatch.setattr("sys.platform", "linux")

        console.wait_for_key()

        mock_read.assert_called_once()
        stdin.readline.assert_not_called()

    @patch("connect4_launcher.console._read_key_windows")
    def test_tty_on_windows_uses_msvcrt(self, mock_read, monkeypatch):
        """Test Windows consoles go through msvcrt."""
        stdin = MagicMock(closed=False)
        stdin.isatty.return_value = True
        monkeypatch.setattr("sys.stdin", stdin)
        monkeypatch.setattr("sys.platform", "win32")

        console.wait_for_key()

        mock_read.assert_called_once()
