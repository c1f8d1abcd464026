"""
Unit tests for ClientConnection.
"""

import io

from publicset.core.connection import ClientConnection


class TestReadLine:
    """Tests for read_line()."""

    def test_strips_newline_keeps_cr(self, make_client):
        """Test LF is removed and a CR inside a non-empty line is kept."""
        client = make_client(b"GET / HTTP/1.0\r\n")
        assert client.read_line() == "GET / HTTP/1.0\r"

    def test_bare_cr_is_empty(self, make_client):
        """Test the CRLF blank line reads as empty."""
        client = make_client(b"\r\n")
        assert client.read_line() == ""

    def test_lf_only_lines(self, make_client):
        """Test LF-terminated lines."""
        client = make_client(b"one\ntwo\n")
        assert client.read_line() == "one"
        assert client.read_line() == "two"
        assert client.read_line() == ""

    def test_last_line_without_newline(self, make_client):
        """Test a final unterminated line is returned as-is."""
        client = make_client(b"GET /a HTTP/1.0")
        assert client.read_line() == "GET /a HTTP/1.0"

    def test_eof(self, make_client):
        """Test end of stream reads as empty."""
        assert make_client(b"").read_line() == ""

    def test_non_utf8_bytes(self, make_client):
        """Test arbitrary bytes never fail to decode."""
        assert make_client(b"\xff\xfe\n").read_line() == "\xff\xfe"

    def test_read_error(self, broken_stream):
        """Test a read failure reads as empty."""
        client = ClientConnection(input=broken_stream, output=io.BytesIO())
        assert client.read_line() == ""

    def test_counts_bytes(self, make_client):
        """Test bytes_read accounting."""
        client = make_client(b"abc\r\n")
        client.read_line()
        assert client.bytes_read == 5


class TestDrain:
    """Tests for drain()."""

    def test_stops_at_blank_line(self, make_client):
        """Test header lines are consumed up to the blank line only."""
        client = make_client(b"Host: x\r\nAccept: */*\r\n\r\nleftover")
        assert client.drain() == 2
        assert client.input.read() == b"leftover"

    def test_stops_at_eof(self, make_client):
        """Test draining a stream with no blank line."""
        client = make_client(b"Host: x\r\n")
        assert client.drain() == 1
        assert client.read_line() == ""

    def test_nothing_to_drain(self, make_client):
        """Test draining an exhausted stream."""
        assert make_client(b"").drain() == 0


class TestWrite:
    """Tests for write(), send_stream() and flush()."""

    def test_write(self, make_client):
        """Test successful writes are counted."""
        client = make_client(b"")
        assert client.write(b"hello") is True
        assert client.output.getvalue() == b"hello"
        assert client.bytes_written == 5

    def test_write_failure(self, broken_stream):
        """Test a failing write returns False and counts nothing."""
        client = ClientConnection(input=io.BytesIO(), output=broken_stream)
        assert client.write(b"hello") is False
        assert client.bytes_written == 0

    def test_write_closed_stream(self):
        """Test writing to a closed stream returns False."""
        output = io.BytesIO()
        output.close()
        client = ClientConnection(input=io.BytesIO(), output=output)
        assert client.write(b"x") is False
        assert client.flush() is False

    def test_send_stream(self, make_client):
        """Test copying in small chunks."""
        client = make_client(b"")
        client.buffer_size = 3
        assert client.send_stream(io.BytesIO(b"0123456789")) is True
        assert client.output.getvalue() == b"0123456789"
        assert client.bytes_written == 10

    def test_send_stream_failure(self, short_stream):
        """Test the copy stops when the client fails."""
        client = ClientConnection(input=io.BytesIO(), output=short_stream(2), buffer_size=2)
        assert client.send_stream(io.BytesIO(b"abcdef")) is False
        assert client.output.getvalue() == b"abcd"

    def test_ids_unique(self, make_client):
        """Test each connection gets its own log id."""
        assert make_client(b"").id != make_client(b"").id
