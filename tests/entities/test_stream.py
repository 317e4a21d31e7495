"""
Tests for the Stream entity and the stdin source stage.
"""

import io
import sys
from unittest.mock import MagicMock

import pytest

from pipescript.adapters.streams.static_source import BytesSource
from pipescript.config.settings import settings
from pipescript.entities.Command import Command
from pipescript.entities.Stream import Stream, stdin
from pipescript.exceptions import StreamError
from pipescript.ports.streams.byte_source_port import ByteSourcePort


class UpperSource(ByteSourcePort):
    """Test stage: upper-cases whatever the upstream produced so far."""

    def __init__(self, upstream: ByteSourcePort):
        self.upstream = upstream
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        return self.upstream.read(size).upper()


def upper(upstream: ByteSourcePort) -> Command:
    return Command("upper", UpperSource(upstream))


def echo(text: bytes) -> Stream:
    return Stream(Command("echo", BytesSource(text)))


class TestStream:
    """Test cases for the Stream entity."""

    def test_requires_command_or_factory(self):
        """Test that a stream needs exactly one way to get its command."""
        with pytest.raises(StreamError):
            Stream()
        with pytest.raises(StreamError):
            Stream(Command("a"), factory=lambda: Command("b"))

    def test_pipe_to_is_lazy(self):
        """Test that the next stage is only built when it is read."""
        build_next = MagicMock(side_effect=upper)
        piped = echo(b"abc").pipe_to(build_next)

        build_next.assert_not_called()
        assert piped.read() == b"ABC"
        build_next.assert_called_once()

    def test_upstream_built_on_first_upstream_read(self):
        """Test that upstream stages are only built when their output is pulled."""
        build_source = MagicMock(return_value=Command("src", BytesSource(b"data")))
        seen: list[ByteSourcePort] = []

        def passthrough(upstream: ByteSourcePort) -> Command:
            seen.append(upstream)
            return Command("pass", BytesSource(b"own output"))

        piped = Stream(factory=build_source).pipe_to(passthrough)

        assert piped.name == "pass"
        build_source.assert_not_called()
        assert seen[0].read() == b"data"
        build_source.assert_called_once()

    def test_chain_reads_through_every_stage(self):
        """Test a multi-stage pipeline pulling bytes in order."""
        piped = echo(b"one\ntwo\n").pipe_to(upper).pipe_to(upper)

        assert piped.read(4) == b"ONE\n"
        assert piped.read() == b"TWO\n"
        assert piped.read() == b""

    def test_pipe_to_returns_new_stream(self):
        """Test that piping leaves the original stream untouched."""
        original = echo(b"abc")
        piped = original.pipe_to(upper)

        assert piped is not original
        assert original.name == "echo"
        assert piped.name == "upper"

    def test_errors_are_local_to_each_stage(self):
        """Test that a stage does not report upstream errors."""
        source = Command("src", BytesSource(b"x"))
        source.append_error(ValueError("upstream"), "stat path")
        first = Stream(source)

        piped = first.pipe_to(upper)

        assert len(first.errors) == 1
        assert piped.errors == ()
        assert piped.error() is None

    def test_factory_must_return_command(self):
        """Test that a stage builder returning something else is rejected."""
        piped = echo(b"x").pipe_to(lambda upstream: upstream)  # type: ignore[arg-type, return-value]

        with pytest.raises(StreamError, match="must return a Command"):
            piped.read()

    def test_no_restart_after_end_of_input(self):
        """Test that a drained stream stays drained."""
        stream = echo(b"abc")

        assert stream.read_all() == b"abc"
        assert stream.read_all() == b""
        assert stream.read() == b""

    def test_to_string(self):
        """Test draining into text."""
        assert echo("héllo\n".encode()).to_string() == "héllo\n"

    def test_iter_lines(self):
        """Test line iteration across chunk boundaries."""

        class Trickle(ByteSourcePort):
            def __init__(self, data: bytes):
                self.data = data

            def read(self, size: int = -1) -> bytes:
                chunk, self.data = self.data[:3], self.data[3:]
                return chunk

        stream = Stream(Command("trickle", Trickle(b"alpha\nbe\n\ngamma")))

        assert list(stream.iter_lines()) == [b"alpha\n", b"be\n", b"\n", b"gamma"]

    def test_to_writer(self):
        """Test copying into a binary writer in chunks."""
        out = io.BytesIO()

        written = echo(b"0123456789").to(out, chunk_size=3)

        assert written == 10
        assert out.getvalue() == b"0123456789"

    def test_to_rejects_non_positive_chunk_size(self):
        """Test that a zero or negative chunk size is refused, not replaced by the default."""
        for size in (0, -1):
            with pytest.raises(StreamError, match="chunk_size must be positive"):
                echo(b"abc").to(io.BytesIO(), chunk_size=size)

    def test_to_default_chunk_size(self, monkeypatch):
        """Test that no chunk size falls back to the configured one."""
        monkeypatch.setattr(settings, "chunk_size", 2)
        source = MagicMock(spec=["read"])
        source.read.side_effect = [b"ab", b"c", b""]
        out = io.BytesIO()

        assert Stream(Command("src", source)).to(out) == 3
        source.read.assert_called_with(2)

    def test_iter_lines_many_lines_in_one_chunk(self):
        """Test a single large chunk is split into every line, in order."""
        data = b"".join(b"line %d\n" % i for i in range(1000)) + b"tail"

        lines = list(echo(data).iter_lines())

        assert len(lines) == 1001
        assert lines[0] == b"line 0\n"
        assert lines[999] == b"line 999\n"
        assert lines[-1] == b"tail"
        assert b"".join(lines) == data

    def test_repr(self):
        """Test that repr does not force a pending stage."""
        build_next = MagicMock(side_effect=upper)
        piped = echo(b"x").pipe_to(build_next)

        assert repr(piped) == "Stream(<pending>)"
        build_next.assert_not_called()


class TestStdin:
    """Test cases for the stdin source stage."""

    def test_reads_process_stdin(self, monkeypatch):
        """Test that stdin streams the binary standard input."""
        fake = io.TextIOWrapper(io.BytesIO(b"from stdin\n"))
        monkeypatch.setattr(sys, "stdin", fake)

        stream = stdin()

        assert stream.name == "stdin"
        assert stream.read_all() == b"from stdin\n"
        assert stream.read() == b""

    def test_stdin_looked_up_on_first_read(self, monkeypatch):
        """Test that building the stage does not touch sys.stdin."""
        stream = stdin()
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"late")))

        assert stream.read() == b"late"

    def test_piping_from_stdin(self, monkeypatch):
        """Test a stage consuming stdin."""
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"shout")))

        assert stdin().pipe_to(upper).read_all() == b"SHOUT"
