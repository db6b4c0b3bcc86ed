# -*- coding: utf-8 -*-
"""

Tests of the text_stream.py code.

"""
import pytest_helper

pytest_helper.script_run(self_test=True, pytest_args="-v")
pytest_helper.auto_import()

import io
from streamscan.text_stream import * # Test as an individual module.

class NonBlockingStream:
    """Returns the items of `chunks` from successive reads, then `b""`."""
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.reads = 0

    def read(self, size):
        self.reads += 1
        if self.chunks:
            return self.chunks.pop(0)
        return b""

def test_string_stream():
    ts = TextStream(io.StringIO("hello world"))
    assert not ts.end_of_text_stream()
    assert ts.read_chunk(5) == "hello"
    assert ts.read_chunk(100) == " world"
    assert not ts.end_of_text_stream()
    assert ts.read_chunk(100) == ""
    assert ts.end_of_text_stream()
    assert ts.read_chunk(100) == ""

def test_set_string_in():
    ts = TextStream(io.StringIO("old"))
    ts.read_chunk(10)
    ts.read_chunk(10)
    assert ts.end_of_text_stream()
    ts.set_string_in("new")
    assert not ts.end_of_text_stream()
    assert ts.read_chunk(10) == "new"

def test_bytes_are_decoded_across_reads():
    data = "naïve ☃".encode("utf-8")
    ts = TextStream(io.BytesIO(data))
    pieces = []
    while not ts.end_of_text_stream():
        pieces.append(ts.read_chunk(1))
    assert "".join(pieces) == "naïve ☃"
    assert "" not in pieces[:-1] # Partial characters are read through.

def test_other_encoding():
    ts = TextStream(io.BytesIO("café".encode("latin-1")), encoding="latin-1")
    assert ts.read_chunk(100) == "café"

def test_none_read_is_not_end_of_stream():
    stream = NonBlockingStream([None, b"abc", None])
    ts = TextStream(stream)
    assert ts.read_chunk(10) == ""
    assert not ts.end_of_text_stream()
    assert ts.read_chunk(10) == "abc"
    assert ts.read_chunk(10) == ""
    assert not ts.end_of_text_stream()
    assert ts.read_chunk(10) == ""
    assert ts.end_of_text_stream()
    assert stream.reads == 4
    ts.read_chunk(10)
    assert stream.reads == 4 # No reads after the end.

def test_errors_are_wrapped():
    class BrokenStream:
        def read(self, size):
            raise OSError("broken pipe")

    ts = TextStream(BrokenStream())
    with raises(StreamReadError) as e:
        ts.read_chunk(10)
    assert isinstance(e.value.__cause__, OSError)

    closed = io.StringIO("abc")
    closed.close()
    with raises(StreamReadError):
        TextStream(closed).read_chunk(10)

    with raises(StreamReadError) as e:
        TextStream(io.BytesIO(b"ab\xff")).read_chunk(10)
    assert isinstance(e.value.__cause__, UnicodeDecodeError)

def test_truncated_character_at_end():
    ts = TextStream(io.BytesIO("☃".encode("utf-8")[:2]))
    with raises(StreamReadError) as e:
        ts.read_chunk(10)
    assert isinstance(e.value.__cause__, UnicodeDecodeError)

def test_stream_is_not_closed():
    stream = io.StringIO("x")
    ts = TextStream(stream)
    while not ts.end_of_text_stream():
        ts.read_chunk(10)
    assert not stream.closed

