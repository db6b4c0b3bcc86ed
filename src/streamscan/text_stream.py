# -*- coding: utf-8 -*-
"""

The `TextStream` class.  This is the abstraction layer between the `Lexer`
and the stream of text to be scanned.

The stream passed in can be any object with a `read(n)` method, returning
either `str` or `bytes`.  Bytes are decoded incrementally, so a multi-byte
character split across two reads comes out whole.  The three possible kinds
of read result are treated differently:

* a non-empty result is text to be scanned,
* an empty result (`""` or `b""`) means the stream is exhausted,
* `None` means no data is available right now (as from a non-blocking raw
  stream); the stream is *not* exhausted and can be read again later.

The `TextStream` never closes the stream.  That is the caller's job.

"""

# Run tests when invoked as a script.
if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run(["../../test/test_text_stream.py",
                              "../../test/test_lexer.py"],
                              pytest_args="-v")

import io
import codecs
import logging
from .shared_settings_and_exceptions import (StreamReadError, CHUNK_SIZE,
                                             DEFAULT_ENCODING)

logger = logging.getLogger(__name__)

class TextStream:
    """A unified wrapper for a stream of text characters which may come from
    various sources."""

    def __init__(self, stream, encoding=DEFAULT_ENCODING):
        """Initialize with the stream `stream`.  The `encoding` is only used
        when the stream returns bytes."""
        self.encoding = encoding
        self.set_stream_in(stream)

    def clear(self):
        """Clear and reset the text stream."""
        self.ts = None # the text stream object, set by the set methods
        self.EOF = True # false while a stream is open and not at end
        self.decoder = codecs.getincrementaldecoder(self.encoding)()

    def set_stream_in(self, stream):
        """Set a file-like object to be the text source."""
        self.clear()
        self.ts = stream
        self.EOF = False

    def set_string_in(self, str_val):
        """Set a string to be the text source."""
        self.set_stream_in(io.StringIO(str_val)) # in-memory text stream

    def read_chunk(self, size=CHUNK_SIZE):
        """Read at most `size` items from the stream and return them as a
        string.  Returns the empty string if the stream is exhausted or if
        nothing is available yet; use `end_of_text_stream` to tell which.
        Errors from the stream are raised as `StreamReadError`."""
        if self.EOF:
            return ""
        try:
            # Loop only while reads return bytes which are all part of an
            # incomplete multi-byte character.
            while True:
                data = self.ts.read(size)
                if data is None: # Non-blocking stream with nothing ready.
                    logger.debug("No data available from stream %r.", self.ts)
                    return ""
                if isinstance(data, str):
                    if data == "":
                        self._set_eof()
                    return data
                if len(data) == 0:
                    text = self.decoder.decode(b"", final=True)
                    self._set_eof()
                    return text
                text = self.decoder.decode(data)
                if text:
                    return text
        except (OSError, ValueError) as e: # UnicodeDecodeError is a ValueError.
            raise StreamReadError("Error reading from stream {0!r}: {1}"
                                  .format(self.ts, e)) from e

    def _set_eof(self):
        logger.debug("End of stream %r.", self.ts)
        self.EOF = True

    def end_of_text_stream(self):
        """True if the stream has reported that it is exhausted."""
        return self.EOF

