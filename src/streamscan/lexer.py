# -*- coding: utf-8 -*-
"""

A `Lexer` class instance is a general lexer/scanner/tokenizer.  It reads
text from a stream and produces the corresponding sequence of tokens, one at
a time, as the caller asks for them.  It is meant to sit underneath a parser;
it does no parsing, and it only ever looks one token ahead.

The kinds of tokens are defined by an ordered list of `TokenType` instances
(see the `matcher` module).  At each point in the text the token types are
tried in order and the first one which matches gives the next token.  Before
each attempt any whitespace at the front of the text is discarded, using a
separate whitespace token type.  Whitespace is never returned as a token.

Using the lexer
===============

This is a simple example of using the lexer with the default token types::

    lex = Lexer.from_string('x  + "egg"')

    for t in lex:
        print(t)

The result is as follows::

    <IDENT,'x'>
    <OTHER,'+'>
    <STRING,'"egg"'>

Any file-like object with a `read` method can be scanned, for example an
open file or a socket file.  The lexer reads it in chunks as needed and never
closes it::

    with open("prog.txt", "rb") as f:
        lex = Lexer(f)
        tok = lex.scan()

The main methods are:

* `peek` --- return the next token without consuming it
* `scan` --- return the next token and consume it
* `get_last_line` --- the full text of the line currently being scanned
* `at_end` --- true when all the input has been consumed

Both `peek` and `scan` return `None` at the end of the input.  When the text
at the front of the input matches none of the token types they raise
`UnknownTokenError`, whose `literal` is the shortest prefix of the text
which cannot be scanned.  Nothing is consumed in that case, so a caller can
inspect the error, skip past the bad text some other way, and continue.

Configuration
=============

The token types, the whitespace token type, and the buffering parameters
are passed in as a `LexerConfig`.  The module constant `DEFAULT_CONFIG`
holds the reference defaults, and `DEFAULT_CONFIG._replace(...)` is the
easiest way to get a variation::

    config = DEFAULT_CONFIG._replace(whitespace=None)
    lex = Lexer(stream, config)

After creation the attributes `lex.whitespace` and `lex.token_types` can
also be set directly, before or between scans.  Setting `whitespace` to
`None` turns off whitespace skipping.

Code
====

"""

# Run tests when invoked as a script.
if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run(["../../test/test_lexer.py",
                              "../../test/test_matcher.py",
                              "../../test/test_text_stream.py",
                              ],
                              pytest_args="-v")

import io
import collections
import logging
from .shared_settings_and_exceptions import (UnknownTokenError, LINE_TERMINATOR,
                                             LOW_WATER_MARK, CHUNK_SIZE,
                                             DEFAULT_ENCODING)
from .tokens import START_POSITION, advance_position
from .matcher import DEFAULT_WHITESPACE, DEFAULT_TOKEN_TYPES
from .text_stream import TextStream

logger = logging.getLogger(__name__)

LexerConfig = collections.namedtuple("LexerConfig", [
                           "whitespace", # TokenType for skipped text, or None.
                           "token_types", # Ordered sequence of TokenType.
                           "low_water_mark", # Refill when fewer chars buffered.
                           "chunk_size", # Max chars (or bytes) per stream read.
                           "encoding", # Used only for streams returning bytes.
                        ])

DEFAULT_CONFIG = LexerConfig(DEFAULT_WHITESPACE, DEFAULT_TOKEN_TYPES,
                             LOW_WATER_MARK, CHUNK_SIZE, DEFAULT_ENCODING)

class Lexer:
    """Scans text from a stream and returns `Token` instances.

    The instance holds a lookahead buffer of text read from the stream but
    not yet consumed, the `position` of the front of that buffer, and the
    part of the current line which has already been consumed (used by
    `get_last_line`).  These are only changed by `peek` (which discards
    whitespace) and `scan`.

    A `Lexer` is not safe to share between threads without a lock."""

    def __init__(self, stream, config=DEFAULT_CONFIG):
        """Initialize the lexer to scan `stream`, which can be any object with
        a `read(n)` method returning `str` or `bytes`.  The stream is not
        closed by the lexer."""
        self.config = config
        self.text_stream = TextStream(stream, encoding=config.encoding)
        self.whitespace = config.whitespace
        self.token_types = list(config.token_types)

        self.buffer = "" # Text read from the stream but not yet consumed.
        self.loaded_line = "" # Consumed text of the current line.
        self.position = START_POSITION # Position of the front of the buffer.

    @classmethod
    def from_string(cls, text, config=DEFAULT_CONFIG):
        """Return a lexer which scans the string `text`."""
        return cls(io.StringIO(text), config=config)

    #
    # Buffer handling.
    #

    def ensure_buffered(self):
        """Read one chunk from the stream if the buffer is running low.  This
        is best-effort: a short read, or a non-blocking stream with nothing
        ready, can leave the buffer below the low-water mark."""
        if (len(self.buffer) < self.config.low_water_mark
                and not self.text_stream.end_of_text_stream()):
            text = self.text_stream.read_chunk(self.config.chunk_size)
            if text:
                logger.debug("Read %d chars into lexer buffer at %s.",
                             len(text), self.position)
                self.buffer += text

    def _consume(self, literal):
        """Remove `literal` from the front of the buffer, updating the position
        and the loaded line."""
        self.buffer = self.buffer[len(literal):]
        self.position = advance_position(self.position, literal)
        last_newline = literal.rfind(LINE_TERMINATOR)
        if last_newline >= 0:
            self.loaded_line = literal[last_newline+1:]
        else:
            self.loaded_line += literal

    def _skip_whitespace(self):
        """Refill the buffer, then discard any whitespace at its front."""
        if self.whitespace is None:
            self.ensure_buffered()
            return
        while True:
            self.ensure_buffered()
            tok = find_nonempty(self.whitespace, self.buffer, self.position)
            if tok is None:
                break
            self._consume(tok.literal)

    #
    # Next and peek related methods.
    #

    def peek(self):
        """Return the next token without consuming it, or `None` at the end
        of the input.  Any whitespace in front of the token is discarded.
        Raises `UnknownTokenError` if no token type matches."""
        while True:
            for token_type in self.token_types:
                self._skip_whitespace()
                tok = find_nonempty(token_type, self.buffer, self.position)
                if tok is not None:
                    return tok

            if self.buffer:
                raise self._make_error()

            # Empty at the end of input or after a read with nothing ready.
            # Refill once more; loop again only if non-whitespace text arrived.
            self._skip_whitespace()
            if not self.buffer:
                return None

    def scan(self):
        """Return the next token and consume it, or return `None` at the end
        of the input.  Raises `UnknownTokenError` if no token type matches, in
        which case nothing beyond whitespace is consumed."""
        tok = self.peek()
        if tok is not None:
            self._consume(tok.literal)
        return tok

    def __iter__(self):
        return self # Class provides its own __next__ method.

    def __next__(self):
        tok = self.scan()
        if tok is None:
            raise StopIteration
        return tok

    #
    # Informational methods.
    #

    def get_last_line(self):
        """Return the full text of the line currently being scanned, without
        its line terminator.  Nothing is consumed.  Useful in error messages."""
        self.ensure_buffered()
        newline = self.buffer.find(LINE_TERMINATOR)
        if newline >= 0:
            return self.loaded_line + self.buffer[:newline]
        return self.loaded_line + self.buffer

    def at_end(self):
        """True if everything in the stream has been read and consumed."""
        return not self.buffer and self.text_stream.end_of_text_stream()

    #
    # Errors.
    #

    def _make_error(self):
        """Return an `UnknownTokenError` for the front of the buffer.  The
        literal runs up to the first offset where the whitespace token type
        or any of the token types matches, or to the end of the buffer."""
        buffer = self.buffer
        matchers = list(self.token_types)
        if self.whitespace is not None:
            matchers.insert(0, self.whitespace)

        literal = buffer
        for shift in range(1, len(buffer)): # Offset 0 is known not to match.
            rest = buffer[shift:]
            if any(find_nonempty(m, rest, self.position) for m in matchers):
                literal = buffer[:shift]
                break

        logger.debug("Unknown token %r at %s.", literal, self.position)
        return UnknownTokenError(literal, self.position)


def find_nonempty(token_type, text, position):
    """Call the `find` method of `token_type`, treating a match of the empty
    string as no match.  An empty token would never advance the lexer."""
    tok = token_type.find(text, position)
    if tok is None or not tok.literal:
        return None
    return tok

