# -*- coding: utf-8 -*-
"""

Some settings and exceptions that are shared between several modules.

"""

# Reference buffering values.  A refill is attempted whenever fewer than
# `LOW_WATER_MARK` characters are buffered, and pulls at most `CHUNK_SIZE`.
LOW_WATER_MARK = 1024
CHUNK_SIZE = 2048
DEFAULT_ENCODING = "utf-8"

LINE_TERMINATOR = "\n"

#
# Exceptions.
#

class StreamscanBaseException(Exception):
    """The base exception for all package-defined exceptions.  All
    potentially-recoverable exceptions should be subclasses of this
    class (i.e., not a builtin Python exception)."""
    pass

class LexerException(StreamscanBaseException):
    """Base exception for exceptions in the lexer modules."""
    pass

class StreamReadError(LexerException):
    """Raised when reading from the underlying stream fails.  The original
    exception is chained as the `__cause__`."""
    pass

class UnknownTokenError(LexerException):
    """Raised when the unconsumed input matches none of the configured token
    types.  The `literal` attribute is the minimal unrecognized prefix and
    `position` is where it starts.  The string form is::

        <line>:<column>:UnknownTokenError: "<escaped literal>"

    with one-based line and column numbers."""

    def __init__(self, literal, position):
        self.literal = literal
        self.position = position
        super().__init__(literal, position)

    def __str__(self):
        return "{0}:{1}:UnknownTokenError: {2}".format(self.position.line + 1,
                                                       self.position.column + 1,
                                                       quote_literal(self.literal))

#
# Utility functions.
#

_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}

def quote_literal(text):
    """Return `text` in double quotes with backslashes, double quotes and
    non-printable characters escaped, e.g. `a"b` becomes `"a\\"b"`.  Used
    in error messages so the offending text is unambiguous."""
    pieces = ['"']
    for char in text:
        if char in _SHORT_ESCAPES:
            pieces.append(_SHORT_ESCAPES[char])
        elif char.isprintable():
            pieces.append(char)
        elif ord(char) < 0x80:
            pieces.append("\\x{0:02x}".format(ord(char)))
        elif ord(char) <= 0xFFFF:
            pieces.append("\\u{0:04x}".format(ord(char)))
        else:
            pieces.append("\\U{0:08x}".format(ord(char)))
    pieces.append('"')
    return "".join(pieces)

def is_class(obj):
    """Test if object `obj` is a class."""
    return isinstance(obj, type)

def is_subclass_of(subclass_name, class_name):
    """This is just a call to `issubclass` except that it first checks that
    the first argument is a class, returning false if it is not."""
    return is_class(subclass_name) and issubclass(subclass_name, class_name)

