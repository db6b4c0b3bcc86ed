# -*- coding: utf-8 -*-
"""

The value types produced by the `Lexer`: token ids, positions and tokens.

All three are immutable.  A `Token` returned from the lexer belongs to the
caller; the lexer keeps no reference to it.

Positions
=========

A `Position` is a zero-based `(line, column)` pair.  It is displayed
one-based, so the first character of the text is at `1:1`.  Positions are
moved forward only with `advance_position` (or the equivalent method
`Position.advance`), which walks the consumed text one character at a
time.  A line terminator starts a new line at column zero; every other
character moves one column to the right.  A single consumed literal can
contain any number of line terminators (a multi-line string literal, for
example), and they are counted wherever they occur.

Token ids
=========

A `TokenID` is an `int` that classifies a token.  Ids are tags, not keys:
several token types can share an id, such as a group of operator patterns
all reported as one "operator" kind.  The built-in ids are negative so that
users can number their own kinds from zero up.

"""

# Run tests when invoked as a script.
if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run(["../../test/test_tokens.py",
                              "../../test/test_lexer.py"],
                              pytest_args="-v")

import collections
from .shared_settings_and_exceptions import LINE_TERMINATOR

#
# Token ids.
#

class TokenID(int):
    """An integer classification tag for tokens.  Prints the names of the
    built-in ids and `UNKNOWN(<value>)` for any other value."""

    def __str__(self):
        try:
            return TOKEN_ID_NAMES[self]
        except KeyError:
            return "UNKNOWN({0})".format(int(self))

    def __repr__(self):
        return "TokenID({0})".format(str(self))

OTHER = TokenID(-1)
IDENT = TokenID(-2)
NUMBER = TokenID(-3)
STRING = TokenID(-4)

TOKEN_ID_NAMES = {
    OTHER: "OTHER",
    IDENT: "IDENT",
    NUMBER: "NUMBER",
    STRING: "STRING",
}

#
# Positions.
#

class Position(collections.namedtuple("Position", ["line", "column"])):
    """A zero-based line and column in the scanned text."""
    __slots__ = ()

    def __str__(self):
        return "{0}:{1}".format(self.line + 1, self.column + 1)

    def advance(self, consumed_text):
        """Return the position just past `consumed_text` when it is read
        starting at this position."""
        return advance_position(self, consumed_text)

START_POSITION = Position(0, 0)

def advance_position(position, consumed_text):
    """Return the position reached after reading `consumed_text` from
    `position`.  Each line terminator increments the line and resets the
    column to zero; each other character increments the column."""
    line, column = position
    num_newlines = consumed_text.count(LINE_TERMINATOR)
    if num_newlines == 0:
        return Position(line, column + len(consumed_text))
    last_newline = consumed_text.rfind(LINE_TERMINATOR)
    return Position(line + num_newlines, len(consumed_text) - (last_newline + 1))

#
# Tokens.
#

class Token(collections.namedtuple("Token", [
                           "token_type", # The TokenType that matched.
                           "literal", # The exact matched text.
                           "submatches", # Tuple of regex group strings.
                           "position", # Position of the first character.
                        ])):
    """A classified, positioned span of matched input text."""
    __slots__ = ()

    @property
    def token_id(self):
        """The `TokenID` of the token type that produced this token."""
        return self.token_type.id

    def __str__(self):
        return "<{0},{1!r}>".format(self.token_id, self.literal)

