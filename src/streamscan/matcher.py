# -*- coding: utf-8 -*-
"""

The `TokenType` classes, which the `Lexer` uses to recognize tokens at the
front of its unconsumed input.

Using token types
=================

A token type is a rule for making a token.  It has an `id`, which is the
`TokenID` given to the tokens it produces, and a `find` method::

    tok = token_type.find(text, position)

The `find` method returns a new `Token` when the beginning of `text` matches
the rule, and `None` otherwise.  The token's position is the `position`
argument, passed straight through.  The text is never searched forward: a
`None` result means that this rule cannot start a token *here*, not that the
rule matches nowhere in the text.  Calling `find` never modifies the token
type or anything else, so the lexer can call it as often as it likes on the
same text and always get the same answer.

There are two built-in kinds of token type:

* `PatternTokenType` -- a list of literal strings; the first one which is a
  prefix of the text is the match.
* `RegexTokenType` -- a Python regex matched at the start of the text.  The
  groups of the match become the `submatches` of the token.

Users can define their own by subclassing `TokenType` and overriding `find`.
Any such subclass must keep to the same contract: look only at the front of
the text, and do not mutate anything.

Order of token types
====================

The lexer tries its token types in list order and takes the first match,
regardless of match length.  The order is therefore significant.  In the
default list::

    lex.token_types = [
        RegexTokenType(IDENT, r"[a-zA-Z_][a-zA-Z0-9_]*"),
        RegexTokenType(NUMBER, r"[0-9]+(?:\\.[0-9]+)?"),
        RegexTokenType(STRING, r"\\"([^\\"]*)\\""),
        RegexTokenType(OTHER, r"."),
    ]

the final `OTHER` rule accepts any single character.  It must stay last: any
rule added after it is never reached, because `OTHER` has already matched.
Keywords which should win over identifiers need to come before the
identifier rule, and so on.

Code
====

"""

# Run tests when invoked as a script.
if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run(["../../test/test_matcher.py",
                              "../../test/test_lexer.py"],
                              pytest_args="-v")

import re
from .shared_settings_and_exceptions import LexerException
from .tokens import TokenID, Token, OTHER, IDENT, NUMBER, STRING

# Zero or more global inline flag groups at the start of a pattern.
GLOBAL_FLAGS_REGEX = re.compile(r"(?:\(\?[aiLmsux]+\))*")

class TokenType:
    """The base class for token types.  Subclasses must define `find`."""

    def __init__(self, token_id):
        self.id = TokenID(token_id)

    def find(self, text, position):
        """Return a `Token` if `text` starts with a match for this token type,
        otherwise `None`.  Must not modify any state."""
        raise NotImplementedError

    def __str__(self):
        return str(self.id)

class PatternTokenType(TokenType):
    """A token type matching any one of a list of literal strings.  The
    strings are tried in the order given, so when one pattern is a prefix of
    another the longer one should come first."""

    def __init__(self, token_id, patterns):
        super().__init__(token_id)
        self.patterns = tuple(patterns)

    def find(self, text, position):
        for pattern in self.patterns:
            if text.startswith(pattern):
                return Token(self, pattern, (), position)
        return None

    def __repr__(self):
        return "PatternTokenType({0}, {1!r})".format(self.id, list(self.patterns))

class RegexTokenType(TokenType):
    """A token type defined by a regex, matched only at the start of the
    text.  A string pattern which does not begin with `^` is wrapped as
    `^(?:pattern)`; one which does is left alone.  Leading global flag
    groups such as `(?i)` are kept in front of the wrapper, so
    `(?i)select` becomes `(?i)^(?:select)`.  An already-compiled pattern
    is used as given.

    The literal of a token is the whole match.  Its submatches are the
    groups, in order, with any group that did not take part in the match
    given as the empty string."""

    def __init__(self, token_id, regex, flags=0):
        super().__init__(token_id)
        if isinstance(regex, str):
            # Global inline flags like (?i) must stay at the very front.
            flag_groups = GLOBAL_FLAGS_REGEX.match(regex).group(0)
            rest = regex[len(flag_groups):]
            if not rest.startswith("^"):
                regex = flag_groups + "^(?:" + rest + ")"
            try:
                regex = re.compile(regex, flags)
            except re.error as e:
                raise LexerException("Bad regex {0!r} for token type {1}: {2}"
                                     .format(regex, self.id, e)) from e
        self.regex = regex

    @property
    def pattern(self):
        """The (anchored) pattern string of the regex."""
        return self.regex.pattern

    def find(self, text, position):
        match_object = self.regex.match(text)
        if match_object is None:
            return None
        submatches = tuple(g if g is not None else ""
                           for g in match_object.groups())
        return Token(self, match_object.group(0), submatches, position)

    def __repr__(self):
        return "RegexTokenType({0}, {1!r})".format(self.id, self.pattern)

#
# Reference defaults.
#

DEFAULT_WHITESPACE = PatternTokenType(OTHER, [" ", "\t", "\r", "\n"])

# The catch-all OTHER rule must be last.
DEFAULT_TOKEN_TYPES = (
    RegexTokenType(IDENT, r"[a-zA-Z_][a-zA-Z0-9_]*"),
    RegexTokenType(NUMBER, r"[0-9]+(?:\.[0-9]+)?"),
    RegexTokenType(STRING, r"\"([^\"]*)\""),
    RegexTokenType(OTHER, r"."),
)

