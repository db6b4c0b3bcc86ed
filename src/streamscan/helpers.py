# -*- coding: utf-8 -*-
"""

Some helper routines for using the `Lexer`.

"""

# Run tests when invoked as a script.
if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run("../../test/test_helpers.py", pytest_args="-v")

from .shared_settings_and_exceptions import LexerException, is_subclass_of
from .matcher import TokenType

#
# Error reporting.
#

def format_error_context(lex, error):
    """Return a three-line message for an `UnknownTokenError` raised by
    the lexer `lex`: the error itself, the line it occurred on, and a line of
    carets under the offending text.  The lexer must not have been advanced
    since the error was raised."""
    line = lex.get_last_line()
    column = error.position.column
    width = max(1, min(len(error.literal), len(line) - column))
    carets = " " * column + "^" * width
    return "{0}\n{1}\n{2}".format(error, line, carets)

#
# Defining token types.
#

def def_multi_token_types(token_type_class, tuple_list):
    """Return a list of token types of class `token_type_class`, one for each
    tuple of constructor arguments in `tuple_list`, in the same order.  Useful
    for setting `lex.token_types`::

        lex.token_types = def_multi_token_types(RegexTokenType, [
                             (NUMBER, r"\\d+"),
                             (OP, r"[-+*/]"),
                          ])
    """
    if not is_subclass_of(token_type_class, TokenType):
        raise TypeError("Expected a subclass of TokenType, got {0!r}."
                        .format(token_type_class))
    retval_list = []
    for t in tuple_list:
        try:
            retval_list.append(token_type_class(*t))
        except TypeError as e:
            raise LexerException(
                    "Bad multi-definition of {0}: Omitted required arguments or bad "
                    "arguments passed in.  Error on this tuple:\n{1}"
                    .format(token_type_class.__name__, t)) from e
    return retval_list

