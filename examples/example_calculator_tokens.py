# -*- coding: utf-8 -*-
"""

An example token set for a small calculator language, with an error report
that shows the offending line.  Run as a script to tokenize lines typed in.

"""

import sys
import streamscan as ss

# User-defined token ids.  Built-in ids are negative, so start at zero.
K_LET = 0
K_OP = 1
K_LPAR = 2
K_RPAR = 3

def define_calculator_token_types():
    """Return the token types for the calculator.  The `let` keyword comes
    before the identifier rule so it wins, and the longer operator `**` comes
    before `*` in the pattern list."""
    return [
        ss.RegexTokenType(K_LET, r"let\b"),
        ss.RegexTokenType(ss.IDENT, r"[a-zA-Z_][a-zA-Z0-9_]*"),
        ss.RegexTokenType(ss.NUMBER, r"[0-9]+(?:\.[0-9]+)?"),
        ss.PatternTokenType(K_OP, ["**", "*", "/", "+", "-", "="]),
        ss.PatternTokenType(K_LPAR, ["("]),
        ss.PatternTokenType(K_RPAR, [")"]),
    ]

def calculator_config():
    return ss.DEFAULT_CONFIG._replace(token_types=define_calculator_token_types())

def tokenize(text):
    """Return the list of tokens in `text`, or raise `UnknownTokenError`."""
    lex = ss.Lexer.from_string(text, calculator_config())
    return list(lex)

def tokenize_with_report(stream, out=sys.stdout):
    """Tokenize `stream`, printing each token.  On an error print the error
    with the line it was on, and return `False`."""
    lex = ss.Lexer(stream, calculator_config())
    while True:
        try:
            tok = lex.scan()
        except ss.UnknownTokenError as e:
            print(ss.format_error_context(lex, e), file=out)
            return False
        if tok is None:
            return True
        print("{0} at {1}".format(tok, tok.position), file=out)

if __name__ == "__main__":
    tokenize_with_report(sys.stdin)

