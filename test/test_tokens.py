# -*- coding: utf-8 -*-
"""

Tests of the tokens.py code.

"""
import pytest_helper

pytest_helper.script_run(self_test=True, pytest_args="-v")
pytest_helper.auto_import()

from streamscan.tokens import * # Test as an individual module.
from streamscan.matcher import PatternTokenType

def test_token_id_names():
    assert str(OTHER) == "OTHER"
    assert str(IDENT) == "IDENT"
    assert str(NUMBER) == "NUMBER"
    assert str(STRING) == "STRING"
    assert str(TokenID(0)) == "UNKNOWN(0)"
    assert str(TokenID(42)) == "UNKNOWN(42)"
    assert str(TokenID(-9)) == "UNKNOWN(-9)"
    assert "{0}".format(IDENT) == "IDENT"
    assert repr(NUMBER) == "TokenID(NUMBER)"

def test_token_ids_are_ints():
    assert IDENT == -2
    assert TokenID(3) == 3
    assert {IDENT: "x"}[-2] == "x"

def test_advance_position_same_line():
    pos = Position(2, 5)
    assert advance_position(pos, "") == Position(2, 5)
    assert advance_position(pos, "abc") == Position(2, 8)
    assert pos.advance("abc") == Position(2, 8)

def test_advance_position_newlines():
    start = Position(0, 0)
    assert advance_position(start, "\n") == Position(1, 0)
    assert advance_position(start, "ab\n") == Position(1, 0)
    assert advance_position(start, "ab\ncd") == Position(1, 2)
    assert advance_position(Position(3, 7), "x\n\n\nyz") == Position(6, 2)

def test_advance_matches_character_walk():
    """Compare with stepping through the text one character at a time."""
    text = 'a "multi\nline\n" string\n\nend'
    line, column = 0, 0
    for char in text:
        if char == "\n":
            line, column = line + 1, 0
        else:
            column += 1
    assert advance_position(START_POSITION, text) == Position(line, column)

def test_position_display():
    assert str(Position(0, 0)) == "1:1"
    assert str(Position(4, 9)) == "5:10"

def test_token():
    tt = PatternTokenType(IDENT, ["abc"])
    t = Token(tt, "abc", (), Position(1, 2))
    assert t.token_id == IDENT
    assert str(t) == "<IDENT,'abc'>"
    with raises(AttributeError):
        t.literal = "xyz"

