# -*- coding: utf-8 -*-
#
# This file is part of `texbox`, a compiler front-end for a small LaTeX-like markup
#
# Copyright © 2026 by the texbox authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.



"""
Test the parser.
"""

### find texbox
import sys
sys.path.insert(0, '.')

import pytest

from texbox import lexer
from texbox.node import Macro, Seq, Text
from texbox.parser import (
    ParseError, TrailingTokens, UnclosedGroup, UnexpectedToken, parse,
    parse_tokens)


def test_simple_text():
    assert parse("Hello") == Seq([Text("Hello")])
    assert parse("") == Seq([])
    assert parse("% nothing") == Seq([])


def test_grouping():
    assert parse("{A B}") == Seq([Seq([Text("A"), Text("B")])])
    assert parse("{Hi there}") == Seq([Seq([Text("Hi"), Text("there")])])
    assert parse("{}") == Seq([Seq([])])


def test_nesting_depth():
    assert parse("{{{x}}}") == Seq([Seq([Seq([Seq([Text("x")])])])])


def test_macro():
    assert parse(r"\textbf{Bold}") == Seq([
        Macro("textbf", [Seq([Text("Bold")])])])


def test_macro_without_argument():
    assert parse(r"\par text") == Seq([Macro("par"), Text("text")])
    assert parse(r"\a\b{c}") == Seq([
        Macro("a"), Macro("b", [Seq([Text("c")])])])


def test_macro_takes_one_group():
    assert parse(r"\cmd{a}{b}") == Seq([
        Macro("cmd", [Seq([Text("a")])]),
        Seq([Text("b")]),
    ])


def test_unclosed_group():
    with pytest.raises(UnclosedGroup) as info:
        parse("{A")
    assert info.value.pos == 0
    with pytest.raises(UnclosedGroup) as info:
        parse("x {a {b}")
    assert info.value.pos == 2
    with pytest.raises(UnclosedGroup):
        parse(r"\textbf{bold")


def test_trailing_tokens():
    with pytest.raises(TrailingTokens) as info:
        parse("A } B")
    assert info.value.pos == 2
    with pytest.raises(TrailingTokens):
        parse("{a}}")


def test_unexpected_token():
    with pytest.raises(UnexpectedToken) as info:
        parse("ok\n  \\1")
    err = info.value
    assert err.pos == 5
    assert err.token == lexer.Error("\\")
    assert err.line_column() == (2, 3)
    assert "line 2, column 3" in str(err)


def test_errors_are_parse_errors():
    for source in ("{", "}", "\\@"):
        with pytest.raises(ParseError):
            parse(source)


def test_error_without_source():
    with pytest.raises(UnclosedGroup) as info:
        parse_tokens(lexer.lex("a {b"))
    assert info.value.line_column() is None
    assert str(info.value) == "unclosed '{' at position 2"


def test_parse_tokens():
    assert parse_tokens(lexer.lex(r"\emph{x}")) == parse(r"\emph{x}")


def test_deep_nesting():
    depth = 5000
    tree = parse("{" * depth + "x" + "}" * depth)
    for i in range(depth):
        assert len(tree.children) == 1
        tree = tree.children[0]
    assert tree == Seq([Text("x")])
    tree = parse("\\foo{" * depth + "}" * depth)
    assert sum(isinstance(n, Macro) for n in tree.descendants()) == depth


def test_deep_unclosed_group():
    with pytest.raises(UnclosedGroup) as info:
        parse("{" * 5000)
    assert info.value.pos == 4999


def test_positions_count_bytes():
    with pytest.raises(UnclosedGroup) as info:
        parse("é {x")
    assert info.value.pos == 3
    assert info.value.line_column() == (1, 3)
    with pytest.raises(TrailingTokens) as info:
        parse("ü\nöß }")
    assert info.value.pos == 8
    assert info.value.line_column() == (2, 4)
    assert "line 2, column 4" in str(info.value)


if __name__ == "__main__":
    for name, func in list(globals().items()):
        if name.startswith('test_'):
            func()
