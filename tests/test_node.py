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
Test the node module.
"""

### find texbox
import sys
sys.path.insert(0, '.')

import io

from texbox.node import Macro, Seq, StyledText, Style, Text


tree = \
Seq([
    Text("a"),
    Macro("cmd", [
        Seq([
            Text("b"),
            StyledText("c", Style.BOLD),
        ]),
    ]),
    Seq([]),
])


def test_equality():
    assert Text("a") == Text("a")
    assert Text("a") != Text("b")
    assert Seq([Text("a")]) == Seq((Text("a"),))
    assert Macro("x") == Macro("x", [])
    assert StyledText("a", Style.BOLD) != StyledText("a", Style.ITALIC)
    # same contents but different type
    assert Seq([]) != Macro("", [])
    assert Text("a") != ("a",)
    assert len({Text("a"), Text("a"), Seq([Text("a")])}) == 2


def test_children():
    assert tree.child_nodes() == tree.children
    assert tree.children[0].child_nodes() == ()
    assert tree.children[0].is_leaf()
    assert not tree.children[2].is_leaf()
    assert tree.children[1].args[0].children[1].style is Style.BOLD


def test_descendants():
    assert list(tree.descendants()) == [
        Text("a"),
        tree.children[1],
        tree.children[1].args[0],
        Text("b"),
        StyledText("c", Style.BOLD),
        Seq([]),
    ]
    assert list(Text("x").descendants()) == []


def test_dump():
    f = io.StringIO()
    tree.dump(f)
    assert f.getvalue() == (
        "<Seq (3 children)>\n"
        " ├╴<Text 'a'>\n"
        " ├╴<Macro cmd (1 child)>\n"
        " │  ╰╴<Seq (2 children)>\n"
        " │     ├╴<Text 'b'>\n"
        " │     ╰╴<StyledText 'c' bold>\n"
        " ╰╴<Seq (0 children)>\n"
    )
    f = io.StringIO()
    Seq([Text("x")]).dump(f, "ascii")
    assert f.getvalue() == "<Seq (1 child)>\n `-<Text 'x'>\n"


if __name__ == "__main__":
    for name, func in list(globals().items()):
        if name.startswith('test_'):
            func()
