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
This module defines the node types the document tree is built of.

There are four node types: :class:`Text`, :class:`StyledText`,
:class:`Macro` and :class:`Seq`. The set is closed; code walking a tree
dispatches on these four types and raises a :class:`TypeError` on anything
else.

Nodes are immutable tuples and compare equal when their type and contents
are equal, so a tree can be compared with a manually built one::

    >>> from texbox.node import Seq, Text
    >>> from texbox.parser import parse
    >>> parse("{A B}") == Seq([Seq([Text("A"), Text("B")])])
    True

A node owns its children; there are no parent references. Transformations
build new trees instead of modifying existing ones.

"""

import collections
import enum

from .datatypes import Record


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


class Style(enum.Enum):
    """The rendering style of a piece of text."""
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"


class Node(Record):
    """Base class for the node types."""
    __slots__ = ()

    def child_nodes(self):
        """Return the tuple of child nodes; empty for leaf nodes."""
        return ()

    def is_leaf(self):
        """Return True if this node can't have child nodes."""
        return False

    def descendants(self):
        """Iterate over all the descendants of this node, depth-first."""
        stack = []
        gen = iter(self.child_nodes())
        while True:
            for n in gen:
                yield n
                if n.child_nodes():
                    stack.append(gen)
                    gen = iter(n.child_nodes())
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def dump_repr(self):
        """Return the one-line representation used by :meth:`dump`."""
        count = len(self.child_nodes())
        c = "child" if count == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, count, c)

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        print(self.dump_repr(), file=file)
        # (node, prefix, is last child)
        stack = [(n, '', i == 0) for i, n in enumerate(reversed(self.child_nodes()))]
        while stack:
            node, prefix, last = stack.pop()
            print(prefix + d[2 + last] + node.dump_repr(), file=file)
            stack.extend((n, prefix + d[last], i == 0)
                for i, n in enumerate(reversed(node.child_nodes())))


class Text(Node, collections.namedtuple("Text", "text")):
    """Literal text, possibly containing whitespace."""
    __slots__ = ()

    def is_leaf(self):
        return True

    def dump_repr(self):
        return '<Text {}>'.format(repr(self.text))


class StyledText(Node, collections.namedtuple("StyledText", "text style")):
    """Text with a :class:`Style`; only created by macro expansion."""
    __slots__ = ()

    def is_leaf(self):
        return True

    def dump_repr(self):
        return '<StyledText {} {}>'.format(repr(self.text), self.style.value)


class Macro(Node, collections.namedtuple("Macro", "name args")):
    r"""A command invocation, like ``\textbf{...}``.

    The ``name`` does not contain the backslash. The ``args`` are stored as a
    tuple of nodes.

    """
    __slots__ = ()

    def __new__(cls, name, args=()):
        return super().__new__(cls, name, tuple(args))

    def child_nodes(self):
        return self.args

    def dump_repr(self):
        count = len(self.args)
        c = "child" if count == 1 else "children"
        return '<Macro {} ({} {})>'.format(self.name, count, c)


class Seq(Node, collections.namedtuple("Seq", "children")):
    """An ordered group of nodes: a brace group or the whole document."""
    __slots__ = ()

    def __new__(cls, children=()):
        return super().__new__(cls, tuple(children))

    def child_nodes(self):
        return self.children
