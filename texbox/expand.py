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



r"""
Macro expansion.

There are no user-definable macros; expansion does two things:

* nested :class:`~texbox.node.Seq` nodes are flattened, so no Seq ever has
  a Seq as a direct child;

* a styling command with exactly one argument, like ``\textbf{...}`` or
  ``\emph{...}``, is replaced by a :class:`~texbox.node.StyledText` node.

Other commands are kept, with their arguments expanded. For example::

    >>> from texbox.expand import expand
    >>> from texbox.parser import parse
    >>> expand(parse(r"A {B {C}} \emph{D E}"))
    Seq(children=(Text(text='A'), Text(text='B'), Text(text='C'), StyledText(text='D E', style=<Style.ITALIC: 'italic'>)))

Expanding never fails and always builds a new tree.

"""

from .node import Macro, Seq, StyledText, Style, Text


#: The built-in styling commands.
STYLES = {
    'textbf': Style.BOLD,
    'emph': Style.ITALIC,
}


def splice(nodes):
    """Yield the nodes, replacing every Seq with its children."""
    for n in nodes:
        if isinstance(n, Seq):
            yield from n.children
        else:
            yield n


def collect_text(node):
    """Return the text of all Text and StyledText leaves of ``node``.

    The texts are joined with a single space, depth-first; other nodes, like
    a Macro, contribute nothing.

    """
    # (node, texts of the children seen so far)
    stack = [(node, [])]
    while stack:
        n, parts = stack[-1]
        if isinstance(n, Seq) and len(parts) < len(n.children):
            stack.append((n.children[len(parts)], []))
            continue
        stack.pop()
        if isinstance(n, (Text, StyledText)):
            text = n.text
        elif isinstance(n, Seq):
            text = ' '.join(parts)
        else:
            text = ''
        if stack:
            stack[-1][1].append(text)
    return text


class Expander:
    """Expands a tree.

    ``styles`` is a dictionary mapping command names to a
    :class:`~texbox.node.Style`; by default :data:`STYLES` is used.

    The tree is walked with an explicit stack, so arbitrarily deep trees can
    be expanded.

    """
    def __init__(self, styles=None):
        self.styles = STYLES if styles is None else styles

    def expand(self, node):
        """Return a new, expanded tree for ``node``."""
        # (node, its expanded children so far)
        stack = [(node, [])]
        while stack:
            n, done = stack[-1]
            if isinstance(n, (Seq, Macro)):
                children = n.child_nodes()
                if len(done) < len(children):
                    stack.append((children[len(done)], []))
                    continue
            elif not isinstance(n, (Text, StyledText)):
                raise TypeError("not a node: {}".format(repr(n)))
            stack.pop()
            result = self.rebuild(n, done)
            if stack:
                stack[-1][1].append(result)
        return result

    def rebuild(self, node, children):
        """Return the expanded version of ``node`` with its expanded ``children``."""
        if isinstance(node, Seq):
            return Seq(splice(children))
        elif isinstance(node, Macro):
            args = children
            if len(args) != 1:
                # splicing may leave exactly one argument
                args = list(splice(args))
            style = self.styles.get(node.name)
            if style is not None and len(args) == 1:
                return StyledText(collect_text(args[0]), style)
            return Macro(node.name, splice(args))
        return node


_expander = Expander()


def expand(node):
    """Expand the tree ``node`` with the built-in styling commands."""
    return _expander.expand(node)
