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
A parser, building a :mod:`~texbox.node` tree.

The grammar::

    sequence := node*                   (up to a '}' or the end)
    node     := Text | group | command
    group    := '{' sequence '}'
    command  := Command [group]

Every sequence becomes a :class:`~texbox.node.Seq`, a command becomes a
:class:`~texbox.node.Macro` with zero or one argument. The tree is exactly
as deep as the brace nesting in the source text; flattening is done later,
by :func:`texbox.expand.expand`. For example::

    >>> from texbox.parser import parse
    >>> parse(r"\textbf{Bold}").dump()
    <Seq (1 child)>
     ╰╴<Macro textbf (1 child)>
        ╰╴<Seq (1 child)>
           ╰╴<Text 'Bold'>

Errors raise a :exc:`ParseError` subclass, which knows the position in the
source text.

"""

import logging

from . import lexer
from .node import Macro, Seq, Text


logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Base class for parse errors.

    ``pos`` is the offset in UTF-8 encoded bytes in the source text where the
    error was found; if the ``source`` text is known, the message mentions the
    line and column.

    """
    def __init__(self, message, pos, source=None):
        super().__init__(message, pos)
        self.message = message
        self.pos = pos
        self.source = source

    def line_column(self):
        """Return the one-based (line, column) tuple of :attr:`pos`.

        The column counts characters, not bytes. Returns None if the source
        text is not known.

        """
        if self.source is not None:
            data = self.source.encode('utf-8', 'surrogatepass')
            text = data[:self.pos].decode('utf-8', 'surrogatepass')
            line = text.count('\n') + 1
            column = len(text) - text.rfind('\n')
            return line, column

    def __str__(self):
        location = self.line_column()
        if location:
            return "{} at line {}, column {}".format(self.message, *location)
        return "{} at position {}".format(self.message, self.pos)


class UnclosedGroup(ParseError):
    """A ``{`` without matching ``}``; ``pos`` is the position of the ``{``."""


class TrailingTokens(ParseError):
    """An unmatched ``}`` at the top level; ``pos`` is its position."""


class UnexpectedToken(ParseError):
    """A token that can't start a node, e.g. an unrecognized character."""
    def __init__(self, message, pos, source=None, token=None):
        super().__init__(message, pos, source)
        self.token = token


class Parser:
    """Parses a list of :data:`~texbox.lexer.SpannedToken` tuples.

    The ``source`` text is optional and only used for error messages.
    A Parser is used once; call :meth:`parse` to get the tree.

    Groups are tracked on a stack instead of by recursion, so the nesting
    depth is only limited by the available memory.

    """
    def __init__(self, tokens, source=None):
        self.tokens = tokens
        self.source = source
        self.pos = 0

    def error(self, exception_class, message, index, **kwargs):
        """Return an exception of ``exception_class`` for the token at ``index``."""
        if index < len(self.tokens):
            pos = self.tokens[index].start
        else:
            pos = lexer.utf8_length(self.source) if self.source is not None else 0
        err = exception_class(message, pos, self.source, **kwargs)
        logger.debug("parse error: %s", err)
        return err

    def parse(self):
        """Parse all tokens and return a :class:`~texbox.node.Seq`."""
        # (index of the '{', enclosing children, command name or None)
        stack = []
        children = []
        while self.pos < len(self.tokens):
            token = self.tokens[self.pos].token
            if isinstance(token, lexer.Text):
                children.append(Text(token.content))
            elif isinstance(token, lexer.Command):
                if self.pos + 1 < len(self.tokens) and \
                        isinstance(self.tokens[self.pos + 1].token, lexer.LeftBrace):
                    self.pos += 1
                    stack.append((self.pos, children, token.name))
                    children = []
                else:
                    children.append(Macro(token.name))
            elif isinstance(token, lexer.LeftBrace):
                stack.append((self.pos, children, None))
                children = []
            elif isinstance(token, lexer.RightBrace):
                if not stack:
                    raise self.error(TrailingTokens, "unmatched '}'", self.pos)
                start, outer, name = stack.pop()
                group = Seq(children)
                outer.append(group if name is None else Macro(name, [group]))
                children = outer
            else:
                raise self.error(UnexpectedToken,
                    "unexpected token {}".format(repr(token)), self.pos, token=token)
            self.pos += 1
        if stack:
            # the innermost group is the one that misses its '}'
            raise self.error(UnclosedGroup, "unclosed '{'", stack[-1][0])
        return Seq(children)


def parse_tokens(tokens, source=None):
    """Parse a list of :data:`~texbox.lexer.SpannedToken` tuples.

    Returns the tree, a :class:`~texbox.node.Seq`. Raises a
    :exc:`ParseError` on unbalanced braces or unrecognized characters.

    """
    return Parser(tokens, source).parse()


def parse(source):
    """Lex and parse the ``source`` text and return the tree.

    Raises a :exc:`ParseError` on unbalanced braces or unrecognized
    characters.

    """
    return parse_tokens(lexer.lex(source), source)
