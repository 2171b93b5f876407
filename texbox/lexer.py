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
The token types and the :func:`lex` function.

The actual lexing rules are in :class:`texbox.lang.markup.Markup`, a parce
language definition. This module turns the source text into a list of
:data:`SpannedToken` tuples, e.g.::

    >>> from texbox.lexer import lex
    >>> [t.token for t in lex(r"\emph{Word} % comment")]
    [Command(name='emph'), LeftBrace(), Text(content='Word'), RightBrace()]
    >>> lex("Hi")[0]
    SpannedToken(token=Text(content='Hi'), start=0, end=2)
    >>> [(t.start, t.end) for t in lex("été x")]
    [(0, 5), (6, 7)]

Characters no rule matches become an :class:`Error` token; lexing just
continues. The parser complains if it encounters one.

"""

import collections
import logging

from .datatypes import Record


logger = logging.getLogger(__name__)


class Token(Record):
    """Base class for all tokens."""
    __slots__ = ()


class Text(Token, collections.namedtuple("Text", "content")):
    """A run of text, without whitespace, braces, backslashes or ``%``."""
    __slots__ = ()


class Command(Token, collections.namedtuple("Command", "name")):
    """A backslash command; the backslash is not in the ``name``."""
    __slots__ = ()


class LeftBrace(Token, collections.namedtuple("LeftBrace", "")):
    """An opening ``{``."""
    __slots__ = ()


class RightBrace(Token, collections.namedtuple("RightBrace", "")):
    """A closing ``}``."""
    __slots__ = ()


class Error(Token, collections.namedtuple("Error", "content")):
    """An unrecognized character."""
    __slots__ = ()


#: A token with its start and end offset in the UTF-8 encoded source text.
SpannedToken = collections.namedtuple("SpannedToken", "token start end")


def utf8_length(text):
    """Return the length of the text in UTF-8 encoded bytes."""
    return len(text.encode('utf-8', 'surrogatepass'))


def byte_spans(source, tokens):
    """Yield the tokens again, with character offsets turned into byte offsets.

    The tokens must be in source order and must not overlap.

    """
    pos = offset = 0
    for token, start, end in tokens:
        offset += utf8_length(source[pos:start])
        begin = offset
        offset += utf8_length(source[start:end])
        pos = end
        yield SpannedToken(token, begin, offset)


def lex(source):
    """Return the list of :data:`SpannedToken` tuples for the ``source`` text.

    The start and end offsets count bytes of the UTF-8 encoded text, not
    characters. Comments (``%`` or ``//`` up to the end of the line) and
    whitespace are skipped. Never fails; unrecognized characters become
    :class:`Error` tokens.

    """
    from parce.transform import transform_text
    from .lang.markup import Markup
    tokens = transform_text(Markup.root, source) or []
    if not source.isascii():
        tokens = list(byte_spans(source, tokens))
    for token, start, end in tokens:
        if isinstance(token, Error):
            logger.debug("unrecognized character %r at %d", token.content, start)
    return tokens


def tokens(source):
    """Yield only the tokens, without their spans, from the ``source`` text."""
    for token, start, end in lex(source):
        yield token
