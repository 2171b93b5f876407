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
The markup language definition and its transformation to spanned tokens.

The language is a small LaTeX-like subset: plain text, brace-delimited
groups and backslash commands. Comments and whitespace are skipped by the
lexicon, so they never reach the transform.

"""

from parce import Language, lexicon, skip
from parce.transform import Transform
import parce.action as a

from texbox import lexer


class Markup(Language):
    """Markup language definition."""
    @lexicon
    def root(cls):
        yield r'%[^\n]*', skip
        yield r'//[^\n]*', skip
        yield r'\s+', skip
        yield r'\\[A-Za-z]+', a.Name.Command
        yield r'[{}]', a.Delimiter.Brace
        yield r'[^\\{}\s%]+', a.Text
        yield r'.', a.Invalid


class MarkupTransform(Transform):
    """Transform Markup tokens to a list of :data:`~texbox.lexer.SpannedToken`."""
    _brace_mapping = {
        '{': lexer.LeftBrace,
        '}': lexer.RightBrace,
    }

    def root(self, items):
        """Process the ``root`` context; return the spanned tokens."""
        return [lexer.SpannedToken(self.to_token(t), t.pos, t.end)
            for t in items if t.is_token]

    def to_token(self, t):
        """Return a :mod:`~texbox.lexer` token for the parce token ``t``."""
        if t.action is a.Name.Command:
            return lexer.Command(t.text[1:])
        elif t.action is a.Delimiter.Brace:
            return self._brace_mapping[t.text]()
        elif t.action is a.Text:
            return lexer.Text(t.text)
        return lexer.Error(t.text)
