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
The texbox module.

Compiles a small LaTeX-like markup language (text, ``{`` ... ``}`` groups and
commands like ``\textbf{...}`` and ``\emph{...}``) to pages of lines of
boxes, ready to be rendered. The work is done in four stages:

* :func:`texbox.lexer.lex` turns the text into tokens,
* :func:`texbox.parser.parse_tokens` builds a tree of :mod:`texbox.node`
  nodes,
* :func:`texbox.expand.expand` flattens the tree and applies the styling
  commands,
* :func:`texbox.layout.layout` breaks the contents in lines and pages.

:func:`compile_to_layout` performs all of them::

    >>> import texbox
    >>> pages = texbox.compile_to_layout(r"Hello \textbf{world}", 100, 20, 6, 6)
    >>> [run.text for run in pages[0].lines[0].runs()]
    ['Hello', 'world']

"""

from . import expand, layout, lexer, parser
from .geometry import Geometry
from .parser import ParseError
from .pkginfo import version, version_string
from .registry import find


__all__ = ('compile_to_layout', 'find', 'Geometry', 'ParseError', 'version', 'version_string')


def compile_to_layout(source, line_width=None, line_height=None,
                      char_width=None, space_width=None, *, geometry=None):
    """Compile the ``source`` text and return a list of :class:`~texbox.layout.Page`.

    Values for ``line_width``, ``line_height``, ``char_width`` and
    ``space_width`` that are not given are taken from the ``geometry`` (a
    :class:`~texbox.geometry.Geometry`; by default the A4 settings). The
    page budget also comes from the geometry.

    Raises a :exc:`~texbox.parser.ParseError` if the source text can't be
    parsed; the other stages never fail.

    """
    geometry = (geometry or Geometry()) + Geometry(
        line_width = line_width,
        line_height = line_height,
        char_width = char_width,
        space_width = space_width,
    )
    tree = parser.parse_tokens(lexer.lex(source), source)
    return layout.layout(expand.expand(tree), *geometry.layout_args(),
                         page_budget=geometry.page_budget)
