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
The layout engine: turns an expanded tree into pages of lines of boxes.

This works in three stages:

1. :func:`boxes` flattens the tree into a sequence of :class:`HBox`
   objects. Every word becomes a box containing one :class:`Run`; between
   words and between sibling nodes a box with :class:`Glue` is inserted.

2. :func:`break_lines` packs the boxes greedily into :class:`Line` objects
   that are at most ``line_width`` wide. A box that is wider than a line is
   put on a line of its own; boxes are never split.

3. :func:`break_pages` puts a fixed number of lines on every :class:`Page`,
   determined by the line height and :data:`PAGE_BUDGET`.

Widths are simply the number of UTF-8 bytes times the character width; the
unit is the caller's choice, as long as all widths use the same. For
example::

    >>> from texbox.layout import layout
    >>> from texbox.node import Seq, Text
    >>> pages = layout(Seq([Text("Hello world")]), 100, 20, 6, 6)
    >>> len(pages), len(pages[0].lines)
    (1, 1)
    >>> pages[0].lines[0].text()
    'Hello world'

All the layout objects are immutable.

"""

import collections
import logging
import math

from .datatypes import Record
from .lexer import utf8_length
from .node import Macro, Seq, StyledText, Style, Text


logger = logging.getLogger(__name__)


#: The vertical space on a page, divided by the line height to get the
#: number of lines per page.
PAGE_BUDGET = 800.0


class StyledRun(Record, collections.namedtuple("StyledRun", "text style")):
    """A word (without whitespace) with its :class:`~texbox.node.Style`."""
    __slots__ = ()


class LayoutNode(Record):
    """Base class for the items of a :class:`HBox`."""
    __slots__ = ()


class Run(LayoutNode, collections.namedtuple("Run", "run")):
    """A :class:`StyledRun` to render."""
    __slots__ = ()


class Glue(LayoutNode, collections.namedtuple("Glue", "width")):
    """White space between words or nodes; not rendered."""
    __slots__ = ()


class HBox(Record, collections.namedtuple("HBox", "items width")):
    """A horizontal box: the unit that is put on a line, never split.

    The ``width`` is the total width of the ``items``.

    """
    __slots__ = ()

    def __new__(cls, items, width):
        return super().__new__(cls, tuple(items), width)

    def is_glue(self):
        """Return True if this box only contains glue."""
        return all(isinstance(item, Glue) for item in self.items)


class Line(Record, collections.namedtuple("Line", "boxes width")):
    """A line of boxes, with its total width."""
    __slots__ = ()

    def __new__(cls, boxes, width):
        return super().__new__(cls, tuple(boxes), width)

    def runs(self):
        """Yield all the :class:`StyledRun` objects on this line."""
        for box in self.boxes:
            for item in box.items:
                if isinstance(item, Run):
                    yield item.run

    def text(self):
        """Return the plain text of the line, glue becomes a space."""
        return ''.join(item.run.text if isinstance(item, Run) else ' '
            for box in self.boxes for item in box.items)


class Page(Record, collections.namedtuple("Page", "lines")):
    """A page of lines."""
    __slots__ = ()

    def __new__(cls, lines):
        return super().__new__(cls, tuple(lines))


def glue(space_width):
    """Return a HBox with one Glue of ``space_width``."""
    return HBox((Glue(space_width),), space_width)


def words(text, style, char_width, space_width):
    """Yield a HBox for every word in the text, with glue in between.

    The width of a word is its length in UTF-8 encoded bytes times the
    ``char_width``.

    """
    for i, word in enumerate(text.split()):
        if i:
            yield glue(space_width)
        yield HBox((Run(StyledRun(word, style)),), utf8_length(word) * char_width)


# stands for the glue between two children on the boxes() stack
_GLUE = object()


def boxes(node, char_width, space_width):
    """Yield the HBox objects for the (expanded) tree ``node``, depth-first.

    A Seq or Macro node inserts glue between its children (or arguments); a
    Macro's name is not part of the output. Text nodes have the normal
    style.

    """
    todo = [node]
    while todo:
        node = todo.pop()
        if node is _GLUE:
            yield glue(space_width)
        elif isinstance(node, (Seq, Macro)):
            children = node.child_nodes()
            for i in range(len(children) - 1, -1, -1):
                todo.append(children[i])
                if i:
                    todo.append(_GLUE)
        elif isinstance(node, Text):
            yield from words(node.text, Style.NORMAL, char_width, space_width)
        elif isinstance(node, StyledText):
            yield from words(node.text, node.style, char_width, space_width)
        else:
            raise TypeError("not a node: {}".format(repr(node)))


def break_lines(boxes, line_width):
    """Pack the boxes greedily in lines of at most ``line_width``.

    A box that does not fit anymore starts a new line, unless the line is
    still empty: then the box is put there, even if it is too wide. A box
    that fits exactly stays on the line. Glue is counted like any other box,
    also at the end of a line.

    Returns a list of :class:`Line` objects.

    """
    lines = []
    current = []
    width = 0
    for box in boxes:
        if current and width + box.width > line_width:
            lines.append(Line(current, width))
            current = []
            width = 0
        current.append(box)
        width += box.width
    if current:
        lines.append(Line(current, width))
    return lines


def lines_per_page(line_height, page_budget=PAGE_BUDGET):
    """Return the maximum number of lines on a page.

    This is the ``page_budget`` divided by the ``line_height``, rounded down,
    but at least 1. Returns None (no limit) if the line height is zero.

    """
    if line_height == 0:
        return None
    elif line_height > 0:
        count = page_budget / line_height
        if math.isfinite(count):
            return max(1, math.floor(count))
        return None
    return 1


def break_pages(lines, line_height, page_budget=PAGE_BUDGET):
    """Split the lines in a list of :class:`Page` objects.

    Every page gets :func:`lines_per_page` lines, except maybe the last one.
    No lines result in no pages.

    """
    lines = list(lines)
    count = lines_per_page(line_height, page_budget) or max(len(lines), 1)
    return [Page(lines[i:i+count]) for i in range(0, len(lines), count)]


def layout(node, line_width, line_height, char_width, space_width, page_budget=PAGE_BUDGET):
    """Lay out the expanded tree ``node`` and return a list of :class:`Page`.

    ``line_width`` is the maximum width of a line, ``line_height`` is used to
    compute the number of lines per page, ``char_width`` is the width of any
    character and ``space_width`` the width of the glue between words.

    Never fails; an empty tree yields no pages at all.

    """
    hboxes = list(boxes(node, char_width, space_width))
    lines = break_lines(hboxes, line_width)
    pages = break_pages(lines, line_height, page_budget)
    logger.debug("layout: %d boxes, %d lines, %d pages", len(hboxes), len(lines), len(pages))
    return pages
