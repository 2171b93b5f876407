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
Some generic datatypes used by texbox.

Too small to justify separate modules but too generic to be added to some
module where they are actually used.

"""


class Record(tuple):
    """Base class for small immutable value types.

    Inherit from Record and from a :func:`collections.namedtuple` type, in
    that order, and set ``__slots__`` to an empty tuple. Example::

        >>> import collections
        >>> from texbox.datatypes import Record
        >>> class Word(Record, collections.namedtuple("Word", "text")):
        ...     __slots__ = ()
        ...
        >>> class Name(Record, collections.namedtuple("Name", "text")):
        ...     __slots__ = ()
        ...
        >>> Word("a") == Word("a")
        True
        >>> Word("a") == Name("a")
        False

    Unlike plain tuples, two records only compare equal when they have the
    same type and the same field values.

    """
    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, Record):
            return type(self) is type(other) and tuple.__eq__(self, other)
        elif isinstance(other, tuple):
            return False
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((type(self).__name__, tuple.__hash__(self)))
