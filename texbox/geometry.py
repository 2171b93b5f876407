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
The layout settings.

A :class:`Geometry` holds the four values the layout engine needs, and the
vertical page budget used for page breaking. All values are in the same
unit; the defaults are in PostScript points, for 12pt text on an A4 page
with 10mm margins::

    >>> from texbox.geometry import Geometry
    >>> g = Geometry(line_width=100)
    >>> g.line_width, g.char_width
    (100.0, 6.0)
    >>> g + Geometry(char_width=5)
    <Geometry line_width=100.0 line_height=14.4 char_width=5.0 space_width=6.0 page_budget=800.0>

"""

import types


MM = 72 / 25.4      # points per millimeter


def a4(margin=10, font_size=12):
    """Return a dictionary with the settings for an A4 page.

    ``margin`` is the left and right page margin in millimeters,
    ``font_size`` the font size in points. The line height is 1.2 times the
    font size, and a character (or a space) is assumed to be half the font
    size wide.

    """
    return dict(
        line_width = (210 - 2 * margin) * MM,
        line_height = font_size * 6 / 5,
        char_width = font_size / 2,
        space_width = font_size / 2,
        page_budget = 800.0,
    )


class Geometry:
    """The layout settings, accessible as attributes.

    Keyword arguments set the values; settings that are not given (or are
    None) get their default value from :attr:`defaults`. Adding another
    Geometry returns a new Geometry with the explicitly set values of the
    other one taking precedence.

    Raises TypeError for unknown names and ValueError for values that are
    not numbers. Any number is accepted, also negative, infinite or NaN
    values; the layout engine handles those without failing.

    """
    #: The default settings (read-only).
    defaults = types.MappingProxyType(a4())

    def __init__(self, **kwargs):
        unknown = set(kwargs).difference(self.defaults)
        if unknown:
            raise TypeError("unknown geometry setting(s): {}".format(
                ", ".join(sorted(unknown))))
        self._explicit = {}
        for name, value in kwargs.items():
            if value is not None:
                self._explicit[name] = self._check(name, value)

    @staticmethod
    def _check(name, value):
        """Return value as a float; raise ValueError if it is invalid."""
        if isinstance(value, bool):
            raise ValueError("{} must be a number, got {}".format(name, repr(value)))
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValueError("{} must be a number, got {}".format(name, repr(value))) from None
        return value

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            default = self.defaults[name]
        except KeyError:
            raise AttributeError(name) from None
        return self._explicit.get(name, default)

    def __setattr__(self, name, value):
        if name.startswith('_'):
            object.__setattr__(self, name, value)
        else:
            raise AttributeError("Geometry is immutable")

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, " ".join(
            "{}={}".format(name, repr(value)) for name, value in self.items()))

    def __eq__(self, other):
        if isinstance(other, Geometry):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    __hash__ = None

    def __add__(self, other):
        return type(self)(**{**self._explicit, **other._explicit})

    def items(self):
        """Yield (name, value) tuples for all settings."""
        for name in self.defaults:
            yield name, getattr(self, name)

    def layout_args(self):
        """Return the tuple (line_width, line_height, char_width, space_width)."""
        return self.line_width, self.line_height, self.char_width, self.space_width
