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
Test the layout settings.
"""

### find texbox
import sys
sys.path.insert(0, '.')

import math

import pytest

from texbox.geometry import Geometry, a4


def test_defaults():
    g = Geometry()
    assert g.line_width == pytest.approx(538.5827, abs=1e-4)
    assert g.line_height == 14.4
    assert g.char_width == 6.0
    assert g.space_width == 6.0
    assert g.page_budget == 800.0
    assert g.layout_args() == (g.line_width, 14.4, 6.0, 6.0)


def test_a4():
    settings = a4(margin=0, font_size=10)
    assert settings['line_width'] == pytest.approx(595.2756, abs=1e-4)
    assert settings['char_width'] == 5.0
    assert settings['line_height'] == 12.0


def test_values():
    g = Geometry(line_width=100, char_width=None)
    assert g.line_width == 100.0
    assert isinstance(g.line_width, float)
    assert g.char_width == 6.0
    with pytest.raises(AttributeError):
        g.line_width = 10
    with pytest.raises(AttributeError):
        g.nonexistent


def test_add():
    g = Geometry(line_width=100) + Geometry(char_width=5)
    assert g == Geometry(line_width=100, char_width=5)
    assert (g + Geometry(line_width=50)).line_width == 50
    assert (g + Geometry()).line_width == 100
    assert repr(g) == ("<Geometry line_width=100.0 line_height=14.4 "
        "char_width=5.0 space_width=6.0 page_budget=800.0>")


def test_invalid():
    with pytest.raises(TypeError):
        Geometry(width=3)
    for value in ("wide", True, [1]):
        with pytest.raises(ValueError):
            Geometry(line_width=value)


def test_unusual_values():
    # the layout engine copes with any number
    assert Geometry(line_width=0).line_width == 0
    assert Geometry(line_width=-1).line_width == -1
    assert Geometry(line_height=float('inf')).line_height == float('inf')
    assert math.isnan(Geometry(char_width=float('nan')).char_width)


def test_defaults_read_only():
    with pytest.raises(TypeError):
        Geometry.defaults['line_width'] = 1
    assert Geometry().line_width == pytest.approx(538.5827, abs=1e-4)


if __name__ == "__main__":
    for name, func in list(globals().items()):
        if name.startswith('test_'):
            func()
