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
Registration of the language definitions bundled with :mod:`texbox`.

The languages are added to the *parce* registry, so :func:`find` (and
:func:`parce.find` itself) can find them by name or file name.

When adding languages to :mod:`texbox.lang` please also add a registration
here.

"""

__all__ = ['find', 'register']


import parce
from parce.registry import register


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Get the root lexicon for a language with name.

    See for all the arguments :func:`parce.find`. For example::

        >>> import texbox
        >>> texbox.find("texbox")
        Markup.root

    """
    return parce.find(name, filename=filename, mimetype=mimetype, contents=contents)


## register bundled languages here
register("texbox.lang.markup.Markup.root",
    name = "Texbox",
    desc = "LaTeX-like markup with text, groups and styling commands",
    filenames = [("*.tbx", 1)],
)
