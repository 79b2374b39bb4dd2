# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Union

from lxml import etree

if TYPE_CHECKING:
    from lxml_selection.nodes import NodeBase  # noqa: F401


ElementAttributes = etree._Attrib
Filter = Callable[["NodeBase"], bool]
_WrapperCache = dict[int, "NodeBase"]

# a loader either returns a parsed tree or a string that explains why it declined
LoaderResult = Union[etree._ElementTree, str]
Loader = Callable[[Any, etree.HTMLParser], LoaderResult]


__all__ = (
    "ElementAttributes",
    "Filter",
    "Loader",
    "LoaderResult",
)
