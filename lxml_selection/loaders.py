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

"""
Loaders retrieve a parsed tree from various data sources. A loader returns either an
:class:`lxml.etree._ElementTree` or a string that explains why it declined the source.
The :obj:`configured_loaders` are tried in order by :class:`lxml_selection.Document`.
Resources are never fetched over a network.
"""

from __future__ import annotations

from contextlib import suppress
from copy import deepcopy
from io import IOBase, UnsupportedOperation
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast, IO

from lxml import etree

from lxml_selection.nodes import TagNode

if TYPE_CHECKING:
    from lxml_selection.typing import Loader, LoaderResult


def _tree_of(root: etree._Element | None) -> LoaderResult:
    if root is None:
        return "The parser didn't produce a root element."
    return root.getroottree()


def buffer_loader(data: Any, parser: etree.HTMLParser) -> LoaderResult:
    """Parses a document from a :term:`file-like object`."""
    if isinstance(data, IOBase):
        with suppress(UnsupportedOperation):
            data.seek(0)
        return etree.parse(cast(IO, data), parser=parser)
    return "The input value is no buffer object."


def etree_loader(data: Any, parser: etree.HTMLParser) -> LoaderResult:
    """Uses a copy of an lxml element or element tree."""
    if isinstance(data, etree._ElementTree):
        return deepcopy(data)
    if isinstance(data, etree._Element):
        return etree.ElementTree(element=deepcopy(data), parser=parser)
    return "The input value is not an lxml element or element tree."


def path_loader(data: Any, parser: etree.HTMLParser) -> LoaderResult:
    """Parses a document from a file that is pointed at with a :class:`Path`."""
    if isinstance(data, Path):
        with data.open("rb") as file:
            return etree.parse(file, parser=parser)
    return "The input value is not a pathlib.Path instance."


def tag_node_loader(data: Any, parser: etree.HTMLParser) -> LoaderResult:
    """Uses a copy of a tag node and its descendants."""
    if isinstance(data, TagNode):
        return etree.ElementTree(element=data.clone()._etree_obj, parser=parser)
    return "The input value is not a TagNode instance."


def text_loader(data: Any, parser: etree.HTMLParser) -> LoaderResult:
    """Parses a string or byte sequence containing a document or a fragment."""
    if isinstance(data, (bytes, str)):
        return _tree_of(etree.fromstring(data, parser))
    return "The input value is not a byte sequence or a string."


configured_loaders: list[Loader] = [
    tag_node_loader,
    path_loader,
    buffer_loader,
    text_loader,
    etree_loader,
]


__all__ = (
    "configured_loaders",
    buffer_loader.__name__,
    etree_loader.__name__,
    path_loader.__name__,
    tag_node_loader.__name__,
    text_loader.__name__,
)
