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
Elements are rendered with lxml's HTML serializer. Text nodes have no counterpart in
lxml's tree, their contents are escaped here in the same manner.
"""

from __future__ import annotations

from typing import Final, Optional

from lxml import etree

from lxml_selection.exceptions import SerializationError


# constants


CTRL_CHAR_ENTITY_NAME_MAPPING: Final = (
    ("&", "amp"),
    (">", "gt"),
    ("<", "lt"),
)
CCE_TABLE_FOR_TEXT: Final = str.maketrans(
    {ord(k): f"&{v};" for k, v in CTRL_CHAR_ENTITY_NAME_MAPPING}
)
# the contents of these are rendered verbatim
RAW_TEXT_ELEMENTS: Final = frozenset(
    ("iframe", "noembed", "noframes", "noscript", "plaintext", "script", "style", "xmp")
)


# api


def serialize_element(element: etree._Element) -> str:
    """
    Renders an element, a comment or a processing instruction with its descendants,
    but without its tail.
    """
    try:
        return etree.tostring(
            element, encoding="unicode", method="html", with_tail=False
        )
    except (etree.LxmlError, TypeError, ValueError) as e:
        raise SerializationError(element) from e


def serialize_text(content: str, parent_name: Optional[str] = None) -> str:
    if parent_name in RAW_TEXT_ELEMENTS:
        return content
    return content.translate(CCE_TABLE_FOR_TEXT)


__all__ = (
    serialize_element.__name__,
    serialize_text.__name__,
)
