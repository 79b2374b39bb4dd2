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
Manipulations of a tag node's ``class`` attribute.

The class list is handled as one string that starts and ends with a space and where
the class names are separated by single spaces. Hence a membership test is a search
for the name enclosed in spaces, which doesn't match prefixes or suffixes of other
names. The string is written back to the attribute after all requested changes have
been applied, an empty class list removes the attribute.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from lxml_selection.utils import squash_whitespace, trim_ascii_whitespace

if TYPE_CHECKING:
    from lxml_selection.nodes import TagNode


def _get_classes(node: TagNode) -> str:
    value, _ = node.get_attribute("class")
    return squash_whitespace(value)


def _set_classes(node: TagNode, classes: str):
    classes = trim_ascii_whitespace(classes)
    if classes:
        node.set_attribute("class", classes)
    else:
        node.remove_attribute("class")


def _without(classes: str, name: str) -> str:
    needle = f" {name} "
    # repeated names overlap in their enclosing spaces
    while needle in classes:
        classes = classes.replace(needle, " ")
    return classes


def add_classes(node: TagNode, names: Sequence[str]):
    classes = _get_classes(node)
    for name in names:
        if f" {name} " not in classes:
            classes += name + " "
    _set_classes(node, classes)


def has_class(node: TagNode, name: str) -> bool:
    return f" {name} " in _get_classes(node)


def remove_classes(node: TagNode, names: Sequence[str]):
    classes = _get_classes(node)
    for name in names:
        classes = _without(classes, name)
    _set_classes(node, classes)


def toggle_classes(node: TagNode, names: Sequence[str]):
    classes = _get_classes(node)
    for name in names:
        if f" {name} " in classes:
            classes = _without(classes, name)
        else:
            classes += name + " "
    _set_classes(node, classes)


__all__ = (
    add_classes.__name__,
    has_class.__name__,
    remove_classes.__name__,
    toggle_classes.__name__,
)
