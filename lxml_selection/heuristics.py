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
Heuristics that derive the semantic values of form controls and embedded media
elements. Each value is resolved from an ordered chain of candidate sources, the
first one that yields a non-empty value wins.

Mind that :func:`mime_type` and :func:`object_src` return lower-cased values. This
also applies to the addresses of resources which may actually be case-sensitive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from lxml_selection.utils import first_non_empty, trim_ascii_whitespace

if TYPE_CHECKING:
    from lxml_selection.selection import Selection


FORM_CONTROLS: Final = (
    "input[type=text], input[type=hidden], "
    "input[type=radio][checked], input[type=checkbox][checked], "
    "textarea, select"
)


def form_value(selection: Selection) -> str:
    """
    Returns the value of the last form control within the selection's nodes and their
    descendants. The value is returned as it is entered or marked up.
    """
    control = selection.find_or_self(FORM_CONTROLS).last
    if not control:
        return ""

    match control.node_name():
        case "input":
            match control.attr_or("type", "text"):
                case "checkbox" | "radio":
                    return control.attr_or("value", "on")
                case "text" | "hidden":
                    return control.attr_or("value", "")

        case "select":
            option = control.find("option[selected]")
            if not option:
                option = control.find("option").first
                if not option:
                    return ""
            value, exists = option.attr("value")
            if exists:
                return value
            return option.inner_html()

        case "textarea":
            return control.inner_html()

    return ""


def mime_type(selection: Selection) -> str:
    """
    Returns the lower-cased mime type that is declared for the first node if that is an
    ``object``, ``embed`` or ``param`` element.
    """
    subject = selection.first

    match subject.node_name():
        case "object":
            result = first_non_empty(
                lambda: subject.attr_or("codetype", ""),
                lambda: subject.find("param[type]").attr_or("type", ""),
                lambda: subject.find("embed[type]").attr_or("type", ""),
            )
        case "embed" | "param":
            result = subject.attr_or("type", "")
        case _:
            result = ""

    return trim_ascii_whitespace(result).lower()


def object_src(selection: Selection) -> str:
    """
    Returns the lower-cased address of the resource that the first node embeds if that
    is an ``object``, ``embed``, ``iframe`` or a ``param`` element that is named
    ``movie``.
    """
    subject = selection.first

    match subject.node_name():
        case "object":
            result = first_non_empty(
                lambda: subject.attr_or("data", ""),
                lambda: subject.find("param[name=movie]").attr_or("value", ""),
                lambda: subject.find("embed[src]").attr_or("src", ""),
            )
        case "embed" | "iframe":
            result = subject.attr_or("src", "")
        case "param":
            result = subject.filter("param[name=movie]").attr_or("value", "")
        case _:
            result = ""

    return trim_ascii_whitespace(result).lower()


__all__ = (
    form_value.__name__,
    mime_type.__name__,
    object_src.__name__,
)
