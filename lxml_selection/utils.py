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

import re
from collections.abc import Callable, Iterable
from functools import lru_cache
from typing import Final

from cssselect import HTMLTranslator


ASCII_WHITESPACE: Final = " \t\r\n"
CSS_AXES: Final = {
    "descendant": "descendant::",
    "descendant-or-self": "descendant-or-self::",
    "self": "self::",
}


_css_translator = HTMLTranslator()
_whitespace_run_pattern: Final = re.compile(f"[{re.escape(ASCII_WHITESPACE)}]+")


@lru_cache(maxsize=64)
def css_to_xpath(expression: str, axis: str = "descendant") -> str:
    """
    Translates a CSS selector into an XPath expression whose location steps start with
    the given axis, one of ``descendant``, ``descendant-or-self`` or ``self``.
    """
    try:
        prefix = CSS_AXES[axis]
    except KeyError:
        raise ValueError(f"`{axis}` is not a supported axis for CSS queries.")
    return _css_translator.css_to_xpath(expression, prefix=prefix)


def first_non_empty(*candidates: Callable[[], str]) -> str:
    """
    Evaluates the given callables in order and returns the first result that isn't
    empty after trimming ASCII whitespace. Returns an empty string if none yields a
    value.
    """
    for candidate in candidates:
        if value := trim_ascii_whitespace(candidate()):
            return value
    return ""


def split_names(*names: str) -> list[str]:
    """
    Joins the given strings with spaces and splits the result into its non-empty
    tokens, considering spaces, tabs, carriage returns and line feeds as separators.

    >>> split_names("foo bar", "  baz")
    ['foo', 'bar', 'baz']
    """
    return [x for x in _whitespace_run_pattern.split(" ".join(names)) if x]


def squash_whitespace(value: str) -> str:
    """
    Replaces each run of ASCII whitespace with a single space and brackets the result
    with one space on each side.

    >>> squash_whitespace("foo\\t bar")
    ' foo bar '
    """
    tokens = split_names(value)
    if not tokens:
        return " "
    return " " + " ".join(tokens) + " "


def trim_ascii_whitespace(value: str) -> str:
    """Strips spaces, tabs, carriage returns and line feeds from both ends."""
    return value.strip(ASCII_WHITESPACE)


def unique(items: Iterable) -> list:
    """Returns the given items without repetitions, compared by identity."""
    seen: set[int] = set()
    result = []
    for item in items:
        if id(item) not in seen:
            seen.add(id(item))
            result.append(item)
    return result


__all__ = (
    css_to_xpath.__name__,
    first_non_empty.__name__,
    split_names.__name__,
    squash_whitespace.__name__,
    trim_ascii_whitespace.__name__,
    unique.__name__,
)
