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

from typing import NamedTuple, Optional

from lxml import html


class ParserOptions(NamedTuple):
    """
    The configuration options that define the HTML parser's behaviour.

    Documents are parsed with :class:`lxml.html.HTMLParser` which is lenient towards
    invalid markup. Element and attribute names are lower-cased by the parser.
    Fragments are wrapped into ``html`` and ``body`` elements.
    """

    encoding: Optional[str] = None
    """
    This should be used for byte streams where the encoding is not declared in the
    document. It doesn't affect parsing of data that is passed as :class:`str`.
    Default: :obj:`None`.
    """
    remove_blank_text: bool = False
    """Drop text nodes that only contain whitespace.  Default: :obj:`False`."""
    remove_comments: bool = False
    """Ignore comments.  Default: :obj:`False`."""
    remove_processing_instructions: bool = False
    """
    Don't include processing instructions in the parsed tree.  Default: :obj:`False`.
    """

    def make_parser(self) -> html.HTMLParser:
        return html.HTMLParser(
            encoding=self.encoding,
            no_network=True,
            remove_blank_text=self.remove_blank_text,
            remove_comments=self.remove_comments,
            remove_pis=self.remove_processing_instructions,
        )


__all__ = (ParserOptions.__name__,)
