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

from typing import TYPE_CHECKING, Any

from lxml import etree

from lxml_selection.caches import roots_of_documents
from lxml_selection.exceptions import (
    FailedDocumentLoading,
    InvalidOperation,
    SerializationError,
)
from lxml_selection.loaders import configured_loaders
from lxml_selection.nodes import (
    _get_or_create_element_wrapper,
    any_of,
    is_comment_node,
    is_tag_node,
    is_text_node,
    not_,
    CommentNode,
    NodeBase,
    ProcessingInstructionNode,
    TagNode,
    TextNode,
)
from lxml_selection.parser import ParserOptions
from lxml_selection.selection import Selection

if TYPE_CHECKING:
    from lxml_selection.typing import Loader


# api


class Document:
    """
    This class represents a parsed HTML document.

    :param source: Anything that one of the :obj:`lxml_selection.loaders.\
                   configured_loaders` can load a document from, e.g. a string with
                   markup or a :class:`pathlib.Path`.
    :param options: The :class:`ParserOptions` for parsing the source.

    >>> document = Document("<p class='greeting'>Hi <b>there</b></p>")
    >>> document.css_select("p").text()
    'Hi there'
    """

    def __init__(self, source: Any, options: ParserOptions = ParserOptions()):
        self.options = options
        tree = self.__load_source(source, options.make_parser())
        root = _get_or_create_element_wrapper(tree.getroot(), {})
        if not isinstance(root, TagNode):
            raise InvalidOperation("A document's root must be a tag node.")
        roots_of_documents[self] = root

    @staticmethod
    def __load_source(source: Any, parser: etree.HTMLParser) -> etree._ElementTree:
        loader_excuses: dict[Loader, str | Exception] = {}

        for loader in configured_loaders:
            try:
                loader_result = loader(source, parser)
            except Exception as e:
                loader_excuses[loader] = e
            else:
                if isinstance(loader_result, str):
                    loader_excuses[loader] = loader_result
                elif loader_result.getroot() is None:
                    loader_excuses[loader] = "The source has no root element."
                else:
                    return loader_result

        raise FailedDocumentLoading(source, loader_excuses)

    def __contains__(self, node: NodeBase) -> bool:
        """Tests whether a node is part of a document instance."""
        return node.document is self

    def __str__(self) -> str:
        return str(self.root)

    def clone(self) -> Document:
        """Returns a new document with a copy of the contents."""
        return self.__class__(self.root, options=self.options)

    def css_select(self, expression: str) -> Selection:
        """
        Returns a selection of the tag nodes that match the given CSS selector,
        including the root node.
        """
        return self.selection.find_or_self(expression)

    @property
    def root(self) -> TagNode:
        """The root node of a document instance."""
        return roots_of_documents[self]

    @property
    def selection(self) -> Selection:
        """A new selection that contains the document's root node."""
        return Selection((self.root,), document=self)


__all__ = (
    CommentNode.__name__,
    Document.__name__,
    FailedDocumentLoading.__name__,
    InvalidOperation.__name__,
    ParserOptions.__name__,
    ProcessingInstructionNode.__name__,
    Selection.__name__,
    SerializationError.__name__,
    TagNode.__name__,
    TextNode.__name__,
    any_of.__name__,
    is_comment_node.__name__,
    is_tag_node.__name__,
    is_text_node.__name__,
    not_.__name__,
)
