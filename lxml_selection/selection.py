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

import warnings
import weakref
from collections.abc import Collection, Iterable, Sequence
from typing import TYPE_CHECKING, Optional

from lxml_selection import classes, heuristics
from lxml_selection.utils import split_names, unique

if TYPE_CHECKING:
    from lxml_selection import Document
    from lxml_selection.nodes import TagNode
    from lxml_selection.typing import Filter


class Selection(Sequence["TagNode"]):
    """
    An ordered sequence of tag nodes from one document that provides jQuery-like
    methods to query and alter them.

    Methods that read a value consider the first node only, methods that alter nodes
    apply to all of them and return the selection itself so that calls can be chained.
    Every method can be used on an empty selection; reading methods then return empty
    strings, :obj:`False` or the given default value.

    A selection refers its document weakly, it doesn't keep it alive.
    """

    def __init__(
        self, nodes: Iterable[TagNode] = (), document: Optional[Document] = None
    ):
        self.__items = tuple(nodes)
        self.__document_reference = (
            None if document is None else weakref.ref(document)
        )

    def __eq__(self, other):
        if not isinstance(other, Collection):
            raise TypeError

        return len(self.__items) == len(other) and all(x in other for x in self.__items)

    def __getitem__(self, item):
        return self.__items[item]

    def __len__(self) -> int:
        return len(self.__items)

    def __repr__(self):
        return f"<{self.__class__.__name__}({[repr(x) for x in self.__items]})>"

    def _derive(self, nodes: Iterable[TagNode]) -> Selection:
        return self.__class__(nodes, document=self.document)

    # container

    @property
    def document(self) -> Optional[Document]:
        """The document that the nodes belong to or :obj:`None`."""
        if self.__document_reference is not None:
            return self.__document_reference()
        if self.__items:
            return self.__items[0].document
        return None

    def document_selection(self) -> Selection:
        """A new selection that contains the root node of the document."""
        document = self.document
        if document is None:
            return self.__class__()
        return document.selection

    def filter(self, expression: str) -> Selection:
        """Returns the nodes that match the given CSS selector."""
        return self._derive(
            x for x in self.__items if x.css_select(expression, axis="self")
        )

    def filtered_by(self, *filters: Filter) -> Selection:
        """Returns the nodes that pass all of the provided filters."""
        items: Sequence[TagNode] = self.__items
        for filter in filters:
            items = [x for x in items if filter(x)]
        return self._derive(items)

    def find(self, expression: str) -> Selection:
        """
        Returns the descendants of all nodes that match the given CSS selector, without
        repetitions.
        """
        return self._derive(
            unique(y for x in self.__items for y in x.css_select(expression))
        )

    def find_or_self(self, expression: str) -> Selection:
        """
        Like :meth:`Selection.find`, but the selection's nodes are considered as well.
        """
        return self._derive(
            unique(
                y
                for x in self.__items
                for y in x.css_select(expression, axis="descendant-or-self")
            )
        )

    @property
    def first(self) -> Selection:
        """A selection with the first node, if there is any."""
        return self._derive(self.__items[:1])

    @property
    def last(self) -> Selection:
        """A selection with the last node, if there is any."""
        return self._derive(self.__items[-1:])

    @property
    def length(self) -> int:
        """The amount of contained nodes."""
        return len(self.__items)

    @property
    def nodes(self) -> tuple[TagNode, ...]:
        return self.__items

    size = length

    # attributes

    def attr(self, name: str) -> tuple[str, bool]:
        """
        Returns the value of the first node's attribute with the given name and whether
        it exists at all. Names are matched case-insensitively.
        """
        names = split_names(name)
        if not self.__items or not names:
            return "", False
        if len(names) > 1:
            warnings.warn(
                f"Only the first of the attribute names {names} is considered.",
                category=UserWarning,
            )
        return self.__items[0].get_attribute(names[0])

    def attr_or(self, name: str, default: str) -> str:
        """
        Returns the value of the first node's attribute with the given name or the
        ``default`` if it doesn't exist.
        """
        value, exists = self.attr(name)
        return value if exists else default

    def find_remove_attr(self, names: str) -> Selection:
        """
        Removes the space-separated attributes from all descendants that have any of
        them and returns these.
        """
        tokens = split_names(names.lower())
        if not tokens:
            return self
        return (
            self.find("*")
            .filtered_by(lambda x: any(t in x for t in tokens))
            .remove_attr(names)
        )

    def remove_attr(self, names: str) -> Selection:
        """Removes the space-separated attributes from all nodes."""
        for name in split_names(names):
            for node in self.__items:
                node.remove_attribute(name)
        return self

    def set_attr(self, names: str, value: str) -> Selection:
        """
        Sets the space-separated attributes to the given value on all nodes. Names that
        are refused by lxml are skipped with a warning.
        """
        for name in split_names(names):
            for node in self.__items:
                try:
                    node.set_attribute(name, value)
                except ValueError:
                    warnings.warn(
                        f"Ignoring the invalid attribute name {name!r}.",
                        category=UserWarning,
                    )
                    break
        return self

    # classes

    def add_class(self, *names: str) -> Selection:
        """
        Adds the given class names to all nodes. Names can be passed as separate
        arguments and as space-separated strings.
        """
        tokens = split_names(*names)
        if tokens:
            for node in self.__items:
                classes.add_classes(node, tokens)
        return self

    def has_class(self, name: str) -> bool:
        """Tests whether any node has the given class name."""
        return any(classes.has_class(x, name) for x in self.__items)

    def remove_class(self, *names: str) -> Selection:
        """
        Removes the given class names from all nodes. Without any name, the ``class``
        attribute is removed altogether.
        """
        tokens = split_names(*names)
        for node in self.__items:
            if tokens:
                classes.remove_classes(node, tokens)
            else:
                node.remove_attribute("class")
        return self

    def toggle_class(self, *names: str) -> Selection:
        """
        Removes each given class name from a node that has it and adds it to those that
        don't.
        """
        tokens = split_names(*names)
        if tokens:
            for node in self.__items:
                classes.toggle_classes(node, tokens)
        return self

    # contents

    def html(self) -> str:
        """Deprecated. Use :meth:`Selection.inner_html`."""
        warnings.warn(
            "This method is deprecated. Use Selection.inner_html instead.",
            category=DeprecationWarning,
        )
        return self.inner_html()

    def inner_html(self) -> str:
        """
        Returns the markup of the first node's child nodes.

        :raises SerializationError: When a child node can't be rendered. Nothing of
                                    the markup is returned then.
        """
        if not self.__items:
            return ""
        return self.__items[0].inner_html()

    def node_name(self) -> str:
        """The lower-cased name of the first node."""
        if not self.__items:
            return ""
        return self.__items[0].local_name

    def outer_html(self) -> str:
        """
        Returns the markup of the first node, including its own tags.

        :raises SerializationError: When the node can't be rendered.
        """
        if not self.__items:
            return ""
        return self.__items[0].serialize()

    def text(self, separator: str = "") -> str:
        """
        Returns the concatenated contents of all text nodes within the selected nodes'
        subtrees. Each text node's content is enclosed by the ``separator``. Whitespace
        is retained as is.
        """
        return "".join(x.text(separator) for x in self.__items)

    # semantics

    def form_value(self) -> str:
        """See :func:`lxml_selection.heuristics.form_value`."""
        return heuristics.form_value(self)

    def mime_type(self) -> str:
        """See :func:`lxml_selection.heuristics.mime_type`."""
        return heuristics.mime_type(self)

    def object_src(self) -> str:
        """See :func:`lxml_selection.heuristics.object_src`."""
        return heuristics.object_src(self)


__all__ = (Selection.__name__,)
