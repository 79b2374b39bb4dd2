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
The node classes wrap the elements of an :mod:`lxml` tree. The character data that
lxml stores in the ``text`` and ``tail`` slots of elements is exposed as distinct
:class:`TextNode` instances, so that all node types can be traversed in document
order.
"""

from __future__ import annotations

from abc import abstractmethod, ABC
from collections.abc import Iterator
from copy import deepcopy
from typing import TYPE_CHECKING, Any, Optional, Union

from lxml import etree

from lxml_selection.caches import roots_of_documents
from lxml_selection.exceptions import InvalidCodePath
from lxml_selection.serializer import serialize_element, serialize_text
from lxml_selection.utils import css_to_xpath, split_names

if TYPE_CHECKING:
    from lxml_selection import Document
    from lxml_selection.typing import ElementAttributes, Filter, _WrapperCache


Comment = etree.Comment
PI = etree.PI
_Element = etree._Element


DATA, TAIL = 1, 2


def _get_or_create_element_wrapper(
    element: _Element, cache: _WrapperCache
) -> _ElementNodeBase:
    result = cache.get(id(element))
    if result is None:
        if element.tag is Comment:
            result = CommentNode(element, cache)
        elif element.tag is PI:
            result = ProcessingInstructionNode(element, cache)
        elif isinstance(element.tag, str):
            result = TagNode(element, cache)
        else:
            raise InvalidCodePath
        cache[id(element)] = result
    assert isinstance(result, _ElementNodeBase)
    return result


class NodeBase(ABC):
    def __init__(self, cache: _WrapperCache):
        self._cache = cache

    def ancestors(self, *filter: Filter) -> Iterator[TagNode]:
        """Yields the ancestor nodes from bottom to top."""
        parent = self.parent
        if parent is not None:
            if all(f(parent) for f in filter):
                yield parent
            yield from parent.ancestors(*filter)

    @property
    def document(self) -> Optional[Document]:
        parent = self.parent
        if parent is None:
            return None
        return parent.document

    @abstractmethod
    def next_node(self) -> Optional[NodeBase]:
        pass

    @property
    @abstractmethod
    def parent(self) -> Optional[TagNode]:
        pass

    @abstractmethod
    def serialize(self) -> str:
        """
        Returns the node's markup.

        :raises SerializationError: When the node can't be rendered.
        """
        pass

    @abstractmethod
    def text(self, separator: str = "") -> str:
        """
        Returns the contents of all text nodes within the node's subtree in document
        order, each one enclosed by the ``separator``.
        """
        pass


class _ElementNodeBase(NodeBase):
    """Base class for nodes that are represented by an lxml element."""

    def __init__(self, etree_element: _Element, cache: _WrapperCache):
        super().__init__(cache=cache)
        self._etree_obj = etree_element
        self._tail_node = TextNode(etree_element, position=TAIL, cache=cache)

    def next_node(self) -> Optional[NodeBase]:
        if self._tail_node._exists:
            return self._tail_node
        next_etree_obj = self._etree_obj.getnext()
        if next_etree_obj is None:
            return None
        return _get_or_create_element_wrapper(next_etree_obj, self._cache)

    @property
    def parent(self) -> Optional[TagNode]:
        etree_parent = self._etree_obj.getparent()
        if etree_parent is None:
            return None
        result = _get_or_create_element_wrapper(etree_parent, self._cache)
        assert isinstance(result, TagNode)
        return result

    def serialize(self) -> str:
        return serialize_element(self._etree_obj)


class CommentNode(_ElementNodeBase):
    @property
    def content(self) -> str:
        return self._etree_obj.text or ""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self.content!r}) [{hex(id(self))}]>"

    def text(self, separator: str = "") -> str:
        return ""


class ProcessingInstructionNode(_ElementNodeBase):
    @property
    def content(self) -> str:
        return self._etree_obj.text or ""

    @property
    def target(self) -> str:
        return self._etree_obj.target

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}({self.target!r}, {self.content!r}) "
            f"[{hex(id(self))}]>"
        )

    def text(self, separator: str = "") -> str:
        return ""


class TagNode(_ElementNodeBase):
    def __init__(self, etree_element: _Element, cache: _WrapperCache):
        super().__init__(etree_element, cache=cache)
        self._data_node = TextNode(etree_element, position=DATA, cache=cache)

    def __contains__(self, item: Union[str, NodeBase]) -> bool:
        """
        Tests whether the node has an attribute with the given name or whether the
        given node is one of its child nodes.
        """
        if isinstance(item, str):
            return self.get_attribute(item)[1]
        elif isinstance(item, NodeBase):
            for child in self.child_nodes():
                if child is item:
                    return True
            return False
        else:
            raise TypeError

    def __getitem__(self, item: str) -> str:
        value, exists = self.get_attribute(item)
        if not exists:
            raise KeyError(item)
        return value

    def __len__(self) -> int:
        return len([x for x in self.child_nodes()])

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}('{self.local_name}', "
            f"{dict(self.attributes)}) [{hex(id(self))}]>"
        )

    def __str__(self) -> str:
        return self.serialize()

    @property
    def attributes(self) -> ElementAttributes:
        """The element's attributes in their order of insertion."""
        return self._etree_obj.attrib

    def child_nodes(self, *filter: Filter, recurse: bool = False) -> Iterator[NodeBase]:
        current_node: Optional[NodeBase]

        if self._data_node._exists:
            current_node = self._data_node
        elif len(self._etree_obj):
            current_node = _get_or_create_element_wrapper(
                self._etree_obj[0], self._cache
            )
        else:
            current_node = None

        while current_node is not None:
            if all(f(current_node) for f in filter):
                yield current_node

            if recurse and isinstance(current_node, TagNode):
                yield from current_node.child_nodes(*filter, recurse=True)

            current_node = current_node.next_node()

    @property
    def classes(self) -> list[str]:
        """The tokens of the ``class`` attribute."""
        value, _ = self.get_attribute("class")
        return split_names(value)

    def clone(self) -> TagNode:
        """Returns a detached deep copy of the node, without its tail."""
        etree_clone = deepcopy(self._etree_obj)
        etree_clone.tail = None
        result = _get_or_create_element_wrapper(etree_clone, {})
        assert isinstance(result, TagNode)
        return result

    def css_select(self, expression: str, axis: str = "descendant") -> list[TagNode]:
        """
        Returns the tag nodes that match a CSS selector on the given axis, relative to
        this node and in document order.

        :param expression: A CSS selector as supported by :mod:`cssselect`.
        :param axis: One of ``descendant``, ``descendant-or-self`` and ``self``.
        """
        return self.xpath(css_to_xpath(expression, axis))

    @property
    def document(self) -> Optional[Document]:
        if self.parent is None:
            self_root = self
        else:
            *_, self_root = self.ancestors()
        for document, root in roots_of_documents.items():
            if root is self_root:
                return document
        return None

    @property
    def first_child(self) -> Optional[NodeBase]:
        for result in self.child_nodes():
            return result
        return None

    @property
    def full_text(self) -> str:
        return self.text()

    def get_attribute(self, name: str) -> tuple[str, bool]:
        """
        Returns the value of the named attribute and whether it exists. The name is
        matched case-insensitively, a missing attribute yields an empty string.
        """
        attributes = self._etree_obj.attrib
        name = name.lower()
        if name in attributes:
            return attributes[name] or "", True
        return "", False

    def get_attribute_or(self, name: str, default: str) -> str:
        value, exists = self.get_attribute(name)
        return value if exists else default

    def inner_html(self) -> str:
        """
        Returns the markup of all child nodes, including text and comment nodes.

        :raises SerializationError: When any child node can't be rendered.
        """
        return "".join(x.serialize() for x in self.child_nodes())

    @property
    def last_child(self) -> Optional[NodeBase]:
        result = None
        for result in self.child_nodes():
            pass
        return result

    @property
    def local_name(self) -> str:
        # the html parser keeps prefixes such as "o:p" as part of the name
        return self._etree_obj.tag.rpartition("}")[2].lower()

    def remove_attribute(self, name: str):
        """
        Removes the named attribute if present. The order of the remaining attributes
        isn't guaranteed to be retained.
        """
        self._etree_obj.attrib.pop(name.lower(), None)

    def set_attribute(self, name: str, value: str):
        """
        Sets an attribute's value. An existing attribute keeps its position, a new one
        is appended to the node's attributes.

        :raises ValueError: When lxml refuses the attribute name.
        """
        self._etree_obj.set(name.lower(), value)

    def text(self, separator: str = "") -> str:
        return "".join(x.text(separator) for x in self.child_nodes())

    def xpath(self, expression: str) -> list[TagNode]:
        """
        Returns the tag nodes that result from the evaluation of an XPath expression
        with this node as context node. Results that aren't elements are ignored.
        """
        result = []
        for item in self._etree_obj.xpath(expression):
            if isinstance(item, _Element) and isinstance(item.tag, str):
                node = _get_or_create_element_wrapper(item, self._cache)
                assert isinstance(node, TagNode)
                result.append(node)
        return result


class TextNode(NodeBase):
    """
    A text node is bound to an element and represents either its ``text`` (``DATA``)
    or its ``tail`` (``TAIL``) content.
    """

    def __init__(self, reference: _Element, position: int, cache: _WrapperCache):
        super().__init__(cache)
        if position not in (DATA, TAIL):
            raise ValueError
        self._bound_to = reference
        self._position = position

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, TextNode):
            return self.content == other.content
        elif isinstance(other, str):
            return self.content == other
        raise TypeError

    def __repr__(self):
        return (
            f"<{self.__class__.__name__}(text={self.content!r}, "
            f"pos={self._position}) [{hex(id(self))}]>"
        )

    def __str__(self):
        return self.content

    @property
    def content(self) -> str:
        if self._position is DATA:
            return self._bound_to.text or ""
        elif self._position is TAIL:
            return self._bound_to.tail or ""
        raise InvalidCodePath

    @content.setter
    def content(self, text: Any):
        if not isinstance(text, str):
            text = str(text)
        if self._position is DATA:
            self._bound_to.text = text or None
        elif self._position is TAIL:
            self._bound_to.tail = text or None
        else:
            raise InvalidCodePath

    @property
    def _exists(self) -> bool:
        if self._position is DATA:
            return self._bound_to.text is not None
        else:
            return self._bound_to.tail is not None

    def next_node(self) -> Optional[NodeBase]:
        if self._position is DATA:
            if len(self._bound_to):
                return _get_or_create_element_wrapper(self._bound_to[0], self._cache)
            return None
        elif self._position is TAIL:
            next_etree_obj = self._bound_to.getnext()
            if next_etree_obj is None:
                return None
            return _get_or_create_element_wrapper(next_etree_obj, self._cache)
        raise InvalidCodePath

    @property
    def parent(self) -> Optional[TagNode]:
        bound_wrapper = _get_or_create_element_wrapper(self._bound_to, self._cache)
        if self._position is DATA:
            assert isinstance(bound_wrapper, TagNode)
            return bound_wrapper
        elif self._position is TAIL:
            return bound_wrapper.parent
        raise InvalidCodePath

    def serialize(self) -> str:
        parent = self.parent
        return serialize_text(
            self.content, parent.local_name if parent is not None else None
        )

    def text(self, separator: str = "") -> str:
        return separator + self.content + separator


# contributed filters and filter wrappers


def any_of(*filter: Filter) -> Filter:
    """
    A node filter wrapper that matches when any of the given filters is matching, like a
    boolean ``or``.
    """

    def any_of_wrapper(node: NodeBase) -> bool:
        return any(x(node) for x in filter)

    return any_of_wrapper


def is_comment_node(node: NodeBase) -> bool:
    return isinstance(node, CommentNode)


def is_tag_node(node: NodeBase) -> bool:
    return isinstance(node, TagNode)


def is_text_node(node: NodeBase) -> bool:
    return isinstance(node, TextNode)


def not_(*filter: Filter) -> Filter:
    """
    A node filter wrapper that matches when the given filter is not matching,
    like a boolean ``not``.
    """

    def not_wrapper(node: NodeBase) -> bool:
        return not all(f(node) for f in filter)

    return not_wrapper


__all__ = (
    CommentNode.__name__,
    ProcessingInstructionNode.__name__,
    TagNode.__name__,
    TextNode.__name__,
    any_of.__name__,
    is_comment_node.__name__,
    is_tag_node.__name__,
    is_text_node.__name__,
    not_.__name__,
)
