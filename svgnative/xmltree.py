"""A small element tree built from an XML document, walked child by child."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union
from xml.parsers import expat


@dataclass(eq=False)
class XMLNode:
    """An element with its name, attributes, direct text and children."""

    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    value: str = ""
    _children: List["XMLNode"] = field(default_factory=list, init=False, repr=False)
    _next: Optional["XMLNode"] = field(default=None, init=False, repr=False)

    def first_node(self) -> Optional["XMLNode"]:
        """Return the first child element, or None if there is none."""
        return self._children[0] if self._children else None

    def next_sibling(self) -> Optional["XMLNode"]:
        """Return the element that follows this one under the same parent."""
        return self._next

    def attribute(self, name: str, ns_prefix: Optional[str] = None) -> Optional[str]:
        """Return the value of an attribute, or None if it is absent.

        When ``ns_prefix`` is given and the plain name is missing, the
        prefixed form ``prefix:name`` is looked up as well.
        """
        if name in self.attributes:
            return self.attributes[name]
        if ns_prefix:
            return self.attributes.get(f"{ns_prefix}:{name}")
        return None

    def children(self) -> Iterator["XMLNode"]:
        """Iterate over the child elements in document order."""
        node = self.first_node()
        while node is not None:
            yield node
            node = node.next_sibling()


class _TreeBuilder:
    def __init__(self) -> None:
        self.root: Optional[XMLNode] = None
        self._stack: List[XMLNode] = []

    def start(self, name: str, attrs: List[str]) -> None:
        attributes: Dict[str, str] = {}
        for key, value in zip(attrs[0::2], attrs[1::2]):
            attributes.setdefault(key, value)
        node = XMLNode(name, attributes)
        if not self._stack:
            self.root = node
        else:
            parent = self._stack[-1]
            if parent._children:
                parent._children[-1]._next = node
            parent._children.append(node)
        self._stack.append(node)

    def end(self, name: str) -> None:
        self._stack.pop()

    def text(self, data: str) -> None:
        if self._stack:
            self._stack[-1].value += data

    @property
    def balanced(self) -> bool:
        return not self._stack


@dataclass
class XMLDocument:
    """A parsed document; ``root`` is None when the document was not well formed."""

    root: Optional[XMLNode] = None

    @classmethod
    def parse(cls, document: Union[str, bytes]) -> "XMLDocument":
        """Parse a whole document; malformed input yields a document without a root."""
        builder = _TreeBuilder()
        parser = expat.ParserCreate()
        parser.ordered_attributes = True
        parser.buffer_text = True
        parser.StartElementHandler = builder.start
        parser.EndElementHandler = builder.end
        parser.CharacterDataHandler = builder.text
        try:
            parser.Parse(document, True)
        except expat.ExpatError:
            return cls(None)
        if not builder.balanced:
            return cls(None)
        return cls(builder.root)

    def first_node(self) -> Optional[XMLNode]:
        """Return the root element, or None."""
        return self.root