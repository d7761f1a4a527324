"""
Visual Tree

Structured output of a template variant. A UI renderer walks this tree; the
HTML preview serializes it. Nodes that carry a presentation fact are tagged
with `fact` (and `section`/`entry` when they belong to an entity), which is
what the consistency checks read.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


class Fact:
    """Fact tags shared by the visual tree and the assembled block sequence."""

    NAME = "name"
    CONTACT = "contact"
    SECTION_TITLE = "section_title"
    SUMMARY = "summary"
    ENTRY_TITLE = "entry_title"
    SUBTITLE = "subtitle"
    DATE_RANGE = "date_range"
    DESCRIPTION = "description"
    BULLET = "bullet"
    DETAIL = "detail"
    ITEMS_LABEL = "items_label"
    ITEM = "item"
    ITEMS = "items"


@dataclass
class VisualNode:
    """
    One element of the preview.

    Attributes:
        tag: Element kind ("div", "h1", "p", "ul", "li", "span", ...)
        text: Text content of this node itself (children hold their own text)
        classes: Style tokens resolved by the variant's stylesheet
        fact: Presentation fact this node displays, if any
        section: Section key value the node belongs to
        entry: Index of the entity within its section
        children: Child nodes in display order
    """

    tag: str
    text: str = ""
    classes: Tuple[str, ...] = ()
    fact: Optional[str] = None
    section: Optional[str] = None
    entry: Optional[int] = None
    children: List["VisualNode"] = field(default_factory=list)

    def append(self, child: "VisualNode") -> "VisualNode":
        self.children.append(child)
        return child

    def walk(self) -> Iterator["VisualNode"]:
        """Depth-first, pre-order traversal including this node."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, fact: Optional[str] = None, tag: Optional[str] = None) -> List["VisualNode"]:
        """Nodes matching the given fact and/or tag, in document order."""
        return [
            node
            for node in self.walk()
            if (fact is None or node.fact == fact) and (tag is None or node.tag == tag)
        ]

    def text_content(self, separator: str = " ") -> str:
        """All non-empty text in the subtree, joined."""
        return separator.join(node.text for node in self.walk() if node.text)
