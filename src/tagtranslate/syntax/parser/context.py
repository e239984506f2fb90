"""Mutable parse state for the message tokenizer.

The tag stack holds two different kinds of entries: tags that were opened
and still wait for their close marker, and nodes that were fully parsed
inside such a tag and wait to be attached as its children. Both are
modelled as explicit variants so the close-tag resolution can dispatch on
them with a match statement.

Python 3.13+.
"""

from dataclasses import dataclass, field

from tagtranslate.core.depth_guard import DepthGuard
from tagtranslate.syntax.ast import Node, text_node

__all__ = [
    "CompletedNode",
    "ParseContext",
    "PendingTagName",
    "StackEntry",
]


@dataclass(frozen=True, slots=True)
class PendingTagName:
    """Open tag awaiting its close marker.

    Attributes:
        name: Raw tag label as written between "<" and ">"
        position: Offset of the opening "<"
    """

    name: str
    position: int

    def has_attributes(self) -> bool:
        """Check if the label uses attribute syntax, e.g. "a href='#'"."""
        return " " in self.name


@dataclass(frozen=True, slots=True)
class CompletedNode:
    """Parsed sibling waiting for its enclosing tag to close."""

    node: Node


type StackEntry = PendingTagName | CompletedNode


@dataclass(slots=True)
class ParseContext:
    """Per-call tokenizer state.

    Created fresh for every parse; never shared between calls.

    Attributes:
        source: Message being parsed
        depth_guard: Limits the number of simultaneously open tags
        stack: Pending tags and completed nodes inside open tags
        result: Top-level nodes (used while the stack is empty)
        text: Accumulated text
        tag: Accumulated tag label
        placeholder: Accumulated placeholder name
        last_switch_idx: Index of the last switch out of the text state,
            used to restore text when a "<" or "%" turns out not to start markup
    """

    source: str
    depth_guard: DepthGuard
    stack: list[StackEntry] = field(default_factory=list)
    result: list[Node] = field(default_factory=list)
    text: str = ""
    tag: str = ""
    placeholder: str = ""
    last_switch_idx: int = 0

    def emit(self, node: Node) -> None:
        """Attach node to the innermost open tag, or to the result."""
        if self.stack:
            self.stack.append(CompletedNode(node))
        else:
            self.result.append(node)

    def flush_text(self) -> None:
        """Emit accumulated text as a Text node, if any."""
        if self.text:
            self.emit(text_node(self.text))
        self.text = ""

    def open_tag(self, name: str, position: int) -> None:
        """Push an opened tag, enforcing the nesting limit."""
        self.depth_guard.check()
        self.depth_guard.current_depth += 1
        self.stack.append(PendingTagName(name, position))

    def close_tag(self) -> None:
        """Record that an opened tag was matched by its close marker."""
        self.depth_guard.current_depth -= 1
