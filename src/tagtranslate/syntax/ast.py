"""Message AST (Abstract Syntax Tree) node definitions.

A parsed message is an ordered tuple of nodes. The node set is closed:
Text, Tag, VoidTag and Placeholder. Includes type guards as static methods
and constructor helpers that apply the naming rules of the markup.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeIs

from tagtranslate.enums import NodeKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Node types
    "Text",
    "Tag",
    "VoidTag",
    "Placeholder",
    # Type aliases
    "Node",
    "NodeSequence",
    # Constructors
    "text_node",
    "tag_node",
    "void_tag_node",
    "placeholder_node",
    # Guards
    "is_node",
]


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text segment.

    Example:
        "Hello, " in "Hello, %name%"
    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    value: str

    @staticmethod
    def guard(node: object) -> TypeIs["Text"]:
        """Type guard for Text.

        Enables type-safe narrowing without isinstance noise at call sites.

        Args:
            node: Object to check

        Returns:
            True if node is Text

        Example:
            if Text.guard(node):
                node.value  # Type-safe! mypy knows node is Text
        """
        return isinstance(node, Text)


@dataclass(frozen=True, slots=True)
class Tag:
    """Paired markup with children.

    Produced only from content strictly between matching open and close
    markers.

    Example:
        <a>some <b>bold</b> text</a>
        -> Tag("a", (Text("some "), Tag("b", (Text("bold"),)), Text(" text")))
    """

    kind: ClassVar[NodeKind] = NodeKind.TAG

    name: str
    children: tuple["Node", ...] = ()

    @staticmethod
    def guard(node: object) -> TypeIs["Tag"]:
        """Type guard for Tag."""
        return isinstance(node, Tag)


@dataclass(frozen=True, slots=True)
class VoidTag:
    """Self-closing markup without children: <img/>"""

    kind: ClassVar[NodeKind] = NodeKind.VOID_TAG

    name: str

    @staticmethod
    def guard(node: object) -> TypeIs["VoidTag"]:
        """Type guard for VoidTag."""
        return isinstance(node, VoidTag)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Value substitution point: %name%"""

    kind: ClassVar[NodeKind] = NodeKind.PLACEHOLDER

    name: str

    @staticmethod
    def guard(node: object) -> TypeIs["Placeholder"]:
        """Type guard for Placeholder."""
        return isinstance(node, Placeholder)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Node = Text | Tag | VoidTag | Placeholder
type NodeSequence = tuple[Node, ...]


# ============================================================================
# CONSTRUCTORS
# ============================================================================


def text_node(value: str) -> Text:
    """Create a Text node."""
    return Text(value=value)


def tag_node(name: str, children: list[Node] | tuple[Node, ...]) -> Tag:
    """Create a Tag node, trimming the raw tag label."""
    return Tag(name=name.strip(), children=tuple(children))


def void_tag_node(name: str) -> VoidTag:
    """Create a VoidTag node, trimming the raw tag label."""
    return VoidTag(name=name.strip())


def placeholder_node(name: str) -> Placeholder:
    """Create a Placeholder node."""
    return Placeholder(name=name)


def is_node(target: object) -> TypeIs[Node]:
    """Check if target is a message AST node (as opposed to a raw string)."""
    return isinstance(target, Text | Tag | VoidTag | Placeholder)
