"""Message syntax package.

Provides parser, AST definitions and serialization.
Separate from runtime to enable tooling (linters, QA checks) that never
formats messages.

Python 3.13+.
"""

from .ast import (
    Node,
    NodeSequence,
    Placeholder,
    Tag,
    Text,
    VoidTag,
    is_node,
    placeholder_node,
    tag_node,
    text_node,
    void_tag_node,
)
from .parser import MessageParser
from .serializer import MessageSerializer, serialize

__all__ = [
    "MessageParser",
    "MessageSerializer",
    "Node",
    "NodeSequence",
    "Placeholder",
    "Tag",
    "Text",
    "VoidTag",
    "is_node",
    "parse",
    "placeholder_node",
    "serialize",
    "tag_node",
    "text_node",
    "void_tag_node",
]


def parse(source: str) -> tuple[Node, ...]:
    """Parse message source into AST.

    Convenience function for MessageParser.parse().

    Args:
        source: Message source

    Returns:
        Top-level nodes in source order

    Example:
        >>> from tagtranslate.syntax import parse
        >>> parse("Ping %value% ms")
        (Text(value='Ping '), Placeholder(name='value'), Text(value=' ms'))
    """
    parser = MessageParser()
    return parser.parse(source)
