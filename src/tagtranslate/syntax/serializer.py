"""Serialize message AST back to message source.

Converts AST nodes to markup source. Useful for:
- Rewriting messages programmatically
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

from collections.abc import Sequence

from tagtranslate.constants import MAX_DEPTH, PLACEHOLDER_MARK, TAG_CLOSE_BRACE, TAG_OPEN_BRACE
from tagtranslate.core.depth_guard import DepthGuard

from .ast import Node, Placeholder, Tag, Text, VoidTag

__all__ = ["MessageSerializer", "serialize"]


class MessageSerializer:
    """Converts AST back to message source string.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> from tagtranslate.syntax import parse, serialize
        >>> serialize(parse("Save <b>100%%</b> now"))
        'Save <b>100%%</b> now'
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        self._max_depth = max_depth

    def serialize(self, nodes: Sequence[Node]) -> str:
        """Serialize nodes to message source.

        Pure function - builds output locally without mutating instance state.

        Args:
            nodes: Top-level nodes

        Returns:
            Message source

        Raises:
            NestingTooDeepError: If tags nest deeper than max_depth
        """
        output: list[str] = []
        self._serialize_nodes(nodes, output, DepthGuard(max_depth=self._max_depth))
        return "".join(output)

    def _serialize_nodes(
        self,
        nodes: Sequence[Node],
        output: list[str],
        guard: DepthGuard,
    ) -> None:
        for node in nodes:
            match node:
                case Text(value=value):
                    output.append(_escape_text(value))
                case Tag(name=name, children=children):
                    output.append(f"<{name}>")
                    with guard:
                        self._serialize_nodes(children, output, guard)
                    output.append(f"</{name}>")
                case VoidTag(name=name):
                    output.append(f"<{name}/>")
                case Placeholder(name=name):
                    output.append(f"{PLACEHOLDER_MARK}{name}{PLACEHOLDER_MARK}")


def serialize(nodes: Sequence[Node]) -> str:
    """Serialize nodes to message source.

    Convenience function for MessageSerializer.serialize().

    Example:
        >>> from tagtranslate.syntax import parse, serialize
        >>> serialize(parse("Hello <b>%name%</b>"))
        'Hello <b>%name%</b>'
    """
    return MessageSerializer().serialize(nodes)


def _escape_text(value: str) -> str:
    """Escape literal text the way the parser reads it back.

    "%" is doubled so it doesn't open a placeholder, except after an
    unclosed "<": the parser keeps a recovered tag fragment such as "<a%"
    verbatim, so doubling there would change the text.
    """
    escaped: list[str] = []
    in_tag = False
    for char in value:
        if char == TAG_OPEN_BRACE:
            in_tag = True
        elif char == TAG_CLOSE_BRACE:
            in_tag = False
        elif char == PLACEHOLDER_MARK and not in_tag:
            escaped.append(PLACEHOLDER_MARK)
        escaped.append(char)
    return "".join(escaped)
