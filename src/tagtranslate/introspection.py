"""Message introspection: which values a message needs.

Walks the AST and collects the names of placeholders, paired tags and void
tags. Useful for checking a value table before formatting, or for tooling
that lists the parameters of every message in a catalog.

Plural messages are introspected form by form and the results merged.

Python 3.13+.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from tagtranslate.constants import MAX_DEPTH
from tagtranslate.core.depth_guard import DepthGuard
from tagtranslate.runtime.plural_rules import get_forms, has_plural_form
from tagtranslate.syntax import MessageParser, Node, Placeholder, Tag, Text, VoidTag

__all__ = [
    "MessageIntrospection",
    "extract_placeholders",
    "introspect_message",
]


@dataclass(frozen=True, slots=True)
class MessageIntrospection:
    """Names referenced by a message.

    Attributes:
        placeholders: Names of %name% placeholders
        tags: Names of paired tags
        void_tags: Names of void tags
    """

    placeholders: frozenset[str]
    tags: frozenset[str]
    void_tags: frozenset[str]

    def requires_value(self, name: str) -> bool:
        """Check if formatting needs a value (or default) named name."""
        return name in self.placeholders or name in self.tags or name in self.void_tags

    def get_value_names(self) -> frozenset[str]:
        """All names a value table may need to supply."""
        return self.placeholders | self.tags | self.void_tags


class _NameCollector:
    """Collects node names into mutable sets, one instance per call."""

    __slots__ = ("_guard", "placeholders", "tags", "void_tags")

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        self._guard = DepthGuard(max_depth=max_depth)
        self.placeholders: set[str] = set()
        self.tags: set[str] = set()
        self.void_tags: set[str] = set()

    def visit(self, nodes: Sequence[Node]) -> None:
        for node in nodes:
            match node:
                case Text():
                    pass
                case Tag(name=name, children=children):
                    self.tags.add(name)
                    with self._guard:
                        self.visit(children)
                case VoidTag(name=name):
                    self.void_tags.add(name)
                case Placeholder(name=name):
                    self.placeholders.add(name)


def introspect_message(
    message: str | Sequence[Node],
    *,
    max_depth: int = MAX_DEPTH,
) -> MessageIntrospection:
    """Collect placeholder, tag and void tag names used by a message.

    Args:
        message: Message source (plural forms allowed) or parsed nodes
        max_depth: Maximum tag nesting depth

    Returns:
        MessageIntrospection with the collected names

    Raises:
        MessageSyntaxError: Message source has malformed markup
        NestingTooDeepError: Tags nest deeper than max_depth

    Example:
        >>> info = introspect_message("Hi <b>%name%</b><br/>")
        >>> sorted(info.placeholders), sorted(info.tags), sorted(info.void_tags)
        (['name'], ['b'], ['br'])
    """
    collector = _NameCollector(max_depth=max_depth)

    if isinstance(message, str):
        parser = MessageParser(max_nesting_depth=max_depth)
        forms = get_forms(message) if has_plural_form(message) else (message,)
        for form in forms:
            collector.visit(parser.parse(form))
    else:
        collector.visit(message)

    return MessageIntrospection(
        placeholders=frozenset(collector.placeholders),
        tags=frozenset(collector.tags),
        void_tags=frozenset(collector.void_tags),
    )


def extract_placeholders(message: str | Sequence[Node]) -> frozenset[str]:
    """Return the placeholder names used by a message.

    Example:
        >>> sorted(extract_placeholders("| %count% hour | %count% hours in %place%"))
        ['count', 'place']
    """
    return introspect_message(message).placeholders
