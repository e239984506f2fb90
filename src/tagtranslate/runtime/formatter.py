"""Message formatter - converts AST to an ordered sequence of chunks.

Walks the AST and substitutes tags, void tags and placeholders with values
from a table built per call: default tag renderers overridden by the
caller's values. The output keeps sibling order as discrete chunks so UI
adapters can interleave rich values with literal text.

Python 3.13+. Zero external dependencies.

Thread Safety:
    Value tables and depth tracking are created per format() call. The
    formatter itself holds only configuration and is safe to share.
"""

import logging
from collections.abc import Callable, Mapping, Sequence

from tagtranslate.constants import DEFAULT_TAGS, MAX_DEPTH
from tagtranslate.core.depth_guard import DepthGuard
from tagtranslate.diagnostics import ErrorTemplate, MissingValueError
from tagtranslate.syntax import MessageParser, Node, Placeholder, Tag, Text, VoidTag

__all__ = [
    "MessageFormatter",
    "create_default_values",
    "create_string_element",
    "format_message",
    "join_chunks",
    "prepare_values",
]

logger = logging.getLogger(__name__)

type ValueTable = dict[str, object]


def create_string_element(tag_name: str, children: str) -> str:
    """Render a tag as markup, used by default for tags without values.

    Example:
        >>> create_string_element("b", "bold")
        '<b>bold</b>'
        >>> create_string_element("b", "")
        '<b/>'
    """
    if children:
        return f"<{tag_name}>{children}</{tag_name}>"
    return f"<{tag_name}/>"


def create_default_values(
    tags: Sequence[str] = DEFAULT_TAGS,
    element_factory: Callable[[str, str], object] = create_string_element,
) -> ValueTable:
    """Create a fresh table of default tag renderers.

    Called once per format() call, so callers overriding entries never
    affect other calls.

    Args:
        tags: Tag names rendered by default
        element_factory: Builds the rendered element from (tag name, joined children)

    Returns:
        Mapping of tag name to renderer function
    """

    def renderer(tag_name: str) -> Callable[[str], object]:
        return lambda children: element_factory(tag_name, children)

    return {tag: renderer(tag) for tag in tags}


def prepare_values(values: Mapping[str, object]) -> ValueTable:
    """Normalize caller values.

    Functions and strings are kept, None is treated as absent, anything
    else (numbers, dates) is converted with str().
    """
    prepared: ValueTable = {}
    for key, value in values.items():
        if value is None:
            continue
        if callable(value) or isinstance(value, str):
            prepared[key] = value
        else:
            prepared[key] = str(value)
    return prepared


def join_chunks(chunks: Sequence[object]) -> str:
    """Default join strategy: concatenate chunks as strings."""
    return "".join(str(chunk) for chunk in chunks)


class MessageFormatter[T = str]:
    """Formats messages into ordered chunk lists.

    Generic over the rich chunk type T returned by caller-supplied tag
    functions; literal text is always emitted as str.

    Usage:
        formatter = MessageFormatter()
        formatter.format("<a>some text</a>", {"a": lambda c: f'<a href="#">{c}</a>'})
        # ['<a href="#">some text</a>']

    Attributes:
        max_depth: Maximum tag nesting depth for recursion into children
    """

    __slots__ = ("_default_values", "_join", "_max_depth", "_parser")

    def __init__(
        self,
        *,
        join: Callable[[list[str | T]], object] = join_chunks,
        default_values: Callable[[], Mapping[str, object]] = create_default_values,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize formatter.

        Args:
            join: Combines formatted children into the single value passed to a
                tag function (default: string concatenation)
            default_values: Factory for the default value table, called per format()
            max_depth: Maximum tag nesting depth (default: MAX_DEPTH)
        """
        self._join = join
        self._default_values = default_values
        self._max_depth = max_depth
        self._parser = MessageParser(max_nesting_depth=max_depth)

    @property
    def max_depth(self) -> int:
        """Maximum tag nesting depth."""
        return self._max_depth

    def format(
        self,
        message: str | Sequence[Node],
        values: Mapping[str, object] | None = None,
    ) -> list[str | T]:
        """Format a message or a parsed AST.

        Args:
            message: Message source or nodes returned by parse()
            values: Tag functions/strings and placeholder values

        Returns:
            Chunks in source order

        Raises:
            MissingValueError: A tag, void tag or placeholder has no usable value
            NestingTooDeepError: Tags nest deeper than max_depth
            MessageSyntaxError: Message source has malformed markup
        """
        nodes = self._parser.parse(message) if isinstance(message, str) else message
        table: ValueTable = {
            **prepare_values(self._default_values()),
            **prepare_values(values or {}),
        }
        return self._format_nodes(nodes, table, DepthGuard(max_depth=self._max_depth))

    def _format_nodes(
        self,
        nodes: Sequence[Node],
        table: ValueTable,
        guard: DepthGuard,
    ) -> list[str | T]:
        result: list[str | T] = []
        for node in nodes:
            match node:
                case Text(value=value):
                    result.append(value)
                case Tag(name=name, children=children):
                    with guard:
                        chunks = self._format_nodes(children, table, guard)
                    result.append(self._resolve_tag(name, chunks, table))
                case VoidTag(name=name) | Placeholder(name=name):
                    result.append(self._resolve_literal(name, table))
        return result

    def _resolve_tag(self, name: str, chunks: list[str | T], table: ValueTable) -> str | T:
        value = table.get(name)
        if value is None:
            logger.debug("No value for tag '%s'", name)
            raise MissingValueError(ErrorTemplate.value_not_provided(name), name=name)
        if callable(value):
            return value(self._join(chunks))  # type: ignore[no-any-return]
        return value  # type: ignore[return-value]

    @staticmethod
    def _resolve_literal(name: str, table: ValueTable) -> str:
        value = table.get(name)
        if value is None:
            logger.debug("No value for placeholder or void tag '%s'", name)
            raise MissingValueError(ErrorTemplate.value_not_provided(name), name=name)
        if not isinstance(value, str):
            raise MissingValueError(
                ErrorTemplate.value_not_string(name, type(value).__name__),
                name=name,
            )
        return value


def format_message(
    message: str | Sequence[Node],
    values: Mapping[str, object] | None = None,
    *,
    join: Callable[[list[object]], object] = join_chunks,
) -> list[object]:
    """Format a message with a default-configured formatter.

    Convenience function for MessageFormatter(join=join).format().

    The message is plain markup: "|" and "\\|" are not interpreted. Use
    get_forms() or a Translator for plural messages.

    Examples:
        >>> format_message("cat <img/> float", {"img": '<img src="#"/>'})
        ['cat ', '<img src="#"/>', ' float']
        >>> format_message("Ping %value% ms", {"value": 100})
        ['Ping ', '100', ' ms']
    """
    return MessageFormatter[object](join=join).format(message, values)
