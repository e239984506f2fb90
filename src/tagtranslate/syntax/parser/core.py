"""Message markup parser implementation.

This module provides the MessageParser class that turns a message string
into the AST defined in :mod:`tagtranslate.syntax.ast`.

Architecture:
    The parser is a character-by-character state machine with three states
    (:class:`~tagtranslate.enums.ParserState`): TEXT, TAG and PLACEHOLDER.
    Each state handler consumes one character, mutates the per-call
    :class:`~tagtranslate.syntax.parser.context.ParseContext` and returns the
    next state. The tokenizer itself never recurses; tag nesting is tracked
    on an explicit stack of ``PendingTagName | CompletedNode`` entries.

Syntax:
    - ``<name>...</name>`` - paired tag (no attributes allowed)
    - ``<name/>`` - void tag
    - ``%name%`` - placeholder
    - ``%%`` - literal percent sign

Recovery:
    A ``<`` met inside a tag means the previous ``<`` was plain text.
    An unterminated tag or placeholder at the end of input is kept as text.

Security:
    Configurable nesting limit prevents unbounded recursion in every
    consumer of the produced AST.
"""

from tagtranslate.constants import (
    CLOSING_TAG_MARK,
    MAX_DEPTH,
    PLACEHOLDER_MARK,
    TAG_CLOSE_BRACE,
    TAG_OPEN_BRACE,
)
from tagtranslate.core.depth_guard import DepthGuard
from tagtranslate.diagnostics import (
    ErrorTemplate,
    TagHasAttributesError,
    UnbalancedTagsError,
)
from tagtranslate.enums import ParserState
from tagtranslate.syntax.ast import (
    Node,
    placeholder_node,
    tag_node,
    text_node,
    void_tag_node,
)
from tagtranslate.syntax.parser.context import (
    CompletedNode,
    ParseContext,
    PendingTagName,
)

__all__ = ["MessageParser"]


class MessageParser:
    """Message markup parser.

    Design:
    - One explicit state handler per ParserState, dispatched by match
    - Fresh ParseContext per call, so instances are reusable and thread-safe
    - All-or-nothing: either a complete AST or an exception, never partial output

    Attributes:
        max_nesting_depth: Maximum number of simultaneously open tags (default: 100)
    """

    __slots__ = ("_max_nesting_depth",)

    def __init__(self, *, max_nesting_depth: int | None = None) -> None:
        """Initialize parser with optional nesting depth limit.

        Args:
            max_nesting_depth: Maximum tag nesting depth (default: MAX_DEPTH).
                Prevents unbounded recursion on <a><a><a>... input.
        """
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed tag nesting depth."""
        return self._max_nesting_depth

    def parse(self, source: str) -> tuple[Node, ...]:
        """Parse message source into a tuple of top-level nodes.

        Example:
            >>> MessageParser().parse("String to <a>translate</a>")
            (Text(value='String to '), Tag(name='a', children=(Text(value='translate'),)))

        An empty string is parsed into an empty tuple.

        Args:
            source: Message in the simplified markup syntax (no plural forms)

        Returns:
            Top-level nodes in source order

        Raises:
            UnbalancedTagsError: Open tag never closed or close tag never opened
            TagHasAttributesError: Tag label uses attribute syntax
            NestingTooDeepError: More than max_nesting_depth tags open at once
        """
        context = ParseContext(
            source=source,
            depth_guard=DepthGuard(max_depth=self._max_nesting_depth),
        )

        state = ParserState.TEXT
        for idx, char in enumerate(source):
            match state:
                case ParserState.TEXT:
                    state = self._handle_text(context, char, idx)
                case ParserState.TAG:
                    state = self._handle_tag(context, char, idx)
                case ParserState.PLACEHOLDER:
                    state = self._handle_placeholder(context, char, idx)

        if context.stack:
            raise UnbalancedTagsError(ErrorTemplate.unbalanced_tags(source), source=source)

        if state is ParserState.TEXT:
            if context.text:
                context.result.append(text_node(context.text))
        else:
            # Tag or placeholder was never closed: keep it as text
            rest = context.text + source[context.last_switch_idx :]
            if rest:
                context.result.append(text_node(rest))

        return tuple(context.result)

    # ========================================================================
    # STATE HANDLERS
    # ========================================================================

    @staticmethod
    def _handle_text(context: ParseContext, char: str, idx: int) -> ParserState:
        """Handle a character in the text state."""
        if char == TAG_OPEN_BRACE:
            context.last_switch_idx = idx
            return ParserState.TAG

        if char == PLACEHOLDER_MARK:
            context.last_switch_idx = idx
            return ParserState.PLACEHOLDER

        context.text += char
        return ParserState.TEXT

    @staticmethod
    def _handle_placeholder(context: ParseContext, char: str, idx: int) -> ParserState:
        """Handle a character in the placeholder state."""
        if char != PLACEHOLDER_MARK:
            context.placeholder += char
            return ParserState.PLACEHOLDER

        # "%%" escapes the mark itself
        if idx - context.last_switch_idx == 1:
            context.text += PLACEHOLDER_MARK
            return ParserState.TEXT

        context.flush_text()
        context.emit(placeholder_node(context.placeholder))
        context.placeholder = ""
        return ParserState.TEXT

    def _handle_tag(self, context: ParseContext, char: str, idx: int) -> ParserState:
        """Handle a character in the tag state."""
        if char == TAG_OPEN_BRACE:
            # The previous "<" did not start a tag
            context.text += context.source[context.last_switch_idx : idx]
            context.last_switch_idx = idx
            context.tag = ""
            return ParserState.TAG

        if char != TAG_CLOSE_BRACE:
            context.tag += char
            return ParserState.TAG

        tag = context.tag
        context.tag = ""

        if tag.startswith(CLOSING_TAG_MARK):
            self._close_tag(context, tag[1:])
        elif tag.endswith(CLOSING_TAG_MARK):
            context.flush_text()
            context.emit(void_tag_node(tag[:-1]))
        else:
            context.flush_text()
            context.open_tag(tag, context.last_switch_idx)

        return ParserState.TEXT

    @staticmethod
    def _close_tag(context: ParseContext, name: str) -> None:
        """Resolve a close tag against the stack of pending entries.

        Pops completed nodes (they become the tag's children, in source
        order) until the matching pending tag name is found.
        """
        source = context.source
        position = context.last_switch_idx

        children: list[Node] = []
        if context.text:
            children.append(text_node(context.text))
            context.text = ""

        while context.stack:
            entry = context.stack.pop()
            match entry:
                case CompletedNode(node=node):
                    children.insert(0, node)
                case PendingTagName() if entry.name == name:
                    context.close_tag()
                    context.emit(tag_node(name, children))
                    return
                case PendingTagName():
                    if entry.has_attributes():
                        raise TagHasAttributesError(
                            ErrorTemplate.tag_has_attributes(source, entry.name, position),
                            source=source,
                        )
                    raise UnbalancedTagsError(
                        ErrorTemplate.unbalanced_tags(source, position),
                        source=source,
                    )

        # Stack exhausted without finding the opening tag
        raise UnbalancedTagsError(
            ErrorTemplate.unbalanced_tags(source, position),
            source=source,
        )
