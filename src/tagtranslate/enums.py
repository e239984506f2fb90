"""Enumerations for tagtranslate type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NodeKind(StrEnum):
    """Kind of message AST node.

    StrEnum provides automatic string conversion: str(NodeKind.TAG) == "tag"
    """

    TEXT = "text"
    """Literal text: Hello"""

    TAG = "tag"
    """Paired markup with children: <a>link</a>"""

    VOID_TAG = "void_tag"
    """Self-closing markup: <img/>"""

    PLACEHOLDER = "placeholder"
    """Substituted value: %username%"""


class ParserState(StrEnum):
    """State of the message tokenizer.

    StrEnum provides automatic string conversion: str(ParserState.TEXT) == "text"
    """

    TEXT = "text"
    """Plain text or content between open and close tags"""

    TAG = "tag"
    """Inside "<...>", switched back to TEXT by ">" """

    PLACEHOLDER = "placeholder"
    """Inside "%...%", switched back to TEXT by the closing "%" """


__all__ = [
    "NodeKind",
    "ParserState",
]
