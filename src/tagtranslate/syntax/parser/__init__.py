"""Message markup parser module.

Module Organization:
- core.py: Main MessageParser class and its state handlers
- context.py: Per-call parse state and the tagged stack entries

Public API:
    MessageParser: Main parser class
    ParseContext: Parse state (advanced usage)
"""

from tagtranslate.syntax.parser.context import CompletedNode, ParseContext, PendingTagName
from tagtranslate.syntax.parser.core import MessageParser

__all__ = ["CompletedNode", "MessageParser", "ParseContext", "PendingTagName"]
