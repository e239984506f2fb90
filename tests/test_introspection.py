"""Tests for message introspection."""

from __future__ import annotations

import pytest
from hypothesis import given

from tagtranslate.diagnostics import NestingTooDeepError, UnbalancedTagsError
from tagtranslate.introspection import (
    MessageIntrospection,
    extract_placeholders,
    introspect_message,
)
from tagtranslate.syntax import parse
from tagtranslate.syntax.ast import Node, Placeholder, Tag, Text, VoidTag
from tests.strategies import node_sequences


class TestIntrospectMessage:
    """Name collection."""

    def test_collects_all_kinds(self) -> None:
        info = introspect_message("Hi <b>%name%</b>, see <a><i>%count%</i> items</a><br/>")

        assert info.placeholders == frozenset({"name", "count"})
        assert info.tags == frozenset({"b", "a", "i"})
        assert info.void_tags == frozenset({"br"})

    def test_plain_text(self) -> None:
        info = introspect_message("nothing here, 100%% sure")
        assert info == MessageIntrospection(frozenset(), frozenset(), frozenset())

    def test_plural_forms_merged(self) -> None:
        info = introspect_message("Nothing | %count% file in <b>%dir%</b> | %count% files")

        assert info.placeholders == frozenset({"count", "dir"})
        assert info.tags == frozenset({"b"})

    def test_accepts_nodes(self) -> None:
        info = introspect_message(parse("<a>%x%</a>"))
        assert info.get_value_names() == frozenset({"a", "x"})

    def test_requires_value(self) -> None:
        info = introspect_message("<a>%x%</a><img/>")

        assert info.requires_value("a")
        assert info.requires_value("x")
        assert info.requires_value("img")
        assert not info.requires_value("b")

    def test_malformed_message_raises(self) -> None:
        with pytest.raises(UnbalancedTagsError):
            introspect_message("<a>x")

    def test_depth_limit(self) -> None:
        node: Node = Text("x")
        for _ in range(3):
            node = Tag("a", (node,))

        assert introspect_message((node,), max_depth=3).tags == frozenset({"a"})
        with pytest.raises(NestingTooDeepError):
            introspect_message((node,), max_depth=2)


class TestExtractPlaceholders:
    """Convenience wrapper."""

    def test_extract(self) -> None:
        assert extract_placeholders("| %count% hour | %count% hours in %place%") == frozenset(
            {"count", "place"}
        )

    @given(nodes=node_sequences())
    def test_matches_top_level_placeholders(self, nodes: tuple[Node, ...]) -> None:
        """Every top-level placeholder is reported."""
        expected = {node.name for node in nodes if isinstance(node, Placeholder)}
        assert expected <= extract_placeholders(nodes)

    @given(nodes=node_sequences())
    def test_void_tags_never_reported_as_tags(self, nodes: tuple[Node, ...]) -> None:
        info = introspect_message(nodes)
        top_level_voids = {node.name for node in nodes if isinstance(node, VoidTag)}
        assert top_level_voids <= info.void_tags
