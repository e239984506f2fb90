"""Tests for message AST node types, constructors and type guards."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from tagtranslate.enums import NodeKind
from tagtranslate.syntax.ast import (
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


class TestNodeKinds:
    """Every node type exposes its kind for exhaustive dispatch."""

    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (Text("x"), NodeKind.TEXT),
            (Tag("a"), NodeKind.TAG),
            (VoidTag("img"), NodeKind.VOID_TAG),
            (Placeholder("name"), NodeKind.PLACEHOLDER),
        ],
    )
    def test_kind(self, node: object, kind: NodeKind) -> None:
        assert node.kind is kind  # type: ignore[attr-defined]

    def test_kind_is_string(self) -> None:
        """NodeKind members are plain strings."""
        assert NodeKind.VOID_TAG == "void_tag"
        assert str(NodeKind.TAG) == "tag"


class TestNodeImmutability:
    """Nodes are frozen dataclasses."""

    def test_text_is_frozen(self) -> None:
        node = Text("x")
        with pytest.raises(FrozenInstanceError):
            node.value = "y"  # type: ignore[misc]

    def test_tag_is_frozen(self) -> None:
        node = Tag("a", (Text("x"),))
        with pytest.raises(FrozenInstanceError):
            node.children = ()  # type: ignore[misc]

    def test_nodes_are_hashable(self) -> None:
        """Equal nodes hash equal, so ASTs can be used as keys."""
        assert hash(Tag("a", (Text("x"),))) == hash(Tag("a", (Text("x"),)))
        assert len({Placeholder("n"), Placeholder("n"), VoidTag("n")}) == 2


class TestConstructors:
    """Constructor helpers apply the naming rules of the markup."""

    def test_tag_node_trims_name(self) -> None:
        assert tag_node(" b ", []).name == "b"

    def test_tag_node_converts_children_to_tuple(self) -> None:
        children = [Text("x")]
        node = tag_node("b", children)

        children.append(Text("y"))
        assert node.children == (Text("x"),)

    def test_void_tag_node_trims_name(self) -> None:
        assert void_tag_node("br ") == VoidTag("br")

    def test_placeholder_keeps_name(self) -> None:
        """Placeholder names are kept verbatim."""
        assert placeholder_node(" n ") == Placeholder(" n ")

    def test_text_node(self) -> None:
        assert text_node("abc") == Text("abc")


class TestTypeGuards:
    """Static guard() methods and is_node()."""

    def test_guards_accept_own_type(self) -> None:
        assert Text.guard(Text("x"))
        assert Tag.guard(Tag("a"))
        assert VoidTag.guard(VoidTag("a"))
        assert Placeholder.guard(Placeholder("a"))

    def test_guards_reject_other_types(self) -> None:
        assert not Tag.guard(VoidTag("a"))
        assert not Placeholder.guard(Text("a"))
        assert not Text.guard("plain string")

    def test_is_node(self) -> None:
        assert is_node(Text("x"))
        assert is_node(Placeholder("x"))
        assert not is_node("x")
        assert not is_node(None)
