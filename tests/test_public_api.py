"""Tests for the top-level package exports."""

from __future__ import annotations

import tagtranslate


class TestPublicApi:
    def test_all_exports_resolve(self) -> None:
        for name in tagtranslate.__all__:
            assert hasattr(tagtranslate, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(tagtranslate.__version__, str)

    def test_end_to_end(self) -> None:
        """Parse, validate and format through the top-level API."""
        base = "| <b>%count%</b> file | <b>%count%</b> files"
        translated = "| <b>%count%</b> Datei | <b>%count%</b> Dateien"

        assert tagtranslate.is_translation_valid(base, translated, "de")
        assert tagtranslate.serialize_message(tagtranslate.parse_message("<b>x</b>")) == "<b>x</b>"
        assert tagtranslate.format_message("<b>%count%</b>", {"count": 2}) == ["<b>2</b>"]
        assert tagtranslate.extract_placeholders(translated) == frozenset({"count"})
