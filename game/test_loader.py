"""Tests for deck template loading."""

import json

import pytest

from game.loader import DeckLoader, DeckTemplate, DictDeckLoader, TemplateError


@pytest.fixture
def deck_dir(tmp_path):
    (tmp_path / "Pair.json").write_text(json.dumps(
        {"deck": {"name": "Pair", "cards": [{"name": "A"}, {"name": "B", "data": {"x": 1}}]}}
    ))
    (tmp_path / "Broken.json").write_text("{not json")
    (tmp_path / "Nameless.json").write_text(json.dumps({"deck": {"cards": []}}))
    (tmp_path / "notes.txt").write_text("ignored")
    return tmp_path


class TestDeckTemplate:

    def test_parses_cards_in_order(self):
        template = DeckTemplate.from_payload(
            {"deck": {"name": "Pair", "cards": [{"name": "A"}, {"name": "B", "data": {"x": 1}}]}}
        )

        assert template.name == "Pair"
        assert template.cards == [{"name": "A", "data": {}}, {"name": "B", "data": {"x": 1}}]

    @pytest.mark.parametrize("payload", [
        [],
        {"cards": []},
        {"deck": {"name": "", "cards": []}},
        {"deck": {"name": "X"}},
        {"deck": {"name": "X", "cards": [{"data": {}}]}},
        {"deck": {"name": "X", "cards": [{"name": "A", "data": [1, 2]}]}},
    ])
    def test_rejects_malformed_payloads(self, payload):
        with pytest.raises(TemplateError):
            DeckTemplate.from_payload(payload)


class TestDeckLoader:

    def test_lists_json_files_only(self, deck_dir):
        assert DeckLoader(str(deck_dir)).list_template_names() == ["Broken", "Nameless", "Pair"]

    def test_find_template(self, deck_dir):
        template = DeckLoader(str(deck_dir)).find("Pair")

        assert template.name == "Pair"
        assert [c["name"] for c in template.cards] == ["A", "B"]

    def test_missing_template(self, deck_dir):
        assert DeckLoader(str(deck_dir)).find("Nope") is None

    def test_unusable_files_are_not_found(self, deck_dir):
        loader = DeckLoader(str(deck_dir))

        assert loader.find("Broken") is None
        assert loader.find("Nameless") is None

    def test_rejects_path_traversal(self, deck_dir):
        inner = deck_dir / "inner"
        inner.mkdir()

        assert DeckLoader(str(inner)).find("../Pair") is None

    def test_empty_name(self, deck_dir):
        assert DeckLoader(str(deck_dir)).find("") is None

    def test_bundled_templates_load(self):
        loader = DeckLoader()
        names = loader.list_template_names()

        assert "Pair" in names
        for name in names:
            assert loader.find(name) is not None
        assert len(loader.find("Standard_52").cards) == 52


class TestDictDeckLoader:

    def test_serves_payloads(self, loader):
        assert loader.find("Pair").name == "Pair"
        assert loader.find("Nope") is None

    def test_lists_sorted(self):
        loader = DictDeckLoader({"b": {}, "a": {}})
        assert loader.list_template_names() == ["a", "b"]
