"""
Deck template loading.

A template file is JSON of the form:

    {"deck": {"name": "Pair", "cards": [{"name": "A", "data": {...}}, ...]}}

Card entries carry no id; ids are generated when a template is
instantiated into a session, so one template can back many decks.
"""
import glob
import json
import logging
import os

from config import DeckConfig

logger = logging.getLogger(__name__)


class TemplateError(ValueError):
    """Raised when a template payload does not match the expected format"""


class DeckTemplate:
    """A parsed, session-independent deck definition"""

    def __init__(self, name, cards):
        self.name = name
        # [{"name": str, "data": dict}, ...] in template order
        self.cards = cards

    @classmethod
    def from_payload(cls, payload):
        if not isinstance(payload, dict) or not isinstance(payload.get("deck"), dict):
            raise TemplateError("Template must contain a 'deck' object")

        deck = payload["deck"]
        name = deck.get("name")
        if not isinstance(name, str) or not name:
            raise TemplateError("Deck 'name' must be a non-empty string")

        entries = deck.get("cards")
        if not isinstance(entries, list):
            raise TemplateError(f"Deck '{name}' must have a 'cards' list")

        cards = []
        for position, entry in enumerate(entries):
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                raise TemplateError(f"Card #{position} in '{name}' has no name")
            data = entry.get("data") or {}
            if not isinstance(data, dict):
                raise TemplateError(f"Card #{position} in '{name}' has non-object data")
            cards.append({"name": entry["name"], "data": data})

        return cls(name, cards)


class DeckLoader:
    """
    Reads templates from <deck_path>/<name>.json.
    """

    def __init__(self, deck_path=None):
        self.deck_path = os.path.abspath(deck_path or DeckConfig.DECK_PATH)

    def list_template_names(self):
        paths = glob.glob(os.path.join(self.deck_path, "*.json"))
        return sorted(os.path.splitext(os.path.basename(p))[0] for p in paths)

    def find(self, name):
        """
        Returns the DeckTemplate for name, or None when there is no such
        template or the file can't be used.
        """
        if not name:
            return None

        file_path = os.path.abspath(os.path.join(self.deck_path, f"{name}.json"))
        # Names like "../secrets" must not leave the template directory
        if os.path.dirname(file_path) != self.deck_path:
            logger.warning("[LOADER] Rejected template name %r", name)
            return None

        if not os.path.isfile(file_path):
            return None

        try:
            with open(file_path, encoding="utf-8") as fh:
                payload = json.load(fh)
            return DeckTemplate.from_payload(payload)
        except (OSError, ValueError) as e:
            logger.error("[LOADER] Unusable template %s: %s", file_path, e)
            return None


class DictDeckLoader:
    """
    Serves templates from an in-memory {name: payload} mapping.
    """

    def __init__(self, templates=None):
        self.templates = dict(templates or {})

    def list_template_names(self):
        return sorted(self.templates)

    def find(self, name):
        payload = self.templates.get(name)
        if payload is None:
            return None
        return DeckTemplate.from_payload(payload)
