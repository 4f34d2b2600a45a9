"""
Core data structures: Element, CombinationResult, MemoStore, Inventory.

These are the atoms of the whole system. Nothing in here depends on
generators, validation, or the resolver.

Keys:
    A combination key is the two display names sorted and joined with "+".
        combination_key("Su", "Ateş")       -> "Ateş+Su"
        combination_key("Toprak", "Toprak") -> "Toprak+Toprak"

    Names are taken exactly as given: no case folding, no trimming.
    "Ateş" and "ateş " are different ingredients.

Identity:
    Elements compare and hash by display_name (dedupe-by-name).
    The identity token is carried along but never used for equality.
"""

from dataclasses import dataclass, field
from typing import Optional
import json
import logging
import uuid


_logger = logging.getLogger(__name__)

KEY_SEPARATOR = "+"


def combination_key(name_a: str, name_b: str) -> str:
    """Canonical key for an unordered pair of display names."""
    first, second = sorted((name_a, name_b))
    return f"{first}{KEY_SEPARATOR}{second}"


def new_identity() -> str:
    return uuid.uuid4().hex


@dataclass
class Element:
    """A discovered or base concept."""
    identity: str
    display_name: str
    glyph: str
    is_new: bool = False

    def __hash__(self):
        return hash(self.display_name)

    def __eq__(self, other):
        return isinstance(other, Element) and self.display_name == other.display_name

    def __repr__(self):
        return f"Element({self.glyph} {self.display_name!r})"

    @property
    def label(self):
        return f"{self.glyph} {self.display_name}"

    def to_dict(self):
        return {"id": self.identity, "name": self.display_name,
                "emoji": self.glyph, "isNew": self.is_new}

    @classmethod
    def from_dict(cls, d):
        values = (d["id"], d["name"], d["emoji"])
        if not all(isinstance(v, str) for v in values):
            raise TypeError(f"element record has non-string fields: {d!r}")
        if not d["name"]:
            raise ValueError("element record has an empty name")
        return cls(*values, bool(d.get("isNew", False)))


@dataclass(frozen=True)
class CombinationResult:
    """What a pair produced. Both fields are non-empty once validated."""
    name: str
    emoji: str

    def to_element(self) -> Element:
        return Element(new_identity(), self.name, self.emoji, is_new=True)


BASE_ELEMENTS = (
    ("water", "Su",     "💧"),
    ("fire",  "Ateş",   "🔥"),
    ("earth", "Toprak", "🌱"),
    ("wind",  "Hava",   "💨"),
)


def base_elements() -> list:
    return [Element(identity, name, glyph) for identity, name, glyph in BASE_ELEMENTS]


class MemoStore:
    """
    Key -> CombinationResult for one process.

    Grows monotonically and never evicts. Not persisted: a fresh store is
    empty. Owned by whoever builds the resolver, so tests get their own.
    """

    def __init__(self):
        self._results = {}

    def get(self, key: str) -> Optional[CombinationResult]:
        return self._results.get(key)

    def put(self, key: str, result: CombinationResult) -> None:
        self._results[key] = result

    def keys(self):
        return list(self._results)

    def __contains__(self, key):
        return key in self._results

    def __len__(self):
        return len(self._results)

    def __iter__(self):
        return iter(self._results)

    def to_dict(self):
        return {key: {"name": r.name, "emoji": r.emoji}
                for key, r in self._results.items()}


@dataclass
class Inventory:
    """
    Everything the player owns, in discovery order.

    elements: starts with the base elements; only ever appended to
              (until reset)
    """
    elements: list = field(default_factory=base_elements)

    def add_if_absent(self, element: Element) -> bool:
        """Append unless an element with the same display name is present."""
        if element in self.elements:
            return False
        self.elements.append(element)
        return True

    def find(self, name: str) -> Optional[Element]:
        for element in self.elements:
            if element.display_name == name:
                return element
        return None

    def names(self):
        return [e.display_name for e in self.elements]

    def reset(self):
        self.elements = base_elements()

    def __contains__(self, name):
        return self.find(name) is not None

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def to_dict(self):
        return [e.to_dict() for e in self.elements]

    @classmethod
    def from_dict(cls, data):
        """
        Rebuild from a saved list. An empty or unreadable list gives the
        base elements; duplicate names keep the first occurrence.
        """
        inventory = cls()
        if not isinstance(data, list) or not data:
            return inventory
        try:
            elements = [Element.from_dict(d) for d in data]
        except (ValueError, KeyError, TypeError) as e:
            _logger.warning("failed to load saved inventory, starting over: %s", e)
            return inventory
        inventory.elements = []
        for element in elements:
            inventory.add_if_absent(element)
        return inventory

    def save(self, path="alchemy_inventory.json"):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path="alchemy_inventory.json"):
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except ValueError as e:
                _logger.warning("failed to load %s, starting over: %s", path, e)
                return cls()
        return cls.from_dict(data)
