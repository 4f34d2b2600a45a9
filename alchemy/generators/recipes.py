"""
Generator: recipe table.

Classic Little Alchemy: combination rules are a lookup table.
Deterministic and offline -- useful for playing without an API key and
for watching the resolver work at its simplest.
"""

from ..core.errors import ValidationFailure


RECIPES = {
    frozenset({"Hava", "Su"}):       ("Yağmur",  "🌧️"),
    frozenset({"Ateş", "Hava"}):     ("Enerji",  "⚡"),
    frozenset({"Hava", "Toprak"}):   ("Toz",     "🌪️"),
    frozenset({"Su", "Toprak"}):     ("Çamur",   "🟤"),
    frozenset({"Ateş", "Toprak"}):   ("Lav",     "🌋"),
    frozenset({"Ateş", "Su"}):       ("Buhar",   "💨"),
    frozenset({"Yağmur", "Toprak"}): ("Bitki",   "🌿"),
    frozenset({"Çamur", "Bitki"}):   ("Bataklık", "🐊"),
    frozenset({"Lav", "Su"}):        ("Taş",     "🪨"),
    frozenset({"Enerji", "Hava"}):   ("Rüzgar",  "🌬️"),
    frozenset({"Bitki", "Su"}):      ("Yosun",   "🦠"),
    frozenset({"Taş", "Ateş"}):      ("Metal",   "🔩"),
    frozenset({"Taş", "Hava"}):      ("Kum",     "🏖️"),
    frozenset({"Kum", "Ateş"}):      ("Cam",     "🪟"),
    frozenset({"Bitki", "Ateş"}):    ("Kül",     "🌫️"),
    frozenset({"Buhar", "Hava"}):    ("Bulut",   "☁️"),
    frozenset({"Bulut", "Su"}):      ("Yağmur",  "🌧️"),
    frozenset({"Enerji", "Bitki"}):  ("Ağaç",    "🌳"),
    frozenset({"Ağaç", "Ateş"}):     ("Kömür",   "⚫"),
    frozenset({"Toprak"}):           ("Çamur Topu", "⚽"),
}


def recipe_generate(name_a: str, name_b: str) -> dict:
    """Look the pair up in the recipe table."""
    recipe = RECIPES.get(frozenset({name_a, name_b}))
    if recipe is None:
        raise ValidationFailure(f"no recipe for {name_a} + {name_b}")
    name, emoji = recipe
    return {"name": name, "emoji": emoji}
