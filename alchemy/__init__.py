"""
Alchemy: combine two elements to discover a new one.

A memoizing resolver in front of a pluggable generator. Each unordered
pair of element names is sent to the generator at most once per store;
results are validated, cached, and added to the player's inventory.

Usage:
    python -m alchemy Ateş+Su Toprak+Toprak          (needs ANTHROPIC_API_KEY)
    python -m alchemy --offline Ateş+Su Buhar+Hava
    python -m alchemy --generator interactive Su+Hava
    python -m alchemy --inventory save.json Ateş+Toprak
"""

from .core.state import (
    Element, CombinationResult, MemoStore, Inventory,
    combination_key, base_elements,
)
from .core.errors import GenerationError, TransportFailure, ValidationFailure
from .core.validate import validate_payload
from .core.resolver import CombinationResolver, Discovery, discover
from .config import GeneratorConfig
from .generators import GENERATORS, make_llm_generate, recipe_generate, interactive_generate

__all__ = [
    "Element", "CombinationResult", "MemoStore", "Inventory",
    "combination_key", "base_elements",
    "GenerationError", "TransportFailure", "ValidationFailure",
    "validate_payload",
    "CombinationResolver", "Discovery", "discover",
    "GeneratorConfig",
    "GENERATORS", "make_llm_generate", "recipe_generate", "interactive_generate",
]
