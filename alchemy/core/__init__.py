from .state import (
    Element, CombinationResult, MemoStore, Inventory,
    combination_key, base_elements, BASE_ELEMENTS,
)
from .errors import GenerationError, TransportFailure, ValidationFailure
from .validate import validate_payload
from .resolver import CombinationResolver, Discovery, discover

__all__ = [
    "Element", "CombinationResult", "MemoStore", "Inventory",
    "combination_key", "base_elements", "BASE_ELEMENTS",
    "GenerationError", "TransportFailure", "ValidationFailure",
    "validate_payload",
    "CombinationResolver", "Discovery", "discover",
]
