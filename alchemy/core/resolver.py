"""
The combination resolver.

Given two display names: build the key, look it up in the memo store,
and on a miss ask the generator, validate, store, return. The generator
is entirely pluggable -- this module knows nothing about where results
come from.

A pair is sent to the generator at most once per store, as long as it
succeeds. Failures are never cached: the next attempt calls again.
"""

from dataclasses import dataclass
from typing import Callable, Optional
import logging

from .errors import GenerationError, TransportFailure
from .state import CombinationResult, Element, Inventory, MemoStore, combination_key
from .validate import validate_payload


_logger = logging.getLogger(__name__)


class CombinationResolver:
    """
    Memoized front for a generator function.

    Args:
        generate_fn:  generate_fn(name_a, name_b) -> {"name", "emoji"}
                      Raises GenerationError when it has nothing.
        store:        the MemoStore to read and fill. Pass the same store
                      to share results between resolvers.

    No lock: two concurrent misses on one key both call the generator
    and the last write wins.
    """

    def __init__(self, generate_fn: Callable, store: Optional[MemoStore] = None):
        self.generate_fn = generate_fn
        self.store = store if store is not None else MemoStore()
        self.calls = 0
        self.failures = 0

    def resolve(self, name_a: str, name_b: str) -> Optional[CombinationResult]:
        key = combination_key(name_a, name_b)

        cached = self.store.get(key)
        if cached is not None:
            return cached

        try:
            result = self._generate(name_a, name_b)
        except GenerationError as e:
            self.failures += 1
            _logger.warning("no result for %s: %s: %s", key, type(e).__name__, e)
            return None

        self.store.put(key, result)
        _logger.debug("stored %s -> %s %s", key, result.emoji, result.name)
        return result

    def _generate(self, name_a, name_b) -> CombinationResult:
        self.calls += 1
        try:
            payload = self.generate_fn(name_a, name_b)
        except GenerationError:
            raise
        except Exception as e:
            _logger.exception("generator raised unexpectedly for %s + %s", name_a, name_b)
            raise TransportFailure(str(e)) from e
        return validate_payload(payload)


@dataclass
class Discovery:
    """
    What a successful combination did to the inventory.

    element: the inventory's element for the result (the existing one if
             the name was already known)
    is_new:  True when the inventory grew
    """
    element: Element
    result: CombinationResult
    is_new: bool


def discover(
    resolver: CombinationResolver,
    inventory: Inventory,
    a: Element,
    b: Element,
) -> Optional[Discovery]:
    """
    Combine two elements and record the result in the inventory.

    Refuses to combine an element instance with itself (same identity);
    two different instances with the same name are fine. Returns None
    when nothing was produced.
    """
    if a is b or a.identity == b.identity:
        return None

    result = resolver.resolve(a.display_name, b.display_name)
    if result is None:
        return None

    candidate = result.to_element()
    added = inventory.add_if_absent(candidate)
    element = candidate if added else inventory.find(result.name)
    return Discovery(element=element, result=result, is_new=added)
