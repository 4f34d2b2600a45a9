"""
Reporting utilities.
"""

from .core.resolver import CombinationResolver, Discovery
from .core.state import Inventory


NOTHING_HAPPENED = "Bu kombinasyon bir şey oluşturmadı."
NOT_OWNED = "Envanterde yok: {}"


def discovery_message(discovery: Discovery) -> str:
    result = discovery.result
    if discovery.is_new:
        return f"Yeni Keşif: {result.emoji} {result.name}!"
    return f"{result.emoji} {result.name} (zaten biliniyor)"


def print_inventory(inventory: Inventory):
    """Print everything the player owns, newest discoveries marked."""
    print(f"\n{'='*60}")
    print(f"Keşifler ({len(inventory)}):")
    for element in inventory:
        marker = " *" if element.is_new else ""
        print(f"  {element.label}{marker}")
    print(f"{'='*60}")


def print_store(resolver: CombinationResolver):
    """Print the memo store and how often the generator was asked."""
    print(f"\n{'='*60}")
    print(f"Known combinations ({len(resolver.store)}):")
    print(f"{'='*60}")
    for key, result in resolver.store.to_dict().items():
        print(f"  {key} -> {result['emoji']} {result['name']}")
    print(f"  generator calls: {resolver.calls} | failures: {resolver.failures}")
