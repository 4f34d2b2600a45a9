"""
CLI entry point. Run as: python -m alchemy [--generator <name>] A+B ...
"""

import argparse
import logging
import os
from typing import Optional

from .config import GeneratorConfig
from .core.resolver import CombinationResolver, discover
from .core.state import Element, Inventory, MemoStore, new_identity
from .generators import GENERATORS
from .report import NOTHING_HAPPENED, NOT_OWNED, discovery_message, print_inventory, print_store


def parse_pair(text: str):
    if "+" not in text:
        raise argparse.ArgumentTypeError(f"expected A+B, got {text!r}")
    a, b = text.split("+", 1)
    if not a or not b or "+" in b:
        raise argparse.ArgumentTypeError(f"expected A+B, got {text!r}")
    return a, b


def build_parser():
    parser = argparse.ArgumentParser(description="Combine elements to discover new ones")
    parser.add_argument("pairs", nargs="*", type=parse_pair, metavar="A+B",
                        help="Pairs of owned elements to combine, in order")
    parser.add_argument(
        "--generator",
        choices=list(GENERATORS.keys()),
        default="llm",
        help="Where new results come from",
    )
    parser.add_argument("--offline",   action="store_true",
                        help="Shorthand for --generator recipes")
    parser.add_argument("--inventory", type=str, default=None,
                        help="Load and save the inventory at this path")
    parser.add_argument("--reset",     action="store_true",
                        help="Start over from the base elements")
    parser.add_argument("--quiet",     action="store_true", help="Less output")
    parser.add_argument("--verbose",   action="store_true", help="Debug logging")
    return parser


def element_for(inventory: Inventory, name: str) -> Optional[Element]:
    """A fresh bench copy of an owned element; None if the player lacks it."""
    owned = inventory.find(name)
    if owned is None:
        return None
    return Element(new_identity(), owned.display_name, owned.glyph)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    name = "recipes" if args.offline else args.generator
    try:
        config = GeneratorConfig.from_env()
    except ValueError as e:
        parser.error(f"bad ALCHEMY_* setting: {e}")
    if GENERATORS[name]["needs_api_key"] and not config.api_key:
        parser.error("ANTHROPIC_API_KEY is not set (use --offline to play without it)")

    # --- Load or build the inventory ---
    if args.inventory and os.path.exists(args.inventory) and not args.reset:
        inventory = Inventory.load(args.inventory)
        if not args.quiet:
            print(f"Loaded inventory from {args.inventory} ({len(inventory)} elements)")
    else:
        inventory = Inventory()

    store = MemoStore()
    resolver = CombinationResolver(GENERATORS[name]["make_generate"](config), store)

    # --- Run ---
    try:
        for a, b in args.pairs:
            bench = [element_for(inventory, n) for n in (a, b)]
            missing = [n for n, e in zip((a, b), bench) if e is None]
            if missing:
                print(f"{a} + {b}: " + NOT_OWNED.format(", ".join(missing)))
                continue
            discovery = discover(resolver, inventory, *bench)
            print(f"{a} + {b}: " + (discovery_message(discovery) if discovery else NOTHING_HAPPENED))
    except KeyboardInterrupt:
        print("\nInterrupted.")

    if not args.quiet:
        print_inventory(inventory)
        print_store(resolver)

    if args.inventory:
        inventory.save(args.inventory)
        if not args.quiet:
            print(f"Inventory saved to {args.inventory}")


if __name__ == "__main__":
    main()
