"""
Generator: Interactive (human in the loop).

The player decides what two elements produce. Same contract as the
other generators, so the resolver caches the player's answers too.
"""

from ..core.errors import ValidationFailure


def interactive_generate(name_a: str, name_b: str, input_fn=input) -> dict:
    """Ask the human what name_a + name_b makes, as name:emoji."""
    answer = input_fn(f"{name_a} + {name_b} = ? (empty to skip, name:emoji) > ").strip()
    if not answer:
        raise ValidationFailure("skipped")

    parts = answer.split(":", 1)
    if len(parts) < 2:
        raise ValidationFailure(f"no emoji in {answer!r}")
    return {"name": parts[0], "emoji": parts[1]}
