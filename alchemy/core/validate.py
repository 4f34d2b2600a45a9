"""
Payload validation: turn whatever a generator returned into a
CombinationResult, or raise ValidationFailure.
"""

from .errors import ValidationFailure
from .state import CombinationResult


REQUIRED_FIELDS = ("name", "emoji")


def validate_payload(payload) -> CombinationResult:
    """
    Accepts a mapping with string fields "name" and "emoji", or a
    CombinationResult. Both fields must be non-empty after stripping;
    the stored values are the stripped strings.
    """
    if isinstance(payload, CombinationResult):
        payload = {"name": payload.name, "emoji": payload.emoji}
    if not isinstance(payload, dict):
        raise ValidationFailure(f"expected a mapping, got {type(payload).__name__}")

    values = {}
    for key in REQUIRED_FIELDS:
        value = payload.get(key)
        if not isinstance(value, str):
            raise ValidationFailure(f"field {key!r} missing or not a string")
        value = value.strip()
        if not value:
            raise ValidationFailure(f"field {key!r} is empty")
        values[key] = value

    return CombinationResult(name=values["name"], emoji=values["emoji"])
