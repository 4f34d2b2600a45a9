"""
Why a combination produced nothing.

Generators and validation raise these; the resolver catches them and
returns None. Callers of resolve() never see them.
"""


class GenerationError(Exception):
    """Base for every way a generator can fail to produce a result."""


class TransportFailure(GenerationError):
    """The external call could not be completed (network, timeout, non-2xx)."""


class ValidationFailure(GenerationError):
    """The call completed but the payload is missing or empty."""
