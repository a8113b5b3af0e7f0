from puid.core.exceptions import InvalidPrefixError, PuidError
from puid.core.ids import (
    DEFAULT_ENTROPY,
    Puid,
    PuidBuilder,
    builder,
    puid,
    to_base36,
    validate,
)

__all__ = [
    "DEFAULT_ENTROPY",
    "InvalidPrefixError",
    "Puid",
    "PuidBuilder",
    "PuidError",
    "builder",
    "puid",
    "to_base36",
    "validate",
]
