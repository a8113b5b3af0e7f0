# puid/core/ids.py
from __future__ import annotations

import logging
import os
import secrets
import string
import warnings
from dataclasses import dataclass, replace

from puid.core import clock
from puid.core.exceptions import InvalidPrefixError

logger = logging.getLogger(__name__)

BASE36_DIGITS = string.digits + string.ascii_lowercase
ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase

DEFAULT_ENTROPY = 12
ENTROPY_MAX = 255
PREFIX_MIN_LEN = 1
PREFIX_MAX_LEN = 8


def to_base36(value: int) -> str:
    """
    Encode a non-negative integer in base-36, most significant digit first.
    Zero encodes to the empty string.
    """
    if value < 0:
        raise ValueError("to_base36 expects a non-negative integer")
    chars = []
    while value > 0:
        value, rem = divmod(value, 36)
        chars.append(BASE36_DIGITS[rem])
    return "".join(reversed(chars))


def rnd_string(length: int) -> str:
    """`length` random characters from 0-9A-Za-z."""
    return "".join(secrets.choice(ALPHANUMERIC) for _ in range(length))


def validate(prefix: str) -> bool:
    """1 to 8 characters, ASCII letters and digits only."""
    if not isinstance(prefix, str):
        return False
    return (
        PREFIX_MIN_LEN <= len(prefix) <= PREFIX_MAX_LEN
        and prefix.isascii()
        and prefix.isalnum()
    )


def _check_entropy(entropy: int) -> None:
    if isinstance(entropy, bool) or not isinstance(entropy, int):
        raise ValueError("entropy must be an int")
    if not 0 <= entropy <= ENTROPY_MAX:
        raise ValueError(f"entropy must be between 0 and {ENTROPY_MAX}")


def _compose(prefix: str, entropy: int) -> str:
    return "".join(
        (
            prefix,
            "_",
            to_base36(clock.time_millis()),
            str(clock.counter()),
            to_base36(os.getpid()),
            rnd_string(entropy),
        )
    )


@dataclass(frozen=True)
class PuidBuilder:
    """
    Immutable identifier configuration.
    Every setter returns a new builder; the prefix is checked when it is set.
    """
    prefix: str = ""
    entropy: int = DEFAULT_ENTROPY

    def set_prefix(self, prefix: str) -> "PuidBuilder":
        if not validate(prefix):
            raise InvalidPrefixError(prefix)
        return replace(self, prefix=prefix)

    def set_entropy(self, entropy: int) -> "PuidBuilder":
        _check_entropy(entropy)
        return replace(self, entropy=entropy)

    def build(self) -> str:
        if not self.prefix:
            raise InvalidPrefixError(self.prefix)
        uid = _compose(self.prefix, self.entropy)
        logger.debug("built id %s", uid)
        return uid


class Puid:
    """Entry point for the builder API."""

    @staticmethod
    def builder() -> PuidBuilder:
        return PuidBuilder()


def builder() -> PuidBuilder:
    return PuidBuilder()


def puid(prefix: str, entropy: int = DEFAULT_ENTROPY) -> str:
    """
    Deprecated one-call form, use builder() instead.
    An invalid prefix is a programming error here: raises AssertionError.
    Entropy outside 0..255 raises ValueError, as with set_entropy().
    """
    warnings.warn(
        "puid() is deprecated, use builder().set_prefix(...).build()",
        DeprecationWarning,
        stacklevel=2,
    )
    if not validate(prefix):
        raise AssertionError(InvalidPrefixError.message)
    _check_entropy(entropy)
    return _compose(prefix, entropy)


if __name__ == "__main__":
    print(builder().set_prefix("foo").build())
    print(builder().set_prefix("bar").set_entropy(24).build())
