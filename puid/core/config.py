# puid/core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from puid.core.ids import DEFAULT_ENTROPY, ENTROPY_MAX, validate


@dataclass
class Config:
    default_prefix: str
    default_entropy: int
    log_level: str

    @classmethod
    def load(cls) -> "Config":
        prefix = os.environ.get("PUID_DEFAULT_PREFIX", "id")
        entropy = os.environ.get("PUID_DEFAULT_ENTROPY", str(DEFAULT_ENTROPY))
        level = os.environ.get("PUID_LOG_LEVEL", "WARNING")
        try:
            entropy_n = int(entropy)
        except ValueError:
            raise ValueError(f"PUID_DEFAULT_ENTROPY is not an integer: {entropy!r}") from None
        return cls(prefix, entropy_n, level.upper())

    def validate(self) -> None:
        if not validate(self.default_prefix):
            raise ValueError(f"default_prefix is invalid: {self.default_prefix!r}")
        if not 0 <= self.default_entropy <= ENTROPY_MAX:
            raise ValueError(f"default_entropy must be between 0 and {ENTROPY_MAX}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log_level: {self.log_level}")
