"""Resolver configuration.

Settings are passed explicitly to FormatResolver; nothing is read from the
environment.
"""

from dataclasses import dataclass
from enum import Enum, auto


class UndefinedPolicy(Enum):
    """What a placeholder becomes when its value resolves to None.

    Only applies after lazy unwrapping and provider dispatch. An absent or
    MISSING argument slot is a missing argument and always keeps its token.
    """

    KEEP_TOKEN = auto()  # emit the original placeholder text, e.g. "{0:upper}"
    EMPTY = auto()  # emit ""
    TEXT = auto()  # emit "None"


@dataclass(frozen=True)
class ResolverConfig:
    """Behavior switches for FormatResolver."""

    undefined_policy: UndefinedPolicy = UndefinedPolicy.KEEP_TOKEN
    log_provider_failures: bool = True


DEFAULT_CONFIG = ResolverConfig()
