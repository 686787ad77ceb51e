"""Format provider registry and registration decorator.

Providers are kept in registration order and are never removed. Dispatch
walks them front to back and stops at the first one that claims a
placeholder, so registration order is the only priority there is.

Usage:
    from format_resolver import register_format_provider

    @register_format_provider
    def shout(ctx):
        if ctx.expression == "shout":
            ctx.handled = True
            return f"{ctx.value}!"
"""

import logging
import threading
from collections.abc import Iterator

from format_resolver.context import FormatProvider

logger = logging.getLogger(__name__)


class FormatProviderRegistry:
    """Append-only, ordered list of format providers.

    Registries are plain objects so callers and tests can build isolated
    ones. The process-wide default is available through get_registry().
    """

    def __init__(self) -> None:
        self._providers: list[FormatProvider] = []
        self._lock = threading.Lock()

    def register(self, callback: FormatProvider) -> FormatProvider:
        """Append a provider. Duplicates are kept; nothing is validated.

        Returns the callback so this works as a decorator.
        """
        with self._lock:
            self._providers.append(callback)
            position = len(self._providers)
        logger.debug("[REGISTRY] Registered format provider %r (position=%d)", callback, position)
        return callback

    def providers(self) -> tuple[FormatProvider, ...]:
        """Snapshot of registered providers in registration order."""
        with self._lock:
            return tuple(self._providers)

    def count(self) -> int:
        """Get total number of registered providers."""
        with self._lock:
            return len(self._providers)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[FormatProvider]:
        return iter(self.providers())

    def __repr__(self) -> str:
        return f"FormatProviderRegistry(providers={self.count()})"


# Process-wide default, empty until something registers into it
_default_registry = FormatProviderRegistry()


def get_registry() -> FormatProviderRegistry:
    """Get the process-wide provider registry."""
    return _default_registry


def register_format_provider(callback: FormatProvider) -> FormatProvider:
    """Register a provider with the process-wide registry.

    Can be called directly or used as a decorator.
    """
    return _default_registry.register(callback)
