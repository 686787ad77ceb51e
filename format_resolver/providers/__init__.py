"""Built-in format providers.

Each module in this package defines providers using the @builtin_provider
decorator:

- text: upper, lower, title, capitalize, strip
- format_spec: fmt:<format spec>  (e.g. {0:fmt:,.2f})
- dates: date:<strftime pattern>  (e.g. {0:date:%Y-%m-%d})

Built-ins are never registered automatically. Call
register_builtin_providers() to append them to a registry.
"""

from format_resolver.providers.base import BUILTIN_PROVIDERS, builtin_provider

# Import all provider modules to collect them (noqa: F401 for side-effect imports)
from format_resolver.providers import (  # noqa: F401
    text,
    format_spec,
    dates,
)
from format_resolver.registry import FormatProviderRegistry, get_registry

__all__ = ["BUILTIN_PROVIDERS", "builtin_provider", "register_builtin_providers"]


def register_builtin_providers(
    registry: FormatProviderRegistry | None = None,
) -> FormatProviderRegistry:
    """Append all built-in providers to `registry` (default: process-wide).

    Returns the registry for chaining.
    """
    target = registry if registry is not None else get_registry()
    for provider in BUILTIN_PROVIDERS:
        target.register(provider)
    return target
