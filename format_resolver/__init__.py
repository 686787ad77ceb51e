"""Positional string formatting with pluggable format providers.

Usage:
    from format_resolver import register_format_provider, resolve, resolve_variadic

    resolve("{0} vs {1}", ["Lions", "Bears"])     # "Lions vs Bears"
    resolve_variadic("{0}-{1}", "a", "b")          # "a-b"

    @register_format_provider
    def upper(ctx):
        if ctx.expression == "upper":
            ctx.handled = True
            return str(ctx.value).upper()

    resolve("{0:upper}", ["lions"])               # "LIONS"

Placeholders with a ':' run through the registered providers in
registration order; the first one to set ctx.handled wins. Arguments that
are callables are called until they yield a plain value.
"""

from format_resolver.config import DEFAULT_CONFIG, ResolverConfig, UndefinedPolicy
from format_resolver.context import (
    FormatProvider,
    OutcomeStatus,
    ProviderContext,
    ProviderOutcome,
    invoke_provider,
)
from format_resolver.registry import (
    FormatProviderRegistry,
    get_registry,
    register_format_provider,
)
from format_resolver.resolver import (
    MISSING,
    PLACEHOLDER_PATTERN,
    FormatResolver,
    resolve,
    resolve_variadic,
    unwrap_lazy,
)
from format_resolver.providers import register_builtin_providers

__all__ = [
    # Main API
    "FormatResolver",
    "resolve",
    "resolve_variadic",
    "unwrap_lazy",
    "MISSING",
    "PLACEHOLDER_PATTERN",
    # Registry
    "FormatProvider",
    "FormatProviderRegistry",
    "get_registry",
    "register_format_provider",
    "register_builtin_providers",
    # Provider context
    "OutcomeStatus",
    "ProviderContext",
    "ProviderOutcome",
    "invoke_provider",
    # Config
    "DEFAULT_CONFIG",
    "ResolverConfig",
    "UndefinedPolicy",
]
