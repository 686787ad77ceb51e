"""Collection point for built-in providers."""

from format_resolver.context import FormatProvider, ProviderContext

# Filled by @builtin_provider in import order
BUILTIN_PROVIDERS: list[FormatProvider] = []


def builtin_provider(func: FormatProvider) -> FormatProvider:
    """Decorator to collect a built-in provider.

    Usage:
        @builtin_provider
        def upper_provider(ctx: ProviderContext):
            if ctx.expression != "upper":
                return None
            ctx.handled = True
            return str(ctx.value).upper()
    """
    BUILTIN_PROVIDERS.append(func)
    return func


def strip_prefix(ctx: ProviderContext, prefix: str) -> str | None:
    """Return the expression text after `prefix`, or None if it doesn't start with it."""
    if not ctx.expression.startswith(prefix):
        return None
    return ctx.expression[len(prefix):]
