"""Python format-spec provider.

`{0:fmt:,.2f}` with 1234.5 -> "1,234.50". Invalid specs raise ValueError,
which dispatch treats as an unclaimed placeholder.
"""

from format_resolver.context import ProviderContext
from format_resolver.providers.base import builtin_provider, strip_prefix

PREFIX = "fmt:"


@builtin_provider
def format_spec_provider(ctx: ProviderContext):
    format_spec = strip_prefix(ctx, PREFIX)
    if format_spec is None:
        return None
    result = format(ctx.value, format_spec)
    ctx.handled = True
    return result
