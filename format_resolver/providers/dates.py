"""Date provider: `{0:date:%Y-%m-%d}`.

Claims only date/datetime values; other values fall through to later
providers. An empty pattern uses isoformat().
"""

from datetime import date

from format_resolver.context import ProviderContext
from format_resolver.providers.base import builtin_provider, strip_prefix

PREFIX = "date:"


@builtin_provider
def date_provider(ctx: ProviderContext):
    pattern = strip_prefix(ctx, PREFIX)
    if pattern is None or not isinstance(ctx.value, date):
        return None
    ctx.handled = True
    if not pattern:
        return ctx.value.isoformat()
    return ctx.value.strftime(pattern)
