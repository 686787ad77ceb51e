"""Text case providers: upper, lower, title, capitalize, strip.

All operate on str(value).
"""

from format_resolver.context import ProviderContext
from format_resolver.providers.base import builtin_provider

TEXT_TRANSFORMS = {
    "upper": str.upper,
    "lower": str.lower,
    "title": str.title,
    "capitalize": str.capitalize,
    "strip": str.strip,
}


@builtin_provider
def text_case_provider(ctx: ProviderContext):
    transform = TEXT_TRANSFORMS.get(ctx.expression.strip())
    if transform is None:
        return None
    ctx.handled = True
    return transform(str(ctx.value))
