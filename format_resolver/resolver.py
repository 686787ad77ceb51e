"""Positional placeholder resolution.

Replaces `{index}` and `{index:expression}` tokens in a template with values
from an argument list:

    resolve("{0} vs {1}", ["Lions", "Bears"])   -> "Lions vs Bears"
    resolve("{0:upper}", ["lions"])              -> dispatched to providers

Resolution of a single token:
1. Missing argument (index out of range, or the MISSING sentinel) keeps the
   token verbatim. None is a real value and is resolved like any other.
2. Callable arguments are called repeatedly until they produce a
   non-callable value (lazy arguments).
3. If the token has a ':' separator, the value goes through the provider
   chain; the first provider that claims it supplies the replacement.
4. The final value is converted with str(). A final None follows the
   configured UndefinedPolicy.
"""

import inspect
import logging
import re
from collections.abc import Callable, Sequence
from typing import Any

from format_resolver.config import DEFAULT_CONFIG, ResolverConfig, UndefinedPolicy
from format_resolver.context import invoke_provider
from format_resolver.registry import FormatProviderRegistry, get_registry

logger = logging.getLogger(__name__)

# {index} or {index:expression}; expression may be empty, never contains '}'
PLACEHOLDER_PATTERN = re.compile(r"\{(\d+)(?:(:)([^}]*))?\}")


class _Missing:
    """Marker for an argument slot that holds no value."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


# Put in an argument list to leave a hole: resolve("{0}{1}", [MISSING, "b"]) -> "{0}b"
MISSING = _Missing()

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _call_lazy(func: Callable, call_args: tuple) -> Any:
    """Call a lazy argument with as many leading call_args as it accepts.

    Supported signatures take zero to five positional parameters (extra
    ones need defaults) or *args. A required keyword-only parameter, or more
    than five required positionals, makes the call raise TypeError, which
    propagates to the caller like any other lazy-argument error.
    """
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # No introspectable signature (some builtins): call bare
        return func()

    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return func(*call_args)
    accepted = sum(1 for p in params if p.kind in _POSITIONAL_KINDS)
    return func(*call_args[:accepted])


def unwrap_lazy(
    value: Any,
    index: int,
    args: Sequence[Any],
    match_text: str,
    expression: str,
) -> Any:
    """Call `value` until it is no longer callable.

    Each call receives (index, args, match_text, expression, depth) with
    depth counting up from 0. There is no depth limit.
    """
    depth = 0
    while callable(value):
        value = _call_lazy(value, (index, args, match_text, expression, depth))
        depth += 1
    return value


class FormatResolver:
    """Resolves positional placeholders against a provider registry.

    Usage:
        registry = FormatProviderRegistry()
        registry.register(my_provider)

        resolver = FormatResolver(registry)
        resolver.resolve("{0:money}", [12.5])
        resolver.resolve_variadic("{0}-{1}", "a", "b")
    """

    def __init__(
        self,
        registry: FormatProviderRegistry | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self._registry = registry
        self._config = config or DEFAULT_CONFIG

    @property
    def registry(self) -> FormatProviderRegistry:
        # Late-bound so the resolver always sees the current default registry
        return self._registry if self._registry is not None else get_registry()

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(self, template: str | None, args: Sequence[Any] | None = None) -> str | None:
        """Resolve all placeholders in a template.

        Args:
            template: String with {index} or {index:expression} placeholders
            args: Positional arguments; None is treated as empty

        Returns:
            The resolved string. Empty or None templates are returned as-is.
        """
        if not template:
            return template

        if args is None:
            args = []

        def replace_placeholder(match: re.Match) -> str:
            """Replace function for re.sub()"""
            return self._resolve_token(match, args)

        return PLACEHOLDER_PATTERN.sub(replace_placeholder, template)

    def resolve_variadic(self, template: str | None, *args: Any) -> str | None:
        """Resolve a template against variadic arguments."""
        return self.resolve(template, list(args))

    def _resolve_token(self, match: re.Match, args: Sequence[Any]) -> str:
        match_text = match.group(0)
        index = int(match.group(1))
        has_separator = match.group(2) is not None
        expression = match.group(3) or ""

        if index >= len(args) or args[index] is MISSING:
            return match_text

        value = unwrap_lazy(args[index], index, args, match_text, expression)

        if has_separator:
            value = self._dispatch(expression, value)

        if value is not None:
            return str(value)
        return self._undefined_replacement(match_text)

    def _dispatch(self, expression: str, value: Any) -> Any:
        """Run the provider chain; first provider to claim the context wins."""
        for provider in self.registry.providers():
            outcome = invoke_provider(
                provider,
                expression,
                value,
                log_failures=self._config.log_provider_failures,
            )
            if outcome.handled:
                return outcome.value
        logger.debug("[RESOLVER] No format provider handled expression %r", expression)
        return value

    def _undefined_replacement(self, match_text: str) -> str:
        policy = self._config.undefined_policy
        if policy is UndefinedPolicy.EMPTY:
            return ""
        if policy is UndefinedPolicy.TEXT:
            return str(None)
        return match_text


def resolve(
    template: str | None,
    args: Sequence[Any] | None = None,
    *,
    registry: FormatProviderRegistry | None = None,
) -> str | None:
    """Resolve a template against an argument list.

    Uses the process-wide registry unless `registry` is given.
    """
    return FormatResolver(registry).resolve(template, args)


def resolve_variadic(template: str | None, *args: Any) -> str | None:
    """Resolve a template against variadic arguments.

    resolve_variadic("{0}-{1}", "a", "b") -> "a-b"
    """
    return resolve(template, list(args))
