"""Provider context and invocation outcomes.

A ProviderContext is built fresh for every (placeholder, provider) attempt.
The provider reads `expression` and `value` and sets `handled = True` to
claim the substitution. invoke_provider() turns one attempt into a tagged
ProviderOutcome so dispatch never has to deal with raw exceptions.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

logger = logging.getLogger(__name__)


class ProviderContext:
    """Per-attempt record handed to a format provider."""

    __slots__ = ("_expression", "_value", "handled")

    def __init__(self, expression: str, value: Any) -> None:
        self._expression = expression
        self._value = value
        self.handled = False

    @property
    def expression(self) -> str:
        """Raw format expression from the placeholder (text after ':')."""
        return self._expression

    @property
    def value(self) -> Any:
        """Resolved value entering this provider attempt."""
        return self._value

    def __repr__(self) -> str:
        return (
            f"ProviderContext(expression={self._expression!r}, "
            f"value={self._value!r}, handled={self.handled!r})"
        )


# Type alias for provider callbacks
FormatProvider = Callable[[ProviderContext], Any]


class OutcomeStatus(Enum):
    """How a single provider attempt ended."""

    HANDLED = auto()  # provider set handled=True, its return value wins
    NOT_HANDLED = auto()  # provider left handled=False, return value dropped
    FAILED = auto()  # provider raised


@dataclass(frozen=True)
class ProviderOutcome:
    """Result of invoking one provider against one placeholder."""

    status: OutcomeStatus
    value: Any = None
    error: Exception | None = None

    @property
    def handled(self) -> bool:
        return self.status is OutcomeStatus.HANDLED


_NOT_HANDLED = ProviderOutcome(OutcomeStatus.NOT_HANDLED)


def invoke_provider(
    provider: FormatProvider,
    expression: str,
    value: Any,
    *,
    log_failures: bool = True,
) -> ProviderOutcome:
    """Run one provider attempt against a fresh context.

    Args:
        provider: Registered provider callback
        expression: Format expression of the placeholder
        value: Pre-dispatch value of the placeholder
        log_failures: Log provider exceptions at DEBUG level

    Returns:
        HANDLED with the provider's return value if it claimed the context,
        FAILED with the exception if it raised, NOT_HANDLED otherwise.
    """
    ctx = ProviderContext(expression, value)
    try:
        result = provider(ctx)
    except Exception as e:
        if log_failures:
            logger.debug(
                "[RESOLVER] Format provider %r failed for expression %r",
                provider,
                expression,
                exc_info=True,
            )
        return ProviderOutcome(OutcomeStatus.FAILED, error=e)

    if ctx.handled:
        return ProviderOutcome(OutcomeStatus.HANDLED, value=result)
    return _NOT_HANDLED
