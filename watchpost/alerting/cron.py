"""Timezone-aware cron expression evaluation for alert enablement windows.

An alert's cron schedule describes the minutes during which it may fire, e.g.
``* 9-17 * * 1-5`` for business hours. This module answers whether a given
instant falls inside such a schedule.
"""

import logging
import zoneinfo
from datetime import datetime, timezone
from typing import Dict, Optional

from croniter import croniter
from croniter.croniter import CroniterError


logger = logging.getLogger(__name__)


class CronValidationError(Exception):
    """Exception raised when cron expression validation fails."""
    pass


class CronEvaluationError(Exception):
    """Exception raised when cron evaluation fails."""
    pass


class CronEvaluator:
    """Evaluates five-field cron expressions against instants in a timezone."""

    # Named cron expressions
    NAMED_EXPRESSIONS = {
        '@yearly': '0 0 1 1 *',
        '@annually': '0 0 1 1 *',
        '@monthly': '0 0 1 * *',
        '@weekly': '0 0 * * 0',
        '@daily': '0 0 * * *',
        '@hourly': '0 * * * *',
    }

    def __init__(self):
        self._cache: Dict[str, str] = {}  # validated expressions keyed by original text

    def validate_cron_expression(self, cron_expr: str) -> str:
        """Validate a cron expression and return its normalized five-field form.

        Args:
            cron_expr: Cron expression or named expression (``@daily``)

        Returns:
            The expanded five-field expression

        Raises:
            CronValidationError: If expression is invalid
        """
        if cron_expr in self._cache:
            return self._cache[cron_expr]

        stripped = cron_expr.strip() if isinstance(cron_expr, str) else ''
        expr = self.NAMED_EXPRESSIONS.get(stripped, stripped)

        fields = expr.split()
        if len(fields) != 5:
            raise CronValidationError(
                f"Cron expression must have 5 fields, got {len(fields)}: '{cron_expr}'"
            )
        if not croniter.is_valid(expr):
            raise CronValidationError(f"Invalid cron expression '{cron_expr}'")

        self._cache[cron_expr] = expr
        return expr

    def is_due(
        self,
        cron_expr: str,
        at: Optional[datetime] = None,
        timezone_str: str = 'UTC'
    ) -> bool:
        """Check whether the minute containing ``at`` matches the expression.

        Args:
            cron_expr: Cron expression
            at: Instant to check (default: now). Naive values are read in ``timezone_str``.
            timezone_str: IANA timezone the expression is written in

        Returns:
            True if the expression fires during that minute

        Raises:
            CronValidationError: If the expression is invalid
            CronEvaluationError: If the timezone is unknown or evaluation fails
        """
        expr = self.validate_cron_expression(cron_expr)

        try:
            tz = zoneinfo.ZoneInfo(timezone_str)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError):
            raise CronEvaluationError(f"Invalid timezone: {timezone_str}")

        if at is None:
            at = datetime.now(timezone.utc).astimezone(tz)
        elif at.tzinfo is None:
            at = at.replace(tzinfo=tz)
        else:
            at = at.astimezone(tz)

        try:
            return croniter.match(expr, at.replace(second=0, microsecond=0))
        except CroniterError as e:
            raise CronEvaluationError(f"Failed to evaluate cron expression '{cron_expr}': {e}")
        except Exception as e:
            raise CronEvaluationError(f"Unexpected error evaluating cron expression: {e}")

    def clear_cache(self) -> None:
        """Clear the cron expression validation cache."""
        self._cache.clear()
        logger.debug("Cleared cron expression cache")


_default_evaluator = CronEvaluator()


def validate_cron_expression(cron_expr: str) -> None:
    """Convenience function to validate a cron expression.

    Raises:
        CronValidationError: If expression is invalid
    """
    _default_evaluator.validate_cron_expression(cron_expr)


def is_due(cron_expr: str, at: Optional[datetime] = None, timezone_str: str = 'UTC') -> bool:
    """Convenience function to check whether an instant falls inside a cron schedule."""
    return _default_evaluator.is_due(cron_expr, at, timezone_str)
