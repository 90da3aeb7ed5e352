"""Hysteresis thresholds deciding when an alert triggers or resolves.

The consecutive failure/success counters are owned by the caller; these
functions only compare them against the alert's thresholds and its current
``triggered`` state.
"""

from enum import Enum

from .alert import Alert


class AlertAction(str, Enum):
    """Action warranted by the latest check for a single alert."""
    NONE = "none"
    TRIGGER = "trigger"
    RESOLVE = "resolve"


def should_trigger(alert: Alert, failures_in_a_row: int) -> bool:
    """Return True if ``failures_in_a_row`` reached the threshold of an idle alert."""
    if alert.triggered or failures_in_a_row <= 0:
        return False
    return failures_in_a_row >= alert.failure_threshold


def should_resolve(alert: Alert, successes_in_a_row: int) -> bool:
    """Return True if ``successes_in_a_row`` reached the threshold of an active alert."""
    if not alert.triggered or successes_in_a_row <= 0:
        return False
    return successes_in_a_row >= alert.success_threshold


def evaluate_thresholds(alert: Alert, failures_in_a_row: int, successes_in_a_row: int) -> AlertAction:
    """Decide whether the current check should trigger, resolve, or do nothing.

    Only one of the counters is ever non-zero for a given check, so at most
    one of the two conditions can hold.
    """
    if should_trigger(alert, failures_in_a_row):
        return AlertAction.TRIGGER
    if should_resolve(alert, successes_in_a_row):
        return AlertAction.RESOLVE
    return AlertAction.NONE
