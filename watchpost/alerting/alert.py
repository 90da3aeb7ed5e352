"""Alert configuration and runtime state for one endpoint/provider pair.

An ``Alert`` is created when configuration is loaded and lives until the
configuration is reloaded. Its configuration fields are read-only after
``validate_and_set_defaults``; its runtime fields (``triggered`` and
``resolve_key``) are only changed through ``watchpost.alerting.state`` after a
confirmed send.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .cron import CronEvaluationError, CronValidationError, is_due, validate_cron_expression
from .errors import InvalidAlertDescriptionError
from .types import AlertType
from .utils import to_dash_case


logger = logging.getLogger(__name__)


DEFAULT_FAILURE_THRESHOLD = 3
DEFAULT_SUCCESS_THRESHOLD = 2

# Characters that break provider payload templating
FORBIDDEN_DESCRIPTION_CHARACTERS = ('"', '\\')


class Alert(BaseModel):
    """Alert declared on an endpoint for a single provider."""

    model_config = ConfigDict(
        alias_generator=to_dash_case,
        populate_by_name=True,
        extra='forbid',
    )

    type: AlertType = Field(description="Provider that dispatches this alert")

    # Optional fields distinguish "not set" (None) from an explicit value so
    # that a provider's default alert can fill in only what was left out.
    enabled: Optional[bool] = Field(
        default=None,
        description="Whether the alert is enabled (unset means enabled)"
    )

    failure_threshold: int = Field(
        default=0,
        description="Failures in a row needed before triggering"
    )

    success_threshold: int = Field(
        default=0,
        description="Successes in a row needed before resolving"
    )

    description: Optional[str] = Field(
        default=None,
        description="Free text included in notifications"
    )

    send_on_resolved: Optional[bool] = Field(
        default=None,
        description="Whether to send a second notification once resolved (unset means no)"
    )

    cron_schedule: Optional[str] = Field(
        default=None,
        description="Cron expression restricting when the alert may fire"
    )

    cron_timezone: str = Field(
        default='UTC',
        description="IANA timezone the cron schedule is written in"
    )

    provider_override: Dict[str, Any] = Field(
        default_factory=dict,
        description="Inline override of the provider's configuration"
    )

    # Runtime state
    resolve_key: str = Field(
        default='',
        exclude=True,
        description="Correlates a trigger notification with its resolve notification"
    )

    triggered: bool = Field(
        default=False,
        exclude=True,
        description="Whether a trigger notification was sent and not yet resolved"
    )

    def get_description(self) -> str:
        """Get the description, or an empty string if unset."""
        return self.description or ''

    def is_sending_on_resolved(self) -> bool:
        """Check whether a resolved notification should be sent."""
        return bool(self.send_on_resolved)

    def is_enabled(self, now: Optional[datetime] = None) -> bool:
        """Check whether the alert may fire at ``now``.

        A cron schedule suppresses the alert outside of its due minutes, on
        top of the ``enabled`` flag. A schedule that cannot be evaluated does
        not suppress anything.

        Args:
            now: Instant to evaluate (default: current time)

        Returns:
            True if both the cron schedule and the enabled flag permit firing
        """
        if self.cron_schedule:
            try:
                if not is_due(self.cron_schedule, now, self.cron_timezone):
                    return False
            except (CronValidationError, CronEvaluationError) as e:
                logger.debug(f"Ignoring cron schedule of {self.type.value} alert: {e}")
        return self.enabled is None or self.enabled

    def validate_and_set_defaults(self) -> None:
        """Validate the alert and default its thresholds.

        Raises:
            InvalidAlertDescriptionError: If the description contains ``"`` or ``\\``
        """
        description = self.get_description()
        for character in FORBIDDEN_DESCRIPTION_CHARACTERS:
            if character in description:
                raise InvalidAlertDescriptionError(
                    f"alert description must not contain {character!r}: {description!r}"
                )

        if self.failure_threshold <= 0:
            self.failure_threshold = DEFAULT_FAILURE_THRESHOLD
        if self.success_threshold <= 0:
            self.success_threshold = DEFAULT_SUCCESS_THRESHOLD

        if self.cron_schedule:
            try:
                validate_cron_expression(self.cron_schedule)
            except CronValidationError as e:
                logger.warning(
                    f"Cron schedule of {self.type.value} alert is invalid and will be ignored: {e}"
                )

    def apply_default(self, default_alert: Optional["Alert"]) -> None:
        """Fill fields left unset with the provider's default alert.

        Args:
            default_alert: The provider's default alert, if any
        """
        if default_alert is None:
            return
        if self.enabled is None:
            self.enabled = default_alert.enabled
        if self.send_on_resolved is None:
            self.send_on_resolved = default_alert.send_on_resolved
        if self.description is None:
            self.description = default_alert.description
        if self.failure_threshold == 0:
            self.failure_threshold = default_alert.failure_threshold
        if self.success_threshold == 0:
            self.success_threshold = default_alert.success_threshold
        if self.cron_schedule is None:
            self.cron_schedule = default_alert.cron_schedule
            if 'cron_timezone' not in self.model_fields_set:
                self.cron_timezone = default_alert.cron_timezone
