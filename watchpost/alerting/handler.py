"""Alert handling for one endpoint check.

For each check of an endpoint, ``AlertingHandler.handle`` updates the
endpoint's consecutive counters, asks the threshold and enablement gates
whether any of its alerts should trigger or resolve, resolves the provider
configuration, invokes the provider's sender and commits the new alert state
only if the send succeeded.

The handler does not lock anything. Callers must run at most one ``handle``
per endpoint at a time; different endpoints may be handled concurrently.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Dict, List, Optional

from .alert import Alert
from .config import AlertingConfig
from .errors import AlertingError
from .providers import ProviderConfig
from .state import commit_resolve, commit_trigger, prepare_trigger
from .thresholds import AlertAction, evaluate_thresholds
from .types import AlertType

if TYPE_CHECKING:
    from ..endpoint.models import Endpoint, Result


logger = logging.getLogger(__name__)


class AlertSender(ABC):
    """Dispatch boundary of one provider."""

    @abstractmethod
    async def send(
        self,
        endpoint: "Endpoint",
        alert: Alert,
        result: "Result",
        resolved: bool,
        config: ProviderConfig
    ) -> Optional[str]:
        """Send a trigger or resolve notification.

        Implementations must not modify ``alert``. A provider that generates
        its own correlation id returns it so it can be stored as the alert's
        resolve key.

        Args:
            endpoint: Endpoint the alert belongs to
            alert: Alert being dispatched; ``alert.resolve_key`` addresses the incident
            result: Check result that caused the notification
            resolved: True for a resolve notification
            config: Effective provider configuration

        Returns:
            Resolve key generated by the remote API, if any

        Raises:
            Exception: Any exception means the notification was not delivered
        """
        pass


@dataclass
class AlertOutcome:
    """What happened to one alert during a check."""

    alert_type: AlertType
    action: AlertAction
    sent: bool
    committed: bool
    error: Optional[str] = None


class AlertingHandler:
    """Evaluates endpoint checks against their alerts and dispatches notifications."""

    def __init__(self, config: AlertingConfig, senders: Dict[AlertType, AlertSender]):
        self.config = config
        self.senders = dict(senders)

    async def handle(
        self,
        endpoint: "Endpoint",
        result: "Result",
        now: Optional[datetime] = None
    ) -> List[AlertOutcome]:
        """Handle the alerts of an endpoint for a new check result.

        Args:
            endpoint: Endpoint that was checked
            result: Result of the check
            now: Instant used for cron schedules (default: current time)

        Returns:
            One outcome per alert for which a trigger or resolve was warranted
        """
        endpoint.record_result(result)

        outcomes = []
        for alert in endpoint.alerts:
            action = evaluate_thresholds(
                alert,
                endpoint.number_of_failures_in_a_row,
                endpoint.number_of_successes_in_a_row
            )
            if action is AlertAction.NONE:
                continue
            if not alert.is_enabled(now):
                logger.debug(
                    f"Skipping {action.value} of {alert.type.value} alert for "
                    f"endpoint={endpoint.key()} because the alert is disabled"
                )
                continue
            outcomes.append(await self._dispatch(endpoint, alert, result, action))
        return outcomes

    async def _dispatch(
        self,
        endpoint: "Endpoint",
        alert: Alert,
        result: "Result",
        action: AlertAction
    ) -> AlertOutcome:
        resolved = action is AlertAction.RESOLVE
        alert_name = f"{alert.type.value} alert for endpoint={endpoint.key()}"

        # No notification means no provider is needed to resolve
        if resolved and not alert.is_sending_on_resolved():
            commit_resolve(alert)
            logger.info(f"Resolved {alert_name} without notification")
            return AlertOutcome(alert.type, action, sent=False, committed=True)

        provider = self.config.get_provider(alert.type)
        sender = self.senders.get(alert.type)
        if provider is None or sender is None:
            logger.warning(f"Not sending {alert_name} despite {action.value}, because the provider isn't configured")
            return AlertOutcome(alert.type, action, sent=False, committed=False, error="provider not configured")

        try:
            config = provider.get_config(endpoint.group, alert)
        except AlertingError as e:
            logger.error(f"Not sending {alert_name}, failed to resolve provider configuration: {e}")
            return AlertOutcome(alert.type, action, sent=False, committed=False, error=str(e))

        if not resolved:
            prepare_trigger(alert, endpoint.key(), provider.requires_resolve_key)

        logger.info(f"Sending {alert_name} with description='{alert.get_description()}' ({action.value})")
        try:
            resolve_key = await sender.send(endpoint, alert, result, resolved, config)
        except Exception as e:
            logger.error(f"Ran into error sending {alert_name}: {e}")
            return AlertOutcome(alert.type, action, sent=False, committed=False, error=str(e))

        if resolved:
            commit_resolve(alert)
        else:
            commit_trigger(alert, resolve_key)
        return AlertOutcome(alert.type, action, sent=True, committed=True)
