"""Alerting configuration: one provider block per alert type.

The document mirrors the provider shapes 1:1::

    alerting:
      email:
        from: monitoring@example.com
        host: smtp.example.com
        port: 587
        to: oncall@example.com
        default-alert:
          failure-threshold: 5
        overrides:
          - group: core
            to: core-team@example.com

Invalid providers and alerts are disabled and reported instead of failing
the whole configuration.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

import yaml

from .alert import Alert
from .errors import AlertingError, ConfigurationError, UnknownAlertTypeError
from .providers import AlertProvider, get_provider_class
from .types import AlertType

if TYPE_CHECKING:
    from ..endpoint.models import Endpoint


logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    """Outcome of validating alerting configuration against endpoints."""

    valid_providers: List[AlertType] = field(default_factory=list)
    invalid_providers: Dict[AlertType, str] = field(default_factory=dict)
    invalid_alerts: Dict[str, str] = field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        """Check whether nothing had to be disabled."""
        return not self.invalid_providers and not self.invalid_alerts


class AlertingConfig:
    """Configured alert providers, keyed by alert type."""

    def __init__(self, providers: Optional[Dict[AlertType, AlertProvider]] = None):
        self._providers: Dict[AlertType, AlertProvider] = dict(providers or {})

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AlertingConfig":
        """Build the configuration from the ``alerting`` block of a document.

        Raises:
            ConfigurationError: If a block is malformed or names an unknown provider
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError("alerting configuration must be a mapping")

        providers = {}
        for name, block in data.items():
            try:
                alert_type = AlertType(name)
            except ValueError:
                raise UnknownAlertTypeError(f"Unknown alerting provider: {name}")
            if block is None:
                continue
            providers[alert_type] = get_provider_class(alert_type).from_dict(block)
        return cls(providers)

    @classmethod
    def from_yaml(cls, text: str) -> "AlertingConfig":
        """Build the configuration from YAML text holding an ``alerting`` block.

        Raises:
            ConfigurationError: If the YAML cannot be parsed or is malformed
        """
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}")

        if document is None:
            return cls()
        if not isinstance(document, dict):
            raise ConfigurationError("Configuration must contain a YAML dictionary")
        return cls.from_dict(document.get('alerting'))

    def get_provider(self, alert_type: AlertType) -> Optional[AlertProvider]:
        """Get the provider configured for an alert type, if any."""
        return self._providers.get(alert_type)

    def set_provider(self, alert_type: AlertType, provider: Optional[AlertProvider]) -> None:
        """Replace or, with ``None``, remove the provider for an alert type."""
        if provider is None:
            self._providers.pop(alert_type, None)
        else:
            self._providers[alert_type] = provider

    @property
    def provider_types(self) -> List[AlertType]:
        """Alert types with a configured provider."""
        return list(self._providers.keys())

    def validate_providers(self, endpoints: Iterable["Endpoint"] = ()) -> ValidationReport:
        """Validate providers and the alerts that use them.

        Invalid providers are removed. Each endpoint alert then receives its
        provider's default alert, is validated, and has its overrides resolved
        once for its endpoint's group; alerts failing any of this are disabled.

        Args:
            endpoints: Endpoints whose alerts should be prepared

        Returns:
            Report of what was kept and what was disabled
        """
        report = ValidationReport()

        for alert_type, provider in list(self._providers.items()):
            try:
                provider.validate()
            except ConfigurationError as e:
                logger.warning(f"Ignoring provider={alert_type.value} because configuration is invalid: {e}")
                report.invalid_providers[alert_type] = str(e)
                self.set_provider(alert_type, None)
            else:
                report.valid_providers.append(alert_type)

        for endpoint in endpoints:
            for index, alert in enumerate(endpoint.alerts):
                alert_id = f"{endpoint.key()}#{index}:{alert.type.value}"
                provider = self.get_provider(alert.type)
                if provider is not None:
                    alert.apply_default(provider.get_default_alert())
                try:
                    alert.validate_and_set_defaults()
                    if provider is not None:
                        provider.validate_overrides(endpoint.group, alert)
                except AlertingError as e:
                    self._disable_alert(report, alert, alert_id, str(e))

        logger.info(
            f"Configured providers={[t.value for t in report.valid_providers]}; "
            f"ignored providers={[t.value for t in report.invalid_providers]}"
        )
        return report

    def _disable_alert(self, report: ValidationReport, alert: Alert, alert_id: str, reason: str) -> None:
        logger.warning(f"Disabling alert {alert_id}: {reason}")
        alert.enabled = False
        report.invalid_alerts[alert_id] = reason
