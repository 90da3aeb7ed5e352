"""Prometheus Alertmanager provider configuration."""

from typing import Dict, List, Optional

from pydantic import Field

from ..errors import MissingRequiredFieldError
from ..types import AlertType
from .base import AlertProvider, ClientConfig, ProviderConfig, register_provider


class URLsNotSetError(MissingRequiredFieldError):
    """Exception raised when no Alertmanager URL is configured."""
    pass


class AlertmanagerConfig(ProviderConfig):
    """Alertmanager API targets and extra alert data."""

    urls: List[str] = Field(default_factory=list, description="Alertmanager API URLs")
    default_severity: str = Field(default='critical', description="Severity label of sent alerts")
    extra_labels: Dict[str, str] = Field(default_factory=dict, description="Labels added to every alert")
    extra_annotations: Dict[str, str] = Field(default_factory=dict, description="Annotations added to every alert")
    client: Optional[ClientConfig] = Field(default=None, description="HTTP client configuration")

    def validate_config(self) -> None:
        self._require('urls', error=URLsNotSetError)


@register_provider(AlertType.ALERTMANAGER)
class AlertmanagerAlertProvider(AlertProvider):
    """Pushes alerts to one or more Alertmanager instances."""

    config_class = AlertmanagerConfig
