"""PagerDuty Events API v2 provider configuration."""

from pydantic import Field

from ..errors import MissingRequiredFieldError
from ..types import AlertType
from .base import AlertProvider, ProviderConfig, register_provider


INTEGRATION_KEY_LENGTH = 32


class IntegrationKeyNotSetError(MissingRequiredFieldError):
    """Exception raised when the integration key is missing or malformed."""

    def __init__(self, field: str = 'integration-key'):
        super().__init__(field, f"integration-key must have exactly {INTEGRATION_KEY_LENGTH} characters")


class PagerDutyConfig(ProviderConfig):
    """PagerDuty routing settings."""

    integration_key: str = Field(default='', description="Events API v2 integration key")

    def validate_config(self) -> None:
        if len(self.integration_key) != INTEGRATION_KEY_LENGTH:
            raise IntegrationKeyNotSetError()


@register_provider(AlertType.PAGERDUTY)
class PagerDutyAlertProvider(AlertProvider):
    """Triggers and resolves PagerDuty incidents.

    PagerDuty generates the dedup key itself and returns it from the trigger
    call, so no key has to be generated up front.
    """

    config_class = PagerDutyConfig
