"""GitLab alert integration provider configuration."""

from pydantic import Field

from ..errors import MissingRequiredFieldError
from ..types import AlertType
from .base import AlertProvider, ProviderConfig, register_provider


class InvalidWebhookURLError(MissingRequiredFieldError):
    """Exception raised when the webhook URL is missing."""
    pass


class AuthorizationKeyNotSetError(MissingRequiredFieldError):
    """Exception raised when the authorization key is missing."""
    pass


class GitLabConfig(ProviderConfig):
    """GitLab HTTP endpoint integration settings."""

    webhook_url: str = Field(default='', description="Webhook URL provided by GitLab")
    authorization_key: str = Field(default='', description="Authorization key provided by GitLab")
    severity: str = Field(default='critical', description="One of critical, high, medium, low, info, unknown")
    monitoring_tool: str = Field(default='watchpost', description="Monitoring tool name sent to GitLab")
    environment_name: str = Field(default='', description="GitLab environment the alerts belong to")
    service: str = Field(default='', description="Affected service (default: endpoint display name)")

    def validate_config(self) -> None:
        self._require('webhook_url', error=InvalidWebhookURLError)
        self._require('authorization_key', error=AuthorizationKeyNotSetError)


@register_provider(AlertType.GITLAB)
class GitLabAlertProvider(AlertProvider):
    """Opens and closes GitLab alerts, correlated by fingerprint."""

    config_class = GitLabConfig
    requires_resolve_key = True
