"""Unit tests for provider-specific configuration validation."""

import pytest

from watchpost.alerting import Alert, AlertingConfig, AlertType
from watchpost.alerting.providers import (
    AlertmanagerConfig,
    ClientConfig,
    CustomAlertProvider,
    CustomConfig,
    GitLabAlertProvider,
    GitLabConfig,
    IncidentIOAlertProvider,
    IncidentIOConfig,
    PagerDutyAlertProvider,
    PagerDutyConfig,
    SlackConfig,
    TelegramConfig,
)
from watchpost.alerting.providers.alertmanager import URLsNotSetError
from watchpost.alerting.providers.custom import URLNotSetError as CustomURLNotSetError
from watchpost.alerting.providers.gitlab import AuthorizationKeyNotSetError, InvalidWebhookURLError
from watchpost.alerting.providers.incidentio import (
    REST_API_URL,
    AuthTokenNotSetError,
    URLNotSetError as IncidentIOURLNotSetError,
)
from watchpost.alerting.providers.pagerduty import IntegrationKeyNotSetError
from watchpost.alerting.providers.slack import WebhookURLNotSetError
from watchpost.alerting.providers.telegram import API_URL, IDNotSetError, TokenNotSetError
from pydantic import ValidationError


class TestPagerDutyConfig:
    """Test PagerDuty configuration."""

    def test_valid_integration_key(self):
        """Test that a 32 character key validates."""
        PagerDutyConfig(integration_key="a" * 32).validate_config()

    @pytest.mark.parametrize("key", ["", "a" * 31, "a" * 33])
    def test_invalid_integration_key(self, key):
        """Test that keys of the wrong length are rejected."""
        with pytest.raises(IntegrationKeyNotSetError):
            PagerDutyConfig(integration_key=key).validate_config()

    def test_group_override(self):
        """Test that a group can route to another service."""
        provider = PagerDutyAlertProvider.from_dict({
            "integration-key": "a" * 32,
            "overrides": [{"group": "core", "integration-key": "b" * 32}],
        })

        config = provider.get_config("core", Alert(type=AlertType.PAGERDUTY))
        assert config.integration_key == "b" * 32

    def test_generates_own_resolve_key(self):
        """Test that PagerDuty does not need a key up front."""
        assert PagerDutyAlertProvider.requires_resolve_key is False


class TestAlertmanagerConfig:
    """Test Alertmanager configuration."""

    def test_defaults(self):
        """Test default severity and empty extras."""
        config = AlertmanagerConfig(urls=["http://am:9093"])

        assert config.default_severity == "critical"
        assert config.extra_labels == {}
        config.validate_config()

    def test_urls_required(self):
        """Test that at least one URL is required."""
        with pytest.raises(URLsNotSetError):
            AlertmanagerConfig().validate_config()


class TestIncidentIOConfig:
    """Test incident.io configuration."""

    def test_valid(self):
        """Test a complete configuration."""
        IncidentIOConfig(url=REST_API_URL + "01ABC", auth_token="token").validate_config()

    def test_foreign_url(self):
        """Test that URLs outside of the alert events API are rejected."""
        with pytest.raises(IncidentIOURLNotSetError):
            IncidentIOConfig(url="https://example.com/hook", auth_token="token").validate_config()

    def test_auth_token_required(self):
        """Test that the auth token is required."""
        with pytest.raises(AuthTokenNotSetError):
            IncidentIOConfig(url=REST_API_URL + "01ABC").validate_config()

    def test_requires_resolve_key(self):
        """Test that incident.io correlates by caller supplied key."""
        assert IncidentIOAlertProvider.requires_resolve_key is True

    def test_metadata_merges(self):
        """Test that metadata is merged key by key."""
        provider = IncidentIOAlertProvider.from_dict({
            "url": REST_API_URL + "01ABC",
            "auth-token": "token",
            "metadata": {"team": "platform", "tier": 1},
        })
        alert = Alert(type=AlertType.INCIDENT_IO, provider_override={"metadata": {"team": "core"}})

        config = provider.get_config("", alert)
        assert config.metadata == {"team": "core", "tier": 1}


class TestGitLabConfig:
    """Test GitLab configuration."""

    def test_defaults(self):
        """Test default severity and monitoring tool."""
        config = GitLabConfig(webhook_url="https://gitlab.example.com/alerts", authorization_key="key")

        assert config.severity == "critical"
        assert config.monitoring_tool == "watchpost"
        config.validate_config()

    def test_webhook_required(self):
        """Test that the webhook URL is required."""
        with pytest.raises(InvalidWebhookURLError):
            GitLabConfig(authorization_key="key").validate_config()

    def test_authorization_key_required(self):
        """Test that the authorization key is required."""
        with pytest.raises(AuthorizationKeyNotSetError):
            GitLabConfig(webhook_url="https://gitlab.example.com/alerts").validate_config()

    def test_requires_resolve_key(self):
        """Test that GitLab correlates by caller supplied fingerprint."""
        assert GitLabAlertProvider.requires_resolve_key is True


class TestWebhookConfigs:
    """Test Slack, Telegram and custom configurations."""

    def test_slack_webhook_required(self):
        """Test that Slack needs a webhook URL."""
        SlackConfig(webhook_url="https://hooks.slack.com/services/x").validate_config()
        with pytest.raises(WebhookURLNotSetError):
            SlackConfig().validate_config()

    def test_telegram_required_fields(self):
        """Test that Telegram needs a token and a chat id."""
        with pytest.raises(TokenNotSetError):
            TelegramConfig(id="123").validate_config()
        with pytest.raises(IDNotSetError):
            TelegramConfig(token="abc").validate_config()

    def test_telegram_api_url_default(self):
        """Test the default Bot API URL."""
        assert TelegramConfig().api_url == API_URL

    def test_telegram_numeric_id_from_yaml(self):
        """Test that a chat id written as a YAML number loads as a string."""
        config = AlertingConfig.from_yaml("alerting:\n  telegram:\n    token: abc\n    id: 123456789\n")

        telegram = config.get_provider(AlertType.TELEGRAM)
        assert telegram.default_config.id == "123456789"
        telegram.validate()

    def test_custom_numeric_header_value(self):
        """Test that numeric header values are accepted."""
        provider = CustomAlertProvider.from_dict({
            "url": "https://hooks.example.com/alert",
            "headers": {"X-Priority": 5},
        })

        assert provider.default_config.headers == {"X-Priority": "5"}

    def test_custom_url_required(self):
        """Test that the custom provider needs a URL."""
        with pytest.raises(CustomURLNotSetError):
            CustomConfig(method="POST").validate_config()

    def test_custom_placeholders(self):
        """Test parsing of nested placeholder maps."""
        config = CustomConfig.model_validate({
            "url": "https://hooks.example.com/[ALERT_TRIGGERED_OR_RESOLVED]",
            "placeholders": {"ALERT_TRIGGERED_OR_RESOLVED": {"TRIGGERED": "fire", "RESOLVED": "ok"}},
        })

        assert config.placeholders["ALERT_TRIGGERED_OR_RESOLVED"]["RESOLVED"] == "ok"


class TestClientConfig:
    """Test HTTP client configuration."""

    def test_defaults(self):
        """Test default client settings."""
        client = ClientConfig()

        assert client.insecure is False
        assert client.ignore_redirect is False
        assert client.timeout == 10.0
        assert client.dns_resolver is None

    def test_dash_case_keys(self):
        """Test that client settings use dash-case keys."""
        client = ClientConfig.model_validate({"ignore-redirect": True, "dns-resolver": "udp://8.8.8.8:53"})

        assert client.ignore_redirect is True
        assert client.dns_resolver == "udp://8.8.8.8:53"

    def test_timeout_must_be_positive(self):
        """Test that the timeout must be positive."""
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)
