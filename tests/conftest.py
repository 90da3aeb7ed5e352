"""Shared test fixtures and configuration for watchpost tests."""

import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from watchpost.alerting import Alert, AlertSender, AlertType, DispatchError
from watchpost.alerting.providers import EmailAlertProvider
from watchpost.endpoint import ConditionResult, Endpoint, Result


class RecordingSender(AlertSender):
    """Sender that records calls and can be told to fail."""

    def __init__(self, returned_key: Optional[str] = None):
        self.calls: List[dict] = []
        self.should_fail = False
        self.returned_key = returned_key

    async def send(self, endpoint, alert, result, resolved, config):
        self.calls.append({
            "endpoint": endpoint.key(),
            "resolved": resolved,
            "resolve_key": alert.resolve_key,
            "config": config,
        })
        if self.should_fail:
            raise DispatchError("provider unavailable")
        if resolved:
            return None
        return self.returned_key


@pytest.fixture
def recording_sender():
    """Sender recording every call."""
    return RecordingSender()


@pytest.fixture
def failed_result():
    """Result of a failing check."""
    return Result(
        success=False,
        condition_results=[
            ConditionResult(condition="[STATUS] == 200", success=False),
            ConditionResult(condition="[RESPONSE_TIME] < 500", success=True),
        ],
        errors=["unexpected status code 503"],
        hostname="example.org",
        http_status=503,
    )


@pytest.fixture
def successful_result():
    """Result of a passing check."""
    return Result(
        success=True,
        condition_results=[
            ConditionResult(condition="[STATUS] == 200", success=True),
            ConditionResult(condition="[RESPONSE_TIME] < 500", success=True),
        ],
        hostname="example.org",
        http_status=200,
    )


@pytest.fixture
def email_provider():
    """Email provider with one group override."""
    return EmailAlertProvider.from_dict({
        "from": "monitoring@example.com",
        "host": "smtp.example.com",
        "port": 587,
        "to": "a@x.com",
        "overrides": [
            {"group": "g", "to": "b@x.com"},
        ],
    })


@pytest.fixture
def email_alert():
    """Validated email alert with thresholds 3/2."""
    alert = Alert(type=AlertType.EMAIL, description="api is down", send_on_resolved=True)
    alert.validate_and_set_defaults()
    return alert


@pytest.fixture
def endpoint(email_alert):
    """Endpoint in group g with a single email alert."""
    return Endpoint(name="api", group="g", url="https://example.org/health", alerts=[email_alert])


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
