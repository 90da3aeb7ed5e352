"""Unit tests for alert state commits and resolve keys."""

from watchpost.alerting import (
    Alert,
    AlertState,
    AlertType,
    commit_resolve,
    commit_trigger,
    generate_resolve_key,
    get_state,
    prepare_trigger,
)


class TestResolveKey:
    """Test resolve key generation."""

    def setup_method(self):
        """Set up test fixture."""
        self.alert = Alert(type=AlertType.INCIDENT_IO, description="db down")

    def test_key_is_sha256_hex(self):
        """Test that keys are hex encoded SHA-256 digests."""
        key = generate_resolve_key("core_db", self.alert, salt="fixed")

        assert len(key) == 64
        int(key, 16)

    def test_key_is_deterministic_for_same_salt(self):
        """Test that the same inputs produce the same key."""
        assert generate_resolve_key("core_db", self.alert, salt="s") == \
            generate_resolve_key("core_db", self.alert, salt="s")

    def test_key_differs_per_endpoint_and_salt(self):
        """Test that endpoints and incidents do not share keys."""
        base = generate_resolve_key("core_db", self.alert, salt="s")

        assert generate_resolve_key("core_cache", self.alert, salt="s") != base
        assert generate_resolve_key("core_db", self.alert, salt="t") != base

    def test_default_salt_is_fresh(self):
        """Test that keys generated without salt are not empty."""
        assert generate_resolve_key("core_db", self.alert)


class TestPrepareTrigger:
    """Test resolve key assignment before a trigger send."""

    def test_generates_key_when_required(self):
        """Test that a key is generated for providers that need one."""
        alert = Alert(type=AlertType.INCIDENT_IO)
        prepare_trigger(alert, "core_db", requires_resolve_key=True)

        assert len(alert.resolve_key) == 64

    def test_keeps_existing_key(self):
        """Test that a retry after a failed send reuses its key."""
        alert = Alert(type=AlertType.INCIDENT_IO)
        alert.resolve_key = "previous"
        prepare_trigger(alert, "core_db", requires_resolve_key=True)

        assert alert.resolve_key == "previous"

    def test_no_key_when_not_required(self):
        """Test that providers generating their own key get none."""
        alert = Alert(type=AlertType.PAGERDUTY)
        prepare_trigger(alert, "core_db", requires_resolve_key=False)

        assert alert.resolve_key == ''


class TestCommits:
    """Test state transitions after confirmed sends."""

    def test_commit_trigger(self):
        """Test that a trigger commit activates the alert."""
        alert = Alert(type=AlertType.PAGERDUTY)
        assert get_state(alert) is AlertState.IDLE

        commit_trigger(alert, "dedup-123")

        assert get_state(alert) is AlertState.ACTIVE
        assert alert.triggered is True
        assert alert.resolve_key == "dedup-123"

    def test_commit_trigger_without_returned_key_keeps_generated_one(self):
        """Test that a generated key survives when the sender returns none."""
        alert = Alert(type=AlertType.GITLAB)
        alert.resolve_key = "generated"

        commit_trigger(alert, None)

        assert alert.resolve_key == "generated"

    def test_commit_resolve_clears_key_when_sending_on_resolved(self):
        """Test that a resolved incident forgets its key."""
        alert = Alert(type=AlertType.PAGERDUTY, send_on_resolved=True)
        commit_trigger(alert, "dedup-123")

        commit_resolve(alert)

        assert get_state(alert) is AlertState.IDLE
        assert alert.resolve_key == ''

    def test_commit_resolve_keeps_key_without_send_on_resolved(self):
        """Test that the key is kept when no resolved notification is sent."""
        alert = Alert(type=AlertType.PAGERDUTY)
        commit_trigger(alert, "dedup-123")

        commit_resolve(alert)

        assert alert.triggered is False
        assert alert.resolve_key == "dedup-123"

    def test_runtime_state_is_not_serialized(self):
        """Test that runtime fields stay out of dumped configuration."""
        alert = Alert(type=AlertType.PAGERDUTY)
        commit_trigger(alert, "dedup-123")

        dumped = alert.model_dump(by_alias=True)
        assert 'triggered' not in dumped
        assert 'resolve-key' not in dumped
