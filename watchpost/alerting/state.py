"""Commit rules for an alert's runtime state.

An alert is either idle (``triggered`` is False) or active. It only moves
between the two after the dispatch boundary confirms a send:

- a failed trigger send leaves it idle, so the next check retries;
- a failed resolve send leaves it active, so a provider that keeps failing
  does not get flooded with resolved notifications by every healthy check.

The resolve key is only ever written here. Senders hand back the key the
remote API generated instead of writing it onto the alert themselves.
"""

import hashlib
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .alert import Alert


logger = logging.getLogger(__name__)


class AlertState(str, Enum):
    """Observable state of an alert."""
    IDLE = "idle"
    ACTIVE = "active"


def get_state(alert: Alert) -> AlertState:
    """Get the observable state of an alert."""
    return AlertState.ACTIVE if alert.triggered else AlertState.IDLE


def generate_resolve_key(endpoint_key: str, alert: Alert, salt: Optional[str] = None) -> str:
    """Generate a correlation id for an incident.

    Args:
        endpoint_key: Unique key of the endpoint the alert belongs to
        alert: Alert being triggered
        salt: Freshness salt; defaults to the current UTC time so that two
            incidents of the same alert never share a key

    Returns:
        Hex-encoded SHA-256 digest
    """
    if salt is None:
        salt = datetime.now(timezone.utc).isoformat()
    material = '\x1f'.join([endpoint_key, alert.type.value, alert.get_description(), salt])
    return hashlib.sha256(material.encode('utf-8')).hexdigest()


def prepare_trigger(alert: Alert, endpoint_key: str, requires_resolve_key: bool) -> None:
    """Assign a resolve key before a trigger send if the provider needs one.

    A key left over from a failed attempt is kept so the retry addresses the
    same incident.
    """
    if requires_resolve_key and not alert.resolve_key:
        alert.resolve_key = generate_resolve_key(endpoint_key, alert)
        logger.debug(f"Generated resolve key for {alert.type.value} alert of {endpoint_key}")


def commit_trigger(alert: Alert, resolve_key: Optional[str] = None) -> None:
    """Record a successful trigger send.

    Args:
        alert: Alert that was triggered
        resolve_key: Key returned by the provider, replacing any generated one
    """
    alert.triggered = True
    if resolve_key:
        alert.resolve_key = resolve_key


def commit_resolve(alert: Alert) -> None:
    """Record a successful resolve.

    The resolve key is only cleared when a resolved notification is part of
    the alert's lifecycle; otherwise it is kept for providers that still need
    it to close the incident.
    """
    alert.triggered = False
    if alert.is_sending_on_resolved():
        alert.resolve_key = ''
