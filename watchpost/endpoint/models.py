"""Endpoint identity and check results consumed by the alerting core."""

from datetime import datetime, timezone
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..alerting.alert import Alert
from ..alerting.utils import to_dash_case
from .key import convert_group_and_name_to_key


class ConditionResult(BaseModel):
    """Outcome of a single condition of a check."""

    model_config = ConfigDict(frozen=True)

    condition: str = Field(description="Condition as written in the configuration")
    success: bool = Field(description="Whether the condition was met")


class Result(BaseModel):
    """Immutable snapshot of one health check."""

    model_config = ConfigDict(frozen=True)

    success: bool = Field(description="Whether every condition was met")

    condition_results: Tuple[ConditionResult, ...] = Field(
        default=(),
        description="Condition outcomes, in configuration order"
    )

    errors: Tuple[str, ...] = Field(
        default=(),
        description="Errors encountered while checking"
    )

    hostname: str = Field(default='', description="Hostname of the checked target")
    ip: str = Field(default='', description="Resolved IP of the checked target")
    http_status: int = Field(default=0, description="HTTP status code, if any")

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the check was performed"
    )


class Endpoint(BaseModel):
    """A monitored endpoint, as far as alerting is concerned.

    The consecutive counters are owned by the endpoint's evaluation loop. Only
    one evaluation per endpoint may be in flight at a time.
    """

    model_config = ConfigDict(
        alias_generator=to_dash_case,
        populate_by_name=True,
    )

    name: str = Field(description="Endpoint name")
    group: str = Field(default='', description="Group used to select provider overrides")
    url: str = Field(default='', description="Checked URL")

    alerts: List[Alert] = Field(
        default_factory=list,
        description="Alerts declared on the endpoint"
    )

    number_of_failures_in_a_row: int = Field(default=0, exclude=True)
    number_of_successes_in_a_row: int = Field(default=0, exclude=True)

    def display_name(self) -> str:
        """Get ``group/name``, or just the name when there is no group."""
        if self.group:
            return f"{self.group}/{self.name}"
        return self.name

    def key(self) -> str:
        """Get the unique key of the endpoint."""
        return convert_group_and_name_to_key(self.group, self.name)

    def record_result(self, result: Result) -> None:
        """Update the consecutive counters with a new check result."""
        if result.success:
            self.number_of_successes_in_a_row += 1
            self.number_of_failures_in_a_row = 0
        else:
            self.number_of_failures_in_a_row += 1
            self.number_of_successes_in_a_row = 0
