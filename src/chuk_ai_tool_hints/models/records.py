# chuk_ai_tool_hints/models/records.py
"""
Ledger records.

- OutcomeRecord: how often a command succeeded in one environment family
- ToolUsageRecord: success/failure counts, timing and task categories for
  one (provider, tool) pair
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from chuk_ai_tool_hints.models.enums import TaskCategory


class OutcomeRecord(BaseModel):
    """Successful runs of one command in one environment family.

    Absence of a record means "no data", never "failed".
    """

    environment_key: str
    action_key: str
    success_count: int = Field(default=0, ge=0)

    model_config = {"frozen": False}

    def increment(self) -> int:
        self.success_count += 1
        return self.success_count

    def format_compact(self) -> str:
        return f"{self.action_key} ({self.success_count}x)"


class ToolUsageRecord(BaseModel):
    """Aggregated usage of a single tool exposed by a provider."""

    provider_id: str
    tool_name: str

    success_count: int = Field(default=0, ge=0)
    failure_count: int = Field(default=0, ge=0)

    last_used_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    average_latency_ms: float | None = None

    observed_categories: set[TaskCategory] = Field(default_factory=set)

    model_config = {"frozen": False}

    @property
    def total_calls(self) -> int:
        return self.success_count + self.failure_count

    @property
    def success_rate(self) -> float:
        """Successes over all observations, 0.0 when nothing was observed."""
        if self.total_calls == 0:
            return 0.0
        return self.success_count / self.total_calls

    def record_success(
        self,
        category: TaskCategory,
        used_at: datetime,
        latency_ms: float | None = None,
    ) -> None:
        self.success_count += 1
        self.last_used_at = used_at

        if latency_ms is not None:
            if self.average_latency_ms is None:
                self.average_latency_ms = float(latency_ms)
            else:
                # Two-point mean: the newest sample weighs as much as all history
                self.average_latency_ms = (self.average_latency_ms + latency_ms) / 2

        self.observed_categories.add(category)

    def record_failure(self) -> None:
        self.failure_count += 1

    def format_compact(self) -> str:
        return f"{self.provider_id}/{self.tool_name}: {self.success_rate:.0%} ({self.total_calls} calls)"
