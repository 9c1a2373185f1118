# chuk_ai_tool_hints/tools/tracker.py
"""
Tool Usage Tracker - per (provider, tool) success/failure history.

Handles:
- Counting successes and failures
- Tracking last use and a simple latency average
- Remembering which task categories a tool has been useful for
"""

from __future__ import annotations

import logging
from datetime import datetime

from chuk_ai_tool_hints.ledger import BoundedTTLLedger, Clock, LedgerConfig
from chuk_ai_tool_hints.models.context import TaskContext
from chuk_ai_tool_hints.models.enums import TaskCategory
from chuk_ai_tool_hints.models.records import ToolUsageRecord
from chuk_ai_tool_hints.models.stats import ToolStats, ToolStatsEntry

log = logging.getLogger(__name__)

ToolKey = tuple[str, str]  # (provider_id, tool_name)

STATS_TOP_N = 10

_CATEGORY_ORDER = {category: index for index, category in enumerate(TaskCategory)}


class ToolUsageTracker:
    """Records tool outcomes in a bounded, time-expiring ledger."""

    def __init__(self, config: LedgerConfig, clock: Clock | None = None) -> None:
        self.ledger: BoundedTTLLedger[ToolKey, ToolUsageRecord] = BoundedTTLLedger(config, clock=clock)

    def now(self) -> datetime:
        return self.ledger.now()

    def _get_or_create(self, provider_id: str, tool_name: str) -> ToolUsageRecord:
        record = self.ledger.get((provider_id, tool_name))
        if record is None:
            record = ToolUsageRecord(
                provider_id=provider_id,
                tool_name=tool_name,
                last_used_at=self.now(),
            )
        return record

    # --- Recording ---

    def record_success(
        self,
        provider_id: str,
        tool_name: str,
        context: TaskContext,
        latency_ms: float | None = None,
    ) -> ToolUsageRecord:
        """
        Record a successful tool invocation.

        Args:
            provider_id: Provider that served the tool
            tool_name: Name of the tool
            context: Task context the tool was used for
            latency_ms: How long the call took, if known

        Returns:
            The updated record
        """
        record = self._get_or_create(provider_id, tool_name)
        record.record_success(context.category, used_at=self.now(), latency_ms=latency_ms)
        self.ledger.set((provider_id, tool_name), record)

        log.debug(f"Tool success: {record.format_compact()} [{context.category.value}]")
        return record

    def record_failure(self, provider_id: str, tool_name: str) -> ToolUsageRecord:
        """Record a failed tool invocation. Only the failure count changes."""
        record = self._get_or_create(provider_id, tool_name)
        record.record_failure()
        self.ledger.set((provider_id, tool_name), record)

        log.debug(f"Tool failure: {record.format_compact()}")
        return record

    # --- Retrieval ---

    def get(self, provider_id: str, tool_name: str) -> ToolUsageRecord | None:
        return self.ledger.get((provider_id, tool_name))

    def records(self) -> list[ToolUsageRecord]:
        """All live records, oldest write first."""
        return [record for _, record in self.ledger.items()]

    def stats(self) -> ToolStats:
        records = self.records()
        ranked = sorted(records, key=lambda record: record.success_rate, reverse=True)

        return ToolStats(
            total=len(records),
            active=sum(1 for record in records if record.success_count > 0),
            top=[
                ToolStatsEntry(
                    provider_id=record.provider_id,
                    tool_name=record.tool_name,
                    success_count=record.success_count,
                    failure_count=record.failure_count,
                    success_rate=record.success_rate,
                    average_latency_ms=record.average_latency_ms,
                    categories=sorted(record.observed_categories, key=_CATEGORY_ORDER.__getitem__),
                )
                for record in ranked[:STATS_TOP_N]
            ],
        )

    def reset(self) -> None:
        self.ledger.clear()
