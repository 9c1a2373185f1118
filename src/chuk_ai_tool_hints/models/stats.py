# chuk_ai_tool_hints/models/stats.py
"""Statistics models returned by the ledger and the trackers."""

from __future__ import annotations

from pydantic import Field

from chuk_ai_tool_hints.base_models import DictCompatModel
from chuk_ai_tool_hints.models.enums import TaskCategory


class LedgerStats(DictCompatModel):
    """Statistics for a BoundedTTLLedger."""

    size: int = Field(default=0, description="Live entries")
    max_size: int = Field(default=0, description="Capacity")
    utilization: float = Field(default=0.0, description="size / max_size (0-1)")
    hits: int = Field(default=0, description="Reads that returned a value")
    misses: int = Field(default=0, description="Reads of absent or expired keys")
    evictions: int = Field(default=0, description="Entries dropped for capacity")
    expirations: int = Field(default=0, description="Entries dropped for age")
    hit_rate: float = Field(default=0.0, description="hits / (hits + misses)")


class CommandStats(DictCompatModel):
    """Learned commands for the current environment family."""

    total: int = 0
    top: list[str] = Field(default_factory=list, description='Up to 5 "token (Nx)" strings')
    environment: str = ""


class ToolStatsEntry(DictCompatModel):
    """Usage summary of one tool."""

    provider_id: str
    tool_name: str
    success_count: int = 0
    failure_count: int = 0
    success_rate: float = 0.0
    average_latency_ms: float | None = None
    categories: list[TaskCategory] = Field(default_factory=list)


class ToolStats(DictCompatModel):
    """Tool usage across all providers."""

    total: int = 0
    active: int = Field(default=0, description="Tools with at least one success")
    top: list[ToolStatsEntry] = Field(default_factory=list, description="Top 10 by success rate")
