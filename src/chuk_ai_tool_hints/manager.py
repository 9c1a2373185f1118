# chuk_ai_tool_hints/manager.py
"""
Usage Hints Manager - the host-facing entry point.

Owns one command ledger and one tool ledger (no module-level singletons), so
a host can keep one manager per process, per session or per test.

Handles:
- Platform checks before a command runs
- Learning from successful commands
- Task classification and tool ranking
- Learning from tool successes and failures
- Rendering hint blocks

Tracking calls are fire-and-forget: a failure inside the tracking path is
logged and absorbed, never raised into the command or tool call it observes.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, Field

from chuk_ai_tool_hints import config as hints_config
from chuk_ai_tool_hints.commands.compatibility import PlatformCompatibilityClassifier
from chuk_ai_tool_hints.commands.tracker import CommandOutcomeTracker
from chuk_ai_tool_hints.formatter import HintFormatter
from chuk_ai_tool_hints.ledger import Clock, LedgerConfig
from chuk_ai_tool_hints.models.context import CompatibilityVerdict, TaskContext
from chuk_ai_tool_hints.models.environment import EnvironmentDescriptor, current_environment
from chuk_ai_tool_hints.models.stats import CommandStats, ToolStats
from chuk_ai_tool_hints.models.tools import RankingResult, ToolProvider
from chuk_ai_tool_hints.tools.context import TaskContextClassifier
from chuk_ai_tool_hints.tools.ranker import RankerWeights, RelevanceRanker
from chuk_ai_tool_hints.tools.tracker import ToolUsageTracker

log = logging.getLogger(__name__)


class HintsConfig(BaseModel):
    """Per-manager configuration. Defaults come from the environment."""

    command_max_entries: int = Field(default=hints_config.COMMAND_LEDGER_MAX_ENTRIES, gt=0)
    command_ttl_seconds: int = Field(default=hints_config.COMMAND_LEDGER_TTL_SECONDS, gt=0)
    tool_max_entries: int = Field(default=hints_config.TOOL_LEDGER_MAX_ENTRIES, gt=0)
    tool_ttl_seconds: int = Field(default=hints_config.TOOL_LEDGER_TTL_SECONDS, gt=0)

    rank_limit: int = Field(default=hints_config.DEFAULT_RANK_LIMIT, ge=0)
    schema_score_threshold: float = Field(default=hints_config.SCHEMA_SCORE_THRESHOLD)
    weights: RankerWeights = Field(default_factory=RankerWeights)

    @property
    def command_ledger(self) -> LedgerConfig:
        return LedgerConfig(max_entries=self.command_max_entries, ttl=timedelta(seconds=self.command_ttl_seconds))

    @property
    def tool_ledger(self) -> LedgerConfig:
        return LedgerConfig(max_entries=self.tool_max_entries, ttl=timedelta(seconds=self.tool_ttl_seconds))


class UsageHintsManager(BaseModel):
    """
    Learns which commands and tools work, and ranks tools for a task.

    Usage:
        hints = UsageHintsManager.create()

        verdict = hints.classify_compatibility("ls -la")
        hints.record_command_success("git status")

        context = hints.classify_task("fetch the api docs")
        ranking = hints.rank_tools(providers, context)
        hints.record_tool_success("web", "fetch_url", context, latency_ms=120)
    """

    environment: EnvironmentDescriptor
    config: HintsConfig = Field(default_factory=HintsConfig)

    compatibility: PlatformCompatibilityClassifier
    command_tracker: CommandOutcomeTracker
    task_classifier: TaskContextClassifier = Field(default_factory=TaskContextClassifier)
    tool_tracker: ToolUsageTracker
    ranker: RelevanceRanker
    formatter: HintFormatter = Field(default_factory=HintFormatter)

    model_config = {"arbitrary_types_allowed": True}

    @classmethod
    def create(
        cls,
        environment: EnvironmentDescriptor | None = None,
        config: HintsConfig | None = None,
        clock: Clock | None = None,
        **kwargs: Any,
    ) -> UsageHintsManager:
        """
        Create a manager with fresh, empty ledgers.

        Args:
            environment: Where commands run (detected once per process if omitted)
            config: Ledger and ranking configuration
            clock: Time source shared by both ledgers (tests pass a fake)
            **kwargs: Overrides for remaining fields (e.g. formatter)
        """
        environment = environment or current_environment()
        config = config or HintsConfig()

        tool_tracker = ToolUsageTracker(config.tool_ledger, clock=clock)
        return cls(
            environment=environment,
            config=config,
            compatibility=PlatformCompatibilityClassifier(environment),
            command_tracker=CommandOutcomeTracker(environment, config.command_ledger, clock=clock),
            tool_tracker=tool_tracker,
            ranker=RelevanceRanker(
                tool_tracker,
                weights=config.weights,
                schema_threshold=config.schema_score_threshold,
            ),
            **kwargs,
        )

    # --- Platform / command ---

    def classify_compatibility(self, command: str) -> CompatibilityVerdict:
        return self.compatibility.classify(command)

    def record_command_success(self, command: str) -> None:
        """Count a command the host saw succeed. Never raises."""
        try:
            self.command_tracker.record_success(command)
        except Exception as e:
            log.warning(f"Failed to record command success for {command!r}: {e}")

    def top_successful_commands(self, limit: int = 5) -> list[str]:
        return self.command_tracker.top_successful(limit)

    def command_stats(self) -> CommandStats:
        return self.command_tracker.stats()

    # --- Task / tool ---

    def classify_task(self, text: str) -> TaskContext:
        return self.task_classifier.classify(text)

    def record_tool_success(
        self,
        provider_id: str,
        tool_name: str,
        context: TaskContext,
        latency_ms: float | None = None,
    ) -> None:
        """Record a successful tool call. Never raises."""
        try:
            self.tool_tracker.record_success(provider_id, tool_name, context, latency_ms=latency_ms)
        except Exception as e:
            log.warning(f"Failed to record tool success for {provider_id}/{tool_name}: {e}")

    def record_tool_failure(self, provider_id: str, tool_name: str) -> None:
        """Record a failed tool call. Never raises."""
        try:
            self.tool_tracker.record_failure(provider_id, tool_name)
        except Exception as e:
            log.warning(f"Failed to record tool failure for {provider_id}/{tool_name}: {e}")

    def rank_tools(
        self,
        providers: list[ToolProvider],
        context: TaskContext,
        limit: int | None = None,
    ) -> RankingResult:
        limit = self.config.rank_limit if limit is None else limit
        return self.ranker.rank(providers, context, limit=limit)

    def tool_stats(self) -> ToolStats:
        return self.tool_tracker.stats()

    # --- Formatting ---

    def format_command_hints(self, limit: int = 5) -> str:
        return self.formatter.format_command_hints(self.environment, self.top_successful_commands(limit))

    def format_tool_hints(self, ranking: RankingResult) -> str:
        return self.formatter.format_tool_hints(ranking)

    def reset(self) -> None:
        """Forget everything learned so far."""
        self.command_tracker.reset()
        self.tool_tracker.reset()
