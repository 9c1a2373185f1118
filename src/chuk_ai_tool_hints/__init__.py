# chuk_ai_tool_hints/__init__.py
"""
Command and tool usage hints for AI coding assistants.

This package provides:
- BoundedTTLLedger: capped, time-expiring record store
- Platform compatibility checks for shell commands
- Learning which commands succeed in the current environment
- Task classification (category + keywords)
- Tool usage tracking and relevance ranking
- Hint formatting for context injection

Usage:
    from chuk_ai_tool_hints import UsageHintsManager

    hints = UsageHintsManager.create()

    # Before running a command
    verdict = hints.classify_compatibility("ls -la")
    if not verdict.compatible:
        print(f"use {verdict.suggestion} instead")

    # After it succeeded
    hints.record_command_success("git status")

    # Tool selection
    context = hints.classify_task("download the csv and parse it")
    ranking = hints.rank_tools(providers, context)
    text = hints.format_tool_hints(ranking)
"""

from chuk_ai_tool_hints.commands import (
    CommandOutcomeTracker,
    PlatformCompatibilityClassifier,
    looks_successful,
)
from chuk_ai_tool_hints.formatter import HintFormatter, HintFormatterConfig
from chuk_ai_tool_hints.ledger import BoundedTTLLedger, LedgerConfig
from chuk_ai_tool_hints.manager import HintsConfig, UsageHintsManager
from chuk_ai_tool_hints.models import (
    CommandFamily,
    CommandStats,
    CompatibilityVerdict,
    EnvironmentDescriptor,
    LedgerStats,
    OSFamily,
    OutcomeRecord,
    ProviderStatus,
    RankedTool,
    RankingResult,
    ShellKind,
    TaskCategory,
    TaskContext,
    ToolDescriptor,
    ToolProvider,
    ToolRef,
    ToolStats,
    ToolStatsEntry,
    ToolUsageRecord,
    current_environment,
    detect_environment,
)
from chuk_ai_tool_hints.tools import (
    RankerWeights,
    RelevanceRanker,
    TaskContextClassifier,
    ToolUsageTracker,
)

__all__ = [
    # Facade
    "UsageHintsManager",
    "HintsConfig",
    # Ledger
    "BoundedTTLLedger",
    "LedgerConfig",
    # Commands
    "PlatformCompatibilityClassifier",
    "CommandOutcomeTracker",
    "looks_successful",
    # Tools
    "TaskContextClassifier",
    "ToolUsageTracker",
    "RelevanceRanker",
    "RankerWeights",
    # Formatter
    "HintFormatter",
    "HintFormatterConfig",
    # Models
    "CommandFamily",
    "CommandStats",
    "CompatibilityVerdict",
    "EnvironmentDescriptor",
    "LedgerStats",
    "OSFamily",
    "OutcomeRecord",
    "ProviderStatus",
    "RankedTool",
    "RankingResult",
    "ShellKind",
    "TaskCategory",
    "TaskContext",
    "ToolDescriptor",
    "ToolProvider",
    "ToolRef",
    "ToolStats",
    "ToolStatsEntry",
    "ToolUsageRecord",
    "current_environment",
    "detect_environment",
]
