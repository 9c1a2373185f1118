# chuk_ai_tool_hints/models/__init__.py
from chuk_ai_tool_hints.models.context import (
    MAX_KEYWORDS,
    CompatibilityVerdict,
    TaskContext,
)
from chuk_ai_tool_hints.models.enums import (
    CommandFamily,
    OSFamily,
    ProviderStatus,
    ShellKind,
    TaskCategory,
)
from chuk_ai_tool_hints.models.environment import (
    EnvironmentDescriptor,
    current_environment,
    detect_environment,
)
from chuk_ai_tool_hints.models.records import OutcomeRecord, ToolUsageRecord
from chuk_ai_tool_hints.models.stats import (
    CommandStats,
    LedgerStats,
    ToolStats,
    ToolStatsEntry,
)
from chuk_ai_tool_hints.models.tools import (
    RankedTool,
    RankingResult,
    ToolDescriptor,
    ToolProvider,
    ToolRef,
)

__all__ = [
    # Enums
    "CommandFamily",
    "OSFamily",
    "ProviderStatus",
    "ShellKind",
    "TaskCategory",
    # Environment
    "EnvironmentDescriptor",
    "current_environment",
    "detect_environment",
    # Records
    "OutcomeRecord",
    "ToolUsageRecord",
    # Context
    "MAX_KEYWORDS",
    "CompatibilityVerdict",
    "TaskContext",
    # Tools
    "RankedTool",
    "RankingResult",
    "ToolDescriptor",
    "ToolProvider",
    "ToolRef",
    # Stats
    "CommandStats",
    "LedgerStats",
    "ToolStats",
    "ToolStatsEntry",
]
