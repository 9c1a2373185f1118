# chuk_ai_tool_hints/tools/__init__.py
"""
Tool selection hints.

- TaskContextClassifier: task text -> category + keywords
- ToolUsageTracker: success/failure history per (provider, tool)
- RelevanceRanker: shortlist of tools for a task
"""

from chuk_ai_tool_hints.tools.context import TaskContextClassifier
from chuk_ai_tool_hints.tools.ranker import RankerWeights, RelevanceRanker
from chuk_ai_tool_hints.tools.tracker import ToolUsageTracker

__all__ = [
    "TaskContextClassifier",
    "ToolUsageTracker",
    "RelevanceRanker",
    "RankerWeights",
]
