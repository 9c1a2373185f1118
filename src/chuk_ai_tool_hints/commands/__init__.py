# chuk_ai_tool_hints/commands/__init__.py
"""
Shell command hints.

- PlatformCompatibilityClassifier: flags commands from the wrong OS family
- CommandOutcomeTracker: learns which commands succeed in this environment
"""

from chuk_ai_tool_hints.commands.compatibility import (
    PlatformCompatibilityClassifier,
    leading_token,
)
from chuk_ai_tool_hints.commands.tracker import (
    CommandOutcomeTracker,
    looks_successful,
)

__all__ = [
    "PlatformCompatibilityClassifier",
    "CommandOutcomeTracker",
    "leading_token",
    "looks_successful",
]
