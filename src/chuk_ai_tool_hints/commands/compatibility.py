# chuk_ai_tool_hints/commands/compatibility.py
"""
Platform compatibility check for shell commands.

Catches the classic cross-platform mistake (``ls`` on cmd.exe, ``dir`` in
bash) before the command runs, and names the command to use instead.
"""

from __future__ import annotations

from chuk_ai_tool_hints.commands.constants import FAMILY_COMMANDS, TRANSLATIONS
from chuk_ai_tool_hints.models.context import CompatibilityVerdict
from chuk_ai_tool_hints.models.enums import CommandFamily
from chuk_ai_tool_hints.models.environment import EnvironmentDescriptor


def leading_token(command_line: str) -> str:
    """First whitespace-delimited word, lowercased, without a ``.exe`` suffix."""
    parts = command_line.split(maxsplit=1) if command_line else []
    if not parts:
        return ""
    token = parts[0].lower()
    if token.endswith(".exe") and len(token) > 4:
        token = token[:-4]
    return token


class PlatformCompatibilityClassifier:
    """Pure lookup against the static command tables; never raises."""

    def __init__(self, environment: EnvironmentDescriptor) -> None:
        self.environment = environment

    @property
    def family(self) -> CommandFamily:
        return self.environment.command_family

    @property
    def foreign_family(self) -> CommandFamily:
        if self.family == CommandFamily.WINDOWS:
            return CommandFamily.POSIX
        return CommandFamily.WINDOWS

    def classify(self, command_line: str) -> CompatibilityVerdict:
        token = leading_token(command_line)
        if not token:
            return CompatibilityVerdict(compatible=True)

        foreign = self.foreign_family
        if token in FAMILY_COMMANDS[self.family] or token not in FAMILY_COMMANDS[foreign]:
            return CompatibilityVerdict(compatible=True)

        suggestion = TRANSLATIONS[foreign].get(token)
        if suggestion is None:
            suggestion = f"{self.family.display_name} equivalent for {token}"
        return CompatibilityVerdict(compatible=False, suggestion=suggestion)
