# chuk_ai_tool_hints/models/enums.py
"""Enums shared by the command and tool usage trackers."""

from enum import Enum


class OSFamily(str, Enum):
    """Operating-system family of the host process."""

    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"


class ShellKind(str, Enum):
    """Shell that will interpret commands."""

    POSIX = "posix"  # sh, bash, zsh, fish, git-bash, WSL
    CMD = "cmd"
    POWERSHELL = "powershell"


class CommandFamily(str, Enum):
    """Command vocabulary an environment understands.

    This is the partition key for learned commands.
    """

    WINDOWS = "windows"
    POSIX = "posix"

    @property
    def display_name(self) -> str:
        return "Windows" if self is CommandFamily.WINDOWS else "POSIX"


class TaskCategory(str, Enum):
    """Coarse classification of a user's task."""

    FILE_OPERATION = "file_operation"
    WEB_REQUEST = "web_request"
    DATA_PROCESSING = "data_processing"
    AUTOMATION = "automation"
    OTHER = "other"


class ProviderStatus(str, Enum):
    """Connectivity of a tool provider (e.g. an MCP server)."""

    CONNECTED = "connected"
    CONNECTING = "connecting"
    DISCONNECTED = "disconnected"
    ERROR = "error"
