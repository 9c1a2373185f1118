# chuk_ai_tool_hints/commands/constants.py
"""Static command vocabulary for the POSIX and Windows families.

The tables are closed and hand-maintained; nothing here is learned.
"""

from __future__ import annotations

import re

from chuk_ai_tool_hints.models.enums import CommandFamily

# POSIX command -> closest Windows (cmd) equivalent
POSIX_TO_WINDOWS: dict[str, str] = {
    "ls": "dir",
    "cat": "type",
    "cp": "copy",
    "mv": "move",
    "rm": "del",
    "grep": "findstr",
    "ps": "tasklist",
    "kill": "taskkill",
    "clear": "cls",
    "which": "where",
    "ifconfig": "ipconfig",
    "touch": "type nul >",
}

# Windows command -> closest POSIX equivalent
WINDOWS_TO_POSIX: dict[str, str] = {
    "dir": "ls",
    "type": "cat",
    "copy": "cp",
    "move": "mv",
    "del": "rm",
    "erase": "rm",
    "findstr": "grep",
    "tasklist": "ps",
    "taskkill": "kill",
    "cls": "clear",
    "where": "which",
    "ipconfig": "ifconfig",
    "xcopy": "cp -r",
}

# Members of each family with no one-word counterpart
POSIX_ONLY: frozenset[str] = frozenset(
    {
        "chmod",
        "chown",
        "sed",
        "awk",
        "head",
        "tail",
        "sudo",
        "apt",
        "apt-get",
        "ln",
        "df",
        "du",
        "man",
        "export",
        "source",
        "pkill",
        "killall",
        "uname",
    }
)

WINDOWS_ONLY: frozenset[str] = frozenset(
    {
        "robocopy",
        "icacls",
        "attrib",
        "systeminfo",
        "netsh",
        "reg",
        "sc",
        "wmic",
        "ver",
        "setx",
    }
)

FAMILY_COMMANDS: dict[CommandFamily, frozenset[str]] = {
    CommandFamily.POSIX: frozenset(POSIX_TO_WINDOWS) | POSIX_ONLY,
    CommandFamily.WINDOWS: frozenset(WINDOWS_TO_POSIX) | WINDOWS_ONLY,
}

# Translation table used when a command from `family` runs elsewhere
TRANSLATIONS: dict[CommandFamily, dict[str, str]] = {
    CommandFamily.POSIX: POSIX_TO_WINDOWS,
    CommandFamily.WINDOWS: WINDOWS_TO_POSIX,
}

# Output that means the shell never ran the command
COMMAND_FAILURE_PATTERN = re.compile(
    r"command not found"
    r"|is not recognized as an internal or external command"
    r"|is not recognized as the name of a cmdlet"
    r"|no such file or directory"
    r"|permission denied",
    re.IGNORECASE,
)
