# chuk_ai_tool_hints/models/environment.py
"""
Environment descriptor and detection.

The descriptor is derived once per process and never mutated. Hosts that
know better (a remote shell, a container) pass their own descriptor to the
manager instead of relying on detection.
"""

from __future__ import annotations

import logging
import os
import sys
from functools import lru_cache

from pydantic import BaseModel

from chuk_ai_tool_hints import config
from chuk_ai_tool_hints.models.enums import CommandFamily, OSFamily, ShellKind

log = logging.getLogger(__name__)

_POSIX_SHELL_NAMES = ("sh", "bash", "zsh", "fish", "dash", "ksh")


class EnvironmentDescriptor(BaseModel):
    """OS family plus shell kind of the environment commands run in."""

    os_family: OSFamily
    shell: ShellKind

    model_config = {"frozen": True}

    @property
    def command_family(self) -> CommandFamily:
        """Which command vocabulary works here.

        A POSIX shell speaks POSIX commands even on Windows (git-bash, WSL);
        cmd and PowerShell on Windows speak Windows commands.
        """
        if self.shell == ShellKind.POSIX:
            return CommandFamily.POSIX
        if self.os_family == OSFamily.WINDOWS:
            return CommandFamily.WINDOWS
        return CommandFamily.POSIX

    @property
    def is_windows(self) -> bool:
        return self.command_family == CommandFamily.WINDOWS

    def describe(self) -> str:
        return f"{self.os_family.value} ({self.shell.value})"

    @classmethod
    def windows_cmd(cls) -> EnvironmentDescriptor:
        return cls(os_family=OSFamily.WINDOWS, shell=ShellKind.CMD)

    @classmethod
    def linux_bash(cls) -> EnvironmentDescriptor:
        return cls(os_family=OSFamily.LINUX, shell=ShellKind.POSIX)


def _detect_os_family(platform: str) -> OSFamily:
    if platform.startswith(("win", "cygwin", "msys")):
        return OSFamily.WINDOWS
    if platform == "darwin":
        return OSFamily.MAC
    return OSFamily.LINUX


def _detect_shell(os_family: OSFamily, environ: dict[str, str]) -> ShellKind:
    shell_path = environ.get("SHELL", "")
    if shell_path:
        # SHELL may hold a Windows path even when read on another platform
        name = shell_path.replace("\\", "/").rsplit("/", 1)[-1].lower()
        if name.endswith(".exe"):
            name = name[:-4]
        if name in _POSIX_SHELL_NAMES:
            return ShellKind.POSIX
        if name in ("pwsh", "powershell"):
            return ShellKind.POWERSHELL

    if os_family != OSFamily.WINDOWS:
        return ShellKind.POSIX

    # PSModulePath is set for every Windows process; only a PowerShell host
    # adds the per-user Documents entry.
    ps_path = environ.get("PSModulePath", "")
    if "documents" in ps_path.lower() and "powershell" in ps_path.lower():
        return ShellKind.POWERSHELL
    return ShellKind.CMD


def _parse_override(enum_cls, raw: str | None):
    if not raw:
        return None
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        log.warning(f"Ignoring unknown {enum_cls.__name__} override: {raw!r}")
        return None


def detect_environment(
    platform: str | None = None,
    environ: dict[str, str] | None = None,
) -> EnvironmentDescriptor:
    """
    Detect the environment of the running process.

    Args:
        platform: Value to use instead of ``sys.platform``
        environ: Mapping to use instead of ``os.environ``

    Returns:
        EnvironmentDescriptor honouring the CHUK_HINTS_OS_FAMILY and
        CHUK_HINTS_SHELL overrides when they are set
    """
    platform = platform if platform is not None else sys.platform
    environ = dict(environ) if environ is not None else dict(os.environ)

    os_family = _parse_override(OSFamily, config.OS_FAMILY_OVERRIDE) or _detect_os_family(platform)
    shell = _parse_override(ShellKind, config.SHELL_OVERRIDE) or _detect_shell(os_family, environ)

    return EnvironmentDescriptor(os_family=os_family, shell=shell)


@lru_cache(maxsize=1)
def current_environment() -> EnvironmentDescriptor:
    """Environment of this process, detected once."""
    env = detect_environment()
    log.info(f"Detected command environment: {env.describe()}")
    return env
