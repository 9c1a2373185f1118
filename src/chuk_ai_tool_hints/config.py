# chuk_ai_tool_hints/config.py
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


# Command ledger: proven shell commands per environment family
COMMAND_LEDGER_MAX_ENTRIES = _env_int("CHUK_HINTS_COMMAND_MAX_ENTRIES", 50)
COMMAND_LEDGER_TTL_SECONDS = _env_int("CHUK_HINTS_COMMAND_TTL_SECONDS", 24 * 60 * 60)

# Tool ledger: per (provider, tool) usage history
TOOL_LEDGER_MAX_ENTRIES = _env_int("CHUK_HINTS_TOOL_MAX_ENTRIES", 200)
TOOL_LEDGER_TTL_SECONDS = _env_int("CHUK_HINTS_TOOL_TTL_SECONDS", 7 * 24 * 60 * 60)

# Ranking
DEFAULT_RANK_LIMIT = _env_int("CHUK_HINTS_RANK_LIMIT", 5)
SCHEMA_SCORE_THRESHOLD = _env_int("CHUK_HINTS_SCHEMA_SCORE_THRESHOLD", 5)

# Environment overrides (unset = detect from the running process)
OS_FAMILY_OVERRIDE = os.getenv("CHUK_HINTS_OS_FAMILY")
SHELL_OVERRIDE = os.getenv("CHUK_HINTS_SHELL")
