# chuk_ai_tool_hints/commands/tracker.py
"""
Command Outcome Tracker - learns which shell commands work here.

Only successes are recorded. One success is an accident; a command becomes
a "proven" hint once it has succeeded at least twice within the retention
window of the ledger.
"""

from __future__ import annotations

import logging

from chuk_ai_tool_hints.commands.compatibility import leading_token
from chuk_ai_tool_hints.commands.constants import COMMAND_FAILURE_PATTERN
from chuk_ai_tool_hints.ledger import BoundedTTLLedger, Clock, LedgerConfig
from chuk_ai_tool_hints.models.environment import EnvironmentDescriptor
from chuk_ai_tool_hints.models.records import OutcomeRecord
from chuk_ai_tool_hints.models.stats import CommandStats

log = logging.getLogger(__name__)

CommandKey = tuple[str, str]  # (environment family, command token)

STATS_TOP_N = 5


def looks_successful(exit_code: int | None, output: str | None = "") -> bool:
    """
    Host-side rule for "did this command really work".

    A zero (or unknown) exit code is not enough: some shells print
    "command not found" and still exit 0 through wrappers.
    """
    if exit_code not in (None, 0):
        return False
    return not (output and COMMAND_FAILURE_PATTERN.search(output))


class CommandOutcomeTracker:
    """Counts successful commands per environment family."""

    def __init__(
        self,
        environment: EnvironmentDescriptor,
        config: LedgerConfig,
        clock: Clock | None = None,
    ) -> None:
        self.environment = environment
        self.ledger: BoundedTTLLedger[CommandKey, OutcomeRecord] = BoundedTTLLedger(config, clock=clock)

    @property
    def environment_key(self) -> str:
        return self.environment.command_family.value

    def record_success(self, command_line: str) -> OutcomeRecord | None:
        """
        Count one successful run of a command.

        Args:
            command_line: The full command line; only the leading token is kept

        Returns:
            The updated record, or None for a blank command
        """
        token = leading_token(command_line)
        if not token:
            return None

        key = (self.environment_key, token)
        record = self.ledger.get(key)
        if record is None:
            record = OutcomeRecord(environment_key=self.environment_key, action_key=token)

        record.increment()
        self.ledger.set(key, record)

        log.debug(f"Command success: {record.format_compact()} [{self.environment_key}]")
        return record

    def _counts(self) -> list[tuple[str, int]]:
        """(token, count) pairs for this environment, most successful first."""
        pairs = [
            (token, record.success_count)
            for (env_key, token), record in self.ledger.items()
            if env_key == self.environment_key
        ]
        # sorted() is stable: equal counts keep insertion order
        return sorted(pairs, key=lambda pair: pair[1], reverse=True)

    def top_successful(self, limit: int = 5) -> list[str]:
        """Commands that succeeded more than once, best first."""
        if limit <= 0:
            return []
        proven = [token for token, count in self._counts() if count > 1]
        return proven[:limit]

    def stats(self) -> CommandStats:
        counts = self._counts()
        return CommandStats(
            total=len(counts),
            top=[f"{token} ({count}x)" for token, count in counts[:STATS_TOP_N]],
            environment=self.environment_key,
        )

    def reset(self) -> None:
        self.ledger.clear()
