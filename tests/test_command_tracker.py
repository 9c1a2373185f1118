# tests/test_command_tracker.py
"""
Tests for CommandOutcomeTracker and looks_successful.
"""

import pytest

from chuk_ai_tool_hints.commands.tracker import CommandOutcomeTracker, looks_successful
from chuk_ai_tool_hints.ledger import LedgerConfig
from chuk_ai_tool_hints.models import CommandStats, OutcomeRecord


@pytest.fixture
def command_config():
    return LedgerConfig.from_seconds(50, 24 * 60 * 60)


@pytest.fixture
def tracker(linux_env, command_config, clock):
    return CommandOutcomeTracker(linux_env, command_config, clock=clock)


class TestRecordSuccess:
    def test_first_success_creates_record(self, tracker):
        record = tracker.record_success("git status")
        assert isinstance(record, OutcomeRecord)
        assert record.environment_key == "posix"
        assert record.action_key == "git"
        assert record.success_count == 1

    def test_repeated_success_increments(self, tracker):
        tracker.record_success("git status")
        tracker.record_success("git log --oneline")
        record = tracker.record_success("GIT diff")
        assert record.success_count == 3

    def test_blank_command_ignored(self, tracker):
        assert tracker.record_success("   ") is None
        assert tracker.stats().total == 0

    def test_keys_are_partitioned_by_family(self, tracker):
        tracker.record_success("git status")
        assert tracker.ledger.keys() == [("posix", "git")]


class TestTopSuccessful:
    def test_twice_is_a_pattern(self, tracker):
        tracker.record_success("git status")
        tracker.record_success("git status")
        assert "git" in tracker.top_successful(3)

    def test_once_is_not_a_pattern(self, tracker):
        tracker.record_success("git status")
        assert tracker.top_successful(3) == []

    def test_sorted_by_count_and_limited(self, tracker):
        for command, times in [("ls", 2), ("git", 4), ("npm", 3), ("make", 2)]:
            for _ in range(times):
                tracker.record_success(command)

        assert tracker.top_successful(3) == ["git", "npm", "ls"]
        assert tracker.top_successful(10) == ["git", "npm", "ls", "make"]

    def test_non_positive_limit(self, tracker):
        tracker.record_success("git")
        tracker.record_success("git")
        assert tracker.top_successful(0) == []

    def test_other_family_records_ignored(self, tracker):
        tracker.ledger.set(("windows", "dir"), OutcomeRecord(environment_key="windows", action_key="dir", success_count=9))
        tracker.record_success("ls")
        tracker.record_success("ls")
        assert tracker.top_successful(5) == ["ls"]

    def test_expired_successes_forgotten(self, tracker, clock):
        tracker.record_success("git")
        tracker.record_success("git")
        clock.advance(hours=25)
        assert tracker.top_successful(3) == []


class TestStats:
    def test_stats_include_single_occurrences(self, tracker):
        tracker.record_success("git")
        tracker.record_success("git")
        tracker.record_success("ls")

        stats = tracker.stats()
        assert isinstance(stats, CommandStats)
        assert stats.total == 2
        assert stats.top == ["git (2x)", "ls (1x)"]
        assert stats.environment == "posix"

    def test_stats_top_five(self, tracker):
        for i, name in enumerate(["a1", "b2", "c3", "d4", "e5", "f6"]):
            for _ in range(i + 1):
                tracker.record_success(name)

        stats = tracker.stats()
        assert stats.total == 6
        assert len(stats.top) == 5
        assert stats.top[0] == "f6 (6x)"

    def test_stats_dict_compat(self, tracker):
        stats = tracker.stats()
        assert stats == {"total": 0, "top": [], "environment": "posix"}
        assert stats["environment"] == "posix"

    def test_windows_environment_key(self, windows_env, command_config, clock):
        tracker = CommandOutcomeTracker(windows_env, command_config, clock=clock)
        tracker.record_success("dir")
        assert tracker.stats().environment == "windows"

    def test_reset(self, tracker):
        tracker.record_success("git")
        tracker.reset()
        assert tracker.stats().total == 0


class TestLooksSuccessful:
    @pytest.mark.parametrize(
        "exit_code, output, expected",
        [
            (0, "On branch main", True),
            (None, "", True),
            (0, None, True),
            (1, "", False),
            (127, "bash: lss: command not found", False),
            (0, "'ls' is not recognized as an internal or external command", False),
            (0, "cat: nope.txt: No such file or directory", False),
        ],
    )
    def test_looks_successful(self, exit_code, output, expected):
        assert looks_successful(exit_code, output) is expected
