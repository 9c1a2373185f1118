# tests/test_tool_tracker.py
"""
Tests for ToolUsageTracker and ToolUsageRecord.
"""

from datetime import timedelta

import pytest

from chuk_ai_tool_hints.ledger import LedgerConfig
from chuk_ai_tool_hints.models import (
    TaskCategory,
    TaskContext,
    ToolStats,
    ToolUsageRecord,
)
from chuk_ai_tool_hints.tools.tracker import ToolUsageTracker


@pytest.fixture
def tracker(clock):
    return ToolUsageTracker(LedgerConfig(max_entries=200, ttl=timedelta(days=7)), clock=clock)


@pytest.fixture
def file_context():
    return TaskContext(category=TaskCategory.FILE_OPERATION, keywords=["file"])


@pytest.fixture
def web_context():
    return TaskContext(category=TaskCategory.WEB_REQUEST, keywords=["fetch"])


class TestToolUsageRecord:
    def test_success_rate_zero_observations(self):
        record = ToolUsageRecord(provider_id="p", tool_name="t")
        assert record.total_calls == 0
        assert record.success_rate == 0.0

    def test_success_rate(self):
        record = ToolUsageRecord(provider_id="p", tool_name="t", success_count=3, failure_count=1)
        assert record.success_rate == pytest.approx(0.75)

    def test_format_compact(self):
        record = ToolUsageRecord(provider_id="fs", tool_name="read_file", success_count=1, failure_count=1)
        assert record.format_compact() == "fs/read_file: 50% (2 calls)"


class TestRecordSuccess:
    def test_creates_record(self, tracker, file_context, clock):
        record = tracker.record_success("fs", "read_file", file_context)
        assert record.success_count == 1
        assert record.failure_count == 0
        assert record.last_used_at == clock()
        assert record.observed_categories == {TaskCategory.FILE_OPERATION}
        assert record.average_latency_ms is None

    def test_updates_last_used(self, tracker, file_context, clock):
        tracker.record_success("fs", "read_file", file_context)
        later = clock.advance(hours=3)
        record = tracker.record_success("fs", "read_file", file_context)
        assert record.last_used_at == later
        assert record.success_count == 2

    def test_categories_form_a_set(self, tracker, file_context, web_context):
        tracker.record_success("fs", "read_file", file_context)
        tracker.record_success("fs", "read_file", web_context)
        record = tracker.record_success("fs", "read_file", file_context)
        assert record.observed_categories == {TaskCategory.FILE_OPERATION, TaskCategory.WEB_REQUEST}

    def test_latency_two_point_mean(self, tracker, file_context):
        tracker.record_success("fs", "read_file", file_context, latency_ms=100)
        tracker.record_success("fs", "read_file", file_context, latency_ms=200)
        record = tracker.record_success("fs", "read_file", file_context, latency_ms=400)
        # (100 + 200) / 2 = 150, then (150 + 400) / 2
        assert record.average_latency_ms == pytest.approx(275.0)

    def test_missing_latency_keeps_average(self, tracker, file_context):
        tracker.record_success("fs", "read_file", file_context, latency_ms=80)
        record = tracker.record_success("fs", "read_file", file_context)
        assert record.average_latency_ms == pytest.approx(80.0)


class TestRecordFailure:
    def test_creates_record_with_failure_only(self, tracker):
        record = tracker.record_failure("web", "fetch_url")
        assert record.failure_count == 1
        assert record.success_count == 0
        assert record.observed_categories == set()

    def test_failure_does_not_touch_last_used(self, tracker, web_context, clock):
        tracker.record_success("web", "fetch_url", web_context)
        first_use = clock()
        clock.advance(hours=1)
        record = tracker.record_failure("web", "fetch_url")
        assert record.last_used_at == first_use
        assert record.failure_count == 1
        assert record.success_count == 1

    def test_counters_never_decrease(self, tracker, web_context):
        successes, failures = 0, 0
        for i in range(10):
            if i % 3 == 0:
                record = tracker.record_failure("web", "fetch_url")
            else:
                record = tracker.record_success("web", "fetch_url", web_context)
            assert record.success_count >= successes
            assert record.failure_count >= failures
            successes, failures = record.success_count, record.failure_count


class TestRetention:
    def test_records_expire_after_seven_days(self, tracker, file_context, clock):
        tracker.record_success("fs", "read_file", file_context)
        clock.advance(days=7, seconds=1)
        assert tracker.get("fs", "read_file") is None

    def test_capacity(self, clock, file_context):
        tracker = ToolUsageTracker(LedgerConfig(max_entries=2, ttl=timedelta(days=7)), clock=clock)
        tracker.record_success("p", "a", file_context)
        tracker.record_success("p", "b", file_context)
        tracker.record_success("p", "c", file_context)
        assert tracker.get("p", "a") is None
        assert [r.tool_name for r in tracker.records()] == ["b", "c"]


class TestStats:
    def test_empty(self, tracker):
        stats = tracker.stats()
        assert isinstance(stats, ToolStats)
        assert stats.total == 0
        assert stats.active == 0
        assert stats.top == []

    def test_sorted_by_success_rate(self, tracker, file_context):
        tracker.record_success("p", "half", file_context)
        tracker.record_failure("p", "half")
        tracker.record_failure("p", "never")
        tracker.record_success("p", "always", file_context)

        stats = tracker.stats()
        assert stats.total == 3
        assert stats.active == 2
        assert [entry.tool_name for entry in stats.top] == ["always", "half", "never"]
        assert stats.top[1].success_rate == pytest.approx(0.5)
        assert stats.top[0].categories == [TaskCategory.FILE_OPERATION]

    def test_top_ten(self, tracker, file_context):
        for i in range(15):
            tracker.record_success("p", f"tool{i}", file_context)
        stats = tracker.stats()
        assert stats.total == 15
        assert len(stats.top) == 10

    def test_idempotent(self, tracker, file_context, web_context):
        tracker.record_success("p", "a", file_context, latency_ms=10)
        tracker.record_success("p", "a", web_context)
        tracker.record_failure("p", "b")

        assert tracker.stats() == tracker.stats()
        assert tracker.stats().model_dump() == tracker.stats().model_dump()

    def test_categories_in_enum_order(self, tracker, file_context, web_context):
        tracker.record_success("p", "a", web_context)
        tracker.record_success("p", "a", file_context)
        entry = tracker.stats().top[0]
        assert entry.categories == [TaskCategory.FILE_OPERATION, TaskCategory.WEB_REQUEST]

    def test_reset(self, tracker):
        tracker.record_failure("p", "a")
        tracker.reset()
        assert tracker.stats().total == 0
