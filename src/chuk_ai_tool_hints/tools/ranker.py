# chuk_ai_tool_hints/tools/ranker.py
"""
Relevance Ranker - shortlists tools for a task.

Score of a candidate tool is a sum of independent terms:

    +2   per task keyword found in "name description" (lowercased)
    +3 * success rate       } only when the tool
    +4   if it was useful for this task category before } has a usage
    +1   if it was used in the last 7 days              } record

Zero-score tools are never shortlisted. The shortlist is ordered by score,
ties keep the order the registry listed the tools in. Tools that were not
shortlisted are still returned by name, so the model knows they exist
without paying for their schemas.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from pydantic import BaseModel, Field

from chuk_ai_tool_hints import config as hints_config
from chuk_ai_tool_hints.models.context import TaskContext
from chuk_ai_tool_hints.models.records import ToolUsageRecord
from chuk_ai_tool_hints.models.tools import (
    RankedTool,
    RankingResult,
    ToolDescriptor,
    ToolProvider,
    ToolRef,
)
from chuk_ai_tool_hints.tools.tracker import ToolUsageTracker

log = logging.getLogger(__name__)


class RankerWeights(BaseModel):
    """Weights of the relevance terms."""

    keyword_match: float = 2.0
    success_rate: float = 3.0
    category_match: float = 4.0
    recent_use: float = 1.0
    recent_window: timedelta = Field(default=timedelta(days=7))


class RelevanceRanker:
    """Scores candidate tools against a task context and usage history."""

    def __init__(
        self,
        tracker: ToolUsageTracker,
        weights: RankerWeights | None = None,
        schema_threshold: float = hints_config.SCHEMA_SCORE_THRESHOLD,
    ) -> None:
        self.tracker = tracker
        self.weights = weights or RankerWeights()
        self.schema_threshold = schema_threshold

    def score(
        self,
        tool: ToolDescriptor,
        context: TaskContext,
        usage: ToolUsageRecord | None = None,
    ) -> float:
        w = self.weights
        text = tool.search_text

        score = sum(w.keyword_match for keyword in context.keywords if keyword in text)

        if usage is not None:
            score += w.success_rate * usage.success_rate
            if context.category in usage.observed_categories:
                score += w.category_match
            if self.tracker.now() - usage.last_used_at <= w.recent_window:
                score += w.recent_use

        return score

    def rank(
        self,
        providers: list[ToolProvider],
        context: TaskContext,
        limit: int = hints_config.DEFAULT_RANK_LIMIT,
    ) -> RankingResult:
        """
        Shortlist the most relevant tools.

        Args:
            providers: Snapshot of the tool registry
            context: Classified task context
            limit: Maximum tools to shortlist

        Returns:
            RankingResult with scored picks and name-only others
        """
        candidates: list[tuple[ToolProvider, ToolDescriptor]] = [
            (provider, tool) for provider in providers for tool in provider.suggestable_tools()
        ]

        scored: list[RankedTool] = []
        for provider, tool in candidates:
            usage = self.tracker.get(provider.provider_id, tool.name)
            value = self.score(tool, context, usage)
            if value > 0:
                scored.append(
                    RankedTool(
                        provider_id=provider.provider_id,
                        tool_name=tool.name,
                        score=value,
                        tool=tool,
                        schema_threshold=self.schema_threshold,
                    )
                )

        # list.sort is stable: ties keep registry order
        scored.sort(key=lambda ranked: ranked.score, reverse=True)
        selected = scored[: max(limit, 0)]

        picked = {(ranked.provider_id, ranked.tool_name) for ranked in selected}
        others = [
            ToolRef(provider_id=provider.provider_id, tool_name=tool.name)
            for provider, tool in candidates
            if (provider.provider_id, tool.name) not in picked
        ]

        log.debug(
            f"Ranked {len(candidates)} tools for {context.category.value}: "
            f"{len(selected)} selected, {len(others)} others"
        )
        return RankingResult(selected=selected, others=others)
