# chuk_ai_tool_hints/models/context.py
"""Per-request value objects: task context and compatibility verdicts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_ai_tool_hints.models.enums import TaskCategory

MAX_KEYWORDS = 10


class TaskContext(BaseModel):
    """Category and keywords derived from a task description."""

    category: TaskCategory = TaskCategory.OTHER
    keywords: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("keywords")
    @classmethod
    def _dedupe_and_cap(cls, value: list[str]) -> list[str]:
        seen: list[str] = []
        for word in value:
            if word and word not in seen:
                seen.append(word)
        return seen[:MAX_KEYWORDS]


class CompatibilityVerdict(BaseModel):
    """Whether a command fits the environment, and what to use instead."""

    compatible: bool = True
    suggestion: str | None = None

    model_config = {"frozen": True}
