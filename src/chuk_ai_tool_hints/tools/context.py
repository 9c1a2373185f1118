# chuk_ai_tool_hints/tools/context.py
"""
Task Context Classifier.

Keyword heuristics, not NLP. Category groups are checked in a fixed order
and the first group with a hit wins, so a task that mentions both a file and
an API is a file_operation.
"""

from __future__ import annotations

from chuk_ai_tool_hints.models.context import MAX_KEYWORDS, TaskContext
from chuk_ai_tool_hints.models.enums import TaskCategory

# Evaluation order matters
CATEGORY_KEYWORDS: tuple[tuple[TaskCategory, tuple[str, ...]], ...] = (
    (TaskCategory.FILE_OPERATION, ("file", "read", "write", "directory", "folder")),
    (TaskCategory.WEB_REQUEST, ("api", "request", "fetch", "http", "curl", "download")),
    (TaskCategory.DATA_PROCESSING, ("data", "parse", "convert", "json", "csv", "xml")),
    (TaskCategory.AUTOMATION, ("automate", "script", "batch", "workflow", "schedule")),
)

# Words put in front of the extracted keywords for each category
CATEGORY_PRIORITY_WORDS: dict[TaskCategory, tuple[str, ...]] = {
    TaskCategory.FILE_OPERATION: ("file", "read", "write"),
    TaskCategory.WEB_REQUEST: ("fetch", "http", "request"),
    TaskCategory.DATA_PROCESSING: ("parse", "convert", "data"),
    TaskCategory.AUTOMATION: ("script", "automate", "workflow"),
    TaskCategory.OTHER: (),
}

STOP_WORDS: frozenset[str] = frozenset(
    {
        "this",
        "that",
        "these",
        "those",
        "with",
        "from",
        "into",
        "have",
        "will",
        "would",
        "could",
        "should",
        "please",
        "about",
        "what",
        "when",
        "where",
        "which",
        "there",
        "their",
        "then",
        "than",
        "them",
        "some",
        "also",
        "just",
        "like",
        "want",
        "need",
        "make",
        "help",
    }
)

MIN_KEYWORD_LENGTH = 4
_STRIP_CHARS = ".,;:!?\"'()[]{}<>`"


def _extract_words(text: str) -> list[str]:
    words = []
    for raw in text.split():
        word = raw.strip(_STRIP_CHARS)
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS:
            words.append(word)
    return words


class TaskContextClassifier:
    """Derives a TaskContext from a free-text task description."""

    def categorize(self, text: str) -> TaskCategory:
        lowered = text.lower()
        for category, keywords in CATEGORY_KEYWORDS:
            if any(keyword in lowered for keyword in keywords):
                return category
        return TaskCategory.OTHER

    def classify(self, text: str | None) -> TaskContext:
        if not text or not text.strip():
            return TaskContext(category=TaskCategory.OTHER, keywords=[])

        lowered = text.lower()
        category = self.categorize(lowered)

        keywords: list[str] = []
        for word in (*CATEGORY_PRIORITY_WORDS[category], *_extract_words(lowered)):
            if word not in keywords:
                keywords.append(word)
            if len(keywords) == MAX_KEYWORDS:
                break

        return TaskContext(category=category, keywords=keywords)
