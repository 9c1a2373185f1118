# chuk_ai_tool_hints/formatter.py
"""
Hint formatter.

Renders learned command patterns and tool shortlists as compact text blocks
a host can page into model context. Where the blocks go in the prompt is
the host's business.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, Field

from chuk_ai_tool_hints.models.environment import EnvironmentDescriptor
from chuk_ai_tool_hints.models.tools import RankedTool, RankingResult


class HintFormatterConfig(BaseModel):
    """Configuration for hint formatting."""

    # Maximum characters of a tool description in summary lines
    max_description_chars: int = 120

    # Indent the JSON schema of highly ranked tools
    pretty_schema: bool = False

    # Show relevance scores next to tool names
    show_scores: bool = False

    # Include the "other available tools" line
    include_others: bool = True


class HintFormatter(BaseModel):
    """Formats command and tool hints for injection into model context."""

    config: HintFormatterConfig = Field(default_factory=HintFormatterConfig)

    def format_command_hints(
        self,
        environment: EnvironmentDescriptor,
        proven_commands: list[str],
    ) -> str:
        """
        Format proven commands for the current environment.

        Returns an empty string when nothing has been learned yet.
        """
        if not proven_commands:
            return ""

        lines = [
            "<command_hints>",
            f"Environment: {environment.describe()}",
            f"Commands that worked here: {', '.join(proven_commands)}",
            "</command_hints>",
        ]
        return "\n".join(lines)

    def format_tool_hints(self, ranking: RankingResult) -> str:
        """
        Format a ranking: full schema for strong matches, one-line summaries
        for the rest of the shortlist, names only for everything else.
        """
        if ranking.is_empty:
            return ""

        lines = ["<tool_hints>"]

        for ranked in ranking.selected:
            lines.extend(self._format_ranked(ranked))

        if self.config.include_others and ranking.others:
            names = ", ".join(ref.qualified_name for ref in ranking.others)
            lines.append(f"Other available tools: {names}")

        lines.append("</tool_hints>")
        return "\n".join(lines)

    def _format_ranked(self, ranked: RankedTool) -> list[str]:
        name = ranked.ref.qualified_name
        if self.config.show_scores:
            name = f"{name} (score {ranked.score:g})"

        description = _truncate(ranked.tool.description, self.config.max_description_chars)
        header = f"- {name}: {description}" if description else f"- {name}"

        if not ranked.include_schema:
            return [header]

        indent = 2 if self.config.pretty_schema else None
        schema = json.dumps(ranked.tool.input_schema, indent=indent, sort_keys=True)
        return [header, f"  input_schema: {schema}"]


def _truncate(text: str, max_len: int) -> str:
    text = " ".join(text.split())
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
