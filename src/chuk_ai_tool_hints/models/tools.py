# chuk_ai_tool_hints/models/tools.py
"""
Tool registry snapshots and ranking results.

Providers and tools are owned by the host's tool registry; the ranker only
reads them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_ai_tool_hints.models.enums import ProviderStatus


class ToolDescriptor(BaseModel):
    """A tool as advertised by its provider."""

    name: str
    description: str = ""
    input_schema: dict[str, Any] | None = None
    enabled: bool = Field(default=True, description="Whether the tool may be suggested")

    model_config = {"frozen": True}

    @property
    def search_text(self) -> str:
        """Lowercased text that task keywords are matched against."""
        return f"{self.name} {self.description}".lower()


class ToolProvider(BaseModel):
    """A tool provider (MCP server, plugin host) and its tools."""

    provider_id: str
    status: ProviderStatus = ProviderStatus.CONNECTED
    disabled: bool = False
    tools: list[ToolDescriptor] = Field(default_factory=list)

    @property
    def is_available(self) -> bool:
        return self.status == ProviderStatus.CONNECTED and not self.disabled

    def suggestable_tools(self) -> list[ToolDescriptor]:
        """Enabled tools, or nothing if the provider itself is unavailable."""
        if not self.is_available:
            return []
        return [tool for tool in self.tools if tool.enabled]


class ToolRef(BaseModel):
    """Name-only reference to a tool."""

    provider_id: str
    tool_name: str

    model_config = {"frozen": True}

    @property
    def qualified_name(self) -> str:
        return f"{self.provider_id}/{self.tool_name}"


class RankedTool(BaseModel):
    """A shortlisted tool and its relevance score."""

    provider_id: str
    tool_name: str
    score: float
    tool: ToolDescriptor
    schema_threshold: float = Field(default=5, exclude=True)

    @property
    def include_schema(self) -> bool:
        """Whether the score earns the full input schema in the prompt."""
        return self.score > self.schema_threshold and self.tool.input_schema is not None

    @property
    def ref(self) -> ToolRef:
        return ToolRef(provider_id=self.provider_id, tool_name=self.tool_name)


class RankingResult(BaseModel):
    """Shortlist plus the residual name-only set."""

    selected: list[RankedTool] = Field(default_factory=list)
    others: list[ToolRef] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.selected and not self.others

    def selected_names(self) -> list[str]:
        return [ranked.ref.qualified_name for ranked in self.selected]
