#!/usr/bin/env python3
"""
01_usage_hints.py - Command and Tool Usage Hints

Demonstrates:
1. Platform compatibility - catching POSIX commands on a Windows shell
2. Command learning - counting commands that worked in this environment
3. Task classification - category and keywords from a user request
4. Tool ranking - keyword matches plus learned success history
5. HintFormatter - rendering hints for the model context

No API keys required.
"""

from chuk_ai_tool_hints import UsageHintsManager
from chuk_ai_tool_hints.formatter import HintFormatter, HintFormatterConfig
from chuk_ai_tool_hints.models import (
    EnvironmentDescriptor,
    ToolDescriptor,
    ToolProvider,
)


def section(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"{title}")
    print("=" * 60)


def build_registry() -> list[ToolProvider]:
    return [
        ToolProvider(
            provider_id="filesystem",
            tools=[
                ToolDescriptor(
                    name="read_file",
                    description="Read a file from disk",
                    input_schema={"type": "object", "properties": {"path": {"type": "string"}}},
                ),
                ToolDescriptor(name="list_directory", description="List directory entries"),
            ],
        ),
        ToolProvider(
            provider_id="web",
            tools=[
                ToolDescriptor(
                    name="fetch_url",
                    description="Fetch a URL over HTTP",
                    input_schema={"type": "object", "properties": {"url": {"type": "string"}}},
                ),
                ToolDescriptor(name="search", description="Search the web"),
            ],
        ),
    ]


def main() -> None:
    print("Usage Hints - Command and Tool Learning Demo")
    print("No API keys required.\n")

    manager = UsageHintsManager.create(
        environment=EnvironmentDescriptor.windows_cmd(),
        formatter=HintFormatter(config=HintFormatterConfig(show_scores=True)),
    )
    print(f"Environment: {manager.environment.describe()}")

    # ------------------------------------------------------------------ #
    section("1. Platform Compatibility")
    # ------------------------------------------------------------------ #

    for command in ("dir /b", "ls -la", "grep TODO notes.txt", "git status"):
        verdict = manager.classify_compatibility(command)
        status = "ok" if verdict.compatible else f"use instead: {verdict.suggestion}"
        print(f"  {command:<22} -> {status}")

    # ------------------------------------------------------------------ #
    section("2. Learning Commands")
    # ------------------------------------------------------------------ #

    for command in ("dir", "dir /s", "git status", "git log", "git diff", "type README.md"):
        manager.record_command_success(command)

    print(f"Proven commands: {manager.top_successful_commands(5)}")
    print(f"Stats: {manager.command_stats().model_dump()}")
    print("\nCommand hints for model:")
    print(manager.format_command_hints())

    # ------------------------------------------------------------------ #
    section("3. Task Classification")
    # ------------------------------------------------------------------ #

    context = manager.classify_task("Fetch the release notes over HTTP and summarize them")
    print(f"Category: {context.category.value}")
    print(f"Keywords: {context.keywords}")

    # ------------------------------------------------------------------ #
    section("4. Tool Ranking")
    # ------------------------------------------------------------------ #

    registry = build_registry()

    first = manager.rank_tools(registry, context)
    print(f"Before learning: {first.selected_names()}")

    manager.record_tool_success("web", "fetch_url", context, latency_ms=240)
    manager.record_tool_success("web", "fetch_url", context, latency_ms=180)
    manager.record_tool_failure("web", "search")

    second = manager.rank_tools(registry, context)
    for ranked in second.selected:
        print(f"  {ranked.ref.qualified_name:<22} score={ranked.score:g} schema={ranked.include_schema}")

    print("\nTool stats:")
    for entry in manager.tool_stats().top:
        print(f"  {entry.provider_id}/{entry.tool_name}: {entry.success_rate:.0%}")

    # ------------------------------------------------------------------ #
    section("5. Tool Hints for Model")
    # ------------------------------------------------------------------ #

    print(manager.format_tool_hints(second))

    # ------------------------------------------------------------------ #
    section("DEMO COMPLETE")
    # ------------------------------------------------------------------ #


if __name__ == "__main__":
    main()
