"""Tools the model can call, and collections of them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

ToolFunction = Callable[[Any], Any]


@dataclass
class ToolDefinition:
    """A tool described in natural language."""

    name: str
    description: str
    parameters: Any


@dataclass
class Tool:
    """A tool an AI agent can call.

    ``tool_call`` takes the arguments and returns a result, raising
    ToolCallError on failure.
    """

    definition: ToolDefinition
    tool_call: ToolFunction

    @property
    def name(self) -> str:
        return self.definition.name

    def call(self, args: Any) -> Any:
        """Call the tool with the given arguments."""
        return self.tool_call(args)


class ToolSet:
    """A collection of tools keyed by name."""

    def __init__(self) -> None:
        self.tools: dict[str, Tool] = {}

    @classmethod
    def from_tools(cls, tools: Iterable[Tool]) -> ToolSet:
        tool_set = cls()
        for tool in tools:
            tool_set.add_tool(tool)
        return tool_set

    def add_tool(self, tool: Tool) -> None:
        """Add a tool, replacing any tool of the same name."""
        self.tools[tool.definition.name] = tool

    def get(self, name: str) -> Tool | None:
        return self.tools.get(name)

    def describe(self) -> str:
        """One line per tool: its name and description."""
        return "".join(
            f"- {tool.definition.name}: {tool.definition.description}\n"
            for tool in self.tools.values()
        )

    def definitions(self) -> Iterator[ToolDefinition]:
        return (tool.definition for tool in self.tools.values())

    def __iter__(self) -> Iterator[Tool]:
        return iter(self.tools.values())

    def __len__(self) -> int:
        return len(self.tools)