"""Chat messages and tool calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ToolCallFunction:
    """The function a tool call invokes."""

    name: str
    arguments: Any


@dataclass
class ToolCall:
    """A request from the model to call a tool."""

    id: str
    type: str
    function: ToolCallFunction

    @classmethod
    def for_function(cls, id: str, name: str, arguments: Any) -> ToolCall:
        """Build a call of type ``function``."""
        return cls(id=id, type="function", function=ToolCallFunction(name, arguments))


@dataclass
class Message:
    """A message in a chat."""

    role: str
    content: str | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None

    @classmethod
    def user(cls, content: str) -> Message:
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> Message:
        return cls(role="assistant", content=content)

    @classmethod
    def assistant_tool_call(cls, tool_calls: list[ToolCall]) -> Message:
        return cls(role="assistant", tool_calls=list(tool_calls))

    @classmethod
    def tool(cls, name: str, content: str) -> Message:
        return cls(role="tool", content=content, name=name)

    def text(self) -> str:
        """The content, or an empty string if there is none."""
        return self.content if self.content is not None else ""