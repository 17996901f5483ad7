"""Chat completion requests and their builder."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from amico.ai.message import Message
from amico.ai.tool import ToolDefinition

if TYPE_CHECKING:
    from amico.ai.service import ServiceContext


@dataclass
class CompletionRequest:
    """A chat completion request."""

    prompt: str = ""
    model: str = ""
    system_prompt: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    chat_history: list[Message] = field(default_factory=list)
    tools: list[ToolDefinition] = field(default_factory=list)


class CompletionRequestBuilder:
    """Builds a CompletionRequest step by step."""

    def __init__(self) -> None:
        self._inner = CompletionRequest()

    @classmethod
    def from_ctx(cls, ctx: ServiceContext) -> CompletionRequestBuilder:
        """Start a request from a service context's settings."""
        return (
            cls()
            .model(ctx.model)
            .system_prompt(ctx.system_prompt)
            .tools(list(ctx.tools.definitions()))
            .temperature(ctx.temperature)
            .max_tokens(ctx.max_tokens)
        )

    def prompt(self, prompt: str) -> CompletionRequestBuilder:
        self._inner.prompt = prompt
        return self

    def model(self, model: str) -> CompletionRequestBuilder:
        self._inner.model = model
        return self

    def system_prompt(self, system_prompt: str) -> CompletionRequestBuilder:
        self._inner.system_prompt = system_prompt
        return self

    def temperature(self, temperature: float) -> CompletionRequestBuilder:
        self._inner.temperature = temperature
        return self

    def max_tokens(self, max_tokens: int) -> CompletionRequestBuilder:
        self._inner.max_tokens = max_tokens
        return self

    def chat_history(self, chat_history: list[Message]) -> CompletionRequestBuilder:
        self._inner.chat_history = list(chat_history)
        return self

    def tools(self, tools: list[ToolDefinition]) -> CompletionRequestBuilder:
        self._inner.tools = list(tools)
        return self

    def build(self) -> CompletionRequest:
        """Return a copy of the request built so far."""
        return replace(
            self._inner,
            chat_history=list(self._inner.chat_history),
            tools=list(self._inner.tools),
        )