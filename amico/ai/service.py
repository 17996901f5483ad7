"""Services that perform AI tasks through a provider, and their configuration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from amico.ai.provider import Provider
from amico.ai.tool import Tool, ToolSet

P = TypeVar("P", bound=Provider)
S = TypeVar("S", bound="Service")

DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_TOKENS = 1000


@dataclass
class ServiceContext(Generic[P]):
    """The settings a service works with."""

    system_prompt: str
    provider: P
    model: str
    temperature: float
    max_tokens: int
    tools: ToolSet = field(default_factory=ToolSet)

    def update_system_prompt(self, prompt: str) -> None:
        self.system_prompt = prompt

    def update_model(self, model: str) -> None:
        self.model = model

    def update_temperature(self, temperature: float) -> None:
        self.temperature = temperature

    def update_max_tokens(self, max_tokens: int) -> None:
        self.max_tokens = max_tokens


class Service(ABC, Generic[P]):
    """Performs an AI task, such as generating text, through provider calls."""

    def __init__(self, context: ServiceContext[P]) -> None:
        self.ctx = context

    @classmethod
    def from_context(cls: type[S], context: ServiceContext) -> S:
        """Build the service from a context."""
        return cls(context)

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """Generate text for the prompt; raise ServiceError on failure."""


class ServiceBuilder(Generic[P]):
    """Collects a service's settings before building it."""

    def __init__(self, provider: P) -> None:
        self._provider = provider
        self._tools: list[Tool] = []
        self._system_prompt = ""
        self._model = ""
        self._temperature = DEFAULT_TEMPERATURE
        self._max_tokens = DEFAULT_MAX_TOKENS

    def model(self, model: str) -> ServiceBuilder[P]:
        self._model = model
        return self

    def system_prompt(self, prompt: str) -> ServiceBuilder[P]:
        self._system_prompt = prompt
        return self

    def tool(self, tool: Tool) -> ServiceBuilder[P]:
        self._tools.append(tool)
        return self

    def temperature(self, temperature: float) -> ServiceBuilder[P]:
        self._temperature = temperature
        return self

    def max_tokens(self, max_tokens: int) -> ServiceBuilder[P]:
        self._max_tokens = max_tokens
        return self

    def build(self, service_cls: type[S]) -> S:
        """Build a service of the given class from the collected settings."""
        return service_cls.from_context(
            ServiceContext(
                system_prompt=self._system_prompt,
                provider=self._provider,
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                tools=ToolSet.from_tools(self._tools),
            )
        )