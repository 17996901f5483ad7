"""Providers of AI models and the choices they return."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from amico.ai.completion import CompletionRequest


@dataclass(frozen=True)
class MessageChoice:
    """The model answered with a text message."""

    text: str


@dataclass(frozen=True)
class ToolCallChoice:
    """The model asked for a tool to be called."""

    name: str
    id: str
    params: Any


ModelChoice = MessageChoice | ToolCallChoice


class Provider(ABC):
    """A source of model completions."""

    @abstractmethod
    async def completion(self, request: CompletionRequest) -> ModelChoice:
        """Complete a request; raise CompletionError on failure."""