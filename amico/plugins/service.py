"""A chat service that keeps its history in memory and runs tool calls."""

from __future__ import annotations

import json
import logging
from typing import Any

from amico.ai.completion import CompletionRequestBuilder
from amico.ai.errors import (
    ApiError,
    CompletionError,
    ProviderError,
    ToolCallError,
    ToolError,
    ToolUnavailable,
)
from amico.ai.message import Message
from amico.ai.provider import MessageChoice
from amico.ai.service import P, Service, ServiceContext
from amico.plugins.interface import Plugin, PluginCategory, PluginInfo

logger = logging.getLogger(__name__)

_INFO = PluginInfo(name="StdInMemoryService", category=PluginCategory.SERVICE)


def _json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, sort_keys=True)


def _tool_call_prompt(function_name: str, arguments: str) -> str:
    return (
        f"**Tool Call Request**\n\nI will call the tool funcion `{function_name}` "
        f"with arguments `{arguments}`. Please tell me the result in your next message."
    )


def _tool_result_prompt(function_name: str, result: str) -> str:
    return (
        f"**Tool Call Result**\n\nThe result of calling the tool `{function_name}` "
        f"is `{result}`. With these extra information, please respond to the user again."
    )


def _tool_failed_prompt(function_name: str, error: str) -> str:
    return (
        f"**Tool Call Failed**\n\nCalling the tool `{function_name}` failed. "
        f"The error is `{error}`. Report the error to the user."
    )


class InMemoryService(Service[P], Plugin):
    """Generates text through the provider, running any tools it asks for.

    After a tool call the exchange is recorded in ``history`` and the
    prompt is sent again.
    """

    def __init__(self, context: ServiceContext[P]) -> None:
        super().__init__(context)
        self.history: list[Message] = []

    @classmethod
    def from_context(cls, context: ServiceContext[P]) -> InMemoryService[P]:
        return cls(context)

    def info(self) -> PluginInfo:
        return _INFO

    async def generate_text(self, prompt: str) -> str:
        while True:
            request = CompletionRequestBuilder.from_ctx(self.ctx).prompt(prompt).build()
            try:
                choice = await self.ctx.provider.completion(request)
            except CompletionError as exc:
                logger.error("Provider error: %s", exc)
                raise ProviderError(ApiError()) from exc

            if isinstance(choice, MessageChoice):
                logger.debug("Received message response: %s", choice.text)
                self.history.append(Message.user(prompt))
                self.history.append(Message.assistant(choice.text))
                return choice.text

            name, params = choice.name, choice.params
            logger.debug("Calling %s (%s) with params %s", name, choice.id, _json(params))
            tool = self.ctx.tools.get(name)
            if tool is None:
                raise ToolError(ToolUnavailable(name))

            try:
                result = tool.call(params)
            except ToolCallError as exc:
                logger.debug("Tool call failed with error: %s", exc)
                outcome = _tool_failed_prompt(name, str(exc))
            else:
                logger.debug("Tool call succeeded with result: %s", _json(result))
                outcome = _tool_result_prompt(name, _json(result))

            self.history.append(Message.user(prompt))
            self.history.append(Message.assistant(_tool_call_prompt(name, _json(params))))
            self.history.append(Message.user(outcome))
            logger.debug("Re-generating text")