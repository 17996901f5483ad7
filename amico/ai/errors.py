"""Exceptions raised by AI providers, tools and services."""

from __future__ import annotations

import json
from typing import Any


def _json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class CreationError(Exception):
    """A provider or service could not be created because a parameter is invalid."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__("Invalid API key")


class CompletionError(Exception):
    """A chat completion could not be produced."""


class ApiError(CompletionError):
    """The model API reported an error."""

    def __init__(self) -> None:
        super().__init__("API error")


class ModelUnavailable(CompletionError):
    """The requested model is not offered by the provider."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(f"Model {model} is unavailable")


class ToolCallError(Exception):
    """A tool call failed."""


class ToolUnavailable(ToolCallError):
    """No tool with the requested name exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool {name} is unavailable")


class InvalidParam(ToolCallError):
    """A tool was called with an invalid parameter."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid param {name} with value {_json(value)} for reason {reason}")


class ExecutionError(ToolCallError):
    """A tool failed while executing."""

    def __init__(self, tool_name: str, params: Any, reason: str) -> None:
        self.tool_name = tool_name
        self.params = params
        self.reason = reason
        super().__init__(
            f"Error executing {tool_name} with params {_json(params)} for reason {reason}"
        )


class ServiceError(Exception):
    """A service could not fulfil a request."""


class ProviderError(ServiceError):
    """The provider failed to complete the request."""

    def __init__(self, error: CompletionError) -> None:
        self.error = error
        super().__init__("Provider error")


class UnexpectedResponse(ServiceError):
    """The provider answered with something the service cannot handle."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unexpected response: {detail}")


class ToolError(ServiceError):
    """A tool needed by the service failed or was missing."""

    def __init__(self, error: ToolCallError) -> None:
        self.error = error
        super().__init__("Tool error")