"""Actions an AI can choose, collections of them, and world models."""

from __future__ import annotations

import copy
import json
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from amico.errors import InvalidParameterType, MissingRequiredParameters
from amico.traits import Action

ActionFunction = Callable[[Any], None]

_DESCRIBE_TEMPLATE = (
    "name: {name} \n"
    "description: {description}\n"
    "parameters description: {parameters_description}\n"
    "parameters types: {parameters_types}\n"
    "Is parameters mandatory: {parameters_requirements}\n"
    "\n\n\n" + " " * 16
)


def _json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, sort_keys=True)


def _matches_type(value: Any, expected_type: str) -> bool:
    match expected_type:
        case "string":
            return isinstance(value, str)
        case "number":
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        case "boolean":
            return isinstance(value, bool)
        case "object":
            return isinstance(value, dict)
        case "array":
            return isinstance(value, list)
        case _:
            return False


@dataclass
class AIAction(Action):
    """An action described well enough for an AI to choose and parameterise it.

    ``parameters_types`` maps parameter names to "string", "number",
    "boolean", "object" or "array"; ``parameters_requirements`` maps them
    to "required" or anything else for optional.
    """

    name: str
    description: str
    parameters: Any
    parameters_types: Any
    parameters_requirements: Any
    parameters_description: Any
    action: ActionFunction

    def execute(self) -> None:
        """Validate the parameters, then run the action with a copy of them."""
        self.validate_parameters()
        self.action(copy.deepcopy(self.parameters))

    def with_parameters(self, parameters: Any) -> AIAction:
        """Return a copy of this action carrying the given parameters."""
        return replace(self, parameters=parameters)

    def validate_parameters(self) -> None:
        """Raise ActionError if a required parameter is missing or has the wrong type."""
        supplied = self.parameters if isinstance(self.parameters, dict) else {}

        if isinstance(self.parameters_requirements, dict):
            for param, requirement in sorted(self.parameters_requirements.items()):
                if requirement == "required" and param not in supplied:
                    raise MissingRequiredParameters(param)

        if isinstance(self.parameters_types, dict):
            for param, expected_type in sorted(self.parameters_types.items()):
                if param not in supplied:
                    continue
                expected = expected_type if isinstance(expected_type, str) else ""
                if not _matches_type(supplied[param], expected):
                    raise InvalidParameterType(param, _json(expected_type))

    def _clone(self) -> AIAction:
        return replace(
            self,
            parameters=copy.deepcopy(self.parameters),
            parameters_types=copy.deepcopy(self.parameters_types),
            parameters_requirements=copy.deepcopy(self.parameters_requirements),
            parameters_description=copy.deepcopy(self.parameters_description),
        )


class ActionMap:
    """Actions keyed by name."""

    def __init__(self) -> None:
        self._actions: dict[str, AIAction] = {}

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def add_action(self, action: AIAction) -> None:
        """Add an action, replacing any action of the same name."""
        self._actions[action.name] = action

    def get(self, name: str) -> AIAction | None:
        """Return a copy of the named action, or None."""
        action = self._actions.get(name)
        return action._clone() if action is not None else None

    def describe(self) -> str:
        """Return a text description of every action in the map."""
        return "".join(
            _DESCRIBE_TEMPLATE.format(
                name=name,
                description=action.description,
                parameters_description=_json(action.parameters_description),
                parameters_types=_json(action.parameters_types),
                parameters_requirements=_json(action.parameters_requirements),
            )
            for name, action in self._actions.items()
        )


class Model(ABC):
    """A model of the world for a model-based agent."""

    @abstractmethod
    def update_model(self, data: Any) -> None:
        """Update the model with new data."""

    @abstractmethod
    def get_environment_description(self) -> str:
        """Describe the current state of the environment."""