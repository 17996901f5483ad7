"""The standard action selector, which asks an AI service to choose an action."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone
from typing import Any

from amico.actions import ActionMap, AIAction, Model
from amico.ai.errors import ServiceError
from amico.ai.service import Service
from amico.errors import SelectingActionFailed
from amico.events import Event
from amico.plugins.interface import ActionSelectorPlugin, PluginCategory, PluginInfo

_INFO = PluginInfo(name="StandardActionSelector", category=PluginCategory.ACTION_SELECTOR)

_U32_MASK = 0xFFFFFFFF

_SELECTOR_PROMPT = """You are an Action Selector to select actions to execute in an agent.
            You will be provided with information of the environment, the state of the current agent
             and the events that are received. Make the best decision based on these information.
              Don't output the reason of choosing the action. Just output the
            name, the parameters of the action you choose and the event ids you solved."""

_EXAMPLE_OUTPUT = """{
            "name": "clean",
            "parameters": {
                "room": "kitchen"
            },
            "event_ids": [1, 2, 3]
        }"""


def _timestamp(moment: datetime | None) -> str | None:
    if moment is None:
        return None
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _events_json(events: list[Event]) -> str:
    payload = [
        {
            "id": event.id,
            "name": event.name,
            "source": event.source,
            "params": event.params,
            "expiry_time": _timestamp(event.expiry_time),
        }
        for event in events
    ]
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _event_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SelectingActionFailed(f"Invalid event id in the response: {value!r}")
    return value & _U32_MASK


class StandardActionSelector(ActionSelectorPlugin):
    """Selects actions by asking an AI service, given the model and the pending events.

    The service must answer with a JSON object holding ``name``,
    ``parameters`` and ``event_ids``.
    """

    def __init__(self, actions_map: ActionMap, service: Service, model: Model) -> None:
        self.actions_map = actions_map
        self.service = service
        self.model = model

    def info(self) -> PluginInfo:
        return _INFO

    def select_action(self, events: list[Event]) -> tuple[AIAction, list[int]]:
        """Ask the service for an action; raise SelectingActionFailed if none results."""
        prompt = (
            "Instruction - Return the correct action for the current state "
            "and return the id of the events that is going to be solved.\n"
            f"Context - {self.model.get_environment_description()}\n"
            f"Received Events - {_events_json(events)}"
        )

        try:
            response = asyncio.run(self.service.generate_text(prompt))
        except ServiceError as exc:
            raise SelectingActionFailed(f"Failed to generate text: {exc}") from exc

        try:
            decoded = json.loads(response)
        except json.JSONDecodeError as exc:
            raise SelectingActionFailed(
                f"Failed to parse the response as JSON: {exc}"
            ) from exc

        if isinstance(decoded, dict):
            name = decoded.get("name")
            parameters = decoded.get("parameters")
            event_ids = decoded.get("event_ids")
            if (
                isinstance(name, str)
                and isinstance(parameters, dict)
                and isinstance(event_ids, list)
            ):
                action = self.actions_map.get(name)
                if action is not None:
                    return (
                        action.with_parameters(dict(parameters)),
                        [_event_id(value) for value in event_ids],
                    )

        raise SelectingActionFailed("Failed to select an action from the response")

    def set_service(self, service: Service) -> None:
        """Replace the AI service and give it the selector's system prompt."""
        self.service = service
        self._update_system_prompt()

    def _update_system_prompt(self) -> None:
        final_prompt = (
            f"{_SELECTOR_PROMPT.strip()}\n"
            f"Here is an example of the output:{_EXAMPLE_OUTPUT}\n"
            f"Here are the available actions:{self.actions_map.describe()}"
        )
        self.service.ctx.update_system_prompt(final_prompt)