"""Plugin interfaces and the storage that owns loaded plugins."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from amico.ai.provider import Provider
from amico.traits import ActionSelector, EventGenerator


class PluginCategory(enum.Enum):
    """What kind of component a plugin is."""

    # High level
    SENSOR = "sensor"
    EFFECTOR = "effector"
    SERVICE = "service"
    API = "api"

    # Low level
    EMBEDDING = "embedding"
    EVENT_GENERATOR = "event_generator"
    ACTION_SELECTOR = "action_selector"


@dataclass(frozen=True)
class PluginInfo:
    """A plugin's name and category."""

    name: str
    category: PluginCategory


class Plugin(ABC):
    """Every plugin reports information about itself."""

    @abstractmethod
    def info(self) -> PluginInfo:
        """Return the plugin's information."""


class ProviderPlugin(Provider, Plugin):
    """A plugin that provides AI models."""


class ActionSelectorPlugin(Plugin, ActionSelector):
    """A plugin that selects actions."""


class EventGeneratorPlugin(Plugin, EventGenerator):
    """A plugin that generates events."""


@dataclass
class PluginStorage:
    """Owns the loaded plugins, keyed by name."""

    providers: dict[str, ProviderPlugin] = field(default_factory=dict)
    action_selectors: dict[str, ActionSelectorPlugin] = field(default_factory=dict)


class PluginLoader:
    """The component responsible for loading plugins into storage."""