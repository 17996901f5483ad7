import pytest

from amico.ai.provider import MessageChoice
from amico.plugins.interface import (
    ActionSelectorPlugin,
    EventGeneratorPlugin,
    Plugin,
    PluginCategory,
    PluginInfo,
    PluginStorage,
    ProviderPlugin,
)


class _SensorPlugin(Plugin):
    def info(self):
        return PluginInfo(name="TestPlugin", category=PluginCategory.SENSOR)


def test_impl_plugin():
    info = _SensorPlugin().info()
    assert info == PluginInfo("TestPlugin", PluginCategory.SENSOR)
    assert PluginCategory(info.category.value) is PluginCategory.SENSOR


def test_plugin_is_abstract():
    with pytest.raises(TypeError):
        Plugin()


def test_category_names_are_snake_case():
    assert PluginCategory.EVENT_GENERATOR.value == "event_generator"
    assert PluginCategory("action_selector") is PluginCategory.ACTION_SELECTOR


def test_plugin_info_equality():
    assert PluginInfo("a", PluginCategory.API) == PluginInfo("a", PluginCategory.API)
    assert PluginInfo("a", PluginCategory.API) != PluginInfo("a", PluginCategory.SERVICE)


class EchoProvider(ProviderPlugin):
    async def completion(self, request):
        return MessageChoice(request.prompt)

    def info(self):
        return PluginInfo("Echo", PluginCategory.SERVICE)


class FirstSelector(ActionSelectorPlugin):
    def select_action(self, events):
        return None, [event.id for event in events]

    def info(self):
        return PluginInfo("First", PluginCategory.ACTION_SELECTOR)


def test_provider_plugin_requires_both_interfaces():
    class Partial(ProviderPlugin):
        def info(self):
            return PluginInfo("Partial", PluginCategory.SERVICE)

    with pytest.raises(TypeError):
        Partial()
    assert EchoProvider().info() == PluginInfo("Echo", PluginCategory.SERVICE)


def test_event_generator_plugin_requires_generate_event():
    class NoGenerate(EventGeneratorPlugin):
        def info(self):
            return PluginInfo("G", PluginCategory.EVENT_GENERATOR)

    with pytest.raises(TypeError):
        NoGenerate()
    assert PluginCategory("event_generator") is PluginCategory.EVENT_GENERATOR


def test_plugin_storage_starts_empty_and_independent():
    first = PluginStorage()
    second = PluginStorage()
    first.providers["echo"] = EchoProvider()
    first.action_selectors["first"] = FirstSelector()
    assert second.providers == {}
    assert second.action_selectors == {}
    assert first.action_selectors["first"].info().category == PluginCategory.ACTION_SELECTOR