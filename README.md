# amico

`amico` is a small framework for building AI agents that react to events.
It has no runtime dependencies.

It gives you:

- **An event core**: `Event` and `EventPool` (in `amico.events`) hold
  incoming events with expiry times and reusable ids. `Agent` (in
  `amico.agent`) runs an event generator and an action selector side by
  side on background threads. The abstract interfaces `Action`,
  `ActionSelector` and `EventGenerator` live in `amico.traits`.
- **Configuration**: `CoreConfig` (in `amico.config`) reads the agent's
  TOML configuration using only the standard library.
- **AI services**: `ServiceBuilder`, `ServiceContext` and `Service` (in
  `amico.ai.service`) wrap a model `Provider` (in `amico.ai.provider`)
  together with a system prompt, a model name, sampling settings and a
  `ToolSet` of callable tools (in `amico.ai.tool`). Chat messages are in
  `amico.ai.message` and requests in `amico.ai.completion`.
- **Actions**: `AIAction` and `ActionMap` (in `amico.actions`) describe
  actions that a model can pick, and validate parameters before execution.
- **Plugins**: ready-made pieces in `amico.plugins`. These are
  `InMemoryService`, which keeps chat history and carries out tool calls,
  `StandardActionSelector`, `StandardEventGenerator`, `RoomModel`, and the
  plugin interfaces they share.
- **An example tool**: `amico.tools` provides `search_jokes_tool()` and the
  assistant system prompt `AMICO_SYSTEM_PROMPT`.

## Installation

```
pip install amico
```

To run the test suite:

```
pip install "amico[test]"
pytest
```

## Configuration

An agent is configured with a TOML document:

```toml
name = "AIMO"
version = 0
runtime = "standalone"
plugins = []

[event_config]
expiry_time = 60   # seconds an event stays in the pool by default
```

```python
from amico.config import CoreConfig

config = CoreConfig.load("agent.toml")
print(config.name, config.event_config.expiry_time)
```

`CoreConfig.from_toml_str(text)` parses text directly. A document raises
`amico.errors.ConfigError` in any of these cases:

- it does not parse;
- a field is missing;
- a field has the wrong type;
- `runtime` is not `"standalone"`.

## Event pool

`EventPool(default_expiry_time)` gives each new event an id. It reuses ids
that were freed by removal or expiry. Events added without an expiry time
get the pool's default.

- `get_events()` drops expired events and returns copies of the rest.
- `remove_events(ids)` raises `SomeEventIdsNotFound`, listing any ids that
  were not in the pool.

## Agent

```python
from amico.agent import Agent

agent = Agent("agent.toml", make_event_generator, make_action_selector)
agent.start()
...
agent.stop()
agent.join()
```

Each factory is called once, inside its own thread:

- The generator thread repeatedly calls `generate_event(...)` and adds the
  results to the pool.
- The selector thread repeatedly passes the pooled events to
  `select_action(...)`, removes the event ids it returns and executes the
  chosen action.

Errors from selection, the pool and actions are logged, and the loops go on.

## Services and tools

A provider implements an asynchronous `completion(request)`. It answers
either with a `MessageChoice` (plain text) or with a `ToolCallChoice` (a
request to run a tool). A service built around it turns prompts into
replies:

```python
import asyncio

from amico.ai.provider import MessageChoice, Provider
from amico.ai.service import ServiceBuilder
from amico.plugins.service import InMemoryService
from amico.tools import search_jokes_tool


class EchoProvider(Provider):
    async def completion(self, request):
        return MessageChoice(f"You said: {request.prompt}")


service = (
    ServiceBuilder(EchoProvider())
    .model("gpt-4o")
    .system_prompt("You are a helpful assistant.")
    .temperature(0.2)
    .max_tokens(1000)
    .tool(search_jokes_tool())
    .build(InMemoryService)
)

print(asyncio.run(service.generate_text("Hello")))
```

When the provider asks for a tool, `InMemoryService` does the following:

1. It runs the tool.
2. It records the request and its result, or the failure, in `history`.
3. It asks the model again.

It raises these errors:

- `amico.ai.errors.ToolError` when a tool is requested that is not in the
  service's `ToolSet`.
- `ProviderError` when the provider raises a `CompletionError`.

## Actions

An `AIAction` carries a name, a description and parameters. For each
parameter it also records:

- the expected JSON type: `string`, `number`, `boolean`, `object` or
  `array`;
- whether the parameter is `required`.

`execute()` validates the parameters first. It raises
`MissingRequiredParameters` or `InvalidParameterType` when they do not fit.

`ActionMap` collects actions by name. `get()` returns a copy of an action,
and `describe()` produces a text listing for a model prompt.

`StandardActionSelector` takes an `ActionMap`, a service and a `Model`. It
sends the service a prompt that holds the environment description and the
pending events as JSON. It expects a JSON reply with `name`, `parameters`
and `event_ids`, and raises `SelectingActionFailed` otherwise.
`select_action` runs the service with `asyncio.run`, so call it from
outside a running event loop.

## What the package does not do

- There is no command-line chat program.
- There is no built-in client for a hosted model API. You supply your own
  `Provider`.
- There is no wallet or on-chain tooling. The only ready-made tool is
  `search_jokes_tool()`, which returns a fixed list of jokes.
- `PluginLoader` is an empty placeholder. Plugins are not discovered or
  loaded automatically. Register them yourself, for example in a
  `PluginStorage`.