from amico.ai.completion import CompletionRequest, CompletionRequestBuilder
from amico.ai.message import Message
from amico.ai.service import ServiceContext
from amico.ai.tool import Tool, ToolDefinition, ToolSet


def test_completion_request_builder():
    request = (
        CompletionRequestBuilder()
        .prompt("Hello, world!")
        .model("test")
        .system_prompt("You are a helpful assistant.")
        .temperature(0.2)
        .max_tokens(100)
        .chat_history([])
        .tools([])
        .build()
    )
    assert request.prompt == "Hello, world!"
    assert request.model == "test"
    assert request.system_prompt == "You are a helpful assistant."
    assert request.temperature == 0.2
    assert request.max_tokens == 100
    assert request.chat_history == []
    assert request.tools == []


def test_default_request():
    assert CompletionRequestBuilder().build() == CompletionRequest(
        prompt="", model="", system_prompt=None, temperature=None, max_tokens=None
    )


def test_build_returns_independent_copies():
    builder = CompletionRequestBuilder().chat_history([Message.user("a")])
    first = builder.build()
    first.chat_history.append(Message.user("b"))
    assert builder.build().chat_history == [Message.user("a")]


def test_from_ctx_copies_settings():
    definition = ToolDefinition("search", "Search", {})
    ctx = ServiceContext(
        system_prompt="sys",
        provider=None,
        model="gpt-4o",
        temperature=0.5,
        max_tokens=42,
        tools=ToolSet.from_tools([Tool(definition, lambda args: args)]),
    )
    request = CompletionRequestBuilder.from_ctx(ctx).prompt("hi").build()
    assert request.model == "gpt-4o"
    assert request.system_prompt == "sys"
    assert request.temperature == 0.5
    assert request.max_tokens == 42
    assert request.tools == [definition]
    assert request.prompt == "hi"