import pytest

from amico.ai.completion import CompletionRequestBuilder
from amico.ai.errors import ModelUnavailable
from amico.ai.provider import MessageChoice, Provider, ToolCallChoice


class EchoProvider(Provider):
    async def completion(self, request):
        if request.model != "echo":
            raise ModelUnavailable(request.model)
        if request.prompt.startswith("tool:"):
            return ToolCallChoice(request.prompt[5:], "call-0", {})
        return MessageChoice(request.prompt)


def test_provider_is_abstract():
    with pytest.raises(TypeError):
        Provider()


@pytest.mark.asyncio
async def test_message_choice():
    request = CompletionRequestBuilder().model("echo").prompt("hi").build()
    choice = await EchoProvider().completion(request)
    assert choice == MessageChoice("hi")


@pytest.mark.asyncio
async def test_tool_call_choice():
    request = CompletionRequestBuilder().model("echo").prompt("tool:search").build()
    choice = await EchoProvider().completion(request)
    match choice:
        case ToolCallChoice(name=name, id=call_id, params=params):
            assert (name, call_id, params) == ("search", "call-0", {})
        case _:
            pytest.fail("expected a tool call")


@pytest.mark.asyncio
async def test_unavailable_model():
    request = CompletionRequestBuilder().model("other").prompt("hi").build()
    assert (request.model, request.prompt) == ("other", "hi")
    with pytest.raises(ModelUnavailable) as info:
        await EchoProvider().completion(request)
    assert info.value.model == "other"
    assert "other" in str(info.value)