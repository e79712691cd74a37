import asyncio
import json
from datetime import datetime

import httpx
import pytest

from agent_workspace.agents import AssistantAgent
from agent_workspace.core.errors import AgentError, ErrorKind
from agent_workspace.providers.ollama_provider import OllamaProvider
from agent_workspace.providers.openai_provider import OpenAIProvider
from agent_workspace.schemas.messages import Message

from conftest import RecordingBackend, json_response, make_config


def _echo_last_user_turn(request: httpx.Request) -> httpx.Response:
    messages = json.loads(request.content)["messages"]
    last_user = [m for m in messages if m["role"] == "user"][-1]
    return json_response(
        200,
        {
            "choices": [{"message": {"content": f"echo: {last_user['content']}"}}],
            "usage": {"prompt_tokens": 9, "completion_tokens": 2},
        },
    )


def _agent(backend: RecordingBackend) -> AssistantAgent:
    return AssistantAgent(OpenAIProvider(make_config("openai"), client=backend.client()))


def test_ask_returns_timestamped_envelope():
    backend = RecordingBackend(_echo_last_user_turn)
    agent = _agent(backend)

    response = asyncio.run(agent.ask("What is the capital of France?"))

    assert response.message == "echo: What is the capital of France?"
    assert isinstance(response.timestamp, datetime)
    assert response.timestamp.tzinfo is not None
    assert response.usage.input_tokens == 9
    assert backend.last_json["messages"] == [
        {"role": "user", "content": "What is the capital of France?"}
    ]


def test_chat_sends_full_history_in_order_without_duplication():
    backend = RecordingBackend(_echo_last_user_turn)
    agent = _agent(backend)
    conversation = [
        Message(role="user", content="What is 2+2?"),
        Message(role="assistant", content="4"),
        Message(role="user", content="Multiply that by 5"),
    ]

    response = asyncio.run(agent.chat(conversation))

    assert response.message == "echo: Multiply that by 5"
    assert len(backend.requests) == 1
    assert backend.last_json["messages"] == [
        {"role": "user", "content": "What is 2+2?"},
        {"role": "assistant", "content": "4"},
        {"role": "user", "content": "Multiply that by 5"},
    ]
    assert len(conversation) == 3


def test_chat_does_not_enforce_alternating_roles():
    backend = RecordingBackend(_echo_last_user_turn)
    agent = _agent(backend)
    conversation = [
        Message(role="user", content="first"),
        Message(role="user", content="second"),
    ]

    asyncio.run(agent.chat(conversation))

    assert [m["content"] for m in backend.last_json["messages"]] == ["first", "second"]


@pytest.mark.parametrize(
    "conversation",
    [
        [],
        [Message(role="user", content="hi"), Message(role="assistant", content="hello")],
        [{"role": "system", "content": "hi"}],
        [{"content": "no role"}],
    ],
)
def test_chat_rejects_unanswerable_conversation(conversation):
    backend = RecordingBackend(_echo_last_user_turn)

    with pytest.raises(AgentError) as excinfo:
        asyncio.run(_agent(backend).chat(conversation))

    assert str(excinfo.value).startswith("Agent error: ")
    assert excinfo.value.kind is ErrorKind.INVALID_REQUEST
    assert backend.requests == []


def test_chat_accepts_plain_dict_turns():
    backend = RecordingBackend(_echo_last_user_turn)
    conversation = [
        {"role": "user", "content": "What is 2+2?"},
        {"role": "assistant", "content": "4"},
        {"role": "user", "content": "Multiply that by 5"},
    ]

    response = asyncio.run(_agent(backend).chat(conversation))

    assert response.message == "echo: Multiply that by 5"
    assert backend.last_json["messages"] == conversation


def test_backend_error_is_wrapped_with_original_message():
    backend = RecordingBackend(
        lambda request: json_response(429, {"error": {"message": "Rate limit reached"}})
    )

    with pytest.raises(AgentError) as excinfo:
        asyncio.run(_agent(backend).ask("hi"))

    message = str(excinfo.value)
    assert message.startswith("Agent error: ")
    assert "Rate limit reached" in message
    assert excinfo.value.kind is ErrorKind.BACKEND


def test_transport_error_is_wrapped_and_classified():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AgentError) as excinfo:
        asyncio.run(_agent(RecordingBackend(refuse)).ask("hi"))

    assert "connection refused" in str(excinfo.value)
    assert excinfo.value.kind is ErrorKind.TRANSPORT
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_parse_error_is_wrapped_and_classified():
    backend = RecordingBackend(lambda request: httpx.Response(200, text="not json"))

    with pytest.raises(AgentError) as excinfo:
        asyncio.run(_agent(backend).ask("hi"))

    assert "not json" in str(excinfo.value)
    assert excinfo.value.kind is ErrorKind.PARSE


def test_exactly_one_call_per_failed_ask():
    backend = RecordingBackend(lambda request: json_response(500, {"error": {"message": "boom"}}))
    agent = _agent(backend)

    with pytest.raises(AgentError):
        asyncio.run(agent.ask("hi"))

    assert len(backend.requests) == 1


def test_no_argument_construction_reads_environment(monkeypatch):
    monkeypatch.setenv("AI_PROVIDER", "ollama")

    agent = AssistantAgent()

    assert isinstance(agent.provider, OllamaProvider)
    assert agent.provider_name == "Ollama (mistral) [Local]"
    asyncio.run(agent.close())


def test_no_argument_construction_without_key_fails_fast(monkeypatch):
    monkeypatch.setenv("AI_PROVIDER", "anthropic")

    with pytest.raises(AgentError) as excinfo:
        AssistantAgent()

    assert "AI_API_KEY" in str(excinfo.value)
    assert excinfo.value.kind is ErrorKind.CONFIG
