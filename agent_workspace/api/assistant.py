import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from agent_workspace.agents.assistant_agent import AssistantAgent
from agent_workspace.core.errors import AgentError, ErrorKind
from agent_workspace.schemas.assistant import AskRequest, ChatRequest
from agent_workspace.schemas.messages import AgentResponse


router = APIRouter()

# Single shared instance so the provider and its HTTP connection pool are reused.
_agent: AssistantAgent | None = None


def get_agent() -> AssistantAgent:
    global _agent
    if _agent is None:
        try:
            _agent = AssistantAgent()
        except AgentError as exc:
            raise _to_http_error(exc) from exc
    return _agent


def _to_http_error(exc: AgentError) -> HTTPException:
    if exc.kind in (ErrorKind.CONFIG, ErrorKind.UNSUPPORTED_BACKEND):
        code = status.HTTP_400_BAD_REQUEST
    elif exc.kind is ErrorKind.INVALID_REQUEST:
        code = 422
    elif exc.kind is ErrorKind.TRANSPORT and isinstance(exc.__cause__, httpx.TimeoutException):
        code = status.HTTP_504_GATEWAY_TIMEOUT
    else:
        code = status.HTTP_502_BAD_GATEWAY
    return HTTPException(status_code=code, detail=str(exc))


@router.get("/provider", summary="Describe the configured provider")
async def describe_provider(agent: AssistantAgent = Depends(get_agent)) -> dict:
    return {"name": agent.provider_name}


@router.post(
    "/ask",
    response_model=AgentResponse,
    summary="Ask a single question",
)
async def ask(
    payload: AskRequest,
    agent: AssistantAgent = Depends(get_agent),
) -> AgentResponse:
    try:
        return await agent.ask(payload.question)
    except AgentError as exc:
        raise _to_http_error(exc) from exc


@router.post(
    "/chat",
    response_model=AgentResponse,
    summary="Continue a multi-turn conversation",
)
async def chat(
    payload: ChatRequest,
    agent: AssistantAgent = Depends(get_agent),
) -> AgentResponse:
    """
    Send the full ordered conversation. The last message must be a user turn.
    """
    try:
        return await agent.chat(payload.messages)
    except AgentError as exc:
        raise _to_http_error(exc) from exc
