"""
Single entrypoint for the Agent Workspace service.

Run: uvicorn agent_workspace.main:app --reload  (or python -m agent_workspace)
"""
from fastapi import FastAPI

from agent_workspace import __version__
from agent_workspace.api import register_routes
from agent_workspace.core.logging_config import configure_logging


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.
    """
    configure_logging()

    app = FastAPI(
        title="Agent Workspace",
        description=(
            "Thin assistant service over interchangeable LLM backends: "
            "OpenAI, Anthropic, GitHub Models and a local Ollama server."
        ),
        version=__version__,
    )

    register_routes(app)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "agent_workspace.main:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
    )
