"""CineXpress - FastAPI Application.

This module is the single entry point for the web application. It defines
the FastAPI application factory, the REST API routes, and the ``main()`` CLI
function that launches the uvicorn server. The Gradio UI is mounted at ``/``
on the same server.

Architecture
------------
- **Configuration** comes from :data:`~cinexpress.core.config.config`.
- **Generation** is performed by :class:`~cinexpress.core.client.GenerationClient`
  through :func:`~cinexpress.core.optimizer.optimize_prompt`; one external
  call per request.
- **History persistence** uses a single ``history.json`` file through
  :class:`~cinexpress.core.history.JsonHistoryStore`.

Both collaborators live on ``app.state`` so tests can inject fakes through
:func:`create_app`.

Endpoints
---------
========  ====================  ==========================================
Method    Path                  Purpose
========  ====================  ==========================================
GET       ``/api/config``       Version, option values and defaults
POST      ``/api/optimize``     Generate an optimized prompt
GET       ``/api/history``      Stored results, newest first
DELETE    ``/api/history``      Clear the stored history
GET       ``/``                 Gradio UI
========  ====================  ==========================================

Usage
-----
CLI (installed entry point)::

    cinexpress

Direct invocation::

    python -m cinexpress.api.main
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from cinexpress import __version__
from cinexpress.api.models import OptimizeRequest
from cinexpress.core.client import GenerationClient
from cinexpress.core.config import config
from cinexpress.core.errors import (
    HISTORY_CLEAR_ERROR_MESSAGE,
    GenerationError,
    StorageError,
    ValidationError,
)
from cinexpress.core.history import JsonHistoryStore
from cinexpress.core.optimizer import optimize_prompt
from cinexpress.core.options import PromptOptions, option_catalog

logger = logging.getLogger(__name__)


def create_app(client=None, history_store=None, mount_ui: bool = True) -> FastAPI:
    """Build the FastAPI application.

    Args:
        client: Generation client (default: built from config)
        history_store: History store (default: JSON file from config)
        mount_ui: Whether to mount the Gradio UI at ``/``

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="CineXpress",
        description="Cinematic prompt optimization API powered by Gemini.",
        version=__version__,
    )

    app.state.client = client if client is not None else GenerationClient.from_config(config)
    app.state.history_store = (
        history_store
        if history_store is not None
        else JsonHistoryStore(config.history_path, config.history_limit)
    )

    # Allow cross-origin requests so a separate frontend can call the API
    # during development.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_routes(app)

    if mount_ui:
        import gradio as gr

        from cinexpress.ui.app import create_ui

        app = gr.mount_gradio_app(app, create_ui(), path="/")

    return app


def _register_routes(app: FastAPI) -> None:
    @app.get("/api/config")
    async def get_config() -> dict:
        """Return the option catalogue for the frontend.

        Returns:
            Dictionary with ``version``, the four option lists, ``defaults``
            and ``max_reference_images``.
        """
        return {
            "version": __version__,
            **option_catalog(),
            "defaults": PromptOptions().to_dict(),
            "max_reference_images": config.max_reference_images,
        }

    @app.post("/api/optimize")
    def optimize(req: OptimizeRequest, request: Request) -> dict:
        """Generate an optimized prompt and store it in the history.

        Declared sync so the blocking Gemini call runs in the threadpool.

        Args:
            req: Validated :class:`OptimizeRequest` payload.

        Returns:
            Dictionary with ``result`` and ``historyItem`` (``None`` when the
            history could not be written; the result is still returned).

        Raises:
            HTTPException: 400 for empty input or invalid options/images,
                502 with the generic production message for any
                generation failure.
        """
        state = request.app.state
        try:
            options = req.options.to_options()
            result = optimize_prompt(
                req.text,
                [image.to_input() for image in req.images],
                options,
                state.client,
                max_images=config.max_reference_images,
            )
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        except GenerationError as e:
            raise HTTPException(status_code=502, detail=str(e)) from e

        try:
            item, _ = state.history_store.add(result)
        except (StorageError, OSError) as e:
            logger.warning(f"Result not stored in history: {e}")
            return {"result": result.to_dict(), "historyItem": None}

        return {"result": result.to_dict(), "historyItem": item.to_dict()}

    @app.get("/api/history")
    def get_history(request: Request) -> dict:
        """Return the stored history, newest first.

        Sync like ``optimize`` so the file read runs in the threadpool.
        """
        items = request.app.state.history_store.load()
        return {"total": len(items), "items": [item.to_dict() for item in items]}

    @app.delete("/api/history")
    def delete_history(request: Request) -> dict:
        """Clear the stored history.

        Raises:
            HTTPException: 503 if the history file cannot be removed
        """
        try:
            request.app.state.history_store.clear()
        except (StorageError, OSError) as e:
            logger.warning(f"Cannot clear history: {e}")
            raise HTTPException(
                status_code=503, detail=HISTORY_CLEAR_ERROR_MESSAGE
            ) from e
        return {"success": True}


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~cinexpress.core.config.config` (which
    loads from ``CINEXPRESS_SERVER_HOST`` and ``CINEXPRESS_SERVER_PORT``
    environment variables). Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``cinexpress`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Starting CineXpress {__version__} with model {config.model_name}")

    uvicorn.run(
        create_app(),
        host=config.server_host,
        port=config.server_port,
    )


if __name__ == "__main__":
    main()
