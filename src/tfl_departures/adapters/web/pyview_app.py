"""PyView web adapter for displaying the departure board."""

from __future__ import annotations

import logging
from typing import Any

from tfl_departures.adapters.config import AppConfig
from tfl_departures.domain.contracts import (
    BoardSchedulerProtocol,  # noqa: TC001 - Runtime dependency: methods called at runtime
)
from tfl_departures.domain.ports import DisplayAdapter, SuggestionService

from .state import State
from .views.departures import create_departures_live_view

logger = logging.getLogger(__name__)

BOARD_CSS = """
<style>
  .board { max-width: 42rem; margin: 2rem auto; font-family: system-ui, sans-serif; }
  .suggestion { padding: 1rem; border-radius: 0.5rem; margin-bottom: 1rem; }
  .suggestion-leave-now { background: #dcfce7; color: #14532d; }
  .suggestion-no-rush { background: #e0f2fe; color: #0c4a6e; }
  .suggestion-none { background: #f3f4f6; color: #374151; }
  .suggestion-label { font-weight: 600; font-size: 1.125rem; }
  .departures { width: 100%; border-collapse: collapse; }
  .departures th, .departures td { text-align: left; padding: 0.5rem; }
  .status-gettable td { font-weight: 600; }
  .status-too-soon td { color: #9ca3af; }
  .no-departures { text-align: center; }
  .theme-dark { background: #111827; color: #f9fafb; }
  @media (prefers-color-scheme: dark) {
    .theme-auto { background: #111827; color: #f9fafb; }
  }
</style>
"""


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter for the departure board."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        scheduler: BoardSchedulerProtocol,
        state: State,
        config: AppConfig,
    ) -> None:
        """Initialize the web adapter.

        Args:
            suggestion_service: Service classifying departures and picking suggestions.
            scheduler: Board scheduler writing into ``state``.
            state: Shared state for the board.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(scheduler, "start", None)) or not callable(
            getattr(scheduler, "stop", None)
        ):
            raise TypeError("scheduler must implement BoardSchedulerProtocol")

        self.suggestion_service = suggestion_service
        self.scheduler = scheduler
        self.state = state
        self.config = config
        self._server: Any | None = None

    def create_app(self) -> Any:
        """Create the PyView application with the board and health routes."""
        from markupsafe import Markup
        from pyview import PyView
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()
        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",
            css=Markup(BOARD_CSS),
        )

        live_view_class = create_departures_live_view(
            self.state, self.suggestion_service, self.config
        )
        app.add_live_view(self.state.route_path, live_view_class)
        logger.info(f"Registered board at path '{self.state.route_path}'")

        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        app.routes.append(Route("/healthz", healthz, methods=["GET"]))
        return app

    async def start(self) -> None:
        """Start the board timers and the web server."""
        import uvicorn

        app = self.create_app()
        await self.scheduler.start()

        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)
        try:
            await self._server.serve()
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Stop the board timers and the web server."""
        await self.scheduler.stop()
        if self._server:
            self._server.should_exit = True
