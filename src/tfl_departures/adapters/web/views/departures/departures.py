"""Departures LiveView for the twin-station board."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from typing import Any

from pyview import LiveView, LiveViewSocket, is_connected
from pyview.events import InfoEvent
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from tfl_departures.adapters.config import AppConfig
from tfl_departures.adapters.web.builders import BoardViewBuilder
from tfl_departures.adapters.web.formatters import DepartureFormatter
from tfl_departures.adapters.web.state import BoardState, State
from tfl_departures.domain.ports import (
    SuggestionService,  # noqa: TC001 - Runtime dependency: methods called at runtime
)

logger = logging.getLogger(__name__)

TEMPLATE_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "departures.html")
_REFRESH_MESSAGES = ("update", "tick")


class DeparturesLiveView(LiveView[BoardState]):
    """LiveView showing the suggestion panel and the departure table."""

    def __init__(
        self,
        state_manager: State,
        suggestion_service: SuggestionService,
        config: AppConfig,
    ) -> None:
        """Initialize the LiveView.

        Args:
            state_manager: Shared state for the board.
            suggestion_service: Service classifying departures and picking suggestions.
            config: Application configuration.
        """
        super().__init__()
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(suggestion_service, "suggest", None)):
            raise TypeError("suggestion_service must implement SuggestionService protocol")

        self.state_manager = state_manager
        self.config = config
        self.formatter = DepartureFormatter(config)
        self.view_builder = BoardViewBuilder(suggestion_service, self.formatter)
        self._template: ibis.Template | None = None

    def _update_context_from_state(self, socket: LiveViewSocket[BoardState]) -> None:
        """Copy the shared board state into the socket context."""
        socket.context = self.state_manager.snapshot()

    def _build_template_assigns(self, state: BoardState) -> dict[str, Any]:
        """Build template assigns from state at the state's reference instant."""
        now = state.now or datetime.now(UTC)
        board_data = self.view_builder.build(state.departures, now)

        theme = self.config.theme.lower()
        if theme not in ("light", "dark", "auto"):
            theme = "auto"

        return {
            **board_data,
            "title": self.config.title,
            "theme": theme,
            "api_status": state.api_status or "unknown",
            "update_time": self.formatter.format_update_time(state.last_update),
        }

    def _load_template(self) -> ibis.Template:
        if self._template is None:
            with open(TEMPLATE_FILE, encoding="utf-8") as f:
                self._template = ibis.Template(f.read())
        return self._template

    async def mount(self, socket: LiveViewSocket[BoardState], _session: dict) -> None:
        """Mount the LiveView and subscribe to board updates."""
        self.state_manager.register_socket(socket)
        socket.context = self.state_manager.snapshot()

        if is_connected(socket):
            try:
                await socket.subscribe(self.state_manager.broadcast_topic)
                logger.info(
                    f"Subscribed socket to broadcast topic: {self.state_manager.broadcast_topic}"
                )
            except Exception as e:
                logger.error(
                    f"Failed to subscribe to topic {self.state_manager.broadcast_topic}: {e}",
                    exc_info=True,
                )
        else:
            logger.debug("Socket not connected during mount, will receive updates when connected")

    async def unmount(self, socket: LiveViewSocket[BoardState]) -> None:
        """Unmount the LiveView and unregister socket."""
        self.state_manager.unregister_socket(socket)

    async def disconnect(self, socket: LiveViewSocket[BoardState]) -> None:
        """Handle socket disconnection."""
        self.state_manager.unregister_socket(socket)

    async def handle_info(
        self, event: str | InfoEvent, socket: LiveViewSocket[BoardState]
    ) -> None:
        """Handle update and tick messages from pubsub."""
        payload = event.payload if isinstance(event, InfoEvent) else event
        if payload in _REFRESH_MESSAGES:
            self._update_context_from_state(socket)
            return

        logger.debug(f"Ignoring unexpected info message: {event}")

    async def render(self, assigns: BoardState | dict, meta: Any) -> Any:
        """Render the HTML template."""
        state = assigns if isinstance(assigns, BoardState) else self.state_manager.board_state
        try:
            template_assigns = self._build_template_assigns(state)
            live_template = LiveTemplate(self._load_template())
            return LiveRender(live_template, template_assigns, meta)
        except Exception as e:
            logger.error(f"Error rendering template: {e}", exc_info=True)
            error_template = ibis.Template("<div>Error rendering board: {{ error }}</div>")
            return LiveRender(LiveTemplate(error_template), {"error": str(e)}, meta)


def create_departures_live_view(
    state_manager: State,
    suggestion_service: SuggestionService,
    config: AppConfig,
) -> type[DeparturesLiveView]:
    """Create a configured DeparturesLiveView class.

    PyView's add_live_view expects a class, not an instance, so the
    dependencies are captured in a subclass.
    """
    captured_state = state_manager
    captured_suggestion_service = suggestion_service
    captured_config = config

    class ConfiguredDeparturesLiveView(DeparturesLiveView):
        """Configured LiveView for the board."""

        def __init__(self) -> None:
            super().__init__(captured_state, captured_suggestion_service, captured_config)

    return ConfiguredDeparturesLiveView
