"""Weather Dashboard: FastAPI backend serving the session state and controls."""

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from weatherdash.config.defaults import ENV_CONFIG_PATH
from weatherdash.config.loader import load_config
from weatherdash.config.schema import DashboardConfig
from weatherdash.reporting.formatters import state_to_dict
from weatherdash.state.controller import WeatherController

logger = logging.getLogger(__name__)


class CitySubmission(BaseModel):
    city: str


def create_app(
    config: DashboardConfig | None = None,
    controller: WeatherController | None = None,
) -> FastAPI:
    """Build the dashboard app around a single session controller.

    The controller is created from config (or WEATHERDASH_CONFIG and the
    environment) at startup, runs its seed refresh, and is closed at
    shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        ctrl = controller
        if ctrl is None:
            cfg = config or load_config(os.environ.get(ENV_CONFIG_PATH) or None)
            ctrl = WeatherController.from_config(cfg)
        app.state.controller = ctrl
        await ctrl.start()
        logger.info("Dashboard ready for %s (%s)", ctrl.state.city, ctrl.state.unit)
        try:
            yield
        finally:
            await ctrl.aclose()

    app = FastAPI(title="Weather Dashboard", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _controller(request: Request) -> WeatherController:
        return request.app.state.controller

    @app.get("/api/health")
    def get_health():
        return {"status": "ok"}

    @app.get("/api/state")
    def get_state(request: Request) -> dict[str, Any]:
        """Current session snapshot."""
        return state_to_dict(_controller(request).state)

    @app.post("/api/city")
    async def post_city(body: CitySubmission, request: Request) -> dict[str, Any]:
        """Search for a city. Rejected input is reported in the `error` field."""
        state = await _controller(request).submit_city(body.city)
        return state_to_dict(state)

    @app.post("/api/unit/toggle")
    async def post_toggle_unit(request: Request) -> dict[str, Any]:
        """Switch between metric and imperial."""
        state = await _controller(request).toggle_unit()
        return state_to_dict(state)

    return app
