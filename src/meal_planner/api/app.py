"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request

from meal_planner.api.models import PageAction
from meal_planner.api.presenters import render_page
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer
from meal_planner.domain.errors import (
    RecordNotFoundError,
    ValidationError,
    ViewStateError,
)
from meal_planner.services.planner import MealPlannerController


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await app.state.container.controller.start()
        if app.state.container.controller.store.error:
            logger.warning(
                "Initial load failed: %s", app.state.container.controller.store.error
            )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/")
    async def page(request: Request) -> dict[str, Any]:
        """Return the current page."""
        state_container: AppContainer = request.app.state.container
        return render_page(state_container.controller)

    @app.post("/")
    async def page_action(action: PageAction, request: Request) -> dict[str, Any]:
        """Apply one user action and return the resulting page."""
        state_container: AppContainer = request.app.state.container
        controller = state_container.controller
        try:
            await _dispatch(controller, action)
        except RecordNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except (ViewStateError, ValidationError) as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return render_page(controller)

    return app


async def _dispatch(  # noqa: PLR0911
    controller: MealPlannerController, action: PageAction
) -> None:
    """Route a page action to the controller."""
    if action.action == "new":
        controller.new_record()
        return
    if action.action == "edit":
        controller.edit_record(_required(action.record_id, "record_id"))
        return
    if action.action == "toggle":
        controller.toggle_record(_required(action.record_id, "record_id"))
        return
    if action.action == "set_field":
        controller.set_field(_required(action.field, "field"), action.value)
        return
    if action.action == "save":
        await controller.save()
        return
    if action.action == "cancel":
        controller.cancel()
        return
    if action.action == "retry":
        await controller.retry()


def _required(value: str | None, name: str) -> str:
    if not value:
        raise ValidationError(f"Action requires {name}")
    return value
