"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from meal_planner.adapters.meal_plan_client import HttpxMealPlanClient, MealPlanClient
from meal_planner.config import Settings
from meal_planner.services.planner import MealPlannerController
from meal_planner.services.records import RecordStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_plan_client: MealPlanClient
    controller: MealPlannerController
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    meal_plan_client = HttpxMealPlanClient.create(
        base_url=resolved_settings.api_base_url,
        timeout=resolved_settings.request_timeout_seconds,
    )
    controller = MealPlannerController.create(RecordStore(meal_plan_client))

    async def close_resources() -> None:
        await meal_plan_client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_plan_client=meal_plan_client,
        controller=controller,
        close_resources=close_resources,
    )
