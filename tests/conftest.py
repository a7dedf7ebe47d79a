"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from meal_planner.adapters.meal_plan_client import MealPlanClient
from meal_planner.config import Settings
from meal_planner.containers import AppContainer
from meal_planner.services.planner import MealPlannerController
from meal_planner.services.records import RecordStore


def make_plan(  # noqa: PLR0913
    plan_id: str,
    date: str,
    weight: str = "60",
    *,
    calories: str = "",
    protein: str = "",
    workout: bool = False,
    breakfast: str = "",
    notes: str = "",
) -> dict[str, object]:
    """Build a nested meal-plan payload as the backend returns it."""
    return {
        "_id": plan_id,
        "date": date,
        "weight": weight,
        "workout": workout,
        "creatine": False,
        "whey": False,
        "meals": {
            "breakfast": breakfast,
            "morningSnack": "",
            "lunch": "",
            "preWorkout": "",
            "postWorkout": "",
            "dinner": "",
            "bedtimeSnack": "",
        },
        "nutrition": {"calories": calories, "protein": protein},
        "notes": notes,
        "createdAt": "2024-05-10T08:00:00.000Z",
        "updatedAt": "2024-05-10T08:00:00.000Z",
    }


@dataclass
class FakeMealPlanClient(MealPlanClient):
    """In-memory backend that records every call."""

    plans: list[dict[str, object]] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    bodies: list[dict[str, object]] = field(default_factory=list)
    list_error: Exception | None = None
    write_error: Exception | None = None
    on_list: Callable[[], None] | None = None

    async def list_meal_plans(self) -> list[dict[str, object]]:
        self.calls.append("list")
        if self.on_list is not None:
            self.on_list()
        if self.list_error is not None:
            raise self.list_error
        return [dict(plan) for plan in self.plans]

    async def create_meal_plan(self, body: dict[str, object]) -> None:
        self.calls.append("create")
        self.bodies.append(body)
        if self.write_error is not None:
            raise self.write_error
        self.plans.insert(0, _nest(f"plan-{len(self.plans) + 1}", body))

    async def update_meal_plan(self, plan_id: str, body: dict[str, object]) -> None:
        self.calls.append(f"update:{plan_id}")
        self.bodies.append(body)
        if self.write_error is not None:
            raise self.write_error
        self.plans = [
            _nest(plan_id, body) if plan["_id"] == plan_id else plan
            for plan in self.plans
        ]


def _nest(plan_id: str, body: dict[str, object]) -> dict[str, object]:
    meal_keys = (
        "breakfast",
        "morningSnack",
        "lunch",
        "preWorkout",
        "postWorkout",
        "dinner",
        "bedtimeSnack",
    )
    return {
        "_id": plan_id,
        "date": body["date"],
        "weight": body["weight"],
        "workout": body["workout"],
        "creatine": body["creatine"],
        "whey": body["whey"],
        "meals": {key: body[key] for key in meal_keys},
        "nutrition": {"calories": body["calories"], "protein": body["protein"]},
        "notes": body["notes"],
        "createdAt": "2024-05-11T08:00:00.000Z",
        "updatedAt": "2024-05-11T08:00:00.000Z",
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="https://api.test/api/")


@pytest.fixture
def meal_plan_client() -> FakeMealPlanClient:
    return FakeMealPlanClient(
        plans=[
            make_plan("p5", "14/05/2024", "59.3", calories="2380", protein="132"),
            make_plan("p4", "13/05/2024", "59.5", workout=True),
            make_plan("p3", "12/05/2024", "59.8"),
            make_plan("p2", "11/05/2024", "60.0", calories="2100"),
            make_plan("p1", "10/05/2024", "60.2"),
        ]
    )


@pytest.fixture
def container(
    settings: Settings, meal_plan_client: FakeMealPlanClient
) -> AppContainer:
    controller = MealPlannerController.create(RecordStore(meal_plan_client))

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        meal_plan_client=meal_plan_client,
        controller=controller,
        close_resources=close_resources,
    )
