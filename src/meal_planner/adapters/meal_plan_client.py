"""Meal-plan REST backend client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from meal_planner.config import normalize_base_url
from meal_planner.domain.errors import ApiError, TransportError


class MealPlanClient(Protocol):
    """Interface for the meal-plan backend."""

    async def list_meal_plans(self) -> list[dict[str, object]]:
        """Return the raw meal-plan payloads in backend order."""

    async def create_meal_plan(self, body: dict[str, object]) -> None:
        """Create a meal plan from a flat request body."""

    async def update_meal_plan(self, plan_id: str, body: dict[str, object]) -> None:
        """Replace a meal plan with a flat request body."""


@dataclass
class HttpxMealPlanClient(MealPlanClient):
    """HTTPX-backed meal-plan client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 10.0) -> "HttpxMealPlanClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=normalize_base_url(base_url),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def list_meal_plans(self) -> list[dict[str, object]]:
        """Fetch all meal plans."""
        envelope = await self._request("GET", "/meal-plans")
        data = envelope.get("data")
        if not isinstance(data, list):
            raise ApiError(_message(envelope))
        return data

    async def create_meal_plan(self, body: dict[str, object]) -> None:
        """POST a new meal plan."""
        await self._request("POST", "/meal-plans", body)

    async def update_meal_plan(self, plan_id: str, body: dict[str, object]) -> None:
        """PUT an existing meal plan."""
        await self._request("PUT", f"/meal-plans/{plan_id}", body)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self, method: str, path: str, body: dict[str, object] | None = None
    ) -> dict[str, object]:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(
                method, url, json=body, timeout=self.timeout
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        try:
            envelope = response.json()
        except ValueError as exc:
            raise TransportError(
                f"{method} {url} returned a non-JSON body "
                f"(status={response.status_code})"
            ) from exc
        if not isinstance(envelope, dict):
            raise TransportError(f"{method} {url} returned an unexpected body")
        if not envelope.get("success"):
            raise ApiError(_message(envelope))
        return envelope


def _message(envelope: dict[str, object]) -> str | None:
    message = envelope.get("message")
    if isinstance(message, str) and message:
        return message
    return None
