"""Record store backed by the meal-plan backend."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from meal_planner.adapters.meal_plan_client import MealPlanClient
from meal_planner.domain.errors import ApiError, TransportError
from meal_planner.domain.records import FormDraft, MealRecord
from meal_planner.domain.wire import record_to_wire, records_from_envelope

CONNECTION_ERROR = (
    "Failed to connect to server. Please check if the backend is running."
)
FETCH_ERROR = "Failed to fetch meal plans"
CREATE_ERROR = "Failed to save meal plan"
UPDATE_ERROR = "Failed to update meal plan"

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a create or update call."""

    ok: bool
    message: str | None = None


@dataclass
class RecordStore:
    """Holds the fetched collection and runs backend operations.

    The backend is the only source of truth: every successful write is
    followed by a full reload rather than a local patch of `records`.
    """

    client: MealPlanClient
    records: list[MealRecord] = field(default_factory=list)
    loading: bool = False
    error: str | None = None
    _writes_in_flight: int = field(default=0, init=False, repr=False)

    @property
    def saving(self) -> bool:
        return self._writes_in_flight > 0

    def get(self, record_id: str) -> MealRecord | None:
        """Return a record by id, if present."""
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    async def load(self) -> None:
        """Fetch the full collection and replace the local copy."""
        self.loading = True
        self.error = None
        try:
            payload = await self.client.list_meal_plans()
            records = records_from_envelope(payload)
        except TransportError as exc:
            _logger.warning("Meal plan fetch failed: %s", exc)
            self.error = CONNECTION_ERROR
        except ApiError as exc:
            _logger.warning("Meal plan fetch rejected: %s", exc)
            self.error = exc.message or FETCH_ERROR
        else:
            self.records = records
            _logger.info("Loaded meal plans: count=%s", len(records))
        finally:
            self.loading = False

    async def create(self, draft: FormDraft) -> SaveResult:
        """Create a record, then reload the collection."""
        return await self._write(
            self.client.create_meal_plan,
            draft,
            action="create",
            fallback=CREATE_ERROR,
        )

    async def update(self, record_id: str, draft: FormDraft) -> SaveResult:
        """Update a record, then reload the collection."""
        return await self._write(
            lambda body: self.client.update_meal_plan(record_id, body),
            draft,
            action=f"update:{record_id}",
            fallback=UPDATE_ERROR,
        )

    async def _write(
        self,
        send: "Callable[[dict[str, object]], Awaitable[None]]",
        draft: FormDraft,
        *,
        action: str,
        fallback: str,
    ) -> SaveResult:
        self._writes_in_flight += 1
        try:
            try:
                await send(record_to_wire(draft))
            except TransportError as exc:
                _logger.warning("Meal plan %s failed: %s", action, exc)
                return SaveResult(ok=False, message=fallback)
            except ApiError as exc:
                _logger.warning("Meal plan %s rejected: %s", action, exc)
                return SaveResult(ok=False, message=exc.message or fallback)
            _logger.info("Meal plan %s succeeded", action)
            await self.load()
            return SaveResult(ok=True)
        finally:
            self._writes_in_flight -= 1
