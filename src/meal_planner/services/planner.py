"""Session-scoped controller for the meal planner page."""

import logging
from dataclasses import dataclass

from meal_planner.domain.errors import RecordNotFoundError, ViewStateError
from meal_planner.domain.records import FormDraft
from meal_planner.services.forms import FormSession
from meal_planner.services.projector import ViewMode, ViewProjector
from meal_planner.services.records import RecordStore, SaveResult

_logger = logging.getLogger(__name__)


@dataclass
class MealPlannerController:
    """Routes user actions to the store, form session and projector.

    Mirrors the page's button discipline: "New Record" is unavailable while
    loading, and Save/Cancel are unavailable while a write is in flight.
    """

    store: RecordStore
    form: FormSession
    projector: ViewProjector

    @classmethod
    def create(
        cls, store: RecordStore, form: FormSession | None = None
    ) -> "MealPlannerController":
        """Wire a controller around a store."""
        resolved_form = form or FormSession(store)
        return cls(
            store=store,
            form=resolved_form,
            projector=ViewProjector(store=store, form=resolved_form),
        )

    @property
    def mode(self) -> ViewMode:
        return self.projector.mode

    async def start(self) -> None:
        """Load the collection when the page is first shown."""
        await self.store.load()

    async def retry(self) -> None:
        """Reload after a failed fetch."""
        await self.store.load()

    def new_record(self) -> FormDraft:
        self._require_mode(ViewMode.LIST)
        if self.store.loading:
            raise ViewStateError("Records are still loading")
        return self.form.open_new()

    def edit_record(self, record_id: str) -> FormDraft:
        self._require_mode(ViewMode.LIST)
        record = self.store.get(record_id)
        if record is None:
            raise RecordNotFoundError(f"No record with id {record_id}")
        return self.form.open_edit(record)

    def toggle_record(self, record_id: str) -> str | None:
        self._require_mode(ViewMode.LIST)
        if self.store.get(record_id) is None:
            raise RecordNotFoundError(f"No record with id {record_id}")
        if all(record.id != record_id for record in self.projector.recent):
            raise ViewStateError("Only recent records can be expanded")
        return self.projector.toggle_expanded(record_id)

    def set_field(self, name: str, value: object) -> FormDraft:
        return self.form.set_field(name, value)

    async def save(self) -> SaveResult:
        self._require_mode(ViewMode.FORM)
        self._require_idle()
        result = await self.form.save()
        if result.ok:
            _logger.info("Record saved; showing list")
        return result

    def cancel(self) -> None:
        self._require_mode(ViewMode.FORM)
        self._require_idle()
        self.form.cancel()

    def _require_mode(self, mode: ViewMode) -> None:
        if self.mode is not mode:
            raise ViewStateError(f"Action requires the {mode.value} view")

    def _require_idle(self) -> None:
        if self.store.saving:
            raise ViewStateError("A save is already in progress")
