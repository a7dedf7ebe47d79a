"""Form session state machine for creating and editing records."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from meal_planner.domain.errors import ValidationError, ViewStateError
from meal_planner.domain.records import FormDraft, MealRecord
from meal_planner.services.records import RecordStore, SaveResult

_logger = logging.getLogger(__name__)


@dataclass
class FormSession:
    """Owns the draft being edited.

    The session is Closed while `draft` is None and Editing otherwise. A
    failed save keeps the draft and sets `error`; only a successful save or a
    cancel closes it.
    """

    store: RecordStore
    today: Callable[[], date] = date.today
    draft: FormDraft | None = None
    error: str | None = None

    @property
    def is_open(self) -> bool:
        return self.draft is not None

    def open_new(self) -> FormDraft:
        """Start a new record dated today."""
        self.draft = FormDraft.blank(self.today())
        self.error = None
        return self.draft

    def open_edit(self, record: MealRecord) -> FormDraft:
        """Start editing a copy of an existing record."""
        self.draft = FormDraft.from_record(record)
        self.error = None
        return self.draft

    def set_field(self, name: str, value: object) -> FormDraft:
        """Replace one field of the open draft."""
        self.draft = self._require_draft().with_field(name, value)
        return self.draft

    def cancel(self) -> None:
        """Discard the draft without touching the backend."""
        self.draft = None
        self.error = None

    async def save(self) -> SaveResult:
        """Validate and persist the draft, closing the form on success."""
        draft = self._require_draft()
        self.error = None
        try:
            draft.validate()
        except ValidationError as exc:
            self.error = str(exc)
            return SaveResult(ok=False, message=self.error)

        if draft.editing_id is None:
            result = await self.store.create(draft)
        else:
            result = await self.store.update(draft.editing_id, draft)

        if result.ok:
            self.draft = None
        else:
            self.error = result.message
            _logger.info("Form save kept open: %s", result.message)
        return result

    def _require_draft(self) -> FormDraft:
        if self.draft is None:
            raise ViewStateError("No record is being edited")
        return self.draft
