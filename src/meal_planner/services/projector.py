"""View projections over the record store."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from meal_planner.domain.records import MealRecord
from meal_planner.services.forms import FormSession
from meal_planner.services.records import RecordStore

RECENT_COUNT = 3


class ViewMode(Enum):
    """Which page is displayed."""

    LIST = "list"
    FORM = "form"


@dataclass
class ViewProjector:
    """Derives what the page shows from the store and form session."""

    store: RecordStore
    form: FormSession
    expanded_id: str | None = None

    @property
    def mode(self) -> ViewMode:
        return ViewMode.FORM if self.form.is_open else ViewMode.LIST

    @property
    def recent(self) -> list[MealRecord]:
        return self.store.records[:RECENT_COUNT]

    @property
    def older(self) -> list[MealRecord]:
        return self.store.records[RECENT_COUNT:]

    def toggle_expanded(self, record_id: str) -> str | None:
        """Expand a record, or collapse it if it is already expanded."""
        self.expanded_id = None if self.expanded_id == record_id else record_id
        return self.expanded_id

    def is_expanded(self, record: MealRecord) -> bool:
        return record.id is not None and record.id == self.expanded_id


def format_display_date(value: str) -> str:
    """Render DD/MM/YYYY as a short weekday label, e.g. 'Fri, 10 May'.

    Strings that do not parse are returned unchanged.
    """
    try:
        parsed = datetime.strptime(value.strip(), "%d/%m/%Y")
    except (AttributeError, ValueError):
        return value
    return f"{parsed:%a}, {parsed.day} {parsed:%b}"
