"""Domain models for meal records and form drafts."""

from dataclasses import dataclass, replace
from datetime import date

from meal_planner.domain.errors import ValidationError

FLAG_FIELDS = ("workout", "creatine", "whey")
MEAL_FIELDS = (
    "breakfast",
    "morning_snack",
    "lunch",
    "pre_workout",
    "post_workout",
    "dinner",
    "bedtime_snack",
)
EDITABLE_FIELDS = (
    "date",
    "weight",
    *FLAG_FIELDS,
    *MEAL_FIELDS,
    "calories",
    "protein",
    "notes",
)


@dataclass(frozen=True)
class MealRecord:
    """One day's logged nutrition and fitness entry."""

    id: str | None
    date: str
    weight: str
    workout: bool = False
    creatine: bool = False
    whey: bool = False
    breakfast: str = ""
    morning_snack: str = ""
    lunch: str = ""
    pre_workout: str = ""
    post_workout: str = ""
    dinner: str = ""
    bedtime_snack: str = ""
    calories: str = ""
    protein: str = ""
    notes: str = ""
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True)
class FormDraft:
    """Editable copy of a record; `editing_id` is None when creating."""

    date: str = ""
    weight: str = ""
    workout: bool = False
    creatine: bool = False
    whey: bool = False
    breakfast: str = ""
    morning_snack: str = ""
    lunch: str = ""
    pre_workout: str = ""
    post_workout: str = ""
    dinner: str = ""
    bedtime_snack: str = ""
    calories: str = ""
    protein: str = ""
    notes: str = ""
    editing_id: str | None = None

    @classmethod
    def blank(cls, today: date) -> "FormDraft":
        """Return an empty draft dated today."""
        return cls(date=format_form_date(today))

    @classmethod
    def from_record(cls, record: MealRecord) -> "FormDraft":
        """Copy the editable fields of a record into a new draft."""
        values = {name: getattr(record, name) for name in EDITABLE_FIELDS}
        return cls(editing_id=record.id, **values)

    @property
    def is_new(self) -> bool:
        return self.editing_id is None

    def with_field(self, name: str, value: object) -> "FormDraft":
        """Return a copy with exactly one editable field replaced."""
        if name not in EDITABLE_FIELDS:
            raise ValidationError(f"Unknown field: {name}")
        if name in FLAG_FIELDS:
            if not isinstance(value, bool):
                raise ValidationError(f"{name} must be true or false")
            return replace(self, **{name: value})
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{name} must be text")
        return replace(self, **{name: value or ""})

    def validate(self) -> None:
        """Raise ValidationError when a required field is empty."""
        if not self.date or not self.weight:
            raise ValidationError("Date and weight are required fields")


def format_form_date(value: date) -> str:
    """Format a date the way records store it (DD/MM/YYYY)."""
    return value.strftime("%d/%m/%Y")
