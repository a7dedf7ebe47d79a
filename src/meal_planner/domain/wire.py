"""Serialization between backend meal-plan payloads and domain records.

The backend nests meals and nutrition when it returns plans but expects the
flat camelCase shape on writes. Both directions are kept as separate
functions so each rule can be checked on its own.
"""

from meal_planner.domain.errors import TransportError
from meal_planner.domain.records import EDITABLE_FIELDS, FormDraft, MealRecord

_WIRE_NAMES = {
    "morning_snack": "morningSnack",
    "pre_workout": "preWorkout",
    "post_workout": "postWorkout",
    "bedtime_snack": "bedtimeSnack",
}


def wire_name(field_name: str) -> str:
    """Return the camelCase wire key for a record attribute."""
    return _WIRE_NAMES.get(field_name, field_name)


def record_from_wire(plan: dict[str, object]) -> MealRecord:
    """Flatten a nested meal-plan payload into a MealRecord."""
    meals = plan.get("meals") or {}
    nutrition = plan.get("nutrition") or {}
    return MealRecord(
        id=_optional_text(plan.get("_id")),
        date=_text(plan.get("date")),
        weight=_text(plan.get("weight")),
        workout=bool(plan.get("workout")),
        creatine=bool(plan.get("creatine")),
        whey=bool(plan.get("whey")),
        breakfast=_text(meals.get("breakfast")),
        morning_snack=_text(meals.get("morningSnack")),
        lunch=_text(meals.get("lunch")),
        pre_workout=_text(meals.get("preWorkout")),
        post_workout=_text(meals.get("postWorkout")),
        dinner=_text(meals.get("dinner")),
        bedtime_snack=_text(meals.get("bedtimeSnack")),
        calories=_text(nutrition.get("calories")),
        protein=_text(nutrition.get("protein")),
        notes=_text(plan.get("notes")),
        created_at=_optional_text(plan.get("createdAt")),
        updated_at=_optional_text(plan.get("updatedAt")),
    )


def record_to_wire(source: FormDraft | MealRecord) -> dict[str, object]:
    """Build the flat request body for POST and PUT calls."""
    return {wire_name(name): getattr(source, name) for name in EDITABLE_FIELDS}


def records_from_envelope(data: list[dict[str, object]]) -> list[MealRecord]:
    """Transform the `data` list of a fetch envelope, keeping its order."""
    try:
        return [record_from_wire(plan) for plan in data]
    except (AttributeError, TypeError) as exc:
        raise TransportError(f"Malformed meal plan payload: {exc}") from exc


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
