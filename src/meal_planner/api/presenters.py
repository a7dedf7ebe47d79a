"""Page view models built from controller state."""

from meal_planner.domain.records import MealRecord
from meal_planner.services.planner import MealPlannerController
from meal_planner.services.projector import ViewMode, format_display_date

_MEAL_LINES = (
    ("breakfast", "B", ""),
    ("morning_snack", "MS", ""),
    ("lunch", "L", ""),
    ("pre_workout", "PreW", ""),
    ("post_workout", "PostW", ""),
    ("dinner", "D", ""),
    ("bedtime_snack", "BB", ""),
)
_NUTRITION_LINES = (
    ("calories", "Calories", " kcal"),
    ("protein", "Protein", "g"),
    ("notes", "Notes", ""),
)
_BADGES = (
    ("workout", "Workout"),
    ("creatine", "Creatine"),
    ("whey", "Whey"),
)

FORM_SECTIONS: tuple[tuple[str, tuple[tuple[str, str, str], ...]], ...] = (
    (
        "Basic Info",
        (
            ("date", "Date *", "DD/MM/YYYY"),
            ("weight", "Weight (kg) *", "59.3"),
            ("workout", "Workout", ""),
            ("creatine", "Creatine", ""),
            ("whey", "Whey", ""),
        ),
    ),
    (
        "Meals",
        (
            ("breakfast", "Breakfast (B)", "3 boiled eggs + oats + milk"),
            ("morning_snack", "Morning Snack (MS)", "1 apple + 10 almonds"),
            ("lunch", "Lunch (L)", "2 roti + paneer curry + sabzi + curd"),
            ("pre_workout", "Pre-Workout (PreW)", "1 scoop whey + banana"),
            (
                "post_workout",
                "Post-Workout (PostW)",
                "4 egg whites + 1 toast + creatine",
            ),
            ("dinner", "Dinner (D)", "2 phulkas + dal + lauki sabzi + salad"),
            ("bedtime_snack", "Bedtime Snack (BB)", "1 cup milk + 1 tsp chia seeds"),
        ),
    ),
    (
        "Nutrition",
        (
            ("calories", "Approx Calories (kcal)", "2380"),
            ("protein", "Protein Estimate (g)", "132"),
        ),
    ),
    (
        "Notes",
        (
            (
                "notes",
                "Notes",
                "Energy good. Felt full. Need to add more fats maybe.",
            ),
        ),
    ),
)


def render_page(controller: MealPlannerController) -> dict[str, object]:
    """Return the view model for whichever view is active."""
    if controller.mode is ViewMode.FORM:
        return render_form(controller)
    return render_list(controller)


def render_list(controller: MealPlannerController) -> dict[str, object]:
    """Build the list view: header, status, recent and previous records."""
    store = controller.store
    projector = controller.projector
    page: dict[str, object] = {
        "view": ViewMode.LIST.value,
        "title": "Meal Planner",
        "subtitle": "Track your daily nutrition and progress",
        "new_record": {"label": "New Record", "disabled": store.loading},
        "loading": store.loading,
        "sections": [],
    }
    if store.loading:
        page["status"] = "Loading meal plans..."
        return page
    if store.error:
        page["error"] = {
            "title": "Error",
            "message": store.error,
            "retry": "Try again",
        }

    sections: list[dict[str, object]] = []
    if store.records:
        sections.append(
            {
                "title": "Recent Records",
                "records": [
                    _recent_card(record, projector.is_expanded(record))
                    for record in projector.recent
                ],
            }
        )
    if projector.older:
        sections.append(
            {
                "title": "Previous Records",
                "records": [_older_row(record) for record in projector.older],
            }
        )
    page["sections"] = sections
    if not store.records and not store.error:
        page["empty"] = {
            "title": "No meal records yet",
            "message": (
                "Start tracking your meals and nutrition by creating your "
                "first record."
            ),
            "action": "Create First Record",
        }
    return page


def render_form(controller: MealPlannerController) -> dict[str, object]:
    """Build the form view for the open draft."""
    draft = controller.form.draft
    if draft is None:
        return render_list(controller)
    saving = controller.store.saving
    return {
        "view": ViewMode.FORM.value,
        "title": "New Meal Record" if draft.is_new else "Edit Meal Record",
        "editing_id": draft.editing_id,
        "error": controller.form.error,
        "sections": [
            {
                "title": title,
                "fields": [
                    {
                        "name": name,
                        "label": label,
                        "placeholder": placeholder,
                        "value": getattr(draft, name),
                    }
                    for name, label, placeholder in field_specs
                ],
            }
            for title, field_specs in FORM_SECTIONS
        ],
        "saving": saving,
        "save": {
            "label": "Saving..." if saving else "Save Record",
            "disabled": saving,
        },
        "cancel": {"label": "Cancel", "disabled": saving},
    }


def _recent_card(record: MealRecord, expanded: bool) -> dict[str, object]:
    card: dict[str, object] = {
        "id": record.id,
        "date": format_display_date(record.date),
        "weight": f"{record.weight} kg",
        "badges": [label for name, label in _BADGES if getattr(record, name)],
        "expanded": expanded,
    }
    if expanded:
        card["details"] = [
            {"title": "Meals", "lines": _lines(record, _MEAL_LINES)},
            {
                "title": "Nutrition & Notes",
                "lines": _lines(record, _NUTRITION_LINES),
            },
        ]
    else:
        summary = []
        if record.calories:
            summary.append(f"{record.calories} kcal")
        if record.protein:
            summary.append(f"{record.protein}g protein")
        card["summary"] = summary
    return card


def _older_row(record: MealRecord) -> dict[str, object]:
    return {
        "id": record.id,
        "date": format_display_date(record.date),
        "weight": f"{record.weight} kg",
        "calories": f"{record.calories} kcal" if record.calories else None,
    }


def _lines(
    record: MealRecord, labels: tuple[tuple[str, str, str], ...]
) -> list[str]:
    return [
        f"{label}: {getattr(record, name)}{suffix}"
        for name, label, suffix in labels
        if getattr(record, name)
    ]
