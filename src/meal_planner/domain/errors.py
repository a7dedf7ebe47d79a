"""Error taxonomy for the meal planner client."""


class MealPlannerError(Exception):
    """Base class for meal planner errors."""


class ValidationError(MealPlannerError):
    """Raised when a draft fails local validation."""


class TransportError(MealPlannerError):
    """Raised when a request cannot be sent or its response cannot be read."""


class ApiError(MealPlannerError):
    """Raised when the backend answers with an unsuccessful envelope."""

    def __init__(self, message: str | None) -> None:
        super().__init__(message or "Backend request failed")
        self.message = message


class ViewStateError(MealPlannerError):
    """Raised when an action is not available in the current view."""


class RecordNotFoundError(MealPlannerError):
    """Raised when an action names a record that is not loaded."""
