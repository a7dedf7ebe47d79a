"""Pydantic models for page actions."""

from typing import Literal

from pydantic import BaseModel


class PageAction(BaseModel):
    """One user action posted to the page."""

    action: Literal["new", "edit", "set_field", "save", "cancel", "toggle", "retry"]
    record_id: str | None = None
    field: str | None = None
    value: str | bool | None = None
