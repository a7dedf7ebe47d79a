"""Tests for view projections."""

import asyncio

import pytest

from meal_planner.services.forms import FormSession
from meal_planner.services.projector import ViewMode, ViewProjector, format_display_date
from meal_planner.services.records import RecordStore
from tests.conftest import FakeMealPlanClient, make_plan


def _projector(count: int) -> ViewProjector:
    plans = [
        make_plan(f"p{index}", f"{10 + index:02d}/05/2024") for index in range(count)
    ]
    store = RecordStore(FakeMealPlanClient(plans=plans))
    asyncio.run(store.load())
    return ViewProjector(store=store, form=FormSession(store))


@pytest.mark.parametrize("count", [0, 1, 2, 3, 4, 7])
def test_partition_sizes_and_order(count: int) -> None:
    projector = _projector(count)

    assert len(projector.recent) == min(count, 3)
    assert len(projector.older) == max(count - 3, 0)
    assert projector.recent + projector.older == projector.store.records


def test_single_record_has_no_older_partition() -> None:
    store = RecordStore(FakeMealPlanClient(plans=[make_plan("a", "10/05/2024", "60")]))
    asyncio.run(store.load())
    projector = ViewProjector(store=store, form=FormSession(store))

    assert [record.id for record in projector.recent] == ["a"]
    assert projector.older == []


def test_expand_is_single_select() -> None:
    projector = _projector(3)

    projector.toggle_expanded("p0")
    projector.toggle_expanded("p1")

    assert projector.expanded_id == "p1"
    assert [projector.is_expanded(record) for record in projector.recent] == [
        False,
        True,
        False,
    ]


def test_expand_same_record_collapses_it() -> None:
    projector = _projector(2)

    projector.toggle_expanded("p0")
    collapsed = projector.toggle_expanded("p0")

    assert collapsed is None
    assert projector.expanded_id is None


def test_mode_follows_form_session() -> None:
    projector = _projector(1)
    assert projector.mode is ViewMode.LIST

    projector.form.open_new()
    assert projector.mode is ViewMode.FORM

    projector.form.cancel()
    assert projector.mode is ViewMode.LIST


def test_format_display_date() -> None:
    assert format_display_date("10/05/2024") == "Fri, 10 May"
    assert format_display_date("01/12/2023") == "Fri, 1 Dec"


@pytest.mark.parametrize("raw", ["", "yesterday", "31/02/2024", "2024-05-10"])
def test_format_display_date_returns_unparsable_input(raw: str) -> None:
    assert format_display_date(raw) == raw
