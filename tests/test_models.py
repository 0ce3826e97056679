"""Tests for series membership bookkeeping and the viewer models."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter

import ao3_series.exceptions
from ao3_series import Admin, Guest, User, Work
from ao3_series.core.enums import ViewerType
from ao3_series.core.models import Viewer
from tests.factories import make_series


def test_add_work_appends_after_highest_position(pseuds) -> None:
    series = make_series(Work(id=1), Work(id=2), authors=[pseuds["alice"]])
    series.memberships[0].position = 7

    membership = series.add_work(Work(id=3))

    assert membership.id == 3
    assert membership.position == 8
    assert [work.id for work in series.works] == [2, 1, 3]


def test_remove_work_drops_its_membership(pseuds) -> None:
    series = make_series(Work(id=1), Work(id=2), authors=[pseuds["alice"]])

    removed = series.remove_work(1)

    assert removed is not None and removed.work.id == 1
    assert [work.id for work in series.works] == [2]
    assert series.remove_work(99) is None


def test_anonymous_and_unrevealed_follow_any_work(pseuds) -> None:
    series = make_series(Work(id=1), Work(id=2, unrevealed=True), authors=[pseuds["alice"]])

    assert not series.anonymous
    assert series.unrevealed


def test_work_remove_author_keeps_at_least_one(pseuds, alice, bob) -> None:
    work = Work(id=1, authors=[pseuds["alice"], pseuds["bob"]])

    work.remove_author(alice)

    assert work.authors == [pseuds["bob"]]
    with pytest.raises(ao3_series.exceptions.LastAuthorError):
        work.remove_author(bob)
    assert work.authors == [pseuds["bob"]]


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"viewer_type": ViewerType.ADMIN, "id": 1}, Admin),
        ({"viewer_type": ViewerType.USER, "id": 2, "pseuds": [{"id": 1, "name": "alice", "user_id": 2}]}, User),
        ({"viewer_type": ViewerType.GUEST}, Guest),
    ],
)
def test_viewer_payloads_pick_their_model(payload, expected) -> None:
    viewer = TypeAdapter(Viewer).validate_python(payload)

    assert isinstance(viewer, expected)


def test_add_work_credits_its_authors_on_the_series(pseuds) -> None:
    series = make_series(authors=[pseuds["alice"]])

    series.add_work(Work(id=1, authors=[pseuds["bob"], pseuds["alice"]]))

    assert series.authors == [pseuds["alice"], pseuds["bob"]]
    assert series.all_authors == [pseuds["alice"], pseuds["bob"]]
