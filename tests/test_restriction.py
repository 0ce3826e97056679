"""Tests for keeping the series restriction flag in step with its works."""

from __future__ import annotations

from ao3_series import Work
from tests.factories import make_series


def test_one_unrestricted_work_unrestricts_the_series(client, pseuds) -> None:
    series = make_series(
        Work(id=1, restricted=True),
        Work(id=2, restricted=False),
        authors=[pseuds["alice"]],
        restricted=True,
    )

    assert client.restriction.reconcile(series) is True
    assert series.restricted is False

    series.remove_work(2)

    assert client.restriction.reconcile(series) is True
    assert series.restricted is True


def test_reconcile_is_idempotent(client, pseuds) -> None:
    series = make_series(Work(id=1, restricted=True), authors=[pseuds["alice"]])

    assert client.restriction.reconcile(series) is True
    first = series.restricted
    assert client.restriction.reconcile(series) is False
    assert series.restricted == first


def test_series_without_works_reconciles_to_restricted(client, pseuds) -> None:
    series = make_series(authors=[pseuds["alice"]])

    client.restriction.reconcile(series)

    assert series.restricted is True


def test_change_of_member_restriction_is_picked_up(client, pseuds) -> None:
    work = Work(id=1, restricted=False)
    series = make_series(work, authors=[pseuds["alice"]])
    assert client.restriction.reconcile(series) is False

    work.restricted = True

    assert client.restriction.reconcile(series) is True
    assert series.restricted is True
