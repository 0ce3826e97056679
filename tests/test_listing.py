"""Tests for filtering lists of series."""

from __future__ import annotations

import pytest

from ao3_series import Guest, Work
from tests.factories import at, make_series


@pytest.fixture
def catalogue(pseuds):
    return {
        "open": make_series(Work(id=1), id=1, authors=[pseuds["alice"]], updated_at=at(1)),
        "restricted": make_series(
            Work(id=2, restricted=True), id=2, authors=[pseuds["bob"]], restricted=True, updated_at=at(3)
        ),
        "hidden": make_series(Work(id=3), id=3, authors=[pseuds["carol"]], hidden_by_admin=True, updated_at=at(2)),
        "anonymous": make_series(Work(id=4, anonymous=True), id=4, authors=[pseuds["bob"]], updated_at=at(4)),
        "unrevealed": make_series(Work(id=5, unrevealed=True), id=5, authors=[pseuds["alice_alt"]], updated_at=at(5)),
    }


def test_visible_logged_in_drops_hidden_and_sorts_newest_first(client, catalogue) -> None:
    result = client.listing.visible_logged_in(catalogue.values())

    assert [series.id for series in result] == [5, 4, 2, 1]


def test_visible_to_public_also_drops_restricted(client, catalogue) -> None:
    result = client.listing.visible_to_public(catalogue.values())

    assert [series.id for series in result] == [5, 4, 1]


def test_exclude_anonymous(client, catalogue) -> None:
    result = client.listing.exclude_anonymous(catalogue.values())

    assert [series.id for series in result] == [1, 2, 3]


def test_for_pseuds(client, catalogue, alice) -> None:
    result = client.listing.for_pseuds(catalogue.values(), alice.pseuds)

    assert [series.id for series in result] == [1, 5]


def test_visible_to_applies_viewer_rules(client, catalogue, carol) -> None:
    assert [series.id for series in client.listing.visible_to(catalogue.values(), Guest())] == [1, 4, 5]
    assert [series.id for series in client.listing.visible_to(catalogue.values(), carol)] == [1, 2, 3, 4, 5]
