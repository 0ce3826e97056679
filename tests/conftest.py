"""Shared pytest fixtures for the series rules."""

from __future__ import annotations

import pytest

from ao3_series import Pseud, SeriesCoreClient, Tag, User
from ao3_series.core.enums import TagKind
from tests.factories import FakeBylineParser, InMemoryPseudStore


@pytest.fixture
def pseuds() -> dict[str, Pseud]:
    return {
        "alice": Pseud(id=1, name="alice", user_id=10),
        "alice_alt": Pseud(id=2, name="Alice Alt", user_id=10),
        "bob": Pseud(id=3, name="bob", user_id=20),
        "carol": Pseud(id=4, name="carol", user_id=30),
    }


@pytest.fixture
def alice(pseuds: dict[str, Pseud]) -> User:
    return User(id=10, login="alice", pseuds=[pseuds["alice"], pseuds["alice_alt"]])


@pytest.fixture
def bob(pseuds: dict[str, Pseud]) -> User:
    return User(id=20, login="bob", pseuds=[pseuds["bob"]])


@pytest.fixture
def carol(pseuds: dict[str, Pseud]) -> User:
    return User(id=30, login="carol", pseuds=[pseuds["carol"]])


@pytest.fixture
def byline_parser(pseuds: dict[str, Pseud]) -> FakeBylineParser:
    return FakeBylineParser(list(pseuds.values()))


@pytest.fixture
def client(pseuds: dict[str, Pseud], byline_parser: FakeBylineParser) -> SeriesCoreClient:
    return SeriesCoreClient(pseud_store=InMemoryPseudStore(list(pseuds.values())), byline_parser=byline_parser)


@pytest.fixture
def tags() -> dict[str, Tag]:
    return {
        "fandom_b": Tag(id=1, name="Bandom", kind=TagKind.FANDOM),
        "fandom_a": Tag(id=2, name="Avatar", kind=TagKind.FANDOM),
        "ship_z": Tag(id=3, name="Zuko/Katara", kind=TagKind.RELATIONSHIP),
        "ship_a": Tag(id=4, name="Aang/Katara", kind=TagKind.RELATIONSHIP),
        "char_k": Tag(id=5, name="Katara", kind=TagKind.CHARACTER),
        "char_a": Tag(id=6, name="Aang", kind=TagKind.CHARACTER),
        "free_fluff": Tag(id=7, name="Fluff", kind=TagKind.FREEFORM),
        "free_angst": Tag(id=8, name="Angst", kind=TagKind.FREEFORM),
        "rating": Tag(id=9, name="Teen And Up", kind=TagKind.RATING),
    }
