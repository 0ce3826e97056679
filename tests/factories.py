"""Test doubles and builders for series tests."""

from __future__ import annotations

from datetime import datetime, timezone

from ao3_series import BylineResult, Pseud, Series, Work


class InMemoryPseudStore:
    """Pseud lookup backed by a dict."""

    def __init__(self, pseuds: list[Pseud]) -> None:
        self._pseuds = {pseud.id: pseud for pseud in pseuds}

    def get(self, pseud_id: int) -> Pseud | None:
        return self._pseuds.get(pseud_id)


class FakeBylineParser:
    """Splits on commas and looks each name up; unknown names are invalid."""

    def __init__(self, pseuds: list[Pseud], ambiguous: dict[str, list[Pseud]] | None = None) -> None:
        self._by_name = {pseud.name: pseud for pseud in pseuds}
        self._ambiguous = ambiguous or {}
        self.calls: list[str] = []

    def parse(self, text: str) -> BylineResult:
        self.calls.append(text)
        result = BylineResult()
        for name in (part.strip() for part in text.split(",")):
            if not name:
                continue
            if name in self._ambiguous:
                result.ambiguous.extend(self._ambiguous[name])
            elif name in self._by_name:
                result.pseuds.append(self._by_name[name])
            else:
                result.invalid.append(name)
        return result


def at(day: int) -> datetime:
    return datetime(2024, 1, day, tzinfo=timezone.utc)


def make_series(*works: Work, authors: list[Pseud] | None = None, **kwargs) -> Series:
    series = Series(id=kwargs.pop("id", 1), title=kwargs.pop("title", "A Series"), authors=authors or [], **kwargs)
    for work in works:
        series.add_work(work)
    return series
