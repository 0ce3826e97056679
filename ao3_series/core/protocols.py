from typing import Protocol, runtime_checkable

from ao3_series.core.models.pseuds import Pseud
from ao3_series.core.models.results import BylineResult


@runtime_checkable
class PseudStore(Protocol):
    """
    Looks pseuds up by ID
    """

    def get(self, pseud_id: int) -> Pseud | None: ...


@runtime_checkable
class BylineParser(Protocol):
    """
    Turns a free-text byline into pseuds, plus the fragments it could not settle
    """

    def parse(self, text: str) -> BylineResult: ...
