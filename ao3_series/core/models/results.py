from pydantic import BaseModel

from ao3_series.core.models.pseuds import Pseud


class AuthorSelection(BaseModel):
    """
    Raw author choices submitted for a series

    Attributes:
        ids (list[int]): Pseud IDs picked explicitly
        ambiguous_ids (list[int]): Pseud IDs picked to settle an earlier ambiguous byline
        byline (str): Free-text byline of extra co-authors
    """

    ids: list[int] = []
    ambiguous_ids: list[int] = []
    byline: str | None = None


class BylineResult(BaseModel):
    """
    Output of a byline parser

    Attributes:
        pseuds (list[Pseud]): Pseuds the byline resolved to
        invalid (list[str]): Byline fragments matching no pseud
        ambiguous (list[Pseud]): Candidate pseuds for fragments matching more than one
    """

    pseuds: list[Pseud] = []
    invalid: list[str] = []
    ambiguous: list[Pseud] = []


class AuthorAssignment(BaseModel):
    """
    Resolved authorship for a series, not yet applied

    Attributes:
        authors (list[Pseud]): De-duplicated pseuds to credit
        to_remove (list[Pseud]): Pseuds of the acting user that were left out
        invalid (list[str]): Byline fragments matching no pseud
        ambiguous (list[Pseud]): Candidate pseuds for ambiguous byline fragments
    """

    authors: list[Pseud] = []
    to_remove: list[Pseud] = []
    invalid: list[str] = []
    ambiguous: list[Pseud] = []

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.invalid or self.ambiguous)
