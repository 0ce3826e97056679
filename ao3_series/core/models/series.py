from datetime import datetime, timezone

from pydantic import BaseModel, Field

from ao3_series.core.models.pseuds import Pseud
from ao3_series.core.models.works import Work
from ao3_series.utils import unique_by_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SeriesMembership(BaseModel):
    """
    Places a work in a series

    Attributes:
        id (int): Membership ID
        work (Work): Member work
        position (int): Sort position within the series
    """

    id: int
    work: Work
    position: int


class Series(BaseModel):
    """
    Represents an AO3 series

    `restricted` is stored rather than computed; run the restriction reconciler after changing
    membership or the restriction of a member work.

    Attributes:
        id (int): Series ID
        title (str): Series title
        summary (str): Series summary
        notes (str): Series notes
        restricted (bool): Only visible to logged-in users
        hidden_by_admin (bool): Hidden by an admin
        created_at (datetime): Creation date
        updated_at (datetime): Last update date
        memberships (list[SeriesMembership]): Works in the series
        authors (list[Pseud]): Pseuds credited on the series itself
    """

    id: int
    title: str
    summary: str = ""
    notes: str = ""
    restricted: bool = False
    hidden_by_admin: bool = False
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
    memberships: list[SeriesMembership] = []
    authors: list[Pseud] = []

    @property
    def works(self) -> list[Work]:
        """
        Member works, in series order
        """

        return [membership.work for membership in sorted(self.memberships, key=lambda m: m.position)]

    @property
    def posted_works(self) -> list[Work]:
        return [work for work in self.works if work.posted]

    @property
    def anonymous(self) -> bool:
        return any(work.anonymous for work in self.works)

    @property
    def unrevealed(self) -> bool:
        return any(work.unrevealed for work in self.works)

    @property
    def all_authors(self) -> list[Pseud]:
        """
        Series-level pseuds plus the pseuds of every member work
        """

        return unique_by_id([*self.authors, *(pseud for work in self.works for pseud in work.authors)])

    @property
    def owner_ids(self) -> list[int]:
        """
        IDs of the users behind the series' pseuds
        """

        return list(dict.fromkeys(pseud.user_id for pseud in self.authors))

    def add_work(self, work: Work, membership_id: int | None = None) -> SeriesMembership:
        """
        Appends a work to the end of the series and credits its authors on the series.

        Args:
            work (Work): Work to add
            membership_id (int): ID for the new membership. Defaults to one past the highest existing ID

        Returns:
            (SeriesMembership): The new membership
        """

        if membership_id is None:
            membership_id = max((m.id for m in self.memberships), default=0) + 1
        position = max((m.position for m in self.memberships), default=0) + 1
        membership = SeriesMembership(id=membership_id, work=work, position=position)
        self.memberships = [*self.memberships, membership]
        self.authors = unique_by_id([*self.authors, *work.authors])
        return membership

    def remove_work(self, work_id: int) -> SeriesMembership | None:
        """
        Drops a work's membership from the series.

        Args:
            work_id (int): ID of the work to drop

        Returns:
            (SeriesMembership | None): The removed membership, if the work was a member
        """

        removed = None
        kept = []
        for membership in self.memberships:
            if removed is None and membership.work.id == work_id:
                removed = membership
                continue
            kept.append(membership)
        self.memberships = kept
        return removed
