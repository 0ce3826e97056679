from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel

import ao3_series.exceptions
from ao3_series.core.enums import TagKind
from ao3_series.core.models.pseuds import Pseud
from ao3_series.core.models.tags import Tag

if TYPE_CHECKING:
    from ao3_series.core.models.viewers import User


class Work(BaseModel):
    """
    Represents an AO3 work as seen by the series it belongs to

    Attributes:
        id (int): Work ID
        title (str): Work title
        restricted (bool): Only visible to logged-in users
        anonymous (bool): Posted to an anonymous collection
        unrevealed (bool): Posted to an unrevealed collection
        posted (bool): Published, as opposed to a draft
        hidden_by_admin (bool): Hidden by an admin
        word_count (int): Word count
        published_at (datetime): Date first published
        revised_at (datetime): Date last revised
        tags (list[Tag]): Tags on the work
        authors (list[Pseud]): Pseuds credited on the work
    """

    id: int
    title: str | None = None
    restricted: bool = False
    anonymous: bool = False
    unrevealed: bool = False
    posted: bool = True
    hidden_by_admin: bool = False
    word_count: int = 0
    published_at: datetime | None = None
    revised_at: datetime | None = None
    tags: list[Tag] = []
    authors: list[Pseud] = []

    @property
    def fandoms(self) -> list[Tag]:
        return [tag for tag in self.tags if tag.kind == TagKind.FANDOM]

    @property
    def is_visible(self) -> bool:
        """
        Posted and not hidden by an admin
        """

        return self.posted and not self.hidden_by_admin

    def is_authored_by(self, user: "User") -> bool:
        user_pseud_ids = {pseud.id for pseud in user.pseuds}
        return any(pseud.id in user_pseud_ids for pseud in self.authors)

    def remove_author(self, user: "User"):
        """
        Removes every pseud of the given user from the work.

        Args:
            user (User): User to remove

        Raises:
            ao3_series.exceptions.LastAuthorError: If the work would be left without authors
        """

        user_pseud_ids = {pseud.id for pseud in user.pseuds}
        remaining = [pseud for pseud in self.authors if pseud.id not in user_pseud_ids]
        if not remaining:
            raise ao3_series.exceptions.LastAuthorError(f"Sorry, we can't remove all authors of work {self.id}.")
        self.authors = remaining
