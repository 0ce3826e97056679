from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, Field

from ao3_series.core.enums import ViewerType
from ao3_series.core.models.pseuds import Pseud

if TYPE_CHECKING:
    from ao3_series.core.models.series import Series


class Admin(BaseModel):
    """
    Represents an archive admin

    Attributes:
        viewer_type (ViewerType): admin
        id (int): Admin ID
        login (str): Admin login
    """

    viewer_type: Literal[ViewerType.ADMIN] = ViewerType.ADMIN
    id: int
    login: str | None = None


class User(BaseModel):
    """
    Represents a logged-in AO3 user

    Attributes:
        viewer_type (ViewerType): user
        id (int): User ID
        login (str): User login
        pseuds (list[Pseud]): Pseuds owned by the user
    """

    viewer_type: Literal[ViewerType.USER] = ViewerType.USER
    id: int
    login: str | None = None
    pseuds: list[Pseud] = []

    def is_author_of(self, series: "Series") -> bool:
        user_pseud_ids = {pseud.id for pseud in self.pseuds}
        return any(pseud.id in user_pseud_ids for pseud in series.all_authors)


class Guest(BaseModel):
    """
    Represents an unauthenticated visitor

    Attributes:
        viewer_type (ViewerType): guest
    """

    viewer_type: Literal[ViewerType.GUEST] = ViewerType.GUEST


Viewer = Annotated[Admin | User | Guest, Field(discriminator="viewer_type")]
