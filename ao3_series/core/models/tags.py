from pydantic import BaseModel, ConfigDict

from ao3_series.core.enums import TagKind


class Tag(BaseModel):
    """
    Represents an AO3 tag

    Tags compare by case-insensitive name, then by ID.

    Attributes:
        id (int): Tag ID
        name (str): Tag name
        kind (TagKind): Tag kind
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    kind: TagKind

    def __lt__(self, other: "Tag") -> bool:
        return (self.name.lower(), self.id) < (other.name.lower(), other.id)

    def __str__(self) -> str:
        return self.name
