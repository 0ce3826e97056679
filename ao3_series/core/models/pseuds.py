from pydantic import BaseModel, ConfigDict


class Pseud(BaseModel):
    """
    Represents an AO3 pseud, one of the pen names a user publishes under

    Pseuds compare by case-insensitive name, then by ID.

    Attributes:
        id (int): Pseud ID
        name (str): Pseud name
        user_id (int): ID of the user owning the pseud
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    user_id: int

    def __lt__(self, other: "Pseud") -> bool:
        return (self.name.lower(), self.id) < (other.name.lower(), other.id)

    def __str__(self) -> str:
        return self.name
