from enum import Enum


class TagKind(Enum):
    """
    Enum for AO3 tag kinds

    Attributes:
        FANDOM (str): Fandom
        RELATIONSHIP (str): Relationship
        CHARACTER (str): Character
        FREEFORM (str): Freeform
        RATING (str): Rating
        WARNING (str): Warning
        CATEGORY (str): Category
    """

    FANDOM = "Fandom"
    RELATIONSHIP = "Relationship"
    CHARACTER = "Character"
    FREEFORM = "Freeform"
    RATING = "Rating"
    WARNING = "Warning"
    CATEGORY = "Category"


DEFAULT_AUTHOR_TAG_KINDS = [TagKind.RELATIONSHIP, TagKind.CHARACTER, TagKind.FREEFORM]


class ViewerType(Enum):
    """
    Enum for the kinds of viewer a request can carry

    Attributes:
        ADMIN (str): admin
        USER (str): user
        GUEST (str): guest
    """

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class ViewerClass(Enum):
    """
    How a viewer relates to one particular series

    Attributes:
        ADMIN (str): Archive admin
        AUTHOR (str): Logged-in user who is an author of the series
        AUTHENTICATED (str): Logged-in user who is not an author of the series
        GUEST (str): Unauthenticated visitor
    """

    ADMIN = "admin"
    AUTHOR = "author"
    AUTHENTICATED = "authenticated"
    GUEST = "guest"
