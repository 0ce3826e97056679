from .pseuds import Pseud
from .results import AuthorAssignment, AuthorSelection, BylineResult
from .series import Series, SeriesMembership
from .tags import Tag
from .viewers import Admin, Guest, User, Viewer
from .works import Work

__all__ = [
    "Admin",
    "AuthorAssignment",
    "AuthorSelection",
    "BylineResult",
    "Guest",
    "Pseud",
    "Series",
    "SeriesMembership",
    "Tag",
    "User",
    "Viewer",
    "Work",
]
