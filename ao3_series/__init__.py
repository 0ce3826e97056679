from ao3_series.core import SeriesCoreClient
from ao3_series.core.models import (
    Admin,
    AuthorAssignment,
    AuthorSelection,
    BylineResult,
    Guest,
    Pseud,
    Series,
    SeriesMembership,
    Tag,
    User,
    Work,
)

__all__ = [
    "Admin",
    "AuthorAssignment",
    "AuthorSelection",
    "BylineResult",
    "Guest",
    "Pseud",
    "Series",
    "SeriesCoreClient",
    "SeriesMembership",
    "Tag",
    "User",
    "Work",
]
