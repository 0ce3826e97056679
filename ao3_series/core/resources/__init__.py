from .authors import AuthorsApi
from .listing import ListingApi
from .ordering import OrderingApi
from .restriction import RestrictionApi
from .tags import TagsApi
from .visibility import VisibilityApi

__all__ = [
    "AuthorsApi",
    "ListingApi",
    "OrderingApi",
    "RestrictionApi",
    "TagsApi",
    "VisibilityApi",
]
