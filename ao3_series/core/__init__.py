from .client import SeriesCoreClient

__all__ = [
    "SeriesCoreClient",
]
