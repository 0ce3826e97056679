from typing import Iterable, TypeVar

T = TypeVar("T")


def unique_by_id(items: Iterable[T]) -> list[T]:
    """
    De-duplicates items by their `id` attribute, keeping the first one seen.

    Args:
        items (Iterable): Items with an `id` attribute

    Returns:
        list: Unique items, in first-seen order
    """

    seen: dict = {}
    for item in items:
        seen.setdefault(item.id, item)
    return list(seen.values())
