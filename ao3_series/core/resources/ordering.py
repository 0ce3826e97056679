from collections import Counter

import ao3_series.exceptions
from ao3_series.core.models import Series, SeriesMembership


class OrderingApi:
    """
    API for ordering the works in a series

    Args:
        client (SeriesCoreClient): SeriesCoreClient instance
    """

    def __init__(self, client):
        self._client = client

    def reorder(self, series: Series, membership_ids: list[int]) -> list[SeriesMembership]:
        """
        Renumbers the series' memberships so they read in the given order.

        Args:
            series (Series): Series to reorder
            membership_ids (list[int]): Every membership ID of the series, in the wanted order

        Returns:
            (list[SeriesMembership]): Memberships in their new order

        Raises:
            ao3_series.exceptions.InvalidPermutationError: If the IDs are not exactly the series' memberships
        """

        by_id = {membership.id: membership for membership in series.memberships}

        requested = Counter(membership_ids)
        duplicates = sorted(mid for mid, count in requested.items() if count > 1)
        missing = sorted(set(by_id) - set(requested))
        extra = sorted(set(requested) - set(by_id))
        if duplicates or missing or extra:
            errors = []
            if missing:
                errors.append(f"missing: {missing}")
            if extra:
                errors.append(f"unknown: {extra}")
            if duplicates:
                errors.append(f"repeated: {duplicates}")
            self._client._debug_error(f"Rejected reorder of series {series.id}: {', '.join(errors)}")
            raise ao3_series.exceptions.InvalidPermutationError(
                f"Reorder of series {series.id} must list each of its works exactly once", errors
            )

        ordered = [by_id[mid] for mid in membership_ids]
        for position, membership in enumerate(ordered, start=self._client.POSITION_START):
            membership.position = position
        series.memberships = ordered

        self._client._debug_log(f"Reordered series {series.id}: {membership_ids}")
        return ordered
