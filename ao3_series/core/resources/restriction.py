from ao3_series.core.models import Series


class RestrictionApi:
    """
    API for keeping a series' `restricted` flag in step with its works

    A series is restricted when none of its works is unrestricted. Call `reconcile` after adding or
    removing works, or after changing the restriction of a member work.

    Args:
        client (SeriesCoreClient): SeriesCoreClient instance
    """

    def __init__(self, client):
        self._client = client

    def expected(self, series: Series) -> bool:
        return not any(not work.restricted for work in series.works)

    def reconcile(self, series: Series) -> bool:
        """
        Flips `series.restricted` if it disagrees with the member works.

        Args:
            series (Series): Series to check

        Returns:
            (bool): True if the flag was changed
        """

        expected = self.expected(series)
        if series.restricted == expected:
            return False

        self._client._debug_log(f"Series {series.id} restricted: {series.restricted} -> {expected}")
        series.restricted = expected
        return True
