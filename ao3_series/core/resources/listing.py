from typing import Iterable

from ao3_series.core.models import Pseud, Series, Viewer


class ListingApi:
    """
    API for filtering lists of series

    Args:
        client (SeriesCoreClient): SeriesCoreClient instance
    """

    def __init__(self, client):
        self._client = client

    def _newest_first(self, series_list: Iterable[Series]) -> list[Series]:
        return sorted(series_list, key=lambda series: series.updated_at, reverse=True)

    def visible_logged_in(self, series_list: Iterable[Series]) -> list[Series]:
        """
        Series not hidden by an admin, most recently updated first.
        """

        return self._newest_first(series for series in series_list if not series.hidden_by_admin)

    def visible_to_public(self, series_list: Iterable[Series]) -> list[Series]:
        """
        Series neither hidden by an admin nor restricted, most recently updated first.
        """

        return self._newest_first(
            series for series in series_list if not series.hidden_by_admin and not series.restricted
        )

    def exclude_anonymous(self, series_list: Iterable[Series]) -> list[Series]:
        """
        Drops series containing a work from an anonymous or unrevealed collection.
        """

        return [series for series in series_list if not series.anonymous and not series.unrevealed]

    def for_pseuds(self, series_list: Iterable[Series], pseuds: Iterable[Pseud]) -> list[Series]:
        """
        Series credited to any of the given pseuds.
        """

        pseud_ids = {pseud.id for pseud in pseuds}
        return [series for series in series_list if any(pseud.id in pseud_ids for pseud in series.authors)]

    def visible_to(self, series_list: Iterable[Series], viewer: Viewer) -> list[Series]:
        return [series for series in series_list if self._client.visibility.is_visible(series, viewer)]
