from datetime import datetime

from ao3_series.core.enums import ViewerClass, ViewerType
from ao3_series.core.models import Series, Viewer, Work


class VisibilityApi:
    """
    API for deciding who can see a series, and what they see of it

    Admins and the series' own authors always see it. Guests are kept out by `restricted` and
    `hidden_by_admin`. Other logged-in users are kept out only by `hidden_by_admin` or by the series
    having no posted works; restriction alone never hides a series from them.

    Args:
        client (SeriesCoreClient): SeriesCoreClient instance
    """

    def __init__(self, client):
        self._client = client

    def classify(self, series: Series, viewer: Viewer) -> ViewerClass:
        """
        Works out how the viewer relates to the series.

        Args:
            series (Series): Series being viewed
            viewer (Viewer): Admin, User or Guest

        Returns:
            (ViewerClass): Viewer class for this series
        """

        match viewer.viewer_type:
            case ViewerType.ADMIN:
                return ViewerClass.ADMIN
            case ViewerType.USER:
                if viewer.is_author_of(series):
                    return ViewerClass.AUTHOR
                return ViewerClass.AUTHENTICATED
            case _:
                return ViewerClass.GUEST

    def resolve(self, series: Series, viewer: Viewer) -> Series | None:
        """
        Returns the series if the viewer may see it.

        Args:
            series (Series): Series being viewed
            viewer (Viewer): Admin, User or Guest

        Returns:
            (Series | None): The series, or None when it is hidden from the viewer
        """

        viewer_class = self.classify(series, viewer)
        match viewer_class:
            case ViewerClass.ADMIN | ViewerClass.AUTHOR:
                visible = True
            case ViewerClass.GUEST:
                visible = not series.restricted and not series.hidden_by_admin
            case ViewerClass.AUTHENTICATED:
                visible = not series.hidden_by_admin and len(series.posted_works) > 0

        self._client._debug_log(f"Series {series.id} visible to {viewer_class.value}: {visible}")
        return series if visible else None

    def is_visible(self, series: Series, viewer: Viewer) -> bool:
        return self.resolve(series, viewer) is series

    def visible_works(self, series: Series, viewer: Viewer) -> list[Work]:
        """
        Posted works of the series, leaving out restricted ones for guests.

        Args:
            series (Series): Series being viewed
            viewer (Viewer): Admin, User or Guest

        Returns:
            (list[Work]): Works counted for the viewer, in series order
        """

        works = series.posted_works
        if viewer.viewer_type == ViewerType.GUEST:
            works = [work for work in works if not work.restricted]
        return works

    def visible_work_count(self, series: Series, viewer: Viewer) -> int:
        return len(self.visible_works(series, viewer))

    def visible_word_count(self, series: Series, viewer: Viewer) -> int:
        return sum(work.word_count for work in self.visible_works(series, viewer))

    def published_at(self, series: Series) -> datetime:
        """
        Earliest publication date of the series' visible works, or its creation date when it has none.
        """

        dates = [work.published_at for work in series.works if work.is_visible and work.published_at]
        return min(dates) if dates else series.created_at

    def revised_at(self, series: Series) -> datetime:
        """
        Latest revision date of the series' visible works, or its update date when it has none.
        """

        dates = [work.revised_at for work in series.works if work.is_visible and work.revised_at]
        return max(dates) if dates else series.updated_at
