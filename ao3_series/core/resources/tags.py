from ao3_series.core.models import Pseud, Series, Tag
from ao3_series.utils import unique_by_id


class TagsApi:
    """
    API for the tags, fandoms and pseuds a series gathers from its works

    Args:
        client (SeriesCoreClient): SeriesCoreClient instance
    """

    def __init__(self, client):
        self._client = client

    def work_tags(self, series: Series) -> list[Tag]:
        """
        Every tag on the series' works, each once, in the order first seen.
        """

        return unique_by_id(tag for work in series.works for tag in work.tags)

    def author_tags(self, series: Series) -> list[Tag]:
        """
        Relationship, then Character, then Freeform tags, each group sorted.

        The kinds and their order come from `AUTHOR_TAG_KINDS`; tags of other kinds are left out.

        Args:
            series (Series): Series to read

        Returns:
            (list[Tag]): Tags grouped by kind
        """

        work_tags = self.work_tags(series)
        author_tags = []
        for kind in self._client.AUTHOR_TAG_KINDS:
            author_tags.extend(sorted(tag for tag in work_tags if tag.kind == kind))
        return author_tags

    def tag_groups(self, series: Series) -> dict[str, list[Tag]]:
        """
        Groups the series' tags by kind.

        Args:
            series (Series): Series to read

        Returns:
            (dict[str, list[Tag]]): Kind label to tags, both in the order first seen
        """

        groups: dict[str, list[Tag]] = {}
        for tag in self.work_tags(series):
            groups.setdefault(tag.kind.value, []).append(tag)
        return groups

    def all_fandoms(self, series: Series) -> list[Tag]:
        return sorted(unique_by_id(fandom for work in series.works for fandom in work.fandoms))

    def all_pseuds(self, series: Series) -> list[Pseud]:
        return sorted(unique_by_id(pseud for work in series.works for pseud in work.authors))
