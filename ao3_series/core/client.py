from typing import TYPE_CHECKING, Optional

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

import ao3_series.exceptions
from ao3_series.core.enums import DEFAULT_AUTHOR_TAG_KINDS, TagKind
from ao3_series.core.protocols import BylineParser, PseudStore
from ao3_series.settings import settings

if TYPE_CHECKING:
    from ao3_series.core.resources.authors import AuthorsApi
    from ao3_series.core.resources.listing import ListingApi
    from ao3_series.core.resources.ordering import OrderingApi
    from ao3_series.core.resources.restriction import RestrictionApi
    from ao3_series.core.resources.tags import TagsApi
    from ao3_series.core.resources.visibility import VisibilityApi


class SeriesCoreClient(BaseSettings):
    """
    Entry point to the series rules

    Collaborators are passed in; every viewer is passed explicitly to the operations that need one.

    Args:
        pseud_store (PseudStore): Looks pseuds up by ID. Needed to assign authors
        byline_parser (BylineParser): Parses free-text bylines. Needed to assign authors from a byline

    Attributes:
        DEBUG (bool): Debug mode, also used for the unit of work of author removal. Defaults to the global setting
        POSITION_START (int): Position given to the first membership after a reorder
        AUTHOR_TAG_KINDS (list[TagKind]): Tag kinds shown in author tags, in display order
    """

    model_config = SettingsConfigDict(
        env_file=settings.ENV_PATH,
        env_prefix=settings.ENV_PREFIX,
        extra="ignore",
        env_ignore_empty=True,
    )

    _pseud_store: PseudStore | None
    _byline_parser: BylineParser | None

    DEBUG: bool = settings.DEBUG
    POSITION_START: int = 1
    AUTHOR_TAG_KINDS: list[TagKind] = DEFAULT_AUTHOR_TAG_KINDS

    def __init__(
        self,
        pseud_store: PseudStore | None = None,
        byline_parser: BylineParser | None = None,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)

        self._pseud_store = pseud_store
        self._byline_parser = byline_parser

        # Resources
        self._authors: Optional["AuthorsApi"] = None
        self._listing: Optional["ListingApi"] = None
        self._ordering: Optional["OrderingApi"] = None
        self._restriction: Optional["RestrictionApi"] = None
        self._tags: Optional["TagsApi"] = None
        self._visibility: Optional["VisibilityApi"] = None

    @property
    def pseud_store(self) -> PseudStore:
        """
        Raises:
            ao3_series.exceptions.MissingCollaboratorError: If no pseud store was given
        """

        if self._pseud_store is None:
            raise ao3_series.exceptions.MissingCollaboratorError("A pseud store is required to look up authors")
        return self._pseud_store

    @property
    def byline_parser(self) -> BylineParser:
        """
        Raises:
            ao3_series.exceptions.MissingCollaboratorError: If no byline parser was given
        """

        if self._byline_parser is None:
            raise ao3_series.exceptions.MissingCollaboratorError("A byline parser is required to read bylines")
        return self._byline_parser

    @property
    def authors(self):
        """
        Authors Api Instance

        Returns:
            (AuthorsApi): AuthorsApi Instance
        """

        if self._authors is None:
            from ao3_series.core.resources.authors import AuthorsApi

            self._authors = AuthorsApi(self)

        return self._authors

    @property
    def listing(self):
        """
        Listing Api Instance

        Returns:
            (ListingApi): ListingApi Instance
        """

        if self._listing is None:
            from ao3_series.core.resources.listing import ListingApi

            self._listing = ListingApi(self)

        return self._listing

    @property
    def ordering(self):
        """
        Ordering Api Instance

        Returns:
            (OrderingApi): OrderingApi Instance
        """

        if self._ordering is None:
            from ao3_series.core.resources.ordering import OrderingApi

            self._ordering = OrderingApi(self)

        return self._ordering

    @property
    def restriction(self):
        """
        Restriction Api Instance

        Returns:
            (RestrictionApi): RestrictionApi Instance
        """

        if self._restriction is None:
            from ao3_series.core.resources.restriction import RestrictionApi

            self._restriction = RestrictionApi(self)

        return self._restriction

    @property
    def tags(self):
        """
        Tags Api Instance

        Returns:
            (TagsApi): TagsApi Instance
        """

        if self._tags is None:
            from ao3_series.core.resources.tags import TagsApi

            self._tags = TagsApi(self)

        return self._tags

    @property
    def visibility(self):
        """
        Visibility Api Instance

        Returns:
            (VisibilityApi): VisibilityApi Instance
        """

        if self._visibility is None:
            from ao3_series.core.resources.visibility import VisibilityApi

            self._visibility = VisibilityApi(self)

        return self._visibility

    def _debug_log(self, *args, **kwargs):
        """
        Debug Mode Only: Basic log
        """

        if not self.DEBUG:
            return

        logger.opt(depth=1).debug(*args, **kwargs)

    def _debug_error(self, *args, **kwargs):
        """
        Debug Mode Only: Error log
        """
        if not self.DEBUG:
            return

        logger.opt(depth=1).error(*args, **kwargs)

    def _debug_info(self, *args, **kwargs):
        """
        Debug Mode Only: Info log
        """
        if not self.DEBUG:
            return

        logger.opt(depth=1).info(*args, **kwargs)
