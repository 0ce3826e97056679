from typing import Callable

import ao3_series.exceptions
from ao3_series.core.enums import ViewerType
from ao3_series.core.models import AuthorAssignment, AuthorSelection, Pseud, Series, User, Viewer
from ao3_series.core.transaction import UnitOfWork
from ao3_series.utils import unique_by_id


class AuthorsApi:
    """
    API for crediting and removing the authors of a series

    Args:
        client (SeriesCoreClient): SeriesCoreClient instance
    """

    def __init__(self, client):
        self._client = client

    def find_pseud(self, pseud_id: int) -> Pseud:
        """
        Raises:
            ao3_series.exceptions.NotFoundError: If the ID matches no pseud
        """

        pseud = self._client.pseud_store.get(pseud_id)
        if pseud is None:
            self._client._debug_error(f"No pseud with ID {pseud_id}")
            raise ao3_series.exceptions.NotFoundError(f"Couldn't find pseud with ID {pseud_id}", pseud_id=pseud_id)
        return pseud

    def assign(self, selection: AuthorSelection, acting_user: Viewer | None = None) -> AuthorAssignment:
        """
        Resolves an author selection into the pseuds to credit.

        Nothing is written to the series; pass the result to `apply` for that. Byline fragments that
        match no pseud, or more than one, come back on the result rather than failing the call.
        A blank or whitespace-only byline counts as no byline, and the parser is not called.

        Args:
            selection (AuthorSelection): Explicit IDs, ambiguous-match IDs and an optional byline
            acting_user (Viewer): Who is making the change. Used to spot a user dropping their own pseuds

        Returns:
            (AuthorAssignment): Authors, the acting user's left-out pseuds and byline diagnostics

        Raises:
            ao3_series.exceptions.NotFoundError: If an explicit or ambiguous ID matches no pseud
        """

        authors = [self.find_pseud(pseud_id) for pseud_id in selection.ids]
        authors.extend(self.find_pseud(pseud_id) for pseud_id in selection.ambiguous_ids)

        invalid: list[str] = []
        ambiguous: list[Pseud] = []
        if selection.byline and selection.byline.strip():
            self._client._debug_log(f"Parsing byline: {selection.byline}")
            results = self._client.byline_parser.parse(selection.byline)
            authors.extend(results.pseuds)
            invalid = list(results.invalid)
            ambiguous = list(results.ambiguous)

        authors = unique_by_id(authors)

        to_remove: list[Pseud] = []
        if acting_user is not None and acting_user.viewer_type == ViewerType.USER:
            author_ids = {pseud.id for pseud in authors}
            to_remove = [pseud for pseud in acting_user.pseuds if pseud.id not in author_ids]

        if invalid or ambiguous:
            self._client._debug_info(f"Byline left {len(invalid)} invalid and {len(ambiguous)} ambiguous entries")

        return AuthorAssignment(authors=authors, to_remove=to_remove, invalid=invalid, ambiguous=ambiguous)

    def apply(self, series: Series, assignment: AuthorAssignment):
        """
        Credits the resolved authors on the series.

        Args:
            series (Series): Series to update
            assignment (AuthorAssignment): Result of `assign`

        Raises:
            ao3_series.exceptions.LastAuthorError: If the assignment has no authors
        """

        if not assignment.authors:
            raise ao3_series.exceptions.LastAuthorError(f"Series {series.id} needs at least one author.")

        series.authors = list(assignment.authors)
        self._client._debug_log(f"Series {series.id} authors: {', '.join(str(p) for p in series.authors)}")

    def remove(self, series: Series, user: User, on_commit: Callable[[], None] | None = None):
        """
        Removes a user as an author of the series and of every work in it they co-authored.

        The series and the works change together or not at all.

        Args:
            series (Series): Series to update
            user (User): Author to remove
            on_commit (Callable): Called once both the series and the works have changed. If it raises, both are
                rolled back and the error propagates

        Raises:
            ao3_series.exceptions.LastAuthorError: If the user is the only author of the series, or of one of its works
        """

        user_pseud_ids = {pseud.id for pseud in user.pseuds}
        remaining = [pseud for pseud in series.authors if pseud.id not in user_pseud_ids]
        if not remaining:
            raise ao3_series.exceptions.LastAuthorError("Sorry, we can't remove all authors of a series.")

        authored_works = [work for work in series.works if work.is_authored_by(user)]

        with UnitOfWork(debug=self._client.DEBUG) as uow:
            if on_commit is not None:
                uow.on_commit(on_commit)
            uow.register(series, "authors")
            for work in authored_works:
                uow.register(work, "authors")

            series.authors = remaining
            for work in authored_works:
                work.remove_author(user)

        self._client._debug_log(f"Removed user {user.id} from series {series.id} and {len(authored_works)} works")
