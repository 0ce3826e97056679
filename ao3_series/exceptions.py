class SeriesException(Exception):
    """
    Base class for all series exceptions
    """

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors if errors is not None else []


class NotFoundError(SeriesException):
    """
    Raised when an author id does not resolve to a pseud.
    """

    def __init__(self, message, pseud_id=None, errors=None):
        super().__init__(message, errors)
        self.pseud_id = pseud_id


class LastAuthorError(SeriesException):
    """
    Raised when a change would leave a series or work without any authors.
    """

    pass


class InvalidPermutationError(SeriesException):
    """
    Raised when a reorder request does not name every membership of the series exactly once.
    """

    pass


class MissingCollaboratorError(SeriesException):
    """
    Raised when an operation needs a collaborator the client was not given.
    """

    pass
