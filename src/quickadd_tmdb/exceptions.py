"""
Exceptions raised by quickadd-tmdb.

None of these are handled inside the capture pipeline: any of them aborts the
run before a variable mapping is produced.
"""


class TMDBError(Exception):
    """Base class for every failure of a capture run."""


class TMDBRequestError(TMDBError):
    """The HTTP request failed or TMDB answered with an error status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class TMDBResponseError(TMDBError):
    """TMDB answered with a body that is not valid JSON."""


class MissingDataError(TMDBError):
    """A field the mapping needs is absent from a TMDB record."""

    def __init__(self, field, record="record"):
        super().__init__(f"TMDB {record} has no '{field}' field")
        self.field = field
        self.record = record


class NoResultsError(MissingDataError):
    """A search returned no results to choose from."""

    def __init__(self, query, media_type):
        media_type = getattr(media_type, "value", media_type)
        TMDBError.__init__(self, f"No {media_type} results found for '{query}'")
        self.field = "results"
        self.record = "search response"
        self.query = query
        self.media_type = media_type


class SelectionCancelledError(TMDBError):
    """The user dismissed a prompt without answering it."""
