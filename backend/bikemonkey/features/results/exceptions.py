"""
Error taxonomy for results loading.

Two tiers:
- RecordError / ExtractionError: one bad record, dropped from the batch.
- DocumentError: the input document itself is unusable, fatal for the caller.
"""


class ResultsError(Exception):
    """Base results error."""
    pass


# =============================================================================
# Per-record errors (recoverable)
# =============================================================================

class RecordError(ResultsError, ValueError):
    """A single field value could not be decoded."""
    pass


class MalformedDuration(RecordError):
    """Elapsed time is not reducible to HH:MM:SS."""
    pass


class InvalidField(RecordError):
    """Field is missing, has the wrong type, or violates a record invariant."""
    pass


class RouteError(RecordError):
    """Route descriptor could not be classified."""
    pass


class MalformedRoute(RouteError):
    """Route is structurally too short for the course it names."""
    pass


class UnknownCourse(RouteError):
    """First route token matches no known course."""
    pass


class RejectedCategory(RouteError):
    """Route names the family category, which is never ranked."""
    pass


class BadGender(RouteError):
    """Trailing route token is not a gender."""
    pass


class ExtractionError(ResultsError):
    """A RecordError bound to the record field that produced it."""

    def __init__(self, field: str, error: RecordError):
        self.field = field
        self.error = error
        super().__init__(f"{field}: {error}")

    @property
    def kind(self) -> str:
        """Error class name, e.g. 'UnknownCourse'."""
        return type(self.error).__name__


# =============================================================================
# Boundary errors (fatal)
# =============================================================================

class DocumentError(ResultsError):
    """Input document is missing, unreadable or has the wrong shape."""
    pass
