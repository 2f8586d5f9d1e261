"""Data models for classified results (dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bikemonkey.shared.constants import Course, Gender
from bikemonkey.shared.formatters import format_name

from .exceptions import ExtractionError, InvalidField


@dataclass(frozen=True)
class RouteCategory:
    """Classification of one route descriptor."""

    course: Course
    willow_creek: bool
    fort_ross: bool
    gender: Gender


@dataclass(frozen=True)
class RaceRecord:
    """Single rider result, immutable once extracted."""

    first_name: str  # may be "" when last_name is set
    last_name: str
    elapsed_seconds: int  # 3723
    display_time: str  # "01:02:03", verbatim from the input
    gender: Gender
    course: Course
    willow_creek: bool
    fort_ross: bool
    bib: int  # not unique
    external_id: str  # "_id" in the export

    def __post_init__(self):
        if not self.first_name and not self.last_name:
            raise InvalidField("No riders with no name!")

    @property
    def full_name(self) -> str:
        return format_name(self.first_name, self.last_name)


@dataclass(frozen=True)
class RejectedRecord:
    """A record dropped during extraction, kept for diagnostics."""

    index: int  # position in the input batch
    error: ExtractionError


@dataclass(frozen=True)
class FilterCriteria:
    """
    One query against a catalog.

    None means "no constraint" for every field. Name searches are exact
    canonical caseless matches, not substrings.
    """

    courses: frozenset[Course] | None = None
    gender: Gender | None = None
    first_name: str | None = None
    last_name: str | None = None

    @property
    def has_name_search(self) -> bool:
        return self.first_name is not None or self.last_name is not None


class QueryMode(str, Enum):
    """Which terminal output a query produced."""
    LISTING = "listing"
    LOOKUP = "lookup"
    NO_MATCHES = "no_matches"


@dataclass(frozen=True)
class RankedRecord:
    """A record with its 1-based rank in the filtered, time-sorted set."""

    rank: int
    record: RaceRecord


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of QueryRunner.run.

    `total` is always the size of the filtered, ranked set, even when
    `entries` holds only the riders matching a name search.
    """

    mode: QueryMode
    entries: list[RankedRecord]
    total: int
