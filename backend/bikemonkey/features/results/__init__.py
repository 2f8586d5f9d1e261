"""Results feature module: loading, classifying, filtering and ranking riders."""

from .models import (
    FilterCriteria,
    QueryMode,
    QueryResult,
    RaceRecord,
    RankedRecord,
    RejectedRecord,
    RouteCategory,
)
from .exceptions import (
    BadGender,
    DocumentError,
    ExtractionError,
    InvalidField,
    MalformedDuration,
    MalformedRoute,
    RecordError,
    RejectedCategory,
    ResultsError,
    RouteError,
    UnknownCourse,
)
from .duration import parse_duration
from .route_classifier import RouteClassifier, classify_route
from .extractor import extract_record
from .document import ResultsDocument, load_document, parse_document
from .catalog import Catalog
from .query import QueryRunner
from .report import ReportGenerator

__all__ = [
    # Models
    "FilterCriteria",
    "QueryMode",
    "QueryResult",
    "RaceRecord",
    "RankedRecord",
    "RejectedRecord",
    "RouteCategory",
    # Errors
    "BadGender",
    "DocumentError",
    "ExtractionError",
    "InvalidField",
    "MalformedDuration",
    "MalformedRoute",
    "RecordError",
    "RejectedCategory",
    "ResultsError",
    "RouteError",
    "UnknownCourse",
    # Parsing
    "parse_duration",
    "RouteClassifier",
    "classify_route",
    "extract_record",
    # Loading
    "ResultsDocument",
    "load_document",
    "parse_document",
    # Queries
    "Catalog",
    "QueryRunner",
    "ReportGenerator",
]
