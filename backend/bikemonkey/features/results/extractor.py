"""
Record extraction: raw export rows to RaceRecord.

Fields are checked in a fixed order and the first failure wins:
names, elapsed time, route, bib, id.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from bikemonkey.shared.constants import U64_MAX

from .duration import parse_duration
from .exceptions import ExtractionError, InvalidField, RecordError
from .models import RaceRecord
from .route_classifier import classify_route

T = TypeVar("T")

# Export keys
FIRST_NAME = "firstname"
LAST_NAME = "lastname"
ELAPSED_TIME = "elapsedtime"
ROUTE = "route"
BIB = "bib"
EXTERNAL_ID = "_id"


def extract_record(raw: Any) -> RaceRecord:
    """Validate and decode one export row.

    Raises:
        ExtractionError: naming the failing field and wrapping the
            RecordError subclass that describes the failure.
    """
    if not isinstance(raw, Mapping):
        raise ExtractionError(
            "record", InvalidField(f"expected an object, got {type(raw).__name__}")
        )

    first_name = _require_text(raw, FIRST_NAME)
    last_name = _require_text(raw, LAST_NAME)
    if not first_name and not last_name:
        raise ExtractionError("name", InvalidField("No riders with no name!"))

    display_time = _require_text(raw, ELAPSED_TIME)
    elapsed = _decode(ELAPSED_TIME, parse_duration, display_time)

    route = _require_text(raw, ROUTE)
    category = _decode(ROUTE, classify_route, route)

    bib = _require_bib(raw)
    external_id = _require_text(raw, EXTERNAL_ID)

    return RaceRecord(
        first_name=first_name,
        last_name=last_name,
        elapsed_seconds=elapsed,
        display_time=display_time,
        gender=category.gender,
        course=category.course,
        willow_creek=category.willow_creek,
        fort_ross=category.fort_ross,
        bib=bib,
        external_id=external_id,
    )


def _require_text(raw: Mapping, field: str) -> str:
    value = raw.get(field)
    if not isinstance(value, str):
        raise ExtractionError(field, InvalidField(f"bad {field} {value!r}"))
    return value


def _require_bib(raw: Mapping) -> int:
    value = raw.get(BIB)
    # bool is an int subclass; JSON true is not a bib number
    if isinstance(value, bool) or not isinstance(value, int):
        raise ExtractionError(BIB, InvalidField(f"bad bibno {value!r}"))
    # huge ints are not formatted; str() refuses past the digit limit
    if not 0 <= value <= U64_MAX:
        raise ExtractionError(BIB, InvalidField("bibno out of range"))
    return value


def _decode(field: str, parse: Callable[[str], T], text: str) -> T:
    try:
        return parse(text)
    except RecordError as exc:
        raise ExtractionError(field, exc) from exc
