"""
Shared utilities (NOT business logic).

Usage:
    from bikemonkey.shared import Course, Gender, canonical_caseless
    from bikemonkey.shared.formatters import format_flags
"""
from .constants import (
    Course,
    Gender,
    SELECTABLE_COURSES,
)
from .text import (
    canonical_caseless,
    caseless_equals,
)
from .formatters import (
    format_flags,
    format_name,
)

__all__ = [
    # Constants
    "Course",
    "Gender",
    "SELECTABLE_COURSES",
    # Text
    "canonical_caseless",
    "caseless_equals",
    # Formatters
    "format_flags",
    "format_name",
]
