"""
Unified constants for race categories.

Single source of truth for course and gender naming, shared by the
route classifier, the catalog filters and the command line.
"""

from enum import Enum


class Course(str, Enum):
    """
    Course a rider is registered in.

    FAMILY is recognised in route strings but never admitted to a
    catalog; it exists so the classifier can name what it rejects.
    """
    IL_REGNO = "IlRegno"
    GRAN = "Gran"
    MEDIO = "Medio"
    PICCOLO = "Piccolo"
    FAMILY = "Family"


class Gender(str, Enum):
    """Rider gender as encoded at the end of a route string."""
    MALE = "Male"
    FEMALE = "Female"


# Courses a query may select (FAMILY is never in a catalog)
SELECTABLE_COURSES: list[Course] = [
    Course.IL_REGNO,
    Course.GRAN,
    Course.MEDIO,
    Course.PICCOLO,
]


# =============================================================================
# Route string tokens
# =============================================================================

# First token of a route string -> course
COURSE_TOKENS: dict[str, Course] = {
    "IL": Course.IL_REGNO,
    "PICCOLO": Course.PICCOLO,
    "MEDIO": Course.MEDIO,
    "GRAN": Course.GRAN,
    "FAMILY": Course.FAMILY,
}

# "IL REGNO" spans two tokens and needs a third (the gender) to be valid
IL_REGNO_MIN_TOKENS = 3

FORT_TOKEN = "Fort"
ROSS_TOKEN = "Ross"
WILLOW_CREEK_TOKEN = "WC"
TANDEM_TOKEN = "TANDEM"

GENDER_TOKENS: dict[str, Gender] = {
    "Male": Gender.MALE,
    "Female": Gender.FEMALE,
}

# Gender used when a route string carries no gender token
DEFAULT_GENDER = Gender.MALE

# Largest value an unsigned 64-bit export field can hold (bibs, time parts)
U64_MAX = 2**64 - 1
