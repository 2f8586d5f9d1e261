"""
Route descriptor classification.

A route descriptor is the free-text "route" field of a registration,
e.g. "GRAN Fort Ross WC Female", "IL REGNO Male" or "PICCOLO". It is
split on runs of whitespace, so leading, trailing and repeated spaces
never produce empty tokens (looser than splitting on single spaces):

    route      := course [qualifier] [gender] ...
    course     := "IL" <any> | "PICCOLO" | "MEDIO"
                | "GRAN" ["Fort" "Ross"] | "FAMILY"
    qualifier  := "WC" | "TANDEM"
    gender     := "Male" | "Female"

Tokens are case sensitive. Anything after the gender token is ignored.
An "IL" route needs at least three tokens; a missing gender means Male.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bikemonkey.shared.constants import (
    COURSE_TOKENS,
    DEFAULT_GENDER,
    FORT_TOKEN,
    GENDER_TOKENS,
    IL_REGNO_MIN_TOKENS,
    ROSS_TOKEN,
    TANDEM_TOKEN,
    WILLOW_CREEK_TOKEN,
    Course,
    Gender,
)

from .exceptions import BadGender, MalformedRoute, RejectedCategory, UnknownCourse
from .models import RouteCategory


class RouteState(Enum):
    """What the classifier expects from the next token."""
    COURSE = "course"
    IL_REGNO = "il_regno"  # second half of "IL REGNO"
    GRAN = "gran"  # optional "Fort Ross"
    FORT = "fort"  # "Ross" must follow "Fort"
    QUALIFIER = "qualifier"  # optional WC / TANDEM
    GENDER = "gender"
    DONE = "done"


@dataclass
class _Classification:
    """Mutable accumulator for one classify() call."""

    course: Course | None = None
    willow_creek: bool = False
    fort_ross: bool = False
    gender: Gender = DEFAULT_GENDER


class RouteClassifier:
    """Classifies route descriptors with a token state machine."""

    def classify(self, route: str) -> RouteCategory:
        """
        Classify a route descriptor.

        Raises:
            UnknownCourse: first token is not a course (or route is empty)
            RejectedCategory: route is a family entry
            MalformedRoute: too few tokens for the named course
            BadGender: trailing token is not Male/Female
        """
        tokens = route.split()
        result = _Classification()
        state = RouteState.COURSE

        for token in tokens:
            state = self._step(state, token, tokens, result)
            if state is RouteState.DONE:
                break

        if state is RouteState.COURSE:
            raise UnknownCourse(f"unknown course {route!r}")
        if state in (RouteState.IL_REGNO, RouteState.FORT):
            raise MalformedRoute(f"bad route {route!r}")

        return RouteCategory(
            course=result.course,
            willow_creek=result.willow_creek,
            fort_ross=result.fort_ross,
            gender=result.gender,
        )

    def _step(
        self,
        state: RouteState,
        token: str,
        tokens: list[str],
        result: _Classification,
    ) -> RouteState:
        """Consume one token and return the next state."""
        if state is RouteState.COURSE:
            return self._course(token, tokens, result)
        if state is RouteState.IL_REGNO:
            return RouteState.QUALIFIER
        if state is RouteState.GRAN:
            if token == FORT_TOKEN:
                return RouteState.FORT
            return self._qualifier(token, result)
        if state is RouteState.FORT:
            if token != ROSS_TOKEN:
                raise MalformedRoute(f"bad route {' '.join(tokens)!r}: expected {ROSS_TOKEN!r}")
            result.fort_ross = True
            return RouteState.QUALIFIER
        if state is RouteState.QUALIFIER:
            return self._qualifier(token, result)
        if state is RouteState.GENDER:
            return self._gender(token, result)
        return RouteState.DONE

    def _course(
        self, token: str, tokens: list[str], result: _Classification
    ) -> RouteState:
        course = COURSE_TOKENS.get(token)
        if course is None:
            raise UnknownCourse(f"unknown course {' '.join(tokens)!r}")
        if course is Course.FAMILY:
            raise RejectedCategory("family entries are not ranked")

        result.course = course
        if course is Course.IL_REGNO:
            if len(tokens) < IL_REGNO_MIN_TOKENS:
                raise MalformedRoute(f"bad route {' '.join(tokens)!r}")
            return RouteState.IL_REGNO
        if course is Course.GRAN:
            return RouteState.GRAN
        return RouteState.QUALIFIER

    def _qualifier(self, token: str, result: _Classification) -> RouteState:
        if token == WILLOW_CREEK_TOKEN:
            result.willow_creek = True
            return RouteState.GENDER
        if token == TANDEM_TOKEN:
            return RouteState.GENDER
        return self._gender(token, result)

    def _gender(self, token: str, result: _Classification) -> RouteState:
        gender = GENDER_TOKENS.get(token)
        if gender is None:
            raise BadGender(f"bad gender {token!r}")
        result.gender = gender
        return RouteState.DONE


_classifier = RouteClassifier()


def classify_route(route: str) -> RouteCategory:
    """Classify a route descriptor with the shared classifier."""
    return _classifier.classify(route)
