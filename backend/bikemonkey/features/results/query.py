"""QueryRunner: filter, rank and pick listing or rider lookup."""

from __future__ import annotations

from bikemonkey.shared.text import caseless_equals

from .catalog import Catalog
from .models import FilterCriteria, QueryMode, QueryResult, RaceRecord, RankedRecord


class QueryRunner:
    """
    Answers queries against one catalog.

    Usage:
        runner = QueryRunner(catalog)
        result = runner.run(FilterCriteria(gender=Gender.FEMALE))
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def rank(self, criteria: FilterCriteria) -> list[RankedRecord]:
        """Filtered riders with their 1-based rank."""
        return [
            RankedRecord(rank=rank, record=record)
            for rank, record in enumerate(self.catalog.filter(criteria), start=1)
        ]

    def run(self, criteria: FilterCriteria) -> QueryResult:
        """
        Run one query.

        Without a name search the whole ranking is returned (LISTING).
        With one, only matching riders are returned (LOOKUP), keeping
        their rank in the full ranking; an empty match is NO_MATCHES.
        """
        ranked = self.rank(criteria)
        total = len(ranked)

        if not criteria.has_name_search:
            return QueryResult(mode=QueryMode.LISTING, entries=ranked, total=total)

        found = [entry for entry in ranked if _name_matches(entry.record, criteria)]
        if not found:
            return QueryResult(mode=QueryMode.NO_MATCHES, entries=[], total=total)
        return QueryResult(mode=QueryMode.LOOKUP, entries=found, total=total)


def _name_matches(record: RaceRecord, criteria: FilterCriteria) -> bool:
    if criteria.first_name is not None and not caseless_equals(
        record.first_name, criteria.first_name
    ):
        return False
    if criteria.last_name is not None and not caseless_equals(
        record.last_name, criteria.last_name
    ):
        return False
    return True
