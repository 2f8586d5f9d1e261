"""Rider catalog: the classified batch and its course/gender filters."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .document import ResultsDocument
from .exceptions import ExtractionError
from .extractor import extract_record
from .models import FilterCriteria, RaceRecord, RejectedRecord

logger = logging.getLogger(__name__)


class Catalog:
    """Holds the riders of one results document, in arrival order.

    Built once and read-only afterwards.
    """

    def __init__(
        self,
        records: Iterable[RaceRecord],
        rejected: Iterable[RejectedRecord] = (),
    ):
        self._records = tuple(records)
        self.rejected = tuple(rejected)

    @classmethod
    def from_records(cls, raw_records: Iterable[Any], debug: bool = False) -> Catalog:
        """Extract every raw record, dropping the ones that fail.

        Args:
            raw_records: Export rows, in arrival order.
            debug: Log each rejected record at WARNING.
        """
        records: list[RaceRecord] = []
        rejected: list[RejectedRecord] = []

        for index, raw in enumerate(raw_records):
            try:
                records.append(extract_record(raw))
            except ExtractionError as exc:
                rejected.append(RejectedRecord(index=index, error=exc))
                if debug:
                    logger.warning(
                        "Bad rider found at #%d: %s (%s)", index, exc, exc.kind
                    )

        logger.info("Loaded %d riders, rejected %d", len(records), len(rejected))
        return cls(records, rejected)

    @classmethod
    def from_document(cls, document: ResultsDocument, debug: bool = False) -> Catalog:
        logger.info(
            "Document claims %d of %d records",
            document.query_record_count,
            document.total_record_count,
        )
        return cls.from_records(document.records, debug=debug)

    @property
    def records(self) -> tuple[RaceRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def filter(self, criteria: FilterCriteria) -> list[RaceRecord]:
        """Riders matching the course/gender criteria, fastest first.

        Name searches in `criteria` are ignored here (see QueryRunner).
        Equal times keep their arrival order.
        """
        matched = [r for r in self._records if _matches(r, criteria)]
        return sorted(matched, key=lambda r: r.elapsed_seconds)


def _matches(record: RaceRecord, criteria: FilterCriteria) -> bool:
    if criteria.courses is not None and record.course not in criteria.courses:
        return False
    if criteria.gender is not None and record.gender != criteria.gender:
        return False
    return True
