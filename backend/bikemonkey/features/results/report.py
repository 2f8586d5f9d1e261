"""
Report generators for query results.

One line per rider, for console output.
"""

from __future__ import annotations

from bikemonkey.shared.formatters import format_flags

from .models import QueryMode, QueryResult, RankedRecord

NO_RIDERS_FOUND = "No riders were found"


class ReportGenerator:
    """Format query results as text lines."""

    def generate_lines(self, result: QueryResult) -> list[str]:
        if result.mode is QueryMode.NO_MATCHES:
            return [NO_RIDERS_FOUND]
        if result.mode is QueryMode.LOOKUP:
            return [self.format_lookup(entry, result.total) for entry in result.entries]
        return [self.format_listing(entry) for entry in result.entries]

    def generate_console(self, result: QueryResult) -> str:
        return "\n".join(self.generate_lines(result))

    @staticmethod
    def format_listing(entry: RankedRecord) -> str:
        """'1 [101, a1] Ana Lopez (00:59:00) Gran Female [Fort Ross, WC]'"""
        r = entry.record
        flags = format_flags(r.fort_ross, r.willow_creek)
        flags_str = f" [{', '.join(flags)}]" if flags else ""
        return (
            f"{entry.rank} [{r.bib}, {r.external_id}] {r.full_name} "
            f"({r.display_time}) {r.course.value} {r.gender.value}{flags_str}"
        )

    @staticmethod
    def format_lookup(entry: RankedRecord, total: int) -> str:
        """'Ana Lopez: #1 of 3 in 00:59:00 (Gran Female, Fort Ross, WC)'"""
        r = entry.record
        details = [f"{r.course.value} {r.gender.value}"]
        details.extend(format_flags(r.fort_ross, r.willow_creek))
        return (
            f"{r.full_name}: #{entry.rank} of {total} in {r.display_time} "
            f"({', '.join(details)})"
        )
