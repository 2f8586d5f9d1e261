"""Elapsed time parsing for HH:MM:SS strings."""

from __future__ import annotations

import re

from bikemonkey.shared.constants import U64_MAX

from .exceptions import MalformedDuration

# One unsigned integer component ("07", "+7"; no sign, no spaces).
# 20 digits covers U64_MAX; longer runs are never a valid component.
_COMPONENT_RE = re.compile(r"\+?[0-9]{1,20}")


def parse_duration(text: str) -> int:
    """
    Parse an elapsed time to whole seconds.

    Components that are not unsigned 64-bit integers are dropped first;
    exactly three must remain. Minutes and seconds are not range checked.

    Formats:
        "01:02:03"  → 3723
        "00:59:00"  → 3540
        "1:75:00"   → 8100 (out-of-range minutes are summed)
        "01:02"     → MalformedDuration
        "01:02:x:03" → 3723 ("x" is dropped)
    """
    components = [
        value
        for value in (_unsigned(part) for part in text.split(":"))
        if value is not None
    ]
    if len(components) != 3:
        raise MalformedDuration(f"bad duration {text[:40]!r}: {components}")

    hours, minutes, seconds = components
    return hours * 3600 + minutes * 60 + seconds


def _unsigned(part: str) -> int | None:
    """Component value, or None if it isn't an unsigned 64-bit integer."""
    if not _COMPONENT_RE.fullmatch(part):
        return None
    value = int(part)
    return value if value <= U64_MAX else None
