"""
Formatting utilities for display.

Used by the report generator and log messages.
"""


def format_name(first: str, last: str) -> str:
    """Join first and last name, skipping an empty part."""
    return " ".join(part for part in (first, last) if part)


def format_flags(fort_ross: bool, willow_creek: bool) -> list[str]:
    """
    List the sub-event labels that are set, in display order.

    Returns:
        e.g. ['Fort Ross', 'WC'], or [] when no flag is set
    """
    flags = []
    if fort_ross:
        flags.append("Fort Ross")
    if willow_creek:
        flags.append("WC")
    return flags
