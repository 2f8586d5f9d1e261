"""
Text normalisation for name matching.

Rider names come from a registration form, so the same person can be
typed as "Maria", "MARIA" or "María". Matching folds all of those to
one key.
"""

import unicodedata


def canonical_caseless(s: str) -> str:
    """
    Fold a string for caseless, accent-insensitive comparison.

    NFKD decomposes accented letters and compatibility forms (full-width
    letters, ligatures), combining marks are dropped, then the result is
    casefolded.

    Examples:
        canonical_caseless("marÍa")  -> "maria"
        canonical_caseless("Ｍaria") -> "maria"
    """
    s = unicodedata.normalize("NFKD", s or "")
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    return s.casefold()


def caseless_equals(a: str, b: str) -> bool:
    """Exact equality after canonical caseless folding."""
    return canonical_caseless(a) == canonical_caseless(b)
