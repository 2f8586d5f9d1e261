"""Shared fixtures for results tests."""

import pytest


@pytest.fixture
def make_raw():
    """Build an export row. Keyword overrides replace fields; None drops the key."""

    def _make(**overrides):
        raw = {
            "firstname": "Maria",
            "lastname": "Rossi",
            "elapsedtime": "01:02:03",
            "route": "GRAN Female",
            "bib": 101,
            "_id": "5a1f00c2",
        }
        for key, value in overrides.items():
            if value is None:
                raw.pop(key, None)
            else:
                raw[key] = value
        return raw

    return _make
