"""
Tests for results document loading (files, URLs, JSON, YAML).
"""

import json

import httpx
import pytest

from bikemonkey.features.results import document as document_module
from bikemonkey.features.results.document import (
    ResultsDocument,
    load_document,
    load_file,
    parse_document,
)
from bikemonkey.features.results.exceptions import DocumentError


# =============================================================================
# Test Data
# =============================================================================

SAMPLE = {
    "records": [
        {
            "firstname": "Maria",
            "lastname": "Rossi",
            "elapsedtime": "01:02:03",
            "route": "GRAN Female",
            "bib": 101,
            "_id": "5a1f00c2",
        },
        {"firstname": "", "lastname": ""},
    ],
    "queryRecordCount": 2,
    "totalRecordCount": 2,
}

SAMPLE_YAML = """\
records:
  - firstname: Maria
    lastname: Rossi
    elapsedtime: "01:02:03"
    route: GRAN Female
    bib: 101
    _id: 5a1f00c2
queryRecordCount: 1
totalRecordCount: 3
"""


def _fake_get(handler):
    """Stand-in for httpx.get that routes through a MockTransport."""

    def fake_get(url, timeout=None, follow_redirects=False):
        transport = httpx.MockTransport(handler)
        with httpx.Client(transport=transport, follow_redirects=follow_redirects) as client:
            return client.get(url)

    return fake_get


# =============================================================================
# Parsing
# =============================================================================

class TestParseDocument:
    """Tests for document shape validation."""

    def test_valid(self):
        doc = parse_document(SAMPLE)
        assert isinstance(doc, ResultsDocument)
        assert len(doc.records) == 2
        assert doc.query_record_count == 2
        assert doc.total_record_count == 2

    def test_counts_are_not_checked_against_records(self):
        doc = parse_document({**SAMPLE, "queryRecordCount": 500, "totalRecordCount": 9})
        assert len(doc.records) == 2

    def test_records_stay_untyped(self):
        """Bad rows are the extractor's problem, not the document's."""
        doc = parse_document({**SAMPLE, "records": [1, "two", None]})
        assert doc.records == [1, "two", None]

    @pytest.mark.parametrize("payload", [
        [],
        "records",
        None,
        {"records": []},
        {"queryRecordCount": 1, "totalRecordCount": 1},
        {"records": {}, "queryRecordCount": 1, "totalRecordCount": 1},
        {"records": [], "queryRecordCount": -1, "totalRecordCount": 1},
        {"records": [], "queryRecordCount": "many", "totalRecordCount": 1},
    ])
    def test_wrong_shape(self, payload):
        with pytest.raises(DocumentError, match="not a results document"):
            parse_document(payload)


# =============================================================================
# Files
# =============================================================================

class TestLoadFile:
    """Tests for local files."""

    def test_json(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_text(json.dumps(SAMPLE), encoding="utf-8")
        assert len(load_file(path).records) == 2

    def test_json_with_bom(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_text(json.dumps(SAMPLE), encoding="utf-8-sig")
        assert load_file(path).total_record_count == 2

    def test_yaml(self, tmp_path):
        path = tmp_path / "results.yaml"
        path.write_text(SAMPLE_YAML, encoding="utf-8")
        doc = load_file(path)
        assert doc.records[0]["elapsedtime"] == "01:02:03"
        assert doc.total_record_count == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentError, match="couldn't open"):
            load_file(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_text("{records: [", encoding="utf-8")
        with pytest.raises(DocumentError, match="couldn't parse"):
            load_file(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "results.yml"
        path.write_text("records: [unclosed", encoding="utf-8")
        with pytest.raises(DocumentError, match="couldn't parse"):
            load_file(path)

    def test_load_document_accepts_path_string(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_text(json.dumps(SAMPLE), encoding="utf-8")
        assert len(load_document(str(path)).records) == 2


# =============================================================================
# URLs
# =============================================================================

class TestLoadUrl:
    """Tests for http(s) sources."""

    def test_json_url(self, monkeypatch):
        def handler(request):
            assert request.url.path == "/results.json"
            return httpx.Response(200, json=SAMPLE)

        monkeypatch.setattr(document_module.httpx, "get", _fake_get(handler))
        doc = load_document("https://example.org/results.json")
        assert len(doc.records) == 2

    def test_yaml_url(self, monkeypatch):
        monkeypatch.setattr(
            document_module.httpx,
            "get",
            _fake_get(lambda request: httpx.Response(200, text=SAMPLE_YAML)),
        )
        doc = load_document("http://example.org/2024/results.yaml")
        assert doc.query_record_count == 1

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(
            document_module.httpx,
            "get",
            _fake_get(lambda request: httpx.Response(404, text="not found")),
        )
        with pytest.raises(DocumentError, match="couldn't fetch"):
            load_document("https://example.org/missing.json")

    def test_connection_error(self, monkeypatch):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        monkeypatch.setattr(document_module.httpx, "get", _fake_get(handler))
        with pytest.raises(DocumentError, match="couldn't fetch"):
            load_document("https://example.org/results.json")

    def test_unparsable_body(self, monkeypatch):
        monkeypatch.setattr(
            document_module.httpx,
            "get",
            _fake_get(lambda request: httpx.Response(200, text="<html></html>")),
        )
        with pytest.raises(DocumentError, match="couldn't parse"):
            load_document("https://example.org/results.json")
