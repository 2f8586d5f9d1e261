"""
Results document loading.

The export is one JSON (or YAML) object:

    {
        "records": [{"firstname": ..., "route": ..., ...}, ...],
        "queryRecordCount": 412,
        "totalRecordCount": 412
    }

Records stay untyped here; RecordExtractor decodes them one by one.
Anything that stops the document itself from loading is a DocumentError.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List
from urllib.parse import urlparse

import httpx
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import DocumentError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class ResultsDocument(BaseModel):
    """Top-level results export. The counts are informational only."""

    model_config = ConfigDict(populate_by_name=True)

    records: List[Any]
    query_record_count: int = Field(..., ge=0, alias="queryRecordCount")
    total_record_count: int = Field(..., ge=0, alias="totalRecordCount")


def is_url(source: str | Path) -> bool:
    """True for http(s) sources."""
    return isinstance(source, str) and urlparse(source).scheme in ("http", "https")


def load_document(source: str | Path, timeout: float = 30.0) -> ResultsDocument:
    """Load a results document from a local file or an http(s) URL."""
    if is_url(source):
        return load_url(str(source), timeout=timeout)
    return load_file(Path(source))


def load_file(path: Path) -> ResultsDocument:
    """Parse a local JSON or YAML results file."""
    if not path.exists():
        raise DocumentError(f"couldn't open {path}: file not found")

    try:
        content = path.read_text(encoding="utf-8-sig")  # handles BOM
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"couldn't open {path}: {exc}") from exc

    logger.debug("Read %d bytes from %s", len(content), path)
    return _decode(content, is_yaml=path.suffix.lower() in YAML_SUFFIXES, origin=str(path))


def load_url(url: str, timeout: float = 30.0) -> ResultsDocument:
    """Download and parse a results document."""
    try:
        resp = httpx.get(url, timeout=timeout, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise DocumentError(f"couldn't fetch {url}: {exc}") from exc

    logger.debug("Fetched %d bytes from %s", len(resp.content), url)
    is_yaml = Path(urlparse(url).path).suffix.lower() in YAML_SUFFIXES
    return _decode(resp.text.lstrip("\ufeff"), is_yaml=is_yaml, origin=url)


def parse_document(payload: Any, origin: str = "<document>") -> ResultsDocument:
    """Validate an already decoded payload."""
    try:
        return ResultsDocument.model_validate(payload)
    except ValidationError as exc:
        raise DocumentError(f"{origin} is not a results document: {exc}") from exc


def _decode(content: str, is_yaml: bool, origin: str) -> ResultsDocument:
    try:
        payload = yaml.safe_load(content) if is_yaml else json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentError(f"couldn't parse {origin}: {exc}") from exc
    return parse_document(payload, origin=origin)
