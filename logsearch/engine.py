"""In-memory inverted index over log records for the reference service."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from time import perf_counter
from typing import Dict, Iterable, List

from .models import SearchResponse, SearchResult

logger = logging.getLogger(__name__)

DATA_SUFFIXES = (".json", ".jsonl")


def tokenize(text: str) -> List[str]:
    return text.lower().split()


def _timestamp_key(record: SearchResult) -> int:
    try:
        return int(record.nano_timestamp)
    except (TypeError, ValueError):
        return 0


def _text(value: object) -> str:
    return "" if value is None else str(value)


def find_data_files(directory: str | Path) -> List[Path]:
    root = Path(directory)
    return sorted(
        path for path in root.iterdir() if path.is_file() and path.suffix.lower() in DATA_SUFFIXES
    )


def load_records(path: Path) -> List[SearchResult]:
    """Read a JSON array or a JSON-lines file of log records."""
    with path.open("r", encoding="utf-8") as fh:
        if path.suffix.lower() == ".jsonl":
            raw = [json.loads(line) for line in fh if line.strip()]
        else:
            raw = json.load(fh)
    if not isinstance(raw, list):
        raise ValueError(f"{path} does not contain a list of records")
    records = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: record {position} is not an object")
        records.append(
            SearchResult(
                EventId=_text(item.get("EventId")),
                Message=_text(item.get("Message")),
                NanoTimeStamp=_text(item.get("NanoTimeStamp")),
            )
        )
    return records


class SearchEngine:
    def __init__(self) -> None:
        self.records: List[SearchResult] = []
        self.index: Dict[str, List[int]] = {}

    def add_records(self, records: Iterable[SearchResult]) -> None:
        for record in records:
            position = len(self.records)
            self.records.append(record)
            text = " ".join(_text(value) for value in (record.message, record.event_id, record.nano_timestamp))
            # A record is posted once per distinct term.
            for term in dict.fromkeys(tokenize(text)):
                self.index.setdefault(term, []).append(position)

    def search(self, query: str) -> SearchResponse:
        start = perf_counter()
        terms = tokenize(query)
        if not terms:
            return SearchResponse(results=[], count=0, time_ms=0)

        positions = self.index.get(terms[0], [])
        for term in terms[1:]:
            wanted = set(self.index.get(term, []))
            positions = [pos for pos in positions if pos in wanted]

        results = sorted((self.records[pos] for pos in positions), key=_timestamp_key, reverse=True)
        took_ms = (perf_counter() - start) * 1000
        logger.info("search q=%r terms=%s hits=%s took=%.2fms", query, terms, len(results), took_ms)
        return SearchResponse(results=results, count=len(results), time_ms=round(took_ms, 3))

    @classmethod
    def from_directory(cls, directory: str | Path) -> "SearchEngine":
        files = find_data_files(directory)
        if not files:
            raise FileNotFoundError(f"No data files found in directory {directory}")
        engine = cls()
        for path in files:
            logger.info("Loading file: %s", path)
            try:
                records = load_records(path)
            except (OSError, ValueError) as exc:
                logger.warning("Failed to read data file %s: %s", path, exc)
                continue
            engine.add_records(records)
        logger.info("Loaded %s records", len(engine.records))
        return engine
