"""Reference search engine: indexing, AND matching and ordering."""
import json

import pytest

from logsearch.engine import SearchEngine, load_records, tokenize
from logsearch.models import SearchResult


def record(event_id, message, ts):
    return SearchResult(EventId=event_id, Message=message, NanoTimeStamp=str(ts))


@pytest.fixture
def engine():
    engine = SearchEngine()
    engine.add_records(
        [
            record("e1", "disk full on node-a", 100),
            record("e2", "Disk healthy", 300),
            record("e3", "disk full on node-b", 200),
        ]
    )
    return engine


def test_tokenize_lowercases_and_splits_on_whitespace():
    """Tokenize lowercases and splits on whitespace."""
    assert tokenize("  Disk\tFULL\nnow ") == ["disk", "full", "now"]


def test_search_intersects_terms_and_sorts_newest_first(engine):
    """Search intersects terms and sorts newest first."""
    response = engine.search("DISK full")

    assert [r.event_id for r in response.results] == ["e3", "e1"]
    assert response.count == 2


def test_search_matches_event_id_and_timestamp(engine):
    """Search matches event id and timestamp."""
    assert [r.event_id for r in engine.search("e2").results] == ["e2"]
    assert [r.event_id for r in engine.search("300").results] == ["e2"]


def test_unknown_term_returns_nothing(engine):
    """Unknown term returns nothing."""
    response = engine.search("disk missing")

    assert response.results == []
    assert response.count == 0


def test_blank_query_returns_zero_time(engine):
    """Blank query returns zero time."""
    response = engine.search("   ")

    assert response.count == 0
    assert response.time_ms == 0


def test_unparseable_timestamps_sort_last():
    """Unparseable timestamps sort last."""
    engine = SearchEngine()
    engine.add_records([record("bad", "boot", "n/a"), record("good", "boot", 5)])

    assert [r.event_id for r in engine.search("boot").results] == ["good", "bad"]


def test_from_directory_loads_json_and_jsonl(tmp_path):
    """From directory loads json and jsonl."""
    (tmp_path / "a.json").write_text(
        json.dumps([{"EventId": "1", "Message": "alpha", "NanoTimeStamp": "10"}]), encoding="utf-8"
    )
    (tmp_path / "b.jsonl").write_text(
        '{"EventId": "2", "Message": "beta", "NanoTimeStamp": "20"}\n\n', encoding="utf-8"
    )
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    engine = SearchEngine.from_directory(tmp_path)

    assert len(engine.records) == 2
    assert engine.search("beta").results[0].event_id == "2"


def test_from_directory_requires_data_files(tmp_path):
    """From directory requires data files."""
    with pytest.raises(FileNotFoundError):
        SearchEngine.from_directory(tmp_path)


def test_load_records_rejects_non_list(tmp_path):
    """Load records rejects non list."""
    path = tmp_path / "obj.json"
    path.write_text('{"EventId": "1"}', encoding="utf-8")

    with pytest.raises(ValueError):
        load_records(path)


def test_from_directory_skips_file_with_non_object_records(tmp_path):
    """A file holding bare values is skipped, the rest still loads."""
    (tmp_path / "bad.json").write_text("[1, 2]", encoding="utf-8")
    (tmp_path / "bad_line.jsonl").write_text('"just a string"\n', encoding="utf-8")
    (tmp_path / "good.jsonl").write_text(
        '{"EventId": "g1", "Message": "kept", "NanoTimeStamp": "1"}\n', encoding="utf-8"
    )

    engine = SearchEngine.from_directory(tmp_path)

    assert [r.event_id for r in engine.records] == ["g1"]


def test_null_fields_are_not_indexed_as_text(tmp_path):
    """JSON null becomes an empty field rather than the word 'None'."""
    path = tmp_path / "nulls.json"
    path.write_text('[{"EventId": "n1", "Message": null, "NanoTimeStamp": null}]', encoding="utf-8")

    records = load_records(path)
    engine = SearchEngine()
    engine.add_records(records)

    assert records[0].message == ""
    assert engine.search("none").count == 0
    assert engine.search("n1").count == 1


def test_repeated_terms_return_record_once():
    """A record whose message repeats a word is matched a single time."""
    engine = SearchEngine()
    engine.add_records([record("e1", "error error", 1)])

    response = engine.search("error error")

    assert [r.event_id for r in response.results] == ["e1"]
    assert response.count == 1
