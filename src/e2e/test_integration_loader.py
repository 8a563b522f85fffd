from pathlib import Path
import logging
import pytest
from wordsearch.loader import iter_records, load_index

@pytest.mark.e2e
def test_iter_records_strips_line_endings(tmp_path: Path):
    p = tmp_path / "crlf.txt"
    p.write_bytes(b"alpha beta\r\ngamma\r\n\r\nlast")
    assert list(iter_records(str(p))) == ["alpha beta", "gamma", "", "last"]

@pytest.mark.e2e
def test_undecodable_bytes_are_ignored(tmp_path: Path):
    p = tmp_path / "bad.txt"
    p.write_bytes(b"caf\xff latte\n")
    idx = load_index(str(p))
    assert idx.lookup("caf") is not None
    assert idx.lookup("latte") is not None

@pytest.mark.e2e
def test_progress_logging_when_verbose(tmp_path: Path, monkeypatch, caplog):
    import wordsearch.index as I
    monkeypatch.setenv("WORDSEARCH_VERBOSE", "1")
    monkeypatch.setattr(I, "PROGRESS_EVERY_RECORDS", 2)
    p = tmp_path / "many.txt"
    p.write_text("a\nb\nc\nd\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="wordsearch"):
        idx = load_index(str(p))
    assert idx.record_count == 4
    assert sum("[indexed]" in r.getMessage() for r in caplog.records) == 2

@pytest.mark.e2e
def test_build_logs_a_single_summary(tmp_path: Path, caplog):
    from wordsearch.engine import Engine
    p = tmp_path / "w.txt"
    p.write_text("one two\nthree\n", encoding="utf-8")
    eng = Engine()
    with caplog.at_level(logging.INFO, logger="wordsearch"):
        eng.build(str(p))
    summaries = [r for r in caplog.records if "3 words" in r.getMessage()]
    assert len(summaries) == 1
    assert summaries[0].name == "wordsearch.engine"
    assert not [r for r in caplog.records if r.name == "wordsearch.loader"]
