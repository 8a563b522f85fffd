from pathlib import Path
import pytest
from wordsearch.engine import Engine
import wordsearch_ui.web as webmod
from wordsearch_ui.web import app as flask_app

def _seed(tmp: Path) -> str:
    p = tmp / "cats.txt"
    p.write_text("the cat sat.\nthe dog sat.\n", encoding="utf-8")
    return str(p)

@pytest.fixture
def client(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path))
    webmod._engine = eng
    yield flask_app.test_client()
    eng.shutdown()
    webmod._engine = None

@pytest.mark.e2e
def test_complete_api(client):
    rv = client.get("/api/complete?q=sa&k=5")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["results"] == [{"text": "sat", "frequency": 2}]
    assert data["total_candidates"] == 1

@pytest.mark.e2e
def test_fuzzy_api(client):
    data = client.get("/api/fuzzy?q=cap&k=5&d=1").get_json()
    assert data["results"] == [{"text": "cat", "frequency": 1}]
    assert client.get("/api/fuzzy?q=cap&d=-1").status_code == 400

@pytest.mark.e2e
def test_lookup_api(client):
    data = client.get("/api/lookup?w=the").get_json()
    assert data["found"] is True
    assert data["locations"] == [{"line": 0, "word": 0}, {"line": 1, "word": 0}]
    assert client.get("/api/lookup?w=bird").get_json()["found"] is False

@pytest.mark.e2e
def test_empty_query_and_stats(client):
    assert client.get("/api/complete?q=").get_json()["results"] == []
    st = client.get("/api/stats").get_json()
    assert st["records"] == 2 and st["words"] == 6 and st["distinct"] == 4

@pytest.mark.e2e
def test_health_and_home(client):
    assert client.get("/health").get_json() == {"ok": True, "loaded": True}
    r = client.get("/")
    assert r.status_code == 200
    assert "word search" in r.data.decode("utf-8").lower()

@pytest.mark.e2e
def test_api_without_engine_is_503():
    webmod._engine = None
    c = flask_app.test_client()
    assert c.get("/api/complete?q=a").status_code == 503
    assert c.get("/health").get_json()["loaded"] is False

@pytest.mark.e2e
def test_k_is_clamped_like_the_page_input(client):
    assert len(client.get("/api/complete?q=&k=0").get_json()["results"]) == 0
    assert client.get("/api/complete?q=sa&k=0").get_json()["results"] == [{"text": "sat", "frequency": 2}]
    data = client.get("/api/fuzzy?q=cap&k=-3&d=1").get_json()
    assert data["results"] == [{"text": "cat", "frequency": 1}]
