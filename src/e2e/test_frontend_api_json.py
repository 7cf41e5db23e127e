import pytest
import frontend.web as webmod
from frontend.web import app as flask_app
from wordrank import FileIndex


@pytest.fixture()
def client(two_file_index: FileIndex, monkeypatch):
    monkeypatch.setattr(webmod, "_index", two_file_index)
    return flask_app.test_client()


@pytest.mark.e2e
def test_count_rank_average(client):
    rv = client.get("/api/count?file=B.txt&word=dog")
    assert rv.status_code == 200
    assert rv.get_json()["count"] == 2

    rv = client.get("/api/rank?file=A.txt&word=bird")
    assert rv.get_json()["rank"] == 32

    rv = client.get("/api/average?word=Dog")
    assert rv.get_json() == {"word": "Dog", "average": 1}


@pytest.mark.e2e
def test_words_below(client):
    rv = client.get("/api/words?k=2&kind=min")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["kind"] == "min"
    assert sorted(data["words"]) == ["cat", "dog"]


@pytest.mark.e2e
def test_report_and_files(client):
    data = client.get("/api/report?word=cat").get_json()
    for key in ("word", "known", "counts", "ranks", "average", "min", "max"):
        assert key in data
    assert data["ranks"] == {"A.txt": 1, "B.txt": 32}
    assert client.get("/api/files").get_json() == ["A.txt", "B.txt"]


@pytest.mark.e2e
def test_unknown_file_is_404(client):
    rv = client.get("/api/rank?file=C.txt&word=dog")
    assert rv.status_code == 404
    assert "C.txt" in rv.get_json()["error"]


@pytest.mark.e2e
@pytest.mark.parametrize("url", [
    "/api/count?word=dog",
    "/api/average",
    "/api/words?k=abc",
    "/api/words?k=2&kind=median",
])
def test_bad_parameters_are_400(client, url):
    rv = client.get(url)
    assert rv.status_code == 400
    assert "error" in rv.get_json()
