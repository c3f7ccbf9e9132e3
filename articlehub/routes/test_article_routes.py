from sqlalchemy.exc import OperationalError


def _payload(**overrides):
    payload = {
        "primaryKeyword": "best espresso grinder",
        "userLsiKeywords": ["burr grinder", "espresso"],
        "articles": {"gen-1": {"slug": "best-espresso-grinder", "title": "Best Grinders"}},
        "markdownContent": "# Best Grinders",
        "thumbnailUrl": None,
        "generationSettings": {"tone": "friendly"},
        "searchIntent": {"type": "commercial"},
        "seoAnalysis": {"score": 91},
        "keywordResearchData": {"volume": 1200},
    }
    payload.update(overrides)
    return payload


def test_list_is_empty_initially(client):
    resp = client.get("/api/articles")
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_create_returns_record(client):
    resp = client.post("/api/articles", json=_payload())
    assert resp.status_code == 201

    data = resp.get_json()
    assert data["id"]
    assert data["primaryKeyword"] == "best espresso grinder"
    assert data["articles"]["gen-1"]["slug"] == "best-espresso-grinder"
    assert data["savedAt"]


def test_created_records_are_listed(client):
    client.post("/api/articles", json=_payload(primaryKeyword="one"))
    client.post("/api/articles", json=_payload(primaryKeyword="two"))

    keywords = {a["primaryKeyword"] for a in client.get("/api/articles").get_json()}
    assert keywords == {"one", "two"}


def test_delete_returns_no_content(client):
    created = client.post("/api/articles", json=_payload()).get_json()

    resp = client.delete(f"/api/articles/{created['id']}")
    assert resp.status_code == 204
    assert resp.data == b""
    assert client.get("/api/articles").get_json() == []


def test_delete_unknown_id_is_a_server_error(client):
    resp = client.delete("/api/articles/nope")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Could not delete the article"}


def test_store_failure_on_list_is_500(client, app, monkeypatch):
    store = app.extensions["article_store"]

    def boom():
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(store, "list_saved_articles", boom)

    resp = client.get("/api/articles")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Could not fetch articles"}


def test_store_failure_on_create_is_500(client, app, monkeypatch):
    store = app.extensions["article_store"]

    def boom(fields):
        raise OperationalError("INSERT", {}, Exception("read-only"))

    monkeypatch.setattr(store, "create_saved_article", boom)

    resp = client.post("/api/articles", json=_payload())
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Could not save the article"}
