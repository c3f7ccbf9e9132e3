from datetime import datetime

import pytest

from articlehub.errors import NotFound
from articlehub.extensions import db
from articlehub.models import Article, Project, SavedArticle


def test_saved_articles_listed_newest_first(store):
    db.session.add_all([
        SavedArticle(primary_keyword="old", saved_at=datetime(2024, 1, 1)),
        SavedArticle(primary_keyword="new", saved_at=datetime(2024, 3, 1)),
        SavedArticle(primary_keyword="mid", saved_at=datetime(2024, 2, 1)),
    ])
    db.session.commit()

    assert [s.primary_keyword for s in store.list_saved_articles()] == ["new", "mid", "old"]


def test_create_passes_fields_through(store):
    saved = store.create_saved_article({
        "primaryKeyword": "python flask",
        "userLsiKeywords": ["wsgi", "blueprint"],
        "articles": {"v1": {"slug": "python-flask"}},
        "seoAnalysis": {"score": 87},
        "unknownField": "ignored",
    })

    data = saved.to_dict()
    assert data["primaryKeyword"] == "python flask"
    assert data["userLsiKeywords"] == ["wsgi", "blueprint"]
    assert data["articles"] == {"v1": {"slug": "python-flask"}}
    assert data["seoAnalysis"] == {"score": 87}
    assert data["markdownContent"] is None
    assert data["savedAt"].endswith("Z")
    assert "unknownField" not in data


def test_delete_removes_record(store):
    saved = store.create_saved_article({"primaryKeyword": "bye"})
    store.delete_saved_article(saved.id)
    assert store.list_saved_articles() == []


def test_delete_unknown_id_raises_not_found(store):
    with pytest.raises(NotFound):
        store.delete_saved_article("does-not-exist")


def test_upsert_author_is_idempotent(store):
    first = store.upsert_author("Misbakhul Munir")
    second = store.upsert_author("Misbakhul Munir")
    assert first.id == second.id
    assert store.find_author_by_name("Someone Else") is None


def test_projects_sorted_by_title(store):
    db.session.add_all([Project(title="Zeta"), Project(title="Alpha"), Project(title="Mango")])
    db.session.commit()

    assert [p.title for p in store.list_projects()] == ["Alpha", "Mango", "Zeta"]


def test_articles_listed_by_publish_date(store, author):
    store.create_article(slug="a", author_id=author.id, published_at=datetime(2024, 1, 1), tags=[])
    store.create_article(slug="b", author_id=author.id, published_at=datetime(2024, 6, 1), tags=[])

    assert [a.slug for a in store.list_articles()] == ["b", "a"]
    assert store.find_article_by_slug("b").to_dict()["authorId"] == author.id


def test_long_urls_and_keywords_are_stored_whole(store, author):
    long_url = "https://cdn.example.com/" + "a" * 2000 + ".jpg"
    saved = store.create_saved_article({"primaryKeyword": "k" * 1000, "thumbnailUrl": long_url})
    article = store.create_article(slug="s" * 500, title="t" * 500, image_url=long_url,
                                   author_id=author.id, tags=[])

    assert saved.to_dict()["thumbnailUrl"] == long_url
    assert article.to_dict()["imageUrl"] == long_url
    assert isinstance(SavedArticle.__table__.c.thumbnail_url.type, db.Text)
    assert isinstance(Article.__table__.c.image_url.type, db.Text)
    assert isinstance(Article.__table__.c.slug.type, db.Text)
