"""
Article store gateway.

Thin façade over the Flask-SQLAlchemy session for the four entities the API
touches. Handlers never query models directly; they look the store up with
`get_store()` so the persistence handle is passed explicitly rather than
reached through module globals.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from flask import Flask, current_app

from articlehub.errors import NotFound
from articlehub.extensions import db
from articlehub.models import Article, Author, Project, SavedArticle

EXTENSION_KEY = "article_store"


class ArticleStore:
    """Database gateway for saved articles, articles, authors and projects."""

    def __init__(self, app: Optional[Flask] = None):
        self.app = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Register the store on the app; tables are created if missing."""
        self.app = app
        app.extensions[EXTENSION_KEY] = self
        if app.config.get("AUTO_CREATE_TABLES", True):
            with app.app_context():
                db.create_all()

    def close(self) -> None:
        """Dispose of the engine's pooled connections (process shutdown)."""
        if self.app is None:
            return
        with self.app.app_context():
            db.engine.dispose()

    @property
    def session(self):
        return db.session

    # ---- saved articles (legacy) ----

    def list_saved_articles(self) -> List[SavedArticle]:
        """All saved articles, newest first."""
        return SavedArticle.query.order_by(SavedArticle.saved_at.desc()).all()

    def create_saved_article(self, fields: Dict[str, Any]) -> SavedArticle:
        """
        Persist a saved article. Known request keys pass through verbatim,
        anything else is ignored.
        """
        values = {
            attr: fields[key]
            for key, attr in SavedArticle.FIELDS.items()
            if key in fields
        }
        saved = SavedArticle(**values)
        self.session.add(saved)
        self.session.commit()
        return saved

    def delete_saved_article(self, saved_id: str) -> None:
        saved = self.session.get(SavedArticle, saved_id)
        if saved is None:
            raise NotFound(f"Saved article {saved_id} not found")
        self.session.delete(saved)
        self.session.commit()

    # ---- authors ----

    def find_author_by_name(self, name: str) -> Optional[Author]:
        return Author.query.filter_by(name=name).first()

    def upsert_author(self, name: str) -> Author:
        """Get existing author by name or create it."""
        author = self.find_author_by_name(name)
        if author is None:
            author = Author(name=name)
            self.session.add(author)
            self.session.commit()
        return author

    # ---- normalized articles ----

    def find_article_by_slug(self, slug: str) -> Optional[Article]:
        return Article.query.filter_by(slug=slug).first()

    def create_article(self, **fields) -> Article:
        article = Article(**fields)
        self.session.add(article)
        self.session.commit()
        return article

    def list_articles(self) -> List[Article]:
        return Article.query.order_by(Article.published_at.desc()).all()

    # ---- projects ----

    def list_projects(self) -> List[Project]:
        return Project.query.order_by(Project.title.asc()).all()

    def rollback(self) -> None:
        self.session.rollback()


def get_store() -> ArticleStore:
    """Return the store registered on the current app."""
    return current_app.extensions[EXTENSION_KEY]
