from __future__ import annotations

import uuid
from datetime import datetime, timezone

from articlehub.extensions import db


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _iso(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


class SavedArticle(db.Model):
    """Legacy record: one keyword run with its generated article variants."""
    __tablename__ = "saved_articles"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    primary_keyword = db.Column(db.Text)
    user_lsi_keywords = db.Column(db.JSON, nullable=False, default=list)
    articles = db.Column(db.JSON)  # {internal_id: {title, slug, ...}}
    markdown_content = db.Column(db.Text)
    thumbnail_url = db.Column(db.Text)
    generation_settings = db.Column(db.JSON)
    search_intent = db.Column(db.JSON)
    seo_analysis = db.Column(db.JSON)
    keyword_research_data = db.Column(db.JSON)
    saved_at = db.Column(db.DateTime(timezone=True), default=_utcnow, index=True, nullable=False)

    # request body key -> column
    FIELDS = {
        "primaryKeyword": "primary_keyword",
        "userLsiKeywords": "user_lsi_keywords",
        "articles": "articles",
        "markdownContent": "markdown_content",
        "thumbnailUrl": "thumbnail_url",
        "generationSettings": "generation_settings",
        "searchIntent": "search_intent",
        "seoAnalysis": "seo_analysis",
        "keywordResearchData": "keyword_research_data",
    }

    def to_dict(self):
        data = {"id": self.id}
        for key, attr in self.FIELDS.items():
            data[key] = getattr(self, attr)
        data["savedAt"] = _iso(self.saved_at)
        return data

    def __repr__(self) -> str:
        return f"<SavedArticle {self.id} '{self.primary_keyword}'>"


class Author(db.Model):
    __tablename__ = "authors"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.Text, unique=True, index=True, nullable=False)

    articles = db.relationship("Article", back_populates="author", lazy=True)

    def to_dict(self):
        return {"id": self.id, "name": self.name}

    def __repr__(self) -> str:
        return f"<Author '{self.name}'>"


class Article(db.Model):
    """Normalized article; `slug` is the de-duplication key for migrations."""
    __tablename__ = "articles"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    title = db.Column(db.Text, nullable=False, default="")
    description = db.Column(db.Text, nullable=False, default="")
    content = db.Column(db.Text, nullable=False, default="")
    image_url = db.Column(db.Text, nullable=True)
    slug = db.Column(db.Text, unique=True, index=True, nullable=False)
    published_at = db.Column(db.DateTime(timezone=True), default=_utcnow, index=True, nullable=False)
    tags = db.Column(db.JSON, nullable=False, default=list)
    author_id = db.Column(db.String(36), db.ForeignKey("authors.id"), index=True, nullable=False)

    author = db.relationship("Author", back_populates="articles")

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "content": self.content,
            "imageUrl": self.image_url,
            "slug": self.slug,
            "publishedAt": _iso(self.published_at),
            "tags": list(self.tags or []),
            "authorId": self.author_id,
        }

    def __repr__(self) -> str:
        return f"<Article {self.slug}>"


class Project(db.Model):
    __tablename__ = "projects"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    title = db.Column(db.Text, index=True, nullable=False)
    description = db.Column(db.Text)
    image_url = db.Column(db.Text)
    project_url = db.Column(db.Text)
    tags = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "imageUrl": self.image_url,
            "projectUrl": self.project_url,
            "tags": list(self.tags or []),
            "createdAt": _iso(self.created_at),
        }
