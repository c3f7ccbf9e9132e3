"""
One-shot migration from legacy saved articles to normalized articles.

Each saved article stores its generated variants as a JSON mapping keyed by an
internal id. The first variant (in the mapping's own key order) becomes the
normalized article. Records that can't be read, carry no slug, or whose slug
already exists are skipped, so running the migration again is harmless.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from articlehub.errors import MigrationFailed, PrerequisiteMissing
from articlehub.models import SavedArticle
from articlehub.store import ArticleStore


def _load_articles_blob(saved: SavedArticle) -> Any:
    blob = saved.articles
    if isinstance(blob, str):
        try:
            return json.loads(blob)
        except ValueError:
            current_app.logger.warning("[migrate] unparsable articles blob on saved article %s", saved.id)
            return None
    return blob


def extract_candidate(saved: SavedArticle) -> Optional[dict]:
    """Return the first article-shaped entry of a saved article, if any."""
    blob = _load_articles_blob(saved)
    if not isinstance(blob, dict) or not blob:
        return None
    candidate = next(iter(blob.values()))
    if not isinstance(candidate, dict):
        return None
    return candidate


def migrate_saved_articles(store: ArticleStore, author_name: str) -> int:
    """Copy every saved article into the articles table; return how many were inserted."""
    try:
        author = store.find_author_by_name(author_name)
    except Exception as exc:
        store.rollback()
        raise MigrationFailed(exc) from exc
    if author is None:
        raise PrerequisiteMissing("Default author not found. Please run the seed command first.")

    migrated = 0
    try:
        for saved in store.list_saved_articles():
            candidate = extract_candidate(saved)
            if candidate is None:
                continue

            slug = candidate.get("slug")
            if not slug:
                current_app.logger.debug("[migrate] saved article %s has no slug, skipping", saved.id)
                continue

            if store.find_article_by_slug(slug) is not None:
                continue

            try:
                store.create_article(
                    title=candidate.get("title") or "",
                    description=candidate.get("description") or "",
                    content=candidate.get("content") or "",
                    image_url=candidate.get("imageUrl"),
                    slug=slug,
                    published_at=saved.saved_at,
                    tags=candidate.get("tags") or [],
                    author_id=author.id,
                )
            except IntegrityError:
                store.rollback()
                # only a slug inserted concurrently since the existence check is skipped
                if store.find_article_by_slug(slug) is None:
                    raise
                current_app.logger.warning("[migrate] slug %s already taken, skipping", slug)
                continue
            migrated += 1
    except Exception as exc:
        store.rollback()
        raise MigrationFailed(exc) from exc

    current_app.logger.info("[migrate] migrated %s saved articles", migrated)
    return migrated
