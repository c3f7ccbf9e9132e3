from flask import Blueprint, current_app, jsonify, request

from articlehub.store import get_store

bp = Blueprint("articles", __name__, url_prefix="/api/articles")


# List saved articles, newest first
@bp.route("", methods=["GET"])
def list_articles():
    store = get_store()
    try:
        saved = store.list_saved_articles()
    except Exception as e:
        current_app.logger.error("Failed to fetch articles: %s", e)
        store.rollback()
        return jsonify({"error": "Could not fetch articles"}), 500
    return jsonify([a.to_dict() for a in saved])


# Save a new generated article bundle
@bp.route("", methods=["POST"])
def create_article():
    store = get_store()
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        saved = store.create_saved_article(data)
    except Exception as e:
        current_app.logger.error("Failed to save article: %s", e)
        store.rollback()
        return jsonify({"error": "Could not save the article"}), 500
    return jsonify(saved.to_dict()), 201


# Delete a saved article; a missing id is reported like any other store failure
@bp.route("/<article_id>", methods=["DELETE"])
def delete_article(article_id):
    store = get_store()
    try:
        store.delete_saved_article(article_id)
    except Exception as e:
        current_app.logger.error("Failed to delete article: %s", e)
        store.rollback()
        return jsonify({"error": "Could not delete the article"}), 500
    return "", 204
