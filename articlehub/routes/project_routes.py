from flask import Blueprint, current_app, jsonify

from articlehub.store import get_store

bp = Blueprint("projects", __name__)


@bp.route("/api/projects")
def list_projects():
    store = get_store()
    try:
        projects = store.list_projects()
    except Exception as e:
        current_app.logger.error("Failed to fetch projects: %s", e)
        store.rollback()
        return jsonify({"error": "Could not fetch projects"}), 500
    return jsonify([p.to_dict() for p in projects])
