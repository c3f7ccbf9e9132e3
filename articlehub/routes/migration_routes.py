from flask import Blueprint, current_app, jsonify

from articlehub.errors import MigrationFailed, PrerequisiteMissing
from articlehub.migration import migrate_saved_articles
from articlehub.store import get_store

bp = Blueprint("migration", __name__)


@bp.route("/api/migrate-saved-articles", methods=["GET", "POST"])
def migrate():
    try:
        migrated = migrate_saved_articles(get_store(), current_app.config["DEFAULT_AUTHOR_NAME"])
    except PrerequisiteMissing as e:
        return jsonify({"error": e.message}), e.status_code
    except MigrationFailed as e:
        current_app.logger.exception("Migration failed: %s", e.cause)
        return jsonify({"error": e.message, "details": str(e.cause)}), e.status_code
    return jsonify({
        "migrated": migrated,
        "message": f"Successfully migrated {migrated} articles",
    })
