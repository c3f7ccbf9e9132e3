from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, send_from_directory

bp = Blueprint("site", __name__)


@bp.route("/api/health")
def health():
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return jsonify({"status": "OK", "timestamp": timestamp})


# Uploaded images and other public assets, read-only
@bp.route("/public/<path:filename>")
def public_file(filename):
    return send_from_directory(current_app.config["PUBLIC_FOLDER"], filename)
