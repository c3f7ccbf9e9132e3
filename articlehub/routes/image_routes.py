from flask import Blueprint, current_app, jsonify, request

from articlehub.errors import ArticleHubError
from articlehub.images import persist_inline_image

bp = Blueprint("images", __name__, url_prefix="/api/images")


@bp.route("/upload", methods=["POST"])
def upload_image():
    data = request.get_json(silent=True)
    image_data = data.get("imageData") if isinstance(data, dict) else None
    if not image_data:
        return jsonify({"error": "imageData is required"}), 400
    if not isinstance(image_data, str):
        return jsonify({"error": "Invalid image data format"}), 400

    try:
        url = persist_inline_image(
            image_data,
            public_folder=current_app.config["PUBLIC_FOLDER"],
            base_url=current_app.config["PUBLIC_BASE_URL"],
            upload_subdir=current_app.config["UPLOAD_SUBDIR"],
        )
    except ArticleHubError as e:
        current_app.logger.warning("Image upload rejected: %s", e.message)
        return jsonify({"error": e.message}), e.status_code
    except OSError as e:
        current_app.logger.error("Image upload error: %s", e)
        return jsonify({"error": "Failed to upload image"}), 500
    return jsonify({"url": url}), 201
