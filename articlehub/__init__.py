import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import config
from articlehub.extensions import db, cors
from articlehub.images import resolve_public_base_url
from articlehub.store import ArticleStore


def create_app(config_name="default", overrides=None):
    app = Flask(__name__, static_folder=None)

    # ---- Configs ----
    config_class = config[config_name]
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)
    config_class.init_app(app)

    # Resolved once; upload URLs stay stable for the process lifetime
    app.config["PUBLIC_BASE_URL"] = resolve_public_base_url(
        app.config.get("VERCEL_URL"), app.config["HOST"], app.config["PORT"]
    )
    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    # ---- Extensions ----
    db.init_app(app)
    cors.init_app(app)

    from articlehub import models as _models  # noqa: F401
    ArticleStore(app)

    # ---- Blueprints ----
    from articlehub.routes import article_routes, image_routes, migration_routes, project_routes, site_routes
    app.register_blueprint(article_routes.bp)
    app.register_blueprint(image_routes.bp)
    app.register_blueprint(migration_routes.bp)
    app.register_blueprint(project_routes.bp)
    app.register_blueprint(site_routes.bp)

    @app.errorhandler(HTTPException)
    def json_http_error(e):
        return jsonify({"error": e.description}), e.code

    from articlehub.commands import register_commands
    register_commands(app)

    return app
