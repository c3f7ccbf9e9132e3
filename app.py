from articlehub import create_app
from articlehub.store import get_store
from config import current_config_name

app = create_app(current_config_name())


if __name__ == "__main__":
    host = app.config["HOST"]
    port = app.config["PORT"]
    print(f"Server running at http://{host}:{port}")
    print(f"Environment: {app.config['ENV_NAME']}")
    try:
        app.run(host=host, port=port, debug=app.config.get("DEBUG", False))
    finally:
        with app.app_context():
            get_store().close()
