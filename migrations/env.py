from alembic import context

from articlehub import create_app
from articlehub.extensions import db
from config import current_config_name

app = create_app(current_config_name(), {"AUTO_CREATE_TABLES": False})
target_metadata = db.metadata


def run_migrations_offline():
    context.configure(
        url=app.config["SQLALCHEMY_DATABASE_URI"],
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    with app.app_context():
        with db.engine.connect() as connection:
            context.configure(connection=connection, target_metadata=target_metadata)
            with context.begin_transaction():
                context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
