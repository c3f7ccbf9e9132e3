"""Flask CLI commands: `flask --app app seed` and `flask --app app migrate-saved-articles`."""

import click
from flask import current_app
from flask.cli import with_appcontext

from articlehub.errors import MigrationFailed, PrerequisiteMissing
from articlehub.migration import migrate_saved_articles
from articlehub.store import get_store


@click.command("seed")
@click.option("--author", "author_name", default=None, help="Author name (defaults to DEFAULT_AUTHOR_NAME).")
@with_appcontext
def seed_command(author_name):
    """Create the default author if it does not exist yet."""
    name = author_name or current_app.config["DEFAULT_AUTHOR_NAME"]
    author = get_store().upsert_author(name)
    click.echo(f"Seeding done. Default author: {author.name} ({author.id})")


@click.command("migrate-saved-articles")
@with_appcontext
def migrate_command():
    """Copy legacy saved articles into the normalized articles table."""
    try:
        migrated = migrate_saved_articles(get_store(), current_app.config["DEFAULT_AUTHOR_NAME"])
    except PrerequisiteMissing as e:
        raise click.ClickException(e.message)
    except MigrationFailed as e:
        raise click.ClickException(f"{e.message}: {e.cause}")
    click.echo(f"Successfully migrated {migrated} articles")


def register_commands(app):
    app.cli.add_command(seed_command)
    app.cli.add_command(migrate_command)
