"""
Flask CLI commands for catalog maintenance.

    flask --app backend.app create-indexes
    flask --app backend.app seed-books books.json
"""
import json

import click
from flask.cli import with_appcontext
from pydantic import ValidationError

from shared.modules.catalog.models.book import Book
from backend.factories.service_factory import ServiceFactory


@click.command("create-indexes")
@with_appcontext
def create_indexes_command():
    """Create the books collection indexes."""
    names = ServiceFactory.create_book_catalog_service().ensure_indexes()
    click.echo(f"Indexes ready: {', '.join(names)}")


@click.command("seed-books")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def seed_books_command(path):
    """Import a JSON array of books and clear the cached genres they touch."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise click.BadParameter("expected a JSON array of books", param_hint="PATH")

    try:
        books = [Book(**item) for item in data]
    except (TypeError, ValidationError) as e:
        raise click.BadParameter(f"invalid book record: {e}", param_hint="PATH")

    inserted = ServiceFactory.create_book_catalog_service().import_books(books)
    click.echo(f"Imported {len(inserted)} books")


def register_commands(app):
    app.cli.add_command(create_indexes_command)
    app.cli.add_command(seed_books_command)
