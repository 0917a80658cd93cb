import re

import click
from flask import current_app
from flask.cli import with_appcontext
from flask_sqlalchemy import SQLAlchemy

from komplist.exceptions import BadRequestError


db = SQLAlchemy()

TASK_ID_PATTERN = re.compile(r"-?[0-9]+")
MAX_TASK_ID = 2**63 - 1
MIN_TASK_ID = -(2**63)


@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop existing tables first.")
@with_appcontext
def init_db_command(drop):
    """Create the task tables."""
    if drop:
        db.drop_all()
    db.create_all()
    current_app.logger.info("Database schema ready at %s", db.engine.url)
    click.echo("Initialized the database.")


def init_app(app):
    db.init_app(app)
    app.cli.add_command(init_db_command)

    # Import models so their tables are registered on the metadata
    from komplist.models import task_model  # noqa: F401

    with app.app_context():
        db.create_all()


def parse_task_id(raw_id):
    """Turn a path segment into a task id, or raise a 400.

    Only plain ASCII digits with an optional leading minus are accepted, and
    the value has to fit a signed 64-bit column.
    """
    if not isinstance(raw_id, str) or not TASK_ID_PATTERN.fullmatch(raw_id):
        raise BadRequestError(f"Invalid task id: {raw_id}")
    task_id = int(raw_id)
    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        raise BadRequestError(f"Invalid task id: {raw_id}")
    return task_id
