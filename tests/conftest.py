from pathlib import Path
from unittest.mock import create_autospec

import pytest
from sqlalchemy import text

from komplist.app import create_app
from komplist.repositories.task_repository import TaskRepository
from komplist.services.task_service import TaskService
from komplist.utils.db import db

TEST_DATA_SQL = Path(__file__).parent / "data" / "test-data.sql"


@pytest.fixture()
def app():
    app = create_app("komplist.config.TestConfig")
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def test_data(app):
    """Load the three fixture rows (ids 111-113)."""
    statements = [s.strip() for s in TEST_DATA_SQL.read_text().split(";") if s.strip()]
    for statement in statements:
        db.session.execute(text(statement))
    db.session.commit()


@pytest.fixture()
def repository(app):
    return TaskRepository()


@pytest.fixture()
def service(repository):
    return TaskService(repository)


@pytest.fixture()
def mock_service():
    return create_autospec(TaskService, instance=True)


@pytest.fixture()
def mock_client(mock_service):
    app = create_app("komplist.config.TestConfig", task_service=mock_service)
    return app.test_client()
