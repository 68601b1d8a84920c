# tests/conftest.py

import os
import sys
import tempfile
from pathlib import Path

# Settings are read on import of core.logger; configure before importing the app
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/task_tracker_test")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="task-tracker-logs-"))
os.environ.setdefault("LOG_LEVEL", "DEBUG")

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.database import MongoDB
from repositories.task_repository import TaskRepository

from .fakes import FakeMongoServer
from .helpers import load_main_module


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        MONGODB_URI="mongodb://localhost:27017/task_tracker_test",
        APP_NAME="Task Tracker Test",
    )


@pytest.fixture()
def server() -> FakeMongoServer:
    return FakeMongoServer()


@pytest.fixture()
def database(settings: Settings, server: FakeMongoServer) -> MongoDB:
    return MongoDB(settings, client_factory=server.client_factory)


@pytest.fixture()
def repository(database: MongoDB) -> TaskRepository:
    return TaskRepository(database)


@pytest.fixture()
def client(settings: Settings, database: MongoDB):
    app = load_main_module().create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client
