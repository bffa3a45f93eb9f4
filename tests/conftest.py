"""
Shared fixtures: an in-memory SQLite puzzle store, a fake image bucket, and a
TestClient wired to both.
"""

from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from w4ffle.db.interfaces.postgresql import Base, PostgreSQLDatabase
from w4ffle.main import app
from w4ffle.models.puzzle import Puzzle, PuzzleImage
from w4ffle.services.storage.client import DEFAULT_CONTENT_TYPE, StoredImage


class FakeImageStore:
    """In-memory stand-in for the MinIO-backed ImageStore."""

    def __init__(self):
        self.objects: Dict[str, Tuple[bytes, Optional[str]]] = {}
        self.closed: List[str] = []

    def put(self, key: str, data: bytes, content_type: Optional[str] = None) -> None:
        self.objects[key] = (data, content_type)

    def get(self, key: str) -> Optional[StoredImage]:
        if key not in self.objects:
            return None
        data, content_type = self.objects[key]
        return StoredImage(
            key=key,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            body=iter([data[:4], data[4:]]),
            close=lambda: self.closed.append(key),
        )


@pytest.fixture
def database():
    db = PostgreSQLDatabase(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(db.engine)
    yield db
    db.teardown()


@pytest.fixture
def seed_puzzle(database):
    """Insert a puzzle and its images; images are (round_index, key, is_real)."""

    def _seed(puzzle_date: date, images: Iterable[Tuple[int, str, bool]]) -> int:
        with database.get_session() as session:
            puzzle = Puzzle(puzzle_date=puzzle_date.isoformat())
            session.add(puzzle)
            session.flush()
            for round_index, key, is_real in images:
                session.add(
                    PuzzleImage(
                        puzzle_id=puzzle.id,
                        round_index=round_index,
                        image_key=key,
                        is_real=is_real,
                    )
                )
            session.commit()
            return puzzle.id

    return _seed


@pytest.fixture
def utc_today() -> date:
    return datetime.now(timezone.utc).date()


@pytest.fixture
def image_store():
    return FakeImageStore()


@pytest.fixture
def client(database, image_store):
    app.state.database = database
    app.state.image_store = image_store
    yield TestClient(app)
    app.dependency_overrides.clear()
