"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from repositories.listing_repo import ListingRepository
from services.listing_service import ListingService


class FakeCursor:
    """Cursor stand-in that records executed SQL and returns canned rows."""

    def __init__(self, connection):
        self.connection = connection

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        if self.connection.error is not None:
            raise self.connection.error
        self.connection.executed.append((sql, list(params or [])))

    def fetchall(self):
        return list(self.connection.rows)

    def fetchone(self):
        return self.connection.rows[0] if self.connection.rows else None


class FakeConnection:
    def __init__(self):
        self.rows = []
        self.error = None
        self.executed = []

    def cursor(self):
        return FakeCursor(self)


class FakePool:
    """Pool stand-in tracking acquire/release balance."""

    def __init__(self):
        self.connection = FakeConnection()
        self.acquired = 0
        self.released = 0
        self.acquire_error = None

    def get_connection(self):
        if self.acquire_error is not None:
            raise self.acquire_error
        self.acquired += 1
        return self.connection

    def release_connection(self, conn):
        assert conn is self.connection
        self.released += 1

    @property
    def executed(self):
        return self.connection.executed


def make_game_row(**overrides):
    """A games table row in stored column order."""
    values = {
        "sid": 1042,
        "suid": 77,
        "title": "Dragon Quest Fan Game",
        "uname": "maker",
        "password": "hunter2",
        "updt": datetime(2023, 4, 5, 6, 7, 8),
        "datablocksize": 2048,
        "version": 3,
        "packageversion": 1,
        "reviewave": 4.25,
        "lang": "en",
        "edit": 0,
        "attribute": 2,
        "award": 0,
        "famer": 0,
        "comment": "A short adventure",
        "contest": 5,
        "owner": 77,
        "genre": "3,17,34,99",
        "dlcount": 12,
    }
    values.update(overrides)
    return tuple(values.values())


def make_contest_row(**overrides):
    """A contests table row in stored column order."""
    values = {
        "id": 9,
        "name": "Summer Contest",
        "apply_start": datetime(2023, 7, 1, 0, 0, 0),
        "apply_end": datetime(2023, 7, 31, 23, 59, 59),
        "review_start": datetime(2023, 8, 1, 0, 0, 0),
        "review_end": datetime(2023, 8, 15, 23, 59, 59),
        "exc_start": datetime(2023, 8, 20, 12, 0, 0),
        "exc_end": datetime(2023, 8, 21, 12, 0, 0),
    }
    values.update(overrides)
    return tuple(values.values())


@pytest.fixture
def pool():
    return FakePool()


@pytest.fixture
def repo(pool):
    return ListingRepository(pool)


@pytest.fixture
def service(repo):
    return ListingService(repo)
