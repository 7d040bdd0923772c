"""Tests for the ConnectionPool handle."""

import psycopg2
import pytest

from db import connection
from db.connection import ConnectionPool
from db.errors import ConnectivityError


class RecordingPool:
    def __init__(self, minconn, maxconn, dsn):
        self.args = (minconn, maxconn, dsn)
        self.returned = []
        self.closed = False

    def getconn(self):
        return "conn"

    def putconn(self, conn):
        self.returned.append(conn)

    def closeall(self):
        self.closed = True


def test_get_connection_requires_open():
    with pytest.raises(RuntimeError):
        ConnectionPool("postgresql://unused").get_connection()


def test_open_acquire_release_close(monkeypatch):
    monkeypatch.setattr(connection.pool, "ThreadedConnectionPool", RecordingPool)
    handle = ConnectionPool("postgresql://db/listings", min_conn=2, max_conn=4)

    handle.open()
    inner = handle._pool
    handle.open()

    assert handle._pool is inner
    assert inner.args == (2, 4, "postgresql://db/listings")

    conn = handle.get_connection()
    handle.release_connection(conn)
    assert inner.returned == ["conn"]

    handle.close()
    assert inner.closed
    with pytest.raises(RuntimeError):
        handle.get_connection()


def test_open_unreachable_database(monkeypatch):
    def refuse(*args):
        raise psycopg2.OperationalError("could not connect to server")

    monkeypatch.setattr(connection.pool, "ThreadedConnectionPool", refuse)
    handle = ConnectionPool("postgresql://db/listings")

    with pytest.raises(ConnectivityError, match="could not connect") as exc_info:
        handle.open()

    assert isinstance(exc_info.value.__cause__, psycopg2.OperationalError)
    handle.close()
