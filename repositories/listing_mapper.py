"""
repositories/listing_mapper.py
------------------------------
Converts raw result rows into GameListing / ContestListing records.

Rows are positional tuples in stored column order. Any row whose length or
column types do not match raises DecodeError; nothing is recovered.
"""

import base64
from datetime import datetime
from decimal import Decimal
from typing import Any, Sequence

from db.errors import DecodeError
from models.category import decode_categories
from models.listing import ContestListing, GameListing

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

GAME_COLUMNS = (
    "sid", "suid", "title", "uname", "password", "updt", "datablocksize",
    "version", "packageversion", "reviewave", "lang", "edit", "attribute",
    "award", "famer", "comment", "contest", "owner", "genre", "dlcount",
)

CONTEST_COLUMNS = (
    "id", "name", "apply_start", "apply_end",
    "review_start", "review_end", "exc_start", "exc_end",
)


# ── ENCODING ──────────────────────────────────────────────

def encode_text(value: str | bytes) -> str:
    """Standard base64 of the raw bytes; str values are UTF-8 encoded first."""
    raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return base64.b64encode(raw).decode("ascii")


def decode_text(value: str) -> bytes:
    """Inverse of encode_text."""
    return base64.b64decode(value, validate=True)


# ── COLUMN CONVERTERS ─────────────────────────────────────

def _int_text(value: Any, column: str) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"column '{column}': expected integer, got {value!r}")
    return str(value)


def _float_text(value: Any, column: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise DecodeError(f"column '{column}': expected number, got {value!r}")
    return f"{float(value):.5f}"


def _timestamp_text(value: Any, column: str) -> str:
    if not isinstance(value, datetime):
        raise DecodeError(f"column '{column}': expected timestamp, got {value!r}")
    return value.strftime(TIMESTAMP_FORMAT)


def _plain_text(value: Any, column: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"column '{column}': expected text, got {value!r}")
    return value


def _encoded_text(value: Any, column: str) -> str:
    if not isinstance(value, (str, bytes, bytearray, memoryview)):
        raise DecodeError(f"column '{column}': expected text, got {value!r}")
    return encode_text(value)


def _unpack(row: Sequence[Any], columns: tuple[str, ...]) -> dict[str, Any]:
    if len(row) != len(columns):
        raise DecodeError(f"expected {len(columns)} columns, got {len(row)}")
    return dict(zip(columns, row))


# ── ROW MAPPERS ───────────────────────────────────────────

def map_game_row(row: Sequence[Any]) -> GameListing:
    """Convert one games table row into a GameListing."""
    r = _unpack(row, GAME_COLUMNS)
    return GameListing(
        sid=_int_text(r["sid"], "sid"),
        suid=_int_text(r["suid"], "suid"),
        title=_encoded_text(r["title"], "title"),
        uname=_encoded_text(r["uname"], "uname"),
        password=_plain_text(r["password"], "password"),
        updt=_timestamp_text(r["updt"], "updt"),
        datablocksize=_int_text(r["datablocksize"], "datablocksize"),
        version=_int_text(r["version"], "version"),
        packageversion=_int_text(r["packageversion"], "packageversion"),
        reviewave=_float_text(r["reviewave"], "reviewave"),
        lang=_plain_text(r["lang"], "lang"),
        edit=_int_text(r["edit"], "edit"),
        attribute=_int_text(r["attribute"], "attribute"),
        award=_int_text(r["award"], "award"),
        famer=_int_text(r["famer"], "famer"),
        comment=_encoded_text(r["comment"], "comment"),
        contest=_int_text(r["contest"], "contest"),
        owner=_int_text(r["owner"], "owner"),
        dlcount=_int_text(r["dlcount"], "dlcount"),
        genres=decode_categories(_plain_text(r["genre"], "genre")),
    )


def map_contest_row(row: Sequence[Any]) -> ContestListing:
    """
    Convert one contests table row into a ContestListing.

    The review window comes from the review_start/review_end columns.
    Older servers sent the apply dates in those two fields, so clients that
    relied on that will now see the actual review dates.
    """
    r = _unpack(row, CONTEST_COLUMNS)
    return ContestListing(
        id=_int_text(r["id"], "id"),
        name=_encoded_text(r["name"], "name"),
        apply_start=_timestamp_text(r["apply_start"], "apply_start"),
        apply_end=_timestamp_text(r["apply_end"], "apply_end"),
        review_start=_timestamp_text(r["review_start"], "review_start"),
        review_end=_timestamp_text(r["review_end"], "review_end"),
        exc_start=_timestamp_text(r["exc_start"], "exc_start"),
        exc_end=_timestamp_text(r["exc_end"], "exc_end"),
    )
