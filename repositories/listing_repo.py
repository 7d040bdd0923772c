"""
repositories/listing_repo.py
----------------------------
Data access layer for game and contest listings.
All SQL executed against the `games_*` and `contests_*` tables goes through here.
"""

from typing import Any, Callable, TypeVar

import psycopg2

from db.errors import ConnectivityError
from models.listing import ContestListing, GameListing
from models.query import NO_AWARD, NO_CONTEST, NO_FAMER, ListingKind
from repositories.listing_mapper import map_contest_row, map_game_row
from repositories.listing_query import (
    assemble_query,
    build_filter_clause,
    count_by_id_query,
    resolve_table,
)
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ListingRepository:
    """
    Read-only repository for listings.

    Args:
        pool: Connection pool handle exposing ``get_connection()`` and
            ``release_connection(conn)``, typically a db.connection.ConnectionPool.
    """

    def __init__(self, pool):
        self.pool = pool

    # ── READ ──────────────────────────────────────────────

    def list_games(
        self,
        region: str = "",
        filter_column: str = "",
        keyword: str = "",
        sort: str = "",
        direction: str = "",
        contest_id: int = NO_CONTEST,
        award_id: int = NO_AWARD,
        famer_id: int = NO_FAMER,
        count: int = 0,
        offset: int = 0,
    ) -> dict[str, GameListing]:
        """
        Fetch game listings for a region.

        At most one of the keyword filter, contest, award and famer
        restrictions applies; see build_filter_clause for the order.

        Args:
            region: Region code ("JPN"/"" for JP, anything else for US).
            filter_column: Column for the keyword filter, or "".
            keyword: Value matched against `filter_column`.
            sort: Column to order by, or "" for store order.
            direction: "asc" or "desc".
            contest_id: Contest to restrict to, 0 for none.
            award_id: Award to restrict to, -1 for none.
            famer_id: Hall-of-fame entry to restrict to, 0 for none.
            count: Row limit, 0 for none.
            offset: Rows to skip; only used with `count`.

        Returns:
            Records keyed by their position in the result ("0", "1", ...).
        """
        table = resolve_table(region, ListingKind.GAME)
        clause, clause_args = build_filter_clause(
            filter_column, keyword, contest_id, award_id, famer_id
        )
        sql, params = assemble_query(
            table, clause, clause_args, sort, direction, count, offset
        )
        rows = self._fetch_all(sql, params)
        return self._keyed(rows, map_game_row)

    def list_contests(self, region: str = "") -> dict[str, ContestListing]:
        """
        Fetch every contest listing for a region, unfiltered and unpaged.

        Returns:
            Records keyed by their position in the result ("0", "1", ...).
        """
        sql, params = assemble_query(resolve_table(region, ListingKind.CONTEST))
        rows = self._fetch_all(sql, params)
        return self._keyed(rows, map_contest_row)

    def exists_public_game(self, sid: int, region: str = "") -> bool:
        """
        Check whether a game with id `sid` is stored for the region.

        Returns:
            True if at least one row has that id.
        """
        sql, params = count_by_id_query(resolve_table(region, ListingKind.GAME), sid)
        return self._fetch_val(sql, params) != 0

    # ── HELPERS ───────────────────────────────────────────

    def _execute(self, sql: str, params: list[Any], fetch: Callable[[Any], T]) -> T:
        """Run one query on a pooled connection and hand the cursor to `fetch`."""
        logger.debug(f"Executing: {sql} | {len(params)} bound param(s)")
        try:
            conn = self.pool.get_connection()
        except psycopg2.Error as e:
            logger.error(f"Failed to acquire database connection: {e}")
            raise ConnectivityError(str(e)) from e
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return fetch(cur)
        except psycopg2.Error as e:
            logger.error(f"Listing query failed: {e}")
            raise ConnectivityError(str(e)) from e
        finally:
            self.pool.release_connection(conn)

    def _fetch_all(self, sql: str, params: list[Any]) -> list[tuple]:
        rows = self._execute(sql, params, lambda cur: cur.fetchall())
        logger.info(f"Listing query returned {len(rows)} row(s)")
        return rows

    def _fetch_val(self, sql: str, params: list[Any]) -> Any:
        row = self._execute(sql, params, lambda cur: cur.fetchone())
        return row[0] if row else 0

    @staticmethod
    def _keyed(rows: list[tuple], mapper: Callable[[tuple], T]) -> dict[str, T]:
        """Map every row, keyed by ordinal position; fails as a whole on a bad row."""
        return {str(position): mapper(row) for position, row in enumerate(rows)}
