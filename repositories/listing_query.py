"""
repositories/listing_query.py
-----------------------------
Builds the SQL for listing queries.

Three steps, each usable on its own:
    - resolve_table: region code -> physical table.
    - build_filter_clause: picks at most one WHERE clause by precedence.
    - assemble_query: joins table, filter, ordering and pagination.

Only identifiers from closed enumerations are concatenated into the SQL text;
every user value is returned as a bound parameter for psycopg2 (``%s``).
"""

from typing import Any

from models.query import NO_AWARD, NO_CONTEST, NO_FAMER, FilterColumn, ListingKind

JP_REGIONS = ("JPN", "")

_TABLES: dict[ListingKind, tuple[str, str]] = {
    # kind: (jp table, us table)
    ListingKind.GAME: ("games_jp", "games_us"),
    ListingKind.CONTEST: ("contests_jp", "contests_us"),
}


def resolve_table(region: str, kind: ListingKind) -> str:
    """
    Map a region code to the table holding that region's listings.

    "JPN" and the empty string select the JP table; anything else,
    including unknown codes, selects the US table.
    """
    jp_table, us_table = _TABLES[ListingKind(kind)]
    return jp_table if region in JP_REGIONS else us_table


def build_filter_clause(
    filter_column: str,
    keyword: str,
    contest_id: int = NO_CONTEST,
    award_id: int = NO_AWARD,
    famer_id: int = NO_FAMER,
) -> tuple[str, list[Any]]:
    """
    Select the single filter clause for a game query.

    The first applicable rule wins and the rest are ignored:
        1. keyword filter on `filter_column` (exact match for password)
        2. contest id, unless 0
        3. award id, unless -1 (0 is a real award)
        4. famer id, unless 0

    Returns:
        (clause, args), or ("", []) when no filter applies.
    """
    if filter_column:
        if filter_column == FilterColumn.PASSWORD.value:
            # no wildcards: a partial match would leak password fragments
            return f"{filter_column} = %s", [keyword]
        return f"CAST({filter_column} AS TEXT) LIKE CONCAT('%%', %s, '%%')", [keyword]
    if contest_id != NO_CONTEST:
        return "contest = %s", [contest_id]
    if award_id != NO_AWARD:
        return "award = %s", [award_id]
    if famer_id != NO_FAMER:
        return "famer = %s", [famer_id]
    return "", []


def assemble_query(
    table: str,
    clause: str = "",
    clause_args: list[Any] | None = None,
    sort: str = "",
    direction: str = "",
    count: int = 0,
    offset: int = 0,
) -> tuple[str, list[Any]]:
    """
    Compose the final SELECT and its ordered parameter list.

    `sort` and `direction` are concatenated as given; callers must have
    checked them against SortColumn / SortDirection.
    An offset is only emitted together with a limit.
    """
    sql = f"SELECT * FROM {table}"
    params: list[Any] = []

    if clause:
        sql += f" WHERE {clause}"
        params.extend(clause_args or [])

    if sort:
        sql += f" ORDER BY {sort} {direction}".rstrip()

    if count > 0:
        sql += " LIMIT %s"
        params.append(count)
        if offset > 0:
            sql += " OFFSET %s"
            params.append(offset)

    return sql, params


def count_by_id_query(table: str, sid: int) -> tuple[str, list[Any]]:
    """COUNT(*) of rows with the given game id."""
    return f"SELECT COUNT(*) FROM {table} WHERE sid = %s", [sid]
