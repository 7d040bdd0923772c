"""
services/listing_service.py
---------------------------
Request boundary for listing queries.
Validates raw request parameters against the closed enumerations before
they reach the query builder, then renders records as wire payloads.
"""

from typing import Any, Mapping, Optional

from models.query import (
    NO_AWARD,
    NO_CONTEST,
    NO_FAMER,
    FilterColumn,
    FilterSpec,
    GameQuery,
    PageSpec,
    SortColumn,
    SortDirection,
    SortSpec,
)
from repositories.listing_repo import ListingRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class InvalidParameterError(ValueError):
    """A request parameter is outside its allowed values."""


class ListingService:
    """
    Handles listing requests coming from the transport layer.

    Workflow:
        1. Parse and validate the request parameters.
        2. Query the ListingRepository.
        3. Return records as flat string dictionaries keyed by position.
    """

    def __init__(self, repo: ListingRepository):
        self.repo = repo

    def list_games(self, params: Mapping[str, Any]) -> dict[str, dict[str, str]]:
        """
        List games matching the request parameters.

        Args:
            params: Raw request values. Recognized keys: region, filter,
                keyword, sort, direction, contest, award, famer, count, offset.

        Raises:
            InvalidParameterError: If a value is not allowed.
        """
        query = self.parse_game_query(params)
        filter_spec, sort_spec = query.filter_spec, query.sort_spec
        games = self.repo.list_games(
            region=query.region,
            filter_column=filter_spec.column.value if filter_spec else "",
            keyword=filter_spec.keyword if filter_spec else "",
            sort=sort_spec.column.value if sort_spec else "",
            direction=sort_spec.direction.value if sort_spec else "",
            contest_id=query.contest_id,
            award_id=query.award_id,
            famer_id=query.famer_id,
            count=query.page.count,
            offset=query.page.offset,
        )
        return {key: game.to_dict() for key, game in games.items()}

    def list_contests(self, region: str = "") -> dict[str, dict[str, str]]:
        """List every contest for the region."""
        contests = self.repo.list_contests(region or "")
        return {key: contest.to_dict() for key, contest in contests.items()}

    def game_exists(self, sid: int | str, region: str = "") -> bool:
        """True if a game with id `sid` is stored for the region."""
        return self.repo.exists_public_game(_parse_int("sid", sid, 0), region or "")

    # ── PARSING ───────────────────────────────────────────

    @staticmethod
    def parse_game_query(params: Mapping[str, Any]) -> GameQuery:
        """Build a validated GameQuery from raw request values."""
        filter_spec: Optional[FilterSpec] = None
        filter_name = _text(params.get("filter"))
        if filter_name:
            filter_spec = FilterSpec(
                column=_choice("filter", filter_name, FilterColumn),
                keyword=_text(params.get("keyword")),
            )

        sort_spec: Optional[SortSpec] = None
        sort_name = _text(params.get("sort"))
        if sort_name:
            direction = _text(params.get("direction")).lower() or SortDirection.ASC.value
            sort_spec = SortSpec(
                column=_choice("sort", sort_name, SortColumn),
                direction=_choice("direction", direction, SortDirection),
            )

        return GameQuery(
            region=_text(params.get("region")),
            filter_spec=filter_spec,
            sort_spec=sort_spec,
            page=PageSpec(
                count=_parse_int("count", params.get("count"), 0),
                offset=_parse_int("offset", params.get("offset"), 0),
            ),
            contest_id=_parse_int("contest", params.get("contest"), NO_CONTEST),
            award_id=_parse_int("award", params.get("award"), NO_AWARD),
            famer_id=_parse_int("famer", params.get("famer"), NO_FAMER),
        )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _choice(name: str, value: str, enum_cls):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        logger.warning(f"Rejected {name}={value!r}")
        raise InvalidParameterError(f"{name} must be one of: {allowed}") from None


def _parse_int(name: str, value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Rejected {name}={value!r}")
        raise InvalidParameterError(f"{name} must be an integer") from None
