"""
models/query.py
---------------
Closed enumerations and value objects describing how a listing query is shaped.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Sentinels meaning "parameter not supplied". Award ids start at 0, so the
# award filter uses -1 while the other ids use 0.
NO_CONTEST = 0
NO_AWARD = -1
NO_FAMER = 0


class ListingKind(str, Enum):
    GAME = "game"
    CONTEST = "contest"


class FilterColumn(str, Enum):
    """Columns a keyword filter may target."""
    TITLE = "title"
    UNAME = "uname"
    SUID = "suid"
    PASSWORD = "password"

    @property
    def exact_match(self) -> bool:
        return self is FilterColumn.PASSWORD


class SortColumn(str, Enum):
    UPDT = "updt"
    DLCOUNT = "dlcount"
    REVIEWAVE = "reviewave"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class FilterSpec:
    column: FilterColumn
    keyword: str = ""


@dataclass(frozen=True)
class SortSpec:
    column: SortColumn
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class PageSpec:
    """
    Pagination request.

    Attributes:
        count: Maximum rows to return; 0 means no limit.
        offset: Rows to skip; ignored unless `count` is set.
    """
    count: int = 0
    offset: int = 0


@dataclass(frozen=True)
class GameQuery:
    """All parameters of a game listing request after validation."""
    region: str = ""
    filter_spec: Optional[FilterSpec] = None
    sort_spec: Optional[SortSpec] = None
    page: PageSpec = PageSpec()
    contest_id: int = NO_CONTEST
    award_id: int = NO_AWARD
    famer_id: int = NO_FAMER
