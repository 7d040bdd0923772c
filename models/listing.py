"""
models/listing.py
-----------------
Domain models for listing records as they are sent to clients.
Every attribute is already in its transport form (decimal text, formatted
timestamps, base64 free text).
"""

from dataclasses import asdict, dataclass, field

from models.category import CategorySet


@dataclass(frozen=True)
class GameListing:
    """
    One row of a games table.

    Attributes:
        sid: Game id.
        suid: Uploader id.
        title: Base64 of the game title.
        uname: Base64 of the uploader name.
        password: Stored password, passed through as-is.
        updt: Last update, ``YYYY-MM-DD HH:MM:SS``.
        reviewave: Average review score with 5 decimals.
        comment: Base64 of the game description.
        genres: Genre flags decoded from the stored code list.
    """
    sid: str
    suid: str
    title: str
    uname: str
    password: str
    updt: str
    datablocksize: str
    version: str
    packageversion: str
    reviewave: str
    lang: str
    edit: str
    attribute: str
    award: str
    famer: str
    comment: str
    contest: str
    owner: str
    dlcount: str
    genres: CategorySet = field(default_factory=CategorySet)

    def to_dict(self) -> dict[str, str]:
        """Flat wire payload; genre flags appear only when set."""
        data = asdict(self)
        del data["genres"]
        data.update(self.genres.to_dict())
        return data


@dataclass(frozen=True)
class ContestListing:
    """One row of a contests table. `name` is base64, dates are formatted text."""
    id: str
    name: str
    apply_start: str
    apply_end: str
    review_start: str
    review_end: str
    exc_start: str
    exc_end: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
