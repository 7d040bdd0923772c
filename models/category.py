"""
models/category.py
------------------
Genre flags for game listings.

The store keeps a game's genres as a comma-separated list of codes
("3,17,34"). On the wire every genre is an independent flag, Genre1..Genre34,
sent as "1" when set and left out otherwise.
"""

from dataclasses import dataclass

CATEGORY_COUNT = 34

# Tokens are matched as exact strings: "03" or " 3" are not genre 3.
_CODE_LOOKUP: dict[str, int] = {str(code): code for code in range(1, CATEGORY_COUNT + 1)}


@dataclass(frozen=True)
class CategorySet:
    """
    Fixed set of genre flags stored as a bitset.

    Bit ``n - 1`` is set when genre ``n`` is present.
    """
    bits: int = 0

    def is_set(self, code: int) -> bool:
        """Returns True if genre `code` (1-based) is set."""
        if not 1 <= code <= CATEGORY_COUNT:
            return False
        return bool(self.bits >> (code - 1) & 1)

    def codes(self) -> list[int]:
        """Set genre codes in ascending order."""
        return [code for code in range(1, CATEGORY_COUNT + 1) if self.is_set(code)]

    def to_dict(self) -> dict[str, str]:
        """Wire fields for the set genres only, e.g. {'genre3': '1'}."""
        return {f"genre{code}": "1" for code in self.codes()}

    def __len__(self) -> int:
        return bin(self.bits).count("1")


def decode_categories(packed: str) -> CategorySet:
    """
    Build a CategorySet from a stored comma-separated code list.

    Unknown tokens (out of range, blank, non-numeric) are ignored and
    repeated codes set their flag once.
    """
    bits = 0
    for token in packed.split(","):
        code = _CODE_LOOKUP.get(token)
        if code is not None:
            bits |= 1 << (code - 1)
    return CategorySet(bits)
