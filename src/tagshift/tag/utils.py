"""Utility functions for converting stored tag text."""

import re
from typing import List, Optional, Sequence

from ..constants import MAX_NUMBER, SEP_ARTIST

# ASCII digits only; int() would also take "²", "١" or "1_99"
_NUMBER_RE = re.compile(r"[0-9]+")
_YEAR_RE = re.compile(r"[+-]?[0-9]+")


def parse_number(value: Optional[str]) -> Optional[int]:
    """Parse a track/disc number or total.

    Accepts the ``number/total`` spelling by only looking at the part before
    the slash. Anything that is not a whole number in range is treated as
    absent.
    """
    if value is None:
        return None
    value = value.strip().partition("/")[0].strip()
    if not _NUMBER_RE.fullmatch(value):
        return None
    number = int(value)
    if number > MAX_NUMBER:
        return None
    return number


def parse_total(value: Optional[str]) -> Optional[int]:
    """Parse the total out of a ``number/total`` string."""
    if value is None:
        return None
    sep, total = value.partition("/")[1:]
    if not sep:
        return None
    return parse_number(total)


def parse_year(value: Optional[str]) -> Optional[int]:
    """Parse a year from a date-like string (``2001``, ``2001-05-12``...).

    Only the first four characters are considered.
    """
    if value is None:
        return None
    value = value.strip()[:4]
    if not _YEAR_RE.fullmatch(value):
        return None
    return int(value)


def join_artists(artists: Sequence[str], sep: str = SEP_ARTIST) -> str:
    """Flatten a list of artists into one native string."""
    return sep.join(artists)


def split_artists(value: Optional[str], sep: str = SEP_ARTIST) -> Optional[List[str]]:
    """Split a native artist string back into a list, dropping empty entries."""
    if value is None:
        return None
    artists = [a.strip() for a in value.split(sep)]
    artists = [a for a in artists if a]
    return artists or None


def pack_pair(number: Optional[int], total: Optional[int]) -> Optional[str]:
    """Build the ``number/total`` spelling used by ID3 TRCK/TPOS and APE."""
    if number is None:
        return None
    if total is None:
        return str(number)
    return f"{number}/{total}"
