from __future__ import annotations
from typing import Iterable, List

from gamerelease.models.schemas import ReleaseRecord

# human dates like "2018-Q3"; substring check, see QUARTER_CATEGORIES for the structured field
QUARTER_MARKER = "Q"
# IGDB date categories: 3 YYYYQ1, 4 YYYYQ2, 5 YYYYQ3, 6 YYYYQ4
QUARTER_CATEGORIES = {3, 4, 5, 6}

REGION_EUROPE = 1
REGION_WORLDWIDE = 8
TARGET_REGIONS = {REGION_EUROPE, REGION_WORLDWIDE}

CONJUNCTION = " und "


def is_quarter_date(record: ReleaseRecord) -> bool:
    return QUARTER_MARKER in record.human or record.category in QUARTER_CATEGORIES


def surfaced(record: ReleaseRecord) -> bool:
    return not is_quarter_date(record) and record.region in TARGET_REGIONS


def release_titles(records: Iterable[ReleaseRecord]) -> List[str]:
    """
    Distinct titles of the records worth announcing.

    Deduplicated through a set, so the order is unspecified.
    """
    return list({r.game.name for r in records if surfaced(r)})


def join_titles(titles: List[str]) -> str:
    """["A", "B", "C"] -> "A, B und C"."""
    if len(titles) < 2:
        return "".join(titles)
    return ", ".join(titles[:-1]) + CONJUNCTION + titles[-1]
