"""Date helpers for prompts and video durations."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

Clock = Callable[[], datetime]

_ISO_DURATION = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class DateInfo:
    """Current date pieces used to anchor generated search queries."""

    year: int
    month: str  # "October"
    date: str  # "October 19, 2026"


def current_date_info(clock: Clock = utc_now) -> DateInfo:
    """Capture the date at call time."""
    now = clock()
    return DateInfo(
        year=now.year,
        month=now.strftime("%B"),
        date=f"{now.strftime('%B')} {now.day}, {now.year}",
    )


def parse_iso_duration(duration: str) -> int:
    """Convert an ISO-8601 duration such as "PT1H2M3S" to seconds.

    Day components and unparsable input count as 0 seconds.
    """
    match = _ISO_DURATION.search(duration or "")
    if not match:
        return 0
    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds
