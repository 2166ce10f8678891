"""
Bookmark transformation for the Pinboard to Raindrop.io converter.

Each Pinboard post is converted independently: its timestamp is
re-validated, its description optionally flattened to one line, user
tags appended and the run-wide folder assigned. A post that fails only
drops itself from the output.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from .data_models import PinboardBookmark, RaindropBookmark, TransformOptions
from ..utils.error_handler import InvalidTimestampError, RecordError

logger = logging.getLogger(__name__)

# RFC 3339 section 5.6 date-time
RFC3339_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp into an aware datetime.

    Args:
        value: Timestamp string such as ``2017-04-03T15:59:39Z``

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the value is not a valid RFC 3339 timestamp
    """
    match = RFC3339_PATTERN.fullmatch(value)
    if not match:
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")

    parts = match.groupdict()

    offset = parts["offset"]
    if offset in ("Z", "z"):
        tzinfo = timezone.utc
    else:
        offset_hours, offset_minutes = int(offset[1:3]), int(offset[4:6])
        if offset_hours > 23 or offset_minutes > 59:
            raise ValueError(f"invalid UTC offset: {offset}")
        delta = timedelta(hours=offset_hours, minutes=offset_minutes)
        tzinfo = timezone(-delta if offset[0] == "-" else delta)

    second = int(parts["second"])
    if second > 60:
        raise ValueError(f"invalid seconds: {second}")

    fraction = parts["fraction"] or "0"
    microsecond = int(fraction[:6].ljust(6, "0"))

    # datetime rejects out-of-range fields; leap second 60 is clamped to 59
    return datetime(
        int(parts["year"]),
        int(parts["month"]),
        int(parts["day"]),
        int(parts["hour"]),
        int(parts["minute"]),
        min(second, 59),
        microsecond,
        tzinfo=tzinfo,
    )


def clean_description(description: str) -> str:
    """
    Collapse a multi-line description into a single line.

    Every line is stripped (including carriage returns), blank lines are
    dropped and the remainder joined with single spaces.
    """
    lines = (line.strip() for line in description.split("\n"))
    return " ".join(line for line in lines if line)


def augment_tags(tags: str, user_tags: Optional[str]) -> str:
    """Append user tags to a space-separated tag string."""
    if user_tags is None:
        return tags
    return " ".join([tags, user_tags])


def to_raindrop(
    bookmark: PinboardBookmark, options: TransformOptions
) -> RaindropBookmark:
    """
    Convert one Pinboard post into a Raindrop.io import row.

    Args:
        bookmark: Source bookmark
        options: Run-wide transform options

    Returns:
        RaindropBookmark whose ``created`` is the validated source string

    Raises:
        InvalidTimestampError: If ``created`` is not RFC 3339
    """
    try:
        parse_rfc3339(bookmark.created)
    except ValueError as e:
        raise InvalidTimestampError(bookmark.created, bookmark.url) from e

    if options.clean_description:
        description = clean_description(bookmark.description)
    else:
        description = bookmark.description

    return RaindropBookmark(
        url=bookmark.url,
        folder=options.folder,
        title=bookmark.title,
        description=description,
        tags=augment_tags(bookmark.tags, options.user_tags),
        created=bookmark.created,
    )


@dataclass(frozen=True)
class TransformResult:
    """Outcome of transforming a single bookmark."""

    bookmark: Optional[RaindropBookmark] = None
    error: Optional[RecordError] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None


def transform_all(
    bookmarks: Iterable[PinboardBookmark], options: TransformOptions
) -> List[TransformResult]:
    """
    Transform every bookmark, isolating record-level failures.

    Returns:
        One TransformResult per input bookmark, in input order
    """
    results = []
    for bookmark in bookmarks:
        try:
            results.append(TransformResult(bookmark=to_raindrop(bookmark, options)))
        except RecordError as e:
            logger.debug(f"Skipping bookmark: {e}")
            results.append(TransformResult(error=e))
    return results
