"""
Aggregation and reporting of transform results.
"""

import sys
from dataclasses import dataclass, field
from typing import Iterable, List

from .data_models import RaindropBookmark
from .transformer import TransformResult


@dataclass
class ConversionResults:
    """Successful bookmarks in original order plus a failure tally."""

    succeeded: List[RaindropBookmark] = field(default_factory=list)
    failed_count: int = 0

    @property
    def succeeded_count(self) -> int:
        return len(self.succeeded)

    @property
    def total(self) -> int:
        return self.succeeded_count + self.failed_count

    def __str__(self) -> str:
        return (
            f"ConversionResults(succeeded={self.succeeded_count}, "
            f"failed={self.failed_count})"
        )


def partition_results(results: Iterable[TransformResult]) -> ConversionResults:
    """
    Split transform results into successes and a failure count.

    Failure details are discarded; only the count is kept.
    """
    conversion = ConversionResults()
    for result in results:
        if result.is_ok:
            conversion.succeeded.append(result.bookmark)
        else:
            conversion.failed_count += 1
    return conversion


def _print_line(line: str) -> None:
    try:
        print(line)
    except UnicodeEncodeError:
        # Consoles without the check marks (e.g. cp1252) get "?" instead
        encoding = getattr(sys.stdout, "encoding", None) or "ascii"
        print(line.encode(encoding, errors="replace").decode(encoding))


def report_stats(n_ok: int, n_error: int) -> None:
    """Display the number of successfully processed bookmarks and errors."""
    _print_line(f"✓ {n_ok} bookmarks successfully processed")
    _print_line(f"✕ {n_error} bookmark processing errors")
