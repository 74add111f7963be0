"""
Analytics over the application list.

Everything here is a pure function of the records passed in: no database
access and no reads of the current time. Only `status` and `date_applied`
are looked at, so ORM rows and response schemas work alike.
"""
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Iterable, List, Tuple

from jobtracker.models.application import ApplicationStatus
from jobtracker.schemas.analytics import ApplicationStatistics, StatusSlice, TimelinePoint
from jobtracker.services.lifecycle import CHART_LABELS, is_response

# Fixed English abbreviations so labels don't depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def percentage(part: int, total: int) -> int:
    """Whole percent of part/total, rounded half up. 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


def month_label(value: Any) -> str:
    """Format a timestamp as "Mon YYYY"."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


_STATUS_BY_VALUE = {status.value: status for status in ApplicationStatus}


def count_statuses(apps: Iterable[Any]) -> Counter:
    counts: Counter = Counter()
    for app in apps:
        status = app.status
        if not isinstance(status, ApplicationStatus):
            status = _STATUS_BY_VALUE.get(status)
        # Unknown values still count toward the total, just not a bucket
        if status is not None:
            counts[status] += 1
    return counts


def status_distribution(counts: Dict[ApplicationStatus, int]) -> List[StatusSlice]:
    """Non-zero counts in chart order. IGNORED never appears."""
    return [
        StatusSlice(name=label, value=counts.get(status, 0))
        for status, label in CHART_LABELS
        if counts.get(status, 0) > 0
    ]


def timeline(apps: Iterable[Any], chronological: bool = False) -> List[TimelinePoint]:
    """
    Count applications per calendar month of date_applied.

    Buckets come out in the order each month is first seen in `apps`,
    not in calendar order. Pass chronological=True to sort by date instead.
    """
    by_month: Dict[str, int] = {}
    sort_keys: Dict[str, Tuple[int, int]] = {}

    for app in apps:
        applied_at = app.date_applied
        if isinstance(applied_at, str):
            applied_at = datetime.fromisoformat(applied_at)
        label = month_label(applied_at)
        by_month[label] = by_month.get(label, 0) + 1
        sort_keys.setdefault(label, (applied_at.year, applied_at.month))

    labels = list(by_month)
    if chronological:
        labels.sort(key=sort_keys.__getitem__)

    return [TimelinePoint(month=label, applications=by_month[label]) for label in labels]


def compute_statistics(apps: Iterable[Any], chronological: bool = False) -> ApplicationStatistics:
    """
    Derive dashboard statistics from a snapshot of applications.

    Args:
        apps: Application records (anything with .status and .date_applied)
        chronological: Sort the timeline by month instead of first-seen order

    Returns:
        ApplicationStatistics. An empty list gives all zeros and empty
        distribution/timeline.
    """
    apps = list(apps)
    total = len(apps)
    counts = count_statuses(apps)

    responses = sum(count for status, count in counts.items() if is_response(status))
    offers = counts.get(ApplicationStatus.OFFERED, 0)

    return ApplicationStatistics(
        total=total,
        applied=counts.get(ApplicationStatus.APPLIED, 0),
        interview=counts.get(ApplicationStatus.INTERVIEW, 0),
        offer=offers,
        rejected=counts.get(ApplicationStatus.REJECTED, 0),
        ignored=counts.get(ApplicationStatus.IGNORED, 0),
        response_rate=percentage(responses, total),
        success_rate=percentage(offers, total),
        status_distribution=status_distribution(counts),
        timeline=timeline(apps, chronological=chronological),
    )
