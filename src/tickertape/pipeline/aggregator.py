"""Series aggregation helpers"""

from tickertape.domain.models import LatestPair, PointSeries


def latest_pair(series: PointSeries) -> LatestPair:
    """Return the last two points of a series by position

    Args:
        series: Points in chronological order

    Returns:
        LatestPair with ``previous`` None for fewer than two points and
        ``latest`` None for an empty series
    """
    if not series:
        return LatestPair(latest=None, previous=None)
    return LatestPair(
        latest=series[-1],
        previous=series[-2] if len(series) > 1 else None,
    )


def percent_change(current: float, previous: float | None) -> float | None:
    """Percent change from ``previous`` to ``current``

    Returns None when there is no previous value, or when it is zero and the
    ratio is undefined.
    """
    if previous is None or previous == 0:
        return None
    return (current - previous) / abs(previous) * 100
