"""FRED delimited time-series provider"""

import math
import re
from urllib.parse import quote

from loguru import logger

from tickertape.domain.models import Point, PointSeries
from tickertape.infrastructure.http import ResilientFetcher
from tickertape.shared.constants import FRED_CSV_URL
from tickertape.shared.exceptions import NoData

_LINE_BREAK = re.compile(r"\r?\n")
_DECIMAL = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*")


def parse_series_csv(text: str) -> PointSeries:
    """Parse a FRED graph CSV export into points

    The first non-empty line is the header. Each data line contributes its
    first field as the date and its second as the value; lines that are
    short or whose value is not a plain finite decimal (FRED writes "." for
    missing observations) are skipped.

    Args:
        text: CSV body

    Returns:
        Points in upstream (chronological) order, possibly empty
    """
    lines = [line for line in _LINE_BREAK.split(text) if line]
    if len(lines) < 2:
        return []

    points: PointSeries = []
    for line in lines[1:]:
        parts = line.split(",")
        if len(parts) < 2:
            continue
        if not _DECIMAL.fullmatch(parts[1]):
            continue
        value = float(parts[1])
        if not math.isfinite(value):
            continue
        points.append(Point(timestamp=parts[0], value=value))

    return points


class FredProvider:
    """Fetches FRED series through the relay chain"""

    def __init__(
        self, fetcher: ResilientFetcher, base_url: str = FRED_CSV_URL
    ) -> None:
        self._fetcher = fetcher
        self.base_url = base_url

    def series_url(self, source_id: str) -> str:
        return f"{self.base_url}?id={quote(source_id, safe='')}"

    async def fetch_series(self, source_id: str) -> PointSeries:
        """Fetch and parse one FRED series

        Raises:
            FetchExhausted: If no transport could retrieve the CSV
            NoData: If the CSV held no usable observations
        """
        csv_text = await self._fetcher.fetch_text(self.series_url(source_id))
        points = parse_series_csv(csv_text)
        if not points:
            raise NoData(f"No data for FRED series {source_id}")

        logger.debug(f"FRED {source_id}: {len(points)} observations")
        return points
