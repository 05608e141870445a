"""Steam profile snapshot job.

Pulls owned games, recently played games and the player summary from the
Steam Web API and writes a single JSON document consumed read-only by the
video games page.

Authentication: API key plus the numeric Steam ID, from the environment.
Output fields: fetchedAt, profile, stats, recentlyPlayed, topByPlaytime.
"""

import json
import math
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import httpx
from dotenv import load_dotenv
from loguru import logger

from tickertape.shared.constants import STEAM_API_URL, USER_AGENT
from tickertape.shared.exceptions import ConfigurationError, SnapshotError

DEFAULT_OUTPUT_PATH = Path("steam-data.json")
TOP_GAMES_LIMIT = 10
RECENT_GAMES_COUNT = 10


@dataclass
class SteamConfig:
    """Configuration for the Steam snapshot job."""

    api_key: str
    steam_id: str
    base_url: str = STEAM_API_URL
    output_path: Path = field(default_factory=lambda: DEFAULT_OUTPUT_PATH)
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "SteamConfig":
        """Create config from environment variables.

        Raises:
            ConfigurationError: If STEAM_API_KEY or STEAM_ID is missing.
        """
        load_dotenv()

        api_key = os.getenv("STEAM_API_KEY", "").strip()
        steam_id = os.getenv("STEAM_ID", "").strip()
        if not api_key or not steam_id:
            raise ConfigurationError(
                "Missing STEAM_API_KEY or STEAM_ID in .env"
            )

        return cls(api_key=api_key, steam_id=steam_id)


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def _hours(minutes: int | float | None, digits: int = 1) -> float:
    return _round_half_up((minutes or 0) / 60, digits)


def _bucket_for(hours: float) -> str | None:
    if hours >= 100:
        return "100h+"
    if hours >= 50:
        return "50-100h"
    if hours >= 10:
        return "10-50h"
    if hours >= 1:
        return "1-10h"
    if hours > 0:
        return "<1h"
    return None


def _iso_utc(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_snapshot(
    owned: dict[str, Any],
    recent: dict[str, Any],
    profile: dict[str, Any],
    fetched_at: datetime,
) -> dict[str, Any]:
    """Compute the snapshot document from raw Steam API responses

    Args:
        owned: ``response`` body of GetOwnedGames
        recent: ``response`` body of GetRecentlyPlayedGames
        profile: First player of GetPlayerSummaries (may be empty)
        fetched_at: Timestamp recorded in the document

    Returns:
        JSON-serialisable snapshot document
    """
    games = owned.get("games") or []
    total_games = owned.get("game_count") or len(games)
    total_minutes = sum(g.get("playtime_forever") or 0 for g in games)

    top_by_playtime = [
        {
            "appid": g.get("appid"),
            "name": g.get("name"),
            "hours": _hours(g.get("playtime_forever")),
            "img_icon_url": g.get("img_icon_url") or "",
        }
        for g in sorted(
            games,
            key=lambda g: g.get("playtime_forever") or 0,
            reverse=True,
        )[:TOP_GAMES_LIMIT]
    ]

    recently_played = [
        {
            "appid": g.get("appid"),
            "name": g.get("name"),
            "hours_2weeks": _hours(g.get("playtime_2weeks")),
            "hours_total": _hours(g.get("playtime_forever")),
            "img_icon_url": g.get("img_icon_url") or "",
        }
        for g in recent.get("games") or []
    ]

    played_count = sum(1 for g in games if (g.get("playtime_forever") or 0) > 0)

    buckets = {"100h+": 0, "50-100h": 0, "10-50h": 0, "1-10h": 0, "<1h": 0}
    for g in games:
        bucket = _bucket_for((g.get("playtime_forever") or 0) / 60)
        if bucket is not None:
            buckets[bucket] += 1

    return {
        "fetchedAt": _iso_utc(fetched_at),
        "profile": {
            "name": profile.get("personaname") or "",
            "profileUrl": profile.get("profileurl") or "",
            "avatar": profile.get("avatarmedium") or "",
        },
        "stats": {
            "totalGames": total_games,
            "totalHours": int(_round_half_up(total_minutes / 60)),
            "playedCount": played_count,
            "neverPlayed": total_games - played_count,
            "playtimeBuckets": buckets,
        },
        "recentlyPlayed": recently_played,
        "topByPlaytime": top_by_playtime,
    }


def write_snapshot(document: dict[str, Any], path: str | Path) -> Path:
    """Write the snapshot as pretty-printed JSON

    Raises:
        SnapshotError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8"
        )
    except OSError as e:
        raise SnapshotError(f"Failed to write {path}: {e}") from e
    return path


class SteamClient:
    """Minimal Steam Web API client for the snapshot job."""

    def __init__(
        self, config: SteamConfig, client: httpx.Client | None = None
    ) -> None:
        self.config = config
        self._client = client or httpx.Client(
            timeout=config.timeout, headers={"User-Agent": USER_AGENT}
        )
        self._owns_client = client is None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SteamClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(
        self, interface: str, method: str, version: str, params: dict[str, str]
    ) -> dict[str, Any]:
        url = f"{self.config.base_url}/{interface}/{method}/v{version}/"
        query = {"key": self.config.api_key, "format": "json", **params}

        try:
            response = self._client.get(url, params=query)
        except httpx.HTTPError as e:
            raise SnapshotError(f"{method} failed: {e}") from e

        if not response.is_success:
            raise SnapshotError(f"{method} failed: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise SnapshotError(f"{method} returned invalid JSON: {e}") from e

    def get_owned_games(self) -> dict[str, Any]:
        data = self._get(
            "IPlayerService",
            "GetOwnedGames",
            "0001",
            {
                "steamid": self.config.steam_id,
                "include_appinfo": "1",
                "include_played_free_games": "1",
            },
        )
        return data.get("response") or {}

    def get_recently_played(
        self, count: int = RECENT_GAMES_COUNT
    ) -> dict[str, Any]:
        data = self._get(
            "IPlayerService",
            "GetRecentlyPlayedGames",
            "0001",
            {"steamid": self.config.steam_id, "count": str(count)},
        )
        return data.get("response") or {}

    def get_player_summary(self) -> dict[str, Any]:
        data = self._get(
            "ISteamUser",
            "GetPlayerSummaries",
            "0002",
            {"steamids": self.config.steam_id},
        )
        players = (data.get("response") or {}).get("players") or []
        return players[0] if players else {}


def run_snapshot(
    config: SteamConfig,
    output_path: str | Path | None = None,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Fetch, aggregate and write the Steam snapshot

    Args:
        config: Steam credentials and settings
        output_path: Destination file (defaults to config.output_path)
        client: Optional externally managed httpx.Client

    Returns:
        The document that was written

    Raises:
        SnapshotError: On any upstream or write failure
    """
    logger.info("Fetching Steam data...")

    with SteamClient(config, client=client) as steam:
        owned = steam.get_owned_games()
        recent = steam.get_recently_played()
        profile = steam.get_player_summary()

    document = build_snapshot(
        owned, recent, profile, fetched_at=datetime.now(timezone.utc)
    )
    path = write_snapshot(document, output_path or config.output_path)

    stats = document["stats"]
    top = document["topByPlaytime"]
    logger.info(f"Wrote {path}")
    logger.info(f"  Total games: {stats['totalGames']}")
    logger.info(f"  Total hours: {stats['totalHours']}")
    logger.info(
        f"  Recently played: {len(document['recentlyPlayed'])} games"
    )
    logger.info(
        f"  Top game: {top[0]['name']} ({top[0]['hours']}h)"
        if top
        else "  Top game: N/A"
    )
    return document
