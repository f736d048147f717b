# quakelist/usgs.py
from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

import httpx

from quakelist.config import FEED_BASE_URL, FETCH_TIMEOUT
from quakelist.errors import DecodeError, NetworkError
from quakelist.options import Magnitude, TimeSpan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quake:
    magnitude: float
    place: str
    occurred_at: datetime   # tz-aware, server local time
    url: str


@dataclass
class QueryResult:
    time_span: TimeSpan
    magnitude: Magnitude
    title: str
    count: int              # as declared by the feed; may disagree with len(items)
    items: List[Quake] = field(default_factory=list)
    feed_url: str = ""


def feed_url(ts: TimeSpan, mag: Magnitude, base: str = FEED_BASE_URL) -> str:
    return f"{base.rstrip('/')}/{mag.canonical}_{ts.canonical}.geojson"


def epoch_ms_to_local(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).astimezone()


def _normalize_feature(feature: Mapping[str, Any]) -> Optional[Quake]:
    props = feature.get("properties")
    if not isinstance(props, Mapping):
        return None
    t = props.get("time")
    if t is None:
        return None
    try:
        mag = props.get("mag")
        return Quake(
            magnitude=float(mag) if mag is not None else 0.0,
            place=str(props.get("place") or ""),
            occurred_at=epoch_ms_to_local(int(t)),
            url=str(props.get("url") or ""),
        )
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def parse_feed(data: Any, ts: TimeSpan, mag: Magnitude, url: str = "") -> QueryResult:
    """
    Map a decoded GeoJSON summary document onto a QueryResult.

    Only metadata.title / metadata.count and, per feature, mag / place /
    time / url are read. Rows come from the features list itself, so a feed
    whose declared count disagrees with its features is tolerated.
    """
    if not isinstance(data, Mapping):
        raise DecodeError(f"unexpected feed document: {type(data).__name__}")
    meta = data.get("metadata")
    feats = data.get("features")
    if not isinstance(meta, Mapping):
        raise DecodeError("feed document has no metadata object")
    if not isinstance(feats, list):
        raise DecodeError("feed document has no features list")

    try:
        count = int(meta.get("count") or 0)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"bad metadata.count: {exc}") from exc

    quakes: List[Quake] = []
    for f in feats:
        q = _normalize_feature(f) if isinstance(f, Mapping) else None
        if q is None:
            logger.warning("skipping malformed feature", extra={"feed_url": url})
            continue
        quakes.append(q)

    return QueryResult(
        time_span=ts,
        magnitude=mag,
        title=str(meta.get("title") or ""),
        count=count,
        items=quakes,
        feed_url=url,
    )


def fetch_quakes(ts: TimeSpan,
                 mag: Magnitude,
                 timeout: float = FETCH_TIMEOUT,
                 client: Optional[httpx.Client] = None,
                 base: str = FEED_BASE_URL) -> QueryResult:
    """One GET against the summary feed for (mag, ts).

    Raises NetworkError for transport failures and non-2xx statuses, and
    DecodeError when the body is not the expected JSON. The response is
    closed before returning on every path.
    """
    url = feed_url(ts, mag, base)
    close_client = False
    if client is None:
        client = httpx.Client(timeout=timeout)
        close_client = True

    start = time.perf_counter()
    try:
        try:
            resp = client.get(url)
        except httpx.HTTPError as exc:
            raise NetworkError(str(exc)) from exc

        try:
            try:
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise NetworkError(str(exc)) from exc
            try:
                data = resp.json()
            except ValueError as exc:
                raise DecodeError(str(exc)) from exc
        finally:
            resp.close()

        result = parse_feed(data, ts, mag, url)
        logger.info(
            "fetched feed %s", result.title,
            extra={
                "feed_url": url,
                "event_count": len(result.items),
                "duration_ms": round((time.perf_counter() - start) * 1000, 1),
            },
        )
        return result
    finally:
        if close_client:
            client.close()
