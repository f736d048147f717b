# quakelist/handler.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from quakelist.errors import FeedError, FormParseError
from quakelist.options import Magnitude, TimeSpan
from quakelist.usgs import QueryResult, fetch_quakes
from quakelist.validate import process_request
from quakelist.view import format_error, format_quakes

logger = logging.getLogger(__name__)

Fetcher = Callable[[TimeSpan, Magnitude], QueryResult]


@dataclass(frozen=True)
class PageRequest:
    form: Mapping[str, str] = field(default_factory=dict)
    form_error: Optional[FormParseError] = None   # set when the body could not be parsed


@dataclass
class PageResponse:
    time_span: TimeSpan = TimeSpan.DAY
    magnitude: Magnitude = Magnitude.SIGNIFICANT
    ok: bool = True
    error: str = ""
    fragment: str = ""
    result: Optional[QueryResult] = None


def handle(request: PageRequest, fetch: Fetcher = fetch_quakes) -> PageResponse:
    """
    Validate, fetch, format. Every error kind ends up as an inline banner in
    the returned fragment; nothing here raises for bad input or a bad feed.
    """
    if request.form_error is not None:
        return _failed(PageResponse(), str(request.form_error))

    v = process_request(request.form)
    page = PageResponse(time_span=v.time_span, magnitude=v.magnitude)
    if not v.ok:
        logger.info("rejected form: %s", v.message)
        return _failed(page, v.message)

    try:
        result = fetch(v.time_span, v.magnitude)
    except FeedError as exc:
        logger.warning("feed fetch failed: %s", exc,
                       extra={"timespan": v.time_span.canonical, "magnitude": v.magnitude.canonical})
        return _failed(page, str(exc))

    page.result = result
    page.fragment = format_quakes(result)
    return page


def _failed(page: PageResponse, message: str) -> PageResponse:
    page.ok = False
    page.error = message
    page.fragment = format_error(message)
    return page
