# quakelist/main.py
from __future__ import annotations
from typing import Dict

from fastapi import FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from quakelist.config import TEMPLATES_DIR
from quakelist.errors import FeedError, FormParseError
from quakelist.handler import PageRequest, handle
from quakelist.options import Magnitude, TimeSpan
from quakelist.usgs import QueryResult, fetch_quakes

app = FastAPI(title="Earthquakes")
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# ---------- metrics ----------
FETCH_COUNT     = Counter("feed_fetches_total", "Outbound feed requests")
FETCH_ERRORS    = Counter("feed_fetch_errors_total", "Failed feed requests", ["kind"])
FETCH_LATENCY   = Histogram("feed_fetch_duration_seconds", "Feed request duration")
QUAKES_RENDERED = Counter("quakes_rendered_total", "Table rows rendered")


def instrumented_fetch(ts: TimeSpan, mag: Magnitude) -> QueryResult:
    FETCH_COUNT.inc()
    with FETCH_LATENCY.time():
        try:
            result = fetch_quakes(ts, mag)
        except FeedError as exc:
            FETCH_ERRORS.labels(kind=type(exc).__name__).inc()
            raise
    QUAKES_RENDERED.inc(len(result.items))
    return result


async def read_page_request(request: Request) -> PageRequest:
    """Query string on GET; query string overlaid with the body on POST."""
    fields: Dict[str, str] = dict(request.query_params)
    if request.method == "POST":
        try:
            form = await request.form()
        except MultiPartException as exc:
            return PageRequest(form=fields, form_error=FormParseError(exc.message))
        except HTTPException as exc:
            # Starlette wraps parser failures in a 400 when an app is in scope
            return PageRequest(form=fields, form_error=FormParseError(str(exc.detail)))
        fields.update({k: v for k, v in form.items() if isinstance(v, str)})
    return PageRequest(form=fields)


@app.api_route("/", methods=["GET", "POST"], response_class=HTMLResponse)
async def home(request: Request):
    page_request = await read_page_request(request)
    page = await run_in_threadpool(handle, page_request, instrumented_fetch)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"page": page, "time_spans": list(TimeSpan), "magnitudes": list(Magnitude)},
    )


# ---------- metrics ----------
@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
