# quakelist/view.py
from __future__ import annotations
from datetime import datetime
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape

from quakelist.config import TEMPLATES_DIR
from quakelist.usgs import QueryResult

TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

# relative links have no scheme
LINK_SCHEMES = ("http", "https", "")


def format_time(dt: datetime) -> str:
    return dt.strftime(TIME_FORMAT)


def is_linkable(url: str) -> bool:
    try:
        return bool(url) and urlsplit(url.strip()).scheme.lower() in LINK_SCHEMES
    except ValueError:
        return False


env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)
env.filters["localtime"] = format_time
env.tests["linkable"] = is_linkable


def format_quakes(result: QueryResult) -> str:
    """Render the results fragment: heading, count line and one row per quake.

    Title, place and url come from a third-party feed and are escaped.
    """
    return env.get_template("quakes.html").render(result=result)


def format_error(message: str) -> str:
    return env.get_template("error.html").render(message=message)
