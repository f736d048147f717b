# quakelist/cli.py
from __future__ import annotations
import argparse
import logging
import sys

from quakelist.config import FETCH_TIMEOUT, FIELD_MAGNITUDE, FIELD_TIMESPAN, HOST, PORT
from quakelist.errors import FeedError
from quakelist.logging_config import configure_logging
from quakelist.options import Magnitude, TimeSpan
from quakelist.usgs import fetch_quakes
from quakelist.validate import process_request
from quakelist.view import format_time


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="quakelist", description="Latest earthquakes from the USGS summary feeds")
    p.add_argument("--log-level", default="INFO")
    sub = p.add_subparsers(dest="cmd", required=True)

    servep = sub.add_parser("serve", help="Run the web page")
    servep.add_argument("--host", default=HOST)
    servep.add_argument("--port", type=int, default=PORT)

    fetchp = sub.add_parser("fetch", help="Print one feed to the terminal")
    fetchp.add_argument("--time", default="", help="|".join(t.token for t in TimeSpan))
    fetchp.add_argument("--magnitude", default="", help="|".join(m.token for m in Magnitude))
    fetchp.add_argument("--timeout", type=float, default=FETCH_TIMEOUT)
    return p


def run_fetch(args: argparse.Namespace) -> int:
    v = process_request({FIELD_TIMESPAN: args.time, FIELD_MAGNITUDE: args.magnitude})
    if not v.ok:
        print(v.message, file=sys.stderr)
        return 2
    try:
        result = fetch_quakes(v.time_span, v.magnitude, timeout=args.timeout)
    except FeedError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result.title)
    print(f"count: {result.count}")
    for q in result.items:
        print(f"{q.magnitude:5.2f}  {format_time(q.occurred_at)}  {q.place}  {q.url}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(getattr(logging, str(args.log_level).upper(), logging.INFO))

    if args.cmd == "serve":
        import uvicorn
        uvicorn.run("quakelist.main:app", host=args.host, port=args.port, log_config=None)
        return 0
    return run_fetch(args)


if __name__ == "__main__":
    sys.exit(main())
