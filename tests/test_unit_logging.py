import io
import json
import logging

from quakelist.logging_config import QuakeLogFormatter, configure_logging

def test_extra_fields_become_keys():
    record = logging.makeLogRecord({
        "name": "quakelist.usgs", "levelno": logging.INFO, "levelname": "INFO",
        "msg": "fetched %s", "args": ("T",),
        "feed_url": "http://x/all_day.geojson", "event_count": 3, "duration_ms": None,
    })
    entry = json.loads(QuakeLogFormatter().format(record))
    assert entry["message"] == "fetched T"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "quakelist.usgs"
    assert entry["feed_url"] == "http://x/all_day.geojson"
    assert entry["event_count"] == 3
    assert "duration_ms" not in entry
    assert "args" not in entry and "msg" not in entry

def test_configure_logging_writes_json_and_quiets_httpx():
    root = logging.getLogger()
    saved = (root.level, root.handlers[:], logging.getLogger("httpx").level)
    buf = io.StringIO()
    try:
        configure_logging(logging.DEBUG, stream=buf)
        logging.getLogger("quakelist.handler").info("rejected form", extra={"timespan": "xyz"})
        logging.getLogger("httpx").info("HTTP Request: GET ...")
    finally:
        root.handlers[:] = saved[1]
        root.setLevel(saved[0])
        logging.getLogger("httpx").setLevel(saved[2])

    lines = [json.loads(l) for l in buf.getvalue().splitlines()]
    assert len(lines) == 1
    assert lines[0]["timespan"] == "xyz"
