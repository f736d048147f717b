# quakelist/config.py
from __future__ import annotations
from pathlib import Path

HOST = "0.0.0.0"
PORT = 8080

FEED_BASE_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"
FETCH_TIMEOUT = 30.0

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"

# form field names
FIELD_TIMESPAN = "opttime"
FIELD_MAGNITUDE = "optmagnitude"
