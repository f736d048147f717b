# quakelist/errors.py
from __future__ import annotations


class QuakeListError(Exception):
    """Base for every error that ends up as an inline banner on the page."""


class FormParseError(QuakeListError):
    pass


class ValidationError(QuakeListError):
    def __init__(self, field: str, token: str):
        self.field = field
        self.token = token
        super().__init__(f"invalid {field} '{token}'")


class FeedError(QuakeListError):
    """The outbound feed request did not produce a usable result."""


class NetworkError(FeedError):
    pass


class DecodeError(FeedError):
    pass
