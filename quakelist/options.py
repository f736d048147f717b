# quakelist/options.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple, Type, TypeVar

E = TypeVar("E", bound="_Option")


class _Option(Enum):
    """Enum members are keyed by their form-input token."""

    @property
    def token(self) -> str:
        return self.value

    @property
    def canonical(self) -> str:
        return _CANONICAL.get(self, self.value)

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def default(cls: Type[E]) -> E:
        return _DEFAULTS[cls]

    @classmethod
    def parse(cls: Type[E], token: str) -> Tuple[E, Optional[str]]:
        """
        "" -> (default, None); known token -> (member, None);
        anything else -> (default, "invalid <field> '<token>'").
        """
        if not token:
            return cls.default(), None
        try:
            return cls(token), None
        except ValueError:
            return cls.default(), f"invalid {_FIELDS[cls]} '{token}'"

    @classmethod
    def from_canonical(cls: Type[E], canonical: str) -> E:
        for member in cls:
            if member.canonical == canonical:
                return member
        raise ValueError(f"unknown {_FIELDS[cls]} '{canonical}'")


class TimeSpan(_Option):
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class Magnitude(_Option):
    SIGNIFICANT = "significant"
    M4_5 = "4_5"
    M2_5 = "2_5"
    M1_0 = "1_0"
    ALL = "all"


_FIELDS = {TimeSpan: "timespan", Magnitude: "magnitude"}
_DEFAULTS = {TimeSpan: TimeSpan.DAY, Magnitude: Magnitude.SIGNIFICANT}

# only where the URL token differs from the form token
_CANONICAL = {
    Magnitude.M4_5: "4.5",
    Magnitude.M2_5: "2.5",
    Magnitude.M1_0: "1.0",
}

_LABELS = {
    TimeSpan.HOUR: "Past Hour",
    TimeSpan.DAY: "Past Day",
    TimeSpan.WEEK: "Past 7 Days",
    TimeSpan.MONTH: "Past 30 Days",
    Magnitude.SIGNIFICANT: "Significant",
    Magnitude.M4_5: "M4.5+",
    Magnitude.M2_5: "M2.5+",
    Magnitude.M1_0: "M1.0+",
    Magnitude.ALL: "All",
}
