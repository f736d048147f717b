# quakelist/validate.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from quakelist.config import FIELD_MAGNITUDE, FIELD_TIMESPAN
from quakelist.errors import ValidationError
from quakelist.options import Magnitude, TimeSpan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    time_span: TimeSpan
    magnitude: Magnitude
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def process_request(form: Mapping[str, str]) -> ValidationResult:
    """
    Validate the two filter fields of a submitted form.

    Time span is checked first; when it is invalid the magnitude field is not
    looked at, so only the first bad field is reported. Missing or empty
    fields fall back to the defaults (day / significant) and count as valid.
    """
    input_ts = form.get(FIELD_TIMESPAN) or ""
    input_mag = form.get(FIELD_MAGNITUDE) or ""
    logger.debug("validating form", extra={"timespan": input_ts, "magnitude": input_mag})

    ts, msg = TimeSpan.parse(input_ts)
    if msg:
        return ValidationResult(TimeSpan.default(), Magnitude.default(),
                                ValidationError("timespan", input_ts))

    mag, msg = Magnitude.parse(input_mag)
    if msg:
        return ValidationResult(TimeSpan.default(), Magnitude.default(),
                                ValidationError("magnitude", input_mag))

    return ValidationResult(ts, mag)
