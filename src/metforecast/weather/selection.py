"""Time-of-day selection for locationforecast timeseries."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Final

from metforecast.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)

# 11:00 UTC is shown as 14:00 under the fixed UTC+3 display convention.
AFTERNOON_UTC_HOUR: Final = 11


def is_afternoon_sample(sample: dict[str, Any]) -> bool:
    """Return True when the sample's timestamp falls on 11:00 UTC.

    A sample without a parsable ``time`` never matches.
    """
    try:
        ts = TimeUtils.parse_iso(sample["time"])
    except (KeyError, TypeError, ValueError) as exc:
        logger.debug("Skipping sample without a usable time: %s", exc)
        return False
    return TimeUtils.utc_hour(ts) == AFTERNOON_UTC_HOUR


def select_afternoon(timeseries: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Keep only the samples taken at 11:00 UTC.

    Samples are returned unchanged and in input order, so a multi-day
    hourly series yields one entry per day it covers.

    Args:
        timeseries: Raw ``properties.timeseries`` items from the provider

    Returns:
        The matching samples
    """
    selected = [sample for sample in timeseries if is_afternoon_sample(sample)]
    logger.debug("Selected %d afternoon samples", len(selected))
    return selected
