"""URL utilities for registry listings."""

import datetime

from ..config import REGISTRY_URLS
from ..models import Registry


def listing_url(registry: Registry | str, day: datetime.date) -> str:
    """
    Generate the URL of a registry's extended listing for one day.

    Args:
        registry: Registry, or its identifier (e.g., "apnic", "ripencc")
        day: Day the listing was published

    Returns:
        Full URL to the listing, possibly compressed (.gz or .bz2)

    Raises:
        ValueError: If the registry is not one of the five RIRs
    """
    registry = Registry(registry)
    return REGISTRY_URLS[registry.value].format(
        year=day.strftime("%Y"),
        day=day.strftime("%Y%m%d"),
    )


def listing_day(when: datetime.date | datetime.datetime | int | float) -> datetime.date:
    """
    Reduce a date, datetime or UNIX timestamp to its UTC day.

    Naive datetimes are taken to be UTC already.
    """
    if isinstance(when, datetime.datetime):
        if when.tzinfo is not None:
            when = when.astimezone(datetime.timezone.utc)
        return when.date()
    if isinstance(when, datetime.date):
        return when
    return datetime.datetime.fromtimestamp(when, datetime.timezone.utc).date()
