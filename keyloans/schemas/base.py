#!/usr/bin/env python

"""
    Shared pieces for the snapshot schemas.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from datetime import date, datetime, time
from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from keyloans.configs import TIMEZONE


def to_instant(value) -> Optional[datetime]:
    """Coerces backend timestamps (ISO strings, dates, datetimes) into
    timezone-aware datetimes. Naive values are read in the configured
    TIMEZONE so that every comparison in the core is aware vs aware.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        value = datetime.fromisoformat(value)
    elif not isinstance(value, datetime) and isinstance(value, date):
        value = datetime.combine(value, time())
    if isinstance(value, datetime) and value.tzinfo is None:
        value = value.replace(tzinfo=TIMEZONE)
    return value


class Snapshot(BaseModel):
    """Read-only view of a backend record. Accepts both the python
    field names and the camelCase names used on the wire."""

    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel
        frozen = True
