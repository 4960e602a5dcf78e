#!/usr/bin/env python

"""
    Pickup availability: may a key or card be handed to its next holder?

    The restriction comes from the *previous* loan's hand-back date
    (`available_to_next_tenant_from`). A freshly created loan that has
    not been picked up yet never blocks its own handout.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import enum
import logging
from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from keyloans.configs import TIMEZONE
from keyloans.schemas import Loan, LoanableItem
from keyloans.core.loans import active_loan, previous_loan
from keyloans.core.utils import resolve_now

logger = logging.getLogger(__name__)

SHORT_MONTHS = (
    "jan", "feb", "mar", "apr", "maj", "jun",
    "jul", "aug", "sep", "okt", "nov", "dec",
)


class AvailabilityKind(str, enum.Enum):
    PICKED_UP = "picked-up"
    AVAILABLE = "available"
    BLOCKED_UNTIL = "blocked-until"
    AVAILABLE_FROM = "available-from"


class PickupAvailability(BaseModel):

    kind: AvailabilityKind
    date: Optional[datetime] = None

    class Config:
        frozen = True

    @property
    def is_available(self) -> bool:
        """True when the item may be handed out right now."""
        return self.kind in (AvailabilityKind.AVAILABLE, AvailabilityKind.AVAILABLE_FROM)

    def label(self, now: Optional[datetime] = None) -> str:
        """Badge text. The year is shown only when it differs from now."""
        if self.kind == AvailabilityKind.PICKED_UP:
            return "Utlämnad"
        if self.kind == AvailabilityKind.AVAILABLE:
            return "Får utlämnas"
        when = self.date.astimezone(TIMEZONE)
        current = resolve_now(now).astimezone(TIMEZONE)
        formatted = f"{when.day} {SHORT_MONTHS[when.month - 1]}"
        if when.year != current.year:
            formatted += f" {when.year}"
        if self.kind == AvailabilityKind.BLOCKED_UNTIL:
            return f"Får ej utlämnas till {formatted}"
        return f"Får utlämnas från {formatted}"


def resolve_availability(
    active: Optional[Loan],
    previous: Optional[Loan],
    now: Optional[datetime] = None,
) -> PickupAvailability:
    """
    Decides whether an item may be handed out.

    Args:
        active: the item's unreturned loan, if any.
        previous: the item's most recently returned loan, if any.
        now: reference instant, defaults to the current time.

    Returns:
        PICKED_UP when the active loan has been picked up; otherwise
        AVAILABLE, BLOCKED_UNTIL(date) or AVAILABLE_FROM(date) based on
        the previous loan's hand-back date. The boundary is inclusive:
        a date equal to `now` is AVAILABLE_FROM.
    """
    if active is not None and active.is_picked_up:
        return PickupAvailability(kind=AvailabilityKind.PICKED_UP)

    available_from = previous.available_to_next_tenant_from if previous else None
    if available_from is None:
        return PickupAvailability(kind=AvailabilityKind.AVAILABLE)

    if available_from > resolve_now(now):
        return PickupAvailability(kind=AvailabilityKind.BLOCKED_UNTIL, date=available_from)
    return PickupAvailability(kind=AvailabilityKind.AVAILABLE_FROM, date=available_from)


def item_availability(item: LoanableItem, now: Optional[datetime] = None) -> PickupAvailability:
    result = resolve_availability(active_loan(item), previous_loan(item), now)
    logger.debug(f"Item {item.id}: pickup availability {result.kind.value}")
    return result
