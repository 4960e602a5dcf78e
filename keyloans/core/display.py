#!/usr/bin/env python

"""
    Display status of keys as shown on a tenant's key list:
    status text, optional date line and a green/red availability flag.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence
from pydantic import BaseModel
from keyloans.schemas import KeyEventStatus, KeyEventType, LoanableItem
from keyloans.core.loans import active_loan, previous_loan
from keyloans.core.utils import format_date, resolve_now

KEY_TYPE_LABELS = {
    "HN": "Huvudnyckel",
    "FS": "Fastighet",
    "MV": "Motorvärmarnyckel",
    "LGH": "Lägenhet",
    "PB": "Postbox",
    "GAR": "Garagenyckel",
    "LOK": "Lokalnyckel",
    "HL": "Hänglås",
    "FÖR": "Förrådsnyckel",
    "SOP": "Sopsug",
    "ÖVR": "Övrigt",
}
CARD_LABEL = "Droppe"

KEY_EVENT_TYPE_LABELS = {
    KeyEventType.FLEX: "Flex",
    KeyEventType.ORDER: "Extranyckel",
    KeyEventType.LOST: "Borttappad",
}
KEY_EVENT_STATUS_LABELS = {
    KeyEventStatus.ORDERED: "Beställd",
    KeyEventStatus.RECEIVED: "Inkommen",
    KeyEventStatus.COMPLETED: "Klar",
}

UNKNOWN_CONTACT = "Okänd"


class DisplayStatus(BaseModel):

    text: str
    date: Optional[str] = None
    is_available: Optional[bool] = None


def type_label(item_type: Optional[str]) -> str:
    if item_type == "CARD":
        return CARD_LABEL
    return KEY_TYPE_LABELS.get(item_type or "", item_type or "")


def _codes(contact_codes: Sequence[str]) -> List[str]:
    # Only a lease's first two tenants are matched
    return [code.strip() for code in list(contact_codes)[:2] if code and code.strip()]


def matches_tenant(item: LoanableItem, contact_codes: Sequence[str]) -> bool:
    """True when the item's active loan is held by one of the tenants."""
    loan = active_loan(item)
    if loan is None or not loan.contact:
        return False
    holders = {(loan.contact or "").strip(), (loan.contact2 or "").strip()} - {""}
    return any(code in holders for code in _codes(contact_codes))


def _returned_by_tenant(item: LoanableItem, contact_codes: Sequence[str]) -> bool:
    loan = previous_loan(item)
    if loan is None:
        return False
    holders = {(loan.contact or "").strip(), (loan.contact2 or "").strip()} - {""}
    return any(code in holders for code in _codes(contact_codes))


def _event_status(item: LoanableItem) -> Optional[DisplayStatus]:
    event = item.latest_event
    if event is None or not event.is_active:
        return None
    label = f"{KEY_EVENT_TYPE_LABELS[event.type]} {KEY_EVENT_STATUS_LABELS[event.status].lower()}"
    if event.type == KeyEventType.FLEX:
        when = event.created_at if event.status == KeyEventStatus.ORDERED else event.updated_at
        formatted = format_date(when)
        if formatted:
            label = f"{label} {formatted}"
    return DisplayStatus(text=label, is_available=False)


def display_status(
    item: LoanableItem,
    contact_codes: Sequence[str] = (),
    now: Optional[datetime] = None,
) -> DisplayStatus:
    """
    Status line for a key on a tenant's key list.

    Args:
        item: the key, with its loans.
        contact_codes: contact codes of the tenant(s) being viewed.
        now: reference instant for availability dates.
    """
    pending = _event_status(item)
    if pending is not None:
        return pending

    now = resolve_now(now)
    active = active_loan(item)
    previous = previous_loan(item)
    matches = matches_tenant(item, contact_codes)
    holder = (active.contact if active else None) or UNKNOWN_CONTACT

    if item.disposed:
        if matches:
            return DisplayStatus(text="Kasserad, utlånad till den här hyresgästen")
        return DisplayStatus(text=f"Kasserad, utlånad till {holder}")

    if active is not None and active.is_picked_up:
        formatted = format_date(active.picked_up_at)
        text = "Utlånat till den här hyresgästen" if matches else f"Utlånad till {holder}"
        return DisplayStatus(text=text, date=f"Hämtad: {formatted}")

    available_from = previous.available_to_next_tenant_from if previous else None
    in_future = available_from is not None and available_from > now
    formatted = format_date(available_from)

    if active is not None:
        text = "Kan ej hämtas" if in_future else "Redo att hämtas"
        date = None
        if formatted:
            date = f"{'Kan ej hämtas före' if in_future else 'Redo fr.o.m'}: {formatted}"
        if not matches:
            text = f"{text} ({holder})"
        return DisplayStatus(text=text, date=date, is_available=not in_future)

    if previous is None:
        return DisplayStatus(text="Ny", is_available=True)

    if _returned_by_tenant(item, contact_codes):
        text = "Återlämnad av den här hyresgästen"
    else:
        text = f"Återlämnad av {previous.contact or 'okänd'}"
    date = f"Tillgänglig fr.o.m: {formatted}" if formatted else None
    return DisplayStatus(text=text, date=date, is_available=not in_future)


def filter_visible(items: Iterable[LoanableItem]) -> List[LoanableItem]:
    """Disposed keys stay visible only while they are out on loan."""
    return [item for item in items if not item.disposed or active_loan(item) is not None]
