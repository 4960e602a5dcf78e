#!/usr/bin/env python
"""
    Item Schema for keyloans,
    a key or key card together with the loans it has been part of.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import enum
import logging
from datetime import datetime
from typing import Iterable, List, Optional
from pydantic import Field, ValidationError, field_validator, model_validator
from keyloans.core.exceptions import InvalidSnapshotError
from keyloans.schemas.base import Snapshot, to_instant
from keyloans.schemas.loan import Loan

logger = logging.getLogger(__name__)


class KeyEventType(str, enum.Enum):
    FLEX = "FLEX"
    ORDER = "ORDER"
    LOST = "LOST"


class KeyEventStatus(str, enum.Enum):
    ORDERED = "ORDERED"
    RECEIVED = "RECEIVED"
    COMPLETED = "COMPLETED"


class KeyEvent(Snapshot):
    """Latest pending event on a key (flex order, extra key order...).
    Only used for status display."""

    type: KeyEventType
    status: KeyEventStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def coerce_instant(cls, value):
        return to_instant(value)

    @property
    def is_active(self) -> bool:
        return self.status != KeyEventStatus.COMPLETED


def _as_number(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


class LoanableItem(Snapshot):

    id: str
    name: str = Field("", alias="keyName")
    item_type: Optional[str] = Field(None, alias="keyType")
    sequence_number: Optional[int] = Field(None, alias="keySequenceNumber")
    flex_number: Optional[int] = None
    rental_object_code: Optional[str] = None
    disposed: bool = False
    loans: List[Loan] = []
    latest_event: Optional[KeyEvent] = None

    @model_validator(mode="before")
    @classmethod
    def join_loans(cls, data):
        """The keys backend embeds either a full `loans` list or the
        pair `loan` (active) / `previousLoan` (last returned)."""
        if not isinstance(data, dict) or data.get("loans") is not None:
            return data
        joined = [data.get(k) for k in ("loan", "previousLoan") if data.get(k)]
        if joined:
            data = {**data, "loans": joined}
        return data

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, value):
        return "" if value is None else str(value)

    @field_validator("sequence_number", "flex_number", mode="before")
    @classmethod
    def coerce_number(cls, value):
        return _as_number(value)

    @field_validator("disposed", mode="before")
    @classmethod
    def coerce_disposed(cls, value):
        return bool(value)


def load_items(payloads: Iterable[dict]) -> List[LoanableItem]:
    """Validates a backend snapshot into LoanableItems.

    Raises:
        InvalidSnapshotError: naming the position of the first bad record.
    """
    items = []
    for index, payload in enumerate(payloads):
        try:
            items.append(LoanableItem.model_validate(payload))
        except ValidationError as e:
            logger.warning(f"Rejected item snapshot at index {index}: {e.error_count()} error(s)")
            raise InvalidSnapshotError(f"Invalid item at index {index}: {e}") from e
    logger.debug(f"Loaded {len(items)} item snapshot(s)")
    return items
