#!/usr/bin/env python
"""
    Loan Schema for keyloans,
    a single key loan (tenant or maintenance) and its three timestamps.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import enum
from datetime import datetime
from typing import Optional
from pydantic import field_validator
from keyloans.schemas.base import Snapshot, to_instant


class LoanType(str, enum.Enum):
    TENANT = "TENANT"
    MAINTENANCE = "MAINTENANCE"


class Loan(Snapshot):

    id: str
    contact: Optional[str] = None
    contact2: Optional[str] = None
    contact_person: Optional[str] = None
    loan_type: LoanType = LoanType.TENANT
    created_at: datetime
    picked_up_at: Optional[datetime] = None
    returned_at: Optional[datetime] = None
    available_to_next_tenant_from: Optional[datetime] = None
    description: Optional[str] = None

    @field_validator(
        "created_at", "picked_up_at", "returned_at",
        "available_to_next_tenant_from", mode="before"
    )
    @classmethod
    def coerce_instant(cls, value):
        return to_instant(value)

    @property
    def holder_code(self) -> Optional[str]:
        """Primary contact code, or None when blank."""
        code = (self.contact or "").strip()
        return code or None

    @property
    def is_returned(self) -> bool:
        return self.returned_at is not None

    @property
    def is_picked_up(self) -> bool:
        return self.picked_up_at is not None
