#!/usr/bin/env python

"""
    Loan state classification.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import enum
from typing import Optional
from keyloans.schemas import Loan, LoanableItem
from keyloans.core.loans import active_loan


class LoanStatus(str, enum.Enum):
    NONE = "none"
    NOT_PICKED_UP = "not-picked-up"
    ACTIVE = "active"
    RETURNED = "returned"


LOAN_STATUS_LABELS = {
    LoanStatus.RETURNED: "Återlämnad",
    LoanStatus.ACTIVE: "Aktiv",
    LoanStatus.NOT_PICKED_UP: "Ej upphämtad",
    LoanStatus.NONE: "Inget lån",
}


def classify(loan: Optional[Loan]) -> LoanStatus:
    if loan is None:
        return LoanStatus.NONE
    if loan.is_returned:
        return LoanStatus.RETURNED
    if loan.is_picked_up:
        return LoanStatus.ACTIVE
    return LoanStatus.NOT_PICKED_UP


def item_status(item: LoanableItem) -> LoanStatus:
    """Status of the item's active loan; NONE when it is not loaned."""
    return classify(active_loan(item))
