#!/usr/bin/env python

"""
    Resolution of an item's active and previous loan from the loans
    attached to it.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from typing import List, Optional
from keyloans.schemas import Loan, LoanableItem


def active_loans(item: LoanableItem) -> List[Loan]:
    """Every unreturned loan on the item, newest first.

    More than one entry is a data anomaly the backend should prevent;
    it is returned rather than hidden so callers can report it.
    """
    open_loans = [loan for loan in item.loans if not loan.is_returned]
    return sorted(open_loans, key=lambda loan: loan.created_at, reverse=True)


def active_loan(item: LoanableItem) -> Optional[Loan]:
    """The most recently created unreturned loan, if any."""
    loans = active_loans(item)
    return loans[0] if loans else None


def previous_loan(item: LoanableItem) -> Optional[Loan]:
    """The most recently returned loan, if any."""
    returned = [loan for loan in item.loans if loan.is_returned]
    if not returned:
        return None
    return sorted(returned, key=lambda loan: loan.returned_at, reverse=True)[0]


def is_loaned(item: LoanableItem) -> bool:
    return any(not loan.is_returned for loan in item.loans)
