#!/usr/bin/env python

"""
    Snapshot schemas for keyloans: keys, cards, loans, receipts
    and bundles as delivered by the keys backend.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from keyloans.schemas.loan import Loan, LoanType
from keyloans.schemas.item import (
    LoanableItem, KeyEvent, KeyEventType, KeyEventStatus, load_items
)
from keyloans.schemas.receipt import Receipt, ReceiptType
from keyloans.schemas.bundle import Bundle

__all__ = [
    "Loan", "LoanType", "LoanableItem", "KeyEvent", "KeyEventType",
    "KeyEventStatus", "load_items", "Receipt", "ReceiptType", "Bundle",
]
