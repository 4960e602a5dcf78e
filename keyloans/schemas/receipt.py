#!/usr/bin/env python
"""
    Receipt Schema for keyloans,
    the signed loan/return receipt attached to a key loan.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import enum
from typing import Optional
from keyloans.schemas.base import Snapshot


class ReceiptType(str, enum.Enum):
    LOAN = "LOAN"
    RETURN = "RETURN"


class Receipt(Snapshot):

    id: str
    key_loan_id: Optional[str] = None
    receipt_type: ReceiptType
    file_id: Optional[str] = None

    @property
    def has_file(self) -> bool:
        """True once a signed file has been uploaded."""
        return bool(self.file_id)
