#!/usr/bin/env python

"""
    Receipt attachment tracking for key loans.

    A loan has at most one LOAN receipt and one RETURN receipt. A
    receipt moves NONE -> CREATED_NO_FILE -> HAS_FILE; uploading again
    replaces the file and stays in HAS_FILE.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import enum
import logging
from typing import Iterable, List, Optional, Set, Tuple
from pydantic import BaseModel
from keyloans.schemas import Loan, LoanableItem, Receipt, ReceiptType

logger = logging.getLogger(__name__)


class AttachmentState(str, enum.Enum):
    NONE = "none"
    CREATED_NO_FILE = "created-no-file"
    HAS_FILE = "has-file"


class ReceiptActions(BaseModel):

    can_print: bool
    can_upload: bool
    can_view_loan: bool
    can_view_return: bool

    class Config:
        frozen = True


class ReturnCategories(BaseModel):

    returned: List[LoanableItem] = []
    missing: List[LoanableItem] = []
    disposed: List[LoanableItem] = []

    @property
    def is_partial(self) -> bool:
        return bool(self.missing)


def attachment_state(receipt: Optional[Receipt]) -> AttachmentState:
    if receipt is None:
        return AttachmentState.NONE
    if receipt.has_file:
        return AttachmentState.HAS_FILE
    return AttachmentState.CREATED_NO_FILE


def resolve_actions(
    loan_receipt: Optional[Receipt],
    return_receipt: Optional[Receipt],
) -> ReceiptActions:
    """Which receipt buttons are legal for a loan.

    Printing an unsigned receipt is only offered until a signed file is
    attached; uploading is always possible (it creates the receipt or
    replaces its file).
    """
    loan_state = attachment_state(loan_receipt)
    return ReceiptActions(
        can_print=loan_state != AttachmentState.HAS_FILE,
        can_upload=True,
        can_view_loan=loan_state == AttachmentState.HAS_FILE,
        can_view_return=attachment_state(return_receipt) == AttachmentState.HAS_FILE,
    )


def split_receipts(receipts: Iterable[Receipt]) -> Tuple[Optional[Receipt], Optional[Receipt]]:
    """Picks the loan's LOAN and RETURN receipt from everything stored
    for it. The first of each type wins."""
    loan_receipt = return_receipt = None
    for receipt in receipts:
        if receipt.receipt_type == ReceiptType.LOAN:
            if loan_receipt is None:
                loan_receipt = receipt
            else:
                logger.warning(f"Ignoring extra LOAN receipt {receipt.id} for loan {receipt.key_loan_id}")
        elif receipt.receipt_type == ReceiptType.RETURN:
            if return_receipt is None:
                return_receipt = receipt
            else:
                logger.warning(f"Ignoring extra RETURN receipt {receipt.id} for loan {receipt.key_loan_id}")
    return loan_receipt, return_receipt


def needs_replace_confirmation(loan_receipt: Optional[Receipt]) -> bool:
    """An upload over an attached file overwrites it."""
    return attachment_state(loan_receipt) == AttachmentState.HAS_FILE


def clear_pickup_on_file_delete(loan: Loan, receipt: Receipt) -> Loan:
    """
    The signed loan receipt is the proof of physical pickup. When its
    file is deleted the loan goes back to "not picked up"; the caller
    persists the returned copy.
    """
    if receipt.receipt_type != ReceiptType.LOAN or not receipt.has_file:
        return loan
    if not loan.is_picked_up:
        return loan
    logger.info(f"Loan {loan.id}: pickup cleared after deleting receipt file {receipt.file_id}")
    return loan.model_copy(update={"picked_up_at": None})


def categorize_return(
    items: Iterable[LoanableItem],
    selected_ids: Set[str],
) -> ReturnCategories:
    """Buckets the items of a loan being returned. Disposed items are
    always reported as disposed, even when ticked as returned."""
    returned, missing, disposed = [], [], []
    for item in items:
        if item.disposed:
            disposed.append(item)
        elif item.id in selected_ids:
            returned.append(item)
        else:
            missing.append(item)
    return ReturnCategories(returned=returned, missing=missing, disposed=disposed)
