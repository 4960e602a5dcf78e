#!/usr/bin/env python

"""
    Optional sanity pass over loan snapshots, run at the boundary before
    the engine. The engine itself tolerates every anomaly reported here.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from typing import Iterable, List, Optional
from pydantic import BaseModel
from keyloans.schemas import Loan, LoanableItem
from keyloans.core.exceptions import LoanTimelineError
from keyloans.core.loans import active_loans

logger = logging.getLogger(__name__)

MULTIPLE_ACTIVE_LOANS = "multiple-active-loans"


class Anomaly(BaseModel):

    item_id: str
    loan_id: Optional[str] = None
    reason: str


def check_loan(loan: Loan) -> None:
    """
    Raises:
        LoanTimelineError: when the loan was picked up before it was
            created, or returned before it was picked up.
    """
    if loan.picked_up_at is not None and loan.picked_up_at < loan.created_at:
        raise LoanTimelineError(f"Loan {loan.id} picked up before it was created")
    if (loan.returned_at is not None and loan.picked_up_at is not None
            and loan.returned_at < loan.picked_up_at):
        raise LoanTimelineError(f"Loan {loan.id} returned before it was picked up")


def find_anomalies(items: Iterable[LoanableItem]) -> List[Anomaly]:
    anomalies = []
    for item in items:
        seen = set()
        for loan in item.loans:
            if loan.id in seen:
                continue
            seen.add(loan.id)
            try:
                check_loan(loan)
            except LoanTimelineError as e:
                anomalies.append(Anomaly(item_id=item.id, loan_id=loan.id, reason=str(e)))
        if len(active_loans(item)) > 1:
            anomalies.append(Anomaly(item_id=item.id, reason=MULTIPLE_ACTIVE_LOANS))

    for anomaly in anomalies:
        logger.warning(f"Item {anomaly.item_id}: {anomaly.reason}")
    return anomalies
