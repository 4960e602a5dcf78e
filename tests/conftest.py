#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.conftest
    ~~~~~~~~~~~~~~

    Snapshot factories shared by the keyloans tests.

    :copyright: (c) 2025 by Authors.
    :license: see LICENSE for more details.
"""

import itertools
from datetime import datetime, timezone

import pytest

from keyloans.schemas import Loan, LoanableItem, Receipt
from keyloans.core.utils import has_locale_collation

_ids = itertools.count(1)

swedish_collation = pytest.mark.skipif(
    not has_locale_collation(), reason="collation locale is not installed")


def at(day: str) -> datetime:
    """'2024-06-01' or '2024-06-01T10:00' as an aware UTC datetime."""
    return datetime.fromisoformat(day).replace(tzinfo=timezone.utc)


def make_loan(created="2024-01-10", picked_up=None, returned=None,
              available_from=None, contact="P100", **kwargs) -> Loan:
    return Loan(
        id=kwargs.pop("id", f"loan-{next(_ids)}"),
        contact=contact,
        created_at=at(created),
        picked_up_at=at(picked_up) if picked_up else None,
        returned_at=at(returned) if returned else None,
        available_to_next_tenant_from=at(available_from) if available_from else None,
        **kwargs,
    )


def make_item(name="A-1", item_type="LGH", loans=(), **kwargs) -> LoanableItem:
    return LoanableItem(
        id=kwargs.pop("id", f"key-{next(_ids)}"),
        name=name,
        item_type=item_type,
        loans=list(loans),
        **kwargs,
    )


def make_receipt(receipt_type="LOAN", file_id=None, **kwargs) -> Receipt:
    return Receipt(
        id=kwargs.pop("id", f"receipt-{next(_ids)}"),
        key_loan_id=kwargs.pop("key_loan_id", "loan-1"),
        receipt_type=receipt_type,
        file_id=file_id,
    )


@pytest.fixture
def now():
    return at("2024-06-15T12:00")
