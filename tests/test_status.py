#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.test_status
    ~~~~~~~~~~~~~~~~~

    This module tests loan state classification.

    :copyright: (c) 2025 by Authors.
    :license: see LICENSE for more details.
"""

import itertools

import pytest

from keyloans.core.status import LoanStatus, LOAN_STATUS_LABELS, classify, item_status
from conftest import make_item, make_loan


def test_no_loan_is_none():
    assert classify(None) == LoanStatus.NONE


@pytest.mark.parametrize("picked_up, returned", list(itertools.product([None, "2024-01-11"], [None, "2024-02-01"])))
def test_every_timestamp_combination_classifies(picked_up, returned):
    loan = make_loan(picked_up=picked_up, returned=returned)
    status = classify(loan)
    assert status in set(LoanStatus)
    if returned:
        assert status == LoanStatus.RETURNED


def test_returned_wins_even_without_pickup():
    assert classify(make_loan(returned="2024-02-01")) == LoanStatus.RETURNED


def test_picked_up_and_open_is_active():
    assert classify(make_loan(picked_up="2024-01-11")) == LoanStatus.ACTIVE


def test_created_only_is_not_picked_up():
    assert classify(make_loan()) == LoanStatus.NOT_PICKED_UP


def test_item_status_uses_active_loan():
    old = make_loan(created="2023-01-01", picked_up="2023-01-02", returned="2023-06-01")
    new = make_loan(created="2024-01-10")
    assert item_status(make_item(loans=[old, new])) == LoanStatus.NOT_PICKED_UP
    assert item_status(make_item(loans=[old])) == LoanStatus.NONE


def test_every_status_has_a_label():
    assert set(LOAN_STATUS_LABELS) == set(LoanStatus)
    assert LOAN_STATUS_LABELS[LoanStatus.NOT_PICKED_UP] == "Ej upphämtad"
