#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.test_validation
    ~~~~~~~~~~~~~~~~~~~~~

    This module tests the optional loan timeline checks.

    :copyright: (c) 2025 by Authors.
    :license: see LICENSE for more details.
"""

import logging

import pytest

from keyloans.core.exceptions import KeyLoansError, LoanTimelineError
from keyloans.core.grouping import group
from keyloans.core.status import LoanStatus, classify
from keyloans.core.validation import MULTIPLE_ACTIVE_LOANS, check_loan, find_anomalies
from conftest import make_item, make_loan


def test_consistent_loan_passes():
    check_loan(make_loan(created="2024-01-10", picked_up="2024-01-11", returned="2024-02-01"))


def test_return_before_pickup_raises():
    loan = make_loan(created="2024-01-10", picked_up="2024-03-01", returned="2024-02-01")
    with pytest.raises(LoanTimelineError):
        check_loan(loan)


def test_pickup_before_creation_raises():
    with pytest.raises(KeyLoansError):
        check_loan(make_loan(created="2024-01-10", picked_up="2024-01-01"))


def test_anomalies_are_reported_and_logged(caplog):
    bad = make_loan(id="bad", created="2024-01-10", picked_up="2024-03-01", returned="2024-02-01")
    twice = make_item(id="k2", loans=[make_loan(created="2024-02-01"), make_loan(created="2024-03-01")])
    with caplog.at_level(logging.WARNING, logger="keyloans.core.validation"):
        anomalies = find_anomalies([make_item(id="k1", loans=[bad]), twice, make_item(id="k3")])
    assert [(a.item_id, a.loan_id) for a in anomalies] == [("k1", "bad"), ("k2", None)]
    assert anomalies[1].reason == MULTIPLE_ACTIVE_LOANS
    assert len(caplog.records) == 2


def test_engine_tolerates_inverted_timeline():
    bad = make_loan(created="2024-01-10", picked_up="2024-03-01", returned="2024-02-01")
    item = make_item(loans=[bad])
    assert classify(bad) == LoanStatus.RETURNED
    assert group([item]).unloaned[0].previous_loan == bad
