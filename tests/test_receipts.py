#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.test_receipts
    ~~~~~~~~~~~~~~~~~~~

    This module tests receipt action flags and return categorisation.

    :copyright: (c) 2025 by Authors.
    :license: see LICENSE for more details.
"""

from keyloans.core.receipts import (
    AttachmentState, attachment_state, categorize_return, clear_pickup_on_file_delete,
    needs_replace_confirmation, resolve_actions, split_receipts
)
from conftest import make_item, make_loan, make_receipt


def test_no_receipts():
    actions = resolve_actions(None, None)
    assert actions.can_print
    assert actions.can_upload
    assert not actions.can_view_loan
    assert not actions.can_view_return


def test_upload_flips_print_and_view_together():
    unsigned = make_receipt("LOAN")
    signed = make_receipt("LOAN", file_id="file-1")
    before, after = resolve_actions(unsigned, None), resolve_actions(signed, None)
    assert before.can_print and not before.can_view_loan
    assert not after.can_print and after.can_view_loan
    assert after.can_upload


def test_return_receipt_needs_a_file_to_be_viewed():
    assert not resolve_actions(None, make_receipt("RETURN")).can_view_return
    assert resolve_actions(None, make_receipt("RETURN", file_id="f")).can_view_return


def test_attachment_states():
    assert attachment_state(None) == AttachmentState.NONE
    assert attachment_state(make_receipt()) == AttachmentState.CREATED_NO_FILE
    assert attachment_state(make_receipt(file_id="f")) == AttachmentState.HAS_FILE


def test_replace_confirmation_only_when_file_attached():
    assert not needs_replace_confirmation(None)
    assert not needs_replace_confirmation(make_receipt())
    assert needs_replace_confirmation(make_receipt(file_id="f"))


def test_split_receipts_first_of_each_type_wins():
    first = make_receipt("LOAN", id="r1")
    extra = make_receipt("LOAN", id="r2")
    returned = make_receipt("RETURN", id="r3")
    assert split_receipts([first, returned, extra]) == (first, returned)
    assert split_receipts([]) == (None, None)


def test_deleting_loan_receipt_file_clears_pickup():
    loan = make_loan(picked_up="2024-01-11")
    cleared = clear_pickup_on_file_delete(loan, make_receipt("LOAN", file_id="f"))
    assert cleared.picked_up_at is None
    assert cleared.id == loan.id
    assert loan.picked_up_at is not None


def test_deleting_return_receipt_keeps_pickup():
    loan = make_loan(picked_up="2024-01-11")
    assert clear_pickup_on_file_delete(loan, make_receipt("RETURN", file_id="f")) is loan


def test_disposed_key_is_disposed_even_if_selected():
    key = make_item(id="k1", disposed=True)
    result = categorize_return([key], {"k1"})
    assert result.disposed == [key]
    assert result.returned == []
    assert result.missing == []


def test_mix_of_returned_missing_and_disposed():
    k1, k2, k3 = make_item(id="k1"), make_item(id="k2"), make_item(id="k3", disposed=True)
    result = categorize_return([k1, k2, k3], {"k1"})
    assert result.returned == [k1]
    assert result.missing == [k2]
    assert result.disposed == [k3]
    assert result.is_partial
