#!/usr/bin/env python

"""
    Bundle membership guard.

    Taking a key out of a bundle while it is on loan is allowed, but the
    operator has to confirm it: the bundle is meant to describe keys
    that belong together. The guard only plans; callers perform the
    mutation against the backend.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from typing import Iterable, List, Set
from pydantic import BaseModel
from keyloans.schemas import Bundle, LoanableItem
from keyloans.core.loans import is_loaned

logger = logging.getLogger(__name__)


class RemovalPlan(BaseModel):

    safe_ids: Set[str] = set()
    warn_ids: Set[str] = set()

    @property
    def needs_confirmation(self) -> bool:
        return bool(self.warn_ids)


def plan_removal(
    bundle_item_ids: Iterable[str],
    target_ids: Iterable[str],
    items: Iterable[LoanableItem],
) -> RemovalPlan:
    """
    Splits the keys selected for removal into those that can go
    directly (`safe_ids`) and those on an active loan (`warn_ids`).

    Targets missing from `items` count as not loaned. Every target ends
    up in exactly one of the two sets.
    """
    loaned = {item.id for item in items if is_loaned(item)}
    members = set(bundle_item_ids)
    safe, warn = set(), set()
    for target in set(target_ids):
        if target not in members:
            logger.debug(f"Removal target {target} is not a member of the bundle")
        (warn if target in loaned else safe).add(target)
    plan = RemovalPlan(safe_ids=safe, warn_ids=warn)
    if plan.needs_confirmation:
        logger.info(f"Removal of {len(plan.warn_ids)} loaned key(s) needs confirmation")
    return plan


def plan_addition(current_ids: Iterable[str], new_ids: Iterable[str]) -> List[str]:
    """Union keeping the current order; already present ids are ignored."""
    return list(dict.fromkeys([*current_ids, *new_ids]))


def apply_addition(bundle: Bundle, new_ids: Iterable[str]) -> Bundle:
    return bundle.model_copy(update={"key_ids": plan_addition(bundle.key_ids, new_ids)})


def apply_removal(bundle: Bundle, remove_ids: Iterable[str]) -> Bundle:
    removed = set(remove_ids)
    return bundle.model_copy(
        update={"key_ids": [key_id for key_id in bundle.key_ids if key_id not in removed]}
    )


def loaned_members(bundle: Bundle, items: Iterable[LoanableItem]) -> List[LoanableItem]:
    """Members of the bundle that are currently out on loan, in bundle order."""
    by_id = {item.id: item for item in items}
    return [
        by_id[key_id] for key_id in bundle.key_ids
        if key_id in by_id and is_loaned(by_id[key_id])
    ]
