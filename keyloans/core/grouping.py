#!/usr/bin/env python

"""
    Grouping of keys and cards for presentation.

    Every view in this module is built from one primitive, `partition`:
    split a flat collection by a key function, order the leaves inside
    each group, then order the groups. The views differ only in the
    key function and the orderings they pass in.

    Group keys are derived from holder codes and loan ids only, so they
    stay stable across recomputation on fresher snapshots and can be
    used to remember expand/collapse state outside the engine.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union
from pydantic import BaseModel
from keyloans.configs import (
    NEVER_LOANED, NO_RENTAL_OBJECT, OTHER_TYPE_RANK, UNKNOWN_HOLDER
)
from keyloans.schemas import Loan, LoanableItem
from keyloans.core.loans import active_loan, previous_loan
from keyloans.core.utils import collation_key

logger = logging.getLogger(__name__)

# Apartment, mailbox, property, master key. Everything else ranks last.
KEY_TYPE_ORDER = ("LGH", "PB", "FS", "HN")
_TYPE_RANKS = {code: rank for rank, code in enumerate(KEY_TYPE_ORDER, start=1)}

UNKNOWN_HOLDER_LABEL = "Okänd"


def type_rank(item_type: Optional[str]) -> int:
    if not isinstance(item_type, str):
        return OTHER_TYPE_RANK
    return _TYPE_RANKS.get(item_type, OTHER_TYPE_RANK)


def leaf_key(item: LoanableItem) -> tuple:
    """Sort key: type priority, then name in the configured locale's
    collation, then sequence number with unnumbered items after
    numbered ones. Type codes match exactly."""
    name = item.name if isinstance(item.name, str) else ""
    sequence = item.sequence_number
    return (
        type_rank(item.item_type),
        collation_key(name),
        (sequence is None, sequence if sequence is not None else 0),
    )


def sort_items(items: Iterable[LoanableItem]) -> List[LoanableItem]:
    """Stable leaf ordering; full ties keep their input order."""
    return sorted(items, key=leaf_key)


class Group(BaseModel):
    """One bucket produced by `partition`."""

    key: str
    items: List[Any]
    sample: Any = None


def partition(
    items: Iterable[Any],
    group_key: Callable[[Any], str],
    *,
    leaf_order: Optional[Callable[[Any], Any]] = None,
    group_order: Optional[Callable[[Group], Any]] = None,
    sample: Optional[Callable[[Any], Any]] = None,
) -> List[Group]:
    """
    Splits `items` into groups by `group_key`.

    Args:
        items: anything; the callables decide how to read it.
        group_key: returns the bucket key of one item.
        leaf_order: sort key applied inside every group (stable).
        group_order: sort key applied to the groups (stable). Without it
            groups keep first-seen order.
        sample: reads a reference object (e.g. the shared loan) off the
            first item seen in each group; kept as `Group.sample`.
    """
    buckets: Dict[str, List[Any]] = {}
    for item in items:
        buckets.setdefault(group_key(item), []).append(item)

    groups = [
        Group(
            key=key,
            items=sorted(members, key=leaf_order) if leaf_order else members,
            sample=sample(members[0]) if sample else None,
        )
        for key, members in buckets.items()
    ]
    if group_order is not None:
        groups.sort(key=group_order)
    return groups


class LoanGroup(BaseModel):

    holder: str
    loan: Loan
    items: List[LoanableItem]

    @property
    def loan_id(self) -> str:
        return self.loan.id

    @property
    def group_id(self) -> str:
        return f"loan:{self.holder}:{self.loan.id}"


class HolderGroup(BaseModel):

    holder: str
    loans: List[LoanGroup]

    @property
    def group_id(self) -> str:
        return f"holder:{self.holder}"

    @property
    def is_unknown(self) -> bool:
        return self.holder == UNKNOWN_HOLDER

    def all_items(self) -> List[LoanableItem]:
        return [item for loan in self.loans for item in loan.items]

    def title(self, holder_names: Optional[Dict[str, str]] = None) -> str:
        """Display name of the holder. Names are resolved by the caller;
        unresolved codes are shown as is."""
        if self.is_unknown:
            return UNKNOWN_HOLDER_LABEL
        return (holder_names or {}).get(self.holder) or self.holder


class UnloanedGroup(BaseModel):

    key: str
    previous_loan: Optional[Loan] = None
    items: List[LoanableItem]

    @property
    def group_id(self) -> str:
        return f"unloaned:{self.key}"

    @property
    def is_never_loaned(self) -> bool:
        return self.previous_loan is None


class GroupedView(BaseModel):

    loaned: List[HolderGroup] = []
    unloaned: List[UnloanedGroup] = []

    def group_ids(self) -> List[str]:
        ids = []
        for holder in self.loaned:
            ids.append(holder.group_id)
            ids.extend(loan.group_id for loan in holder.loans)
        ids.extend(group.group_id for group in self.unloaned)
        return ids

    def all_items(self) -> List[LoanableItem]:
        return list(_iter_view(self))

    @property
    def is_empty(self) -> bool:
        return not self.loaned and not self.unloaned


class DisposalView(BaseModel):
    """Active (non-disposed) items first, disposed items second."""

    active: GroupedView
    disposed: GroupedView

    def all_items(self) -> List[LoanableItem]:
        return self.active.all_items() + self.disposed.all_items()


def _holder_of(loan: Loan) -> str:
    return loan.holder_code or UNKNOWN_HOLDER


def _newest_first(group: Group) -> float:
    return -group.sample.created_at.timestamp()


def _by_latest_return(never_loaned_first: bool) -> Callable[[Group], tuple]:
    never_loaned_rank = 0 if never_loaned_first else 2

    def order(group: Group) -> tuple:
        loan = group.sample
        if loan is None:
            return (never_loaned_rank, 0.0)
        if loan.returned_at is None:
            return (3, 0.0)
        return (1, -loan.returned_at.timestamp())

    return order


def _pair_leaf_key(pair) -> tuple:
    return leaf_key(pair[0])


def _pair_loan(pair) -> Optional[Loan]:
    return pair[1]


def group(items: Iterable[LoanableItem], *, never_loaned_first: bool = True) -> GroupedView:
    """
    Builds the loaned/unloaned view of a collection of keys or cards.

    Loaned items are grouped by the active loan's holder, then by loan
    (newest loan first). Unloaned items are grouped by the loan they
    were last returned from, most recently returned first; never loaned
    items come before them, or after them when `never_loaned_first` is
    False. Leaves follow `leaf_key`.

    An item carrying two unreturned loans is listed once, under the
    newest of them.
    """
    loaned_pairs, unloaned_pairs = [], []
    for item in items:
        loan = active_loan(item)
        if loan is not None:
            loaned_pairs.append((item, loan))
        else:
            unloaned_pairs.append((item, previous_loan(item)))

    loan_groups = partition(
        loaned_pairs,
        group_key=lambda pair: pair[1].id,
        leaf_order=_pair_leaf_key,
        group_order=_newest_first,
        sample=_pair_loan,
    )
    holders = partition(loan_groups, group_key=lambda g: _holder_of(g.sample))
    loaned = [
        HolderGroup(
            holder=holder.key,
            loans=[
                LoanGroup(
                    holder=holder.key,
                    loan=g.sample,
                    items=[item for item, _ in g.items],
                )
                for g in holder.items
            ],
        )
        for holder in holders
    ]

    unloaned = [
        UnloanedGroup(
            key=g.key,
            previous_loan=g.sample,
            items=[item for item, _ in g.items],
        )
        for g in partition(
            unloaned_pairs,
            group_key=lambda pair: pair[1].id if pair[1] is not None else NEVER_LOANED,
            leaf_order=_pair_leaf_key,
            group_order=_by_latest_return(never_loaned_first),
            sample=_pair_loan,
        )
    ]

    logger.debug(
        f"Grouped {len(loaned_pairs)} loaned item(s) under {len(loaned)} holder(s), "
        f"{len(unloaned_pairs)} unloaned item(s) in {len(unloaned)} group(s)"
    )
    return GroupedView(loaned=loaned, unloaned=unloaned)


def group_by_disposal(items: Iterable[LoanableItem]) -> DisposalView:
    items = list(items)
    return DisposalView(
        active=group(item for item in items if not item.disposed),
        disposed=group(item for item in items if item.disposed),
    )


def group_by(
    items: Iterable[LoanableItem],
    key_fn: Callable[[LoanableItem], Optional[str]],
    *,
    missing_key: str = NO_RENTAL_OBJECT,
) -> List[Group]:
    """One-level grouping by an arbitrary key. Groups are ordered by key,
    items without a key are collected in `missing_key`, listed last."""

    def bucket(item):
        value = key_fn(item)
        return value if value else missing_key

    return partition(
        items,
        group_key=bucket,
        leaf_order=leaf_key,
        group_order=lambda g: (g.key == missing_key, g.key),
    )


def group_by_rental_object(items: Iterable[LoanableItem]) -> List[Group]:
    return group_by(items, lambda item: item.rental_object_code)


def _iter_view(view: GroupedView) -> Iterator[LoanableItem]:
    for holder in view.loaned:
        for loan in holder.loans:
            yield from loan.items
    for unloaned in view.unloaned:
        yield from unloaned.items


def flatten(view: Union[GroupedView, DisposalView]) -> List[LoanableItem]:
    """Items in display order, e.g. for keyboard navigation in a table."""
    return view.all_items()
