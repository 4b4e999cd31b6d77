"""Sort-order reconciliation for orderable collections.

An orderable collection is a plain list whose position is the display order.
After every add, remove or move the whole list is renumbered so that
``sort_order`` equals the 0-based position of each item; persisted gaps or
duplicates never survive one pass through :func:`normalize`.

Items may be dicts or objects; the order attribute defaults to ``sort_order``.
All functions return new lists, so the caller's list keeps its order.
:func:`renumber` writes the order attribute on the items it is given, and so
do :func:`normalize`, :func:`insert` and :func:`remove_at`, which are built on
it. Only :func:`move` leaves the items themselves untouched.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

SORT_ATTR = "sort_order"


def _get(item: Any, attr: str, default: Any = None) -> Any:
    if isinstance(item, dict):
        return item.get(attr, default)
    return getattr(item, attr, default)


def _set(item: Any, attr: str, value: Any) -> None:
    if isinstance(item, dict):
        item[attr] = value
    else:
        setattr(item, attr, value)


def _check_index(index: int, size: int, name: str) -> None:
    if not 0 <= index < size:
        raise IndexError(f"{name} {index} out of range for collection of {size}")


def move(seq: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """Move the element at ``from_index`` to ``to_index``.

    Elements between the two positions shift by one. Moving an element onto
    its own index returns an equal copy.
    """
    items = list(seq)
    _check_index(from_index, len(items), "from_index")
    _check_index(to_index, len(items), "to_index")
    item = items.pop(from_index)
    items.insert(to_index, item)
    return items


def renumber(items: Iterable[T], attr: str = SORT_ATTR) -> list[T]:
    """Assign ``attr = position`` to every item, in display order."""
    result = list(items)
    for index, item in enumerate(result):
        _set(item, attr, index)
    return result


def normalize(items: Iterable[T], attr: str = SORT_ATTR) -> list[T]:
    """Sort by the current order value and renumber densely.

    The sort is stable, so items sharing a value keep their relative input
    order. Missing values sort last.
    """
    ordered = sorted(
        items,
        key=lambda item: (_get(item, attr) is None, _get(item, attr) or 0),
    )
    return renumber(ordered, attr)


def insert(seq: Sequence[T], item: T, index: int | None = None, attr: str = SORT_ATTR) -> list[T]:
    """Insert ``item`` (appending by default) and renumber."""
    items = list(seq)
    if index is None:
        index = len(items)
    if not 0 <= index <= len(items):
        raise IndexError(f"index {index} out of range for insert into collection of {len(items)}")
    items.insert(index, item)
    return renumber(items, attr)


def remove_at(seq: Sequence[T], index: int, attr: str = SORT_ATTR) -> list[T]:
    """Drop the item at ``index`` and renumber the remaining siblings."""
    items = list(seq)
    _check_index(index, len(items), "index")
    del items[index]
    return renumber(items, attr)


def is_dense(items: Iterable[Any], attr: str = SORT_ATTR) -> bool:
    """True when the order values are exactly ``0..n-1`` in list order."""
    values = [_get(item, attr) for item in items]
    return values == list(range(len(values)))


class OrderedCollection:
    """An in-memory orderable list with snapshot/restore support.

    Every mutation renumbers the collection. ``snapshot`` and ``restore`` let
    a caller undo a mutation whose persistence failed.
    """

    def __init__(self, items: Iterable[Any] = (), attr: str = SORT_ATTR, visibility_attr: str = "is_visible"):
        self.attr = attr
        self.visibility_attr = visibility_attr
        self.items: list[Any] = normalize(items, attr)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def move(self, from_index: int, to_index: int) -> list[Any]:
        self.items = renumber(move(self.items, from_index, to_index), self.attr)
        return self.items

    def add(self, item: Any, index: int | None = None) -> list[Any]:
        self.items = insert(self.items, item, index, self.attr)
        return self.items

    def remove(self, index: int) -> Any:
        removed = self.items[index] if 0 <= index < len(self.items) else None
        self.items = remove_at(self.items, index, self.attr)
        return removed

    def toggle_visibility(self, index: int) -> bool:
        _check_index(index, len(self.items), "index")
        item = self.items[index]
        visible = not bool(_get(item, self.visibility_attr, True))
        _set(item, self.visibility_attr, visible)
        return visible

    def snapshot(self) -> list[Any]:
        return copy.deepcopy(self.items)

    def restore(self, snapshot: list[Any]) -> None:
        self.items = copy.deepcopy(snapshot)
