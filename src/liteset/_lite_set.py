from __future__ import annotations

__all__ = [
    "LiteSet",
    "create_lite_set",
    "add_to_lite_set",
    "remove_from_lite_set",
    "index_in_lite_set",
]

from copy import deepcopy
from typing import Iterator, Optional, Sequence, TypeVar, overload

from returns.maybe import Maybe

from ._exceptions import UnannotatableMemberError
from ._set_ids import SetIdAllocator, default_set_ids

Element = TypeVar("Element")


class LiteSet(Sequence[Element]):
    """A set of objects stored in a single list.

    Each member remembers its own slot: the set writes the member's index into the member's
    instance dictionary under a key containing the set's allocator namespace and id, e.g.
    `__lite_set_index_0_3: 1` for the member at position 1 of set 3 from allocator 0. This gives
    constant time membership, add, and remove without a hash table. Removal swaps the last member
    into the hole, so insertion order only holds until the first removal.

    Members must have an instance `__dict__`. One object can be a member of any number of
    lite sets at once.
    """

    def __init__(self, *items: Element, set_ids: SetIdAllocator = default_set_ids):
        self._set_ids = set_ids
        self._set_id = set_ids.allocate()
        self._key = f"__lite_set_index_{set_ids.namespace}_{self._set_id}"
        self._items: list[Element] = []
        for item in items:
            self.add(item)

    @property
    def set_id(self) -> int:
        return self._set_id

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> Element: ...

    @overload
    def __getitem__(self, index: slice) -> list[Element]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Element]:
        return reversed(self._items)

    def __contains__(self, x: object) -> bool:
        return self.index_of(x) is not None

    def __repr__(self) -> str:
        return f"LiteSet({', '.join(repr(item) for item in self._items)})"

    def __copy__(self) -> LiteSet[Element]:
        # Copies get a fresh id and annotate the members under their own key
        return LiteSet(*self._items, set_ids=self._set_ids)

    def __deepcopy__(self, memo) -> LiteSet[Element]:
        return LiteSet(*(deepcopy(item, memo) for item in self._items), set_ids=self._set_ids)

    def index_of(self, item: object) -> Optional[int]:
        """Slot of `item` in this set, or None if it is not a member."""
        try:
            index = vars(item).get(self._key)
        except TypeError:
            # No instance dictionary, so it can never have been added
            return None

        # A copied object carries its original's annotation but does not own the slot
        if index is not None and index < len(self._items) and self._items[index] is item:
            return index
        else:
            return None

    def find(self, item: object) -> Maybe[int]:
        return Maybe.from_optional(self.index_of(item))

    def index(self, value: object, start: int = 0, stop: Optional[int] = None) -> int:
        index = self.index_of(value)
        if index is None or index not in range(len(self._items))[start:stop]:
            raise ValueError(f"{value!r} is not in {type(self).__name__} {self._set_id}")
        return index

    def count(self, value: object) -> int:
        return 1 if value in self else 0

    def add(self, item: Element, /) -> None:
        """Append `item` if it is not already a member."""
        if self.index_of(item) is not None:
            return

        try:
            vars(item)[self._key] = len(self._items)
        except TypeError:
            raise UnannotatableMemberError(item) from None

        self._items.append(item)

    def remove(self, item: Element, /) -> None:
        """Remove `item` by moving the last member into its slot. No-op if not a member."""
        index = self.index_of(item)
        if index is None:
            return

        del vars(item)[self._key]

        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            vars(last)[self._key] = index

    discard = remove

    def clear(self) -> None:
        for item in self._items:
            del vars(item)[self._key]
        self._items.clear()


def create_lite_set(set_ids: SetIdAllocator = default_set_ids) -> LiteSet[Element]:
    return LiteSet(set_ids=set_ids)


def add_to_lite_set(lite_set: LiteSet[Element], item: Element) -> None:
    lite_set.add(item)


def remove_from_lite_set(lite_set: LiteSet[Element], item: Element) -> None:
    lite_set.remove(item)


def index_in_lite_set(lite_set: LiteSet[Element], item: object) -> Optional[int]:
    return lite_set.index_of(item)
