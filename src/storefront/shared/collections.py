"""Ordered item collections shared by the catalog and the basket.

``Collection`` only knows how to hold ``total`` and an ordered sequence of
records. How the sequence gets filled is a separate capability:

- ``Loadable`` replaces the whole content from an items source in one step.
- ``Modifiable`` appends and deletes single entries.

``LoadCollection`` and ``ModifiableCollection`` are the two combinations the
storefront uses.
"""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")
D = TypeVar("D")
D_co = TypeVar("D_co", covariant=True)


class IndexOutOfRange(IndexError):
    """Raised when a position outside ``[0, len(items))`` is addressed."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} is out of range for a collection of {size} items")
        self.index = index
        self.size = size


@dataclass(frozen=True)
class ItemsPage(Generic[D]):
    """Raw answer of an items source: reported count plus raw records."""

    total: int
    items: Sequence[D] = field(default_factory=tuple)


class ItemsSource(Protocol[D_co]):
    async def load_items_list(self) -> ItemsPage[D_co]: ...


class Collection(Generic[T]):
    """Ordered records plus the count reported by their source."""

    def __init__(self) -> None:
        self.total: int = 0
        self._items: list[T] = []

    @property
    def items(self) -> tuple[T, ...]:
        """Snapshot of the current records; only the owner mutates the list."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def _check_index(self, index: int) -> None:
        # Negative positions are not wrapped around
        if not 0 <= index < len(self._items):
            raise IndexOutOfRange(index, len(self._items))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} total={self.total} items={len(self._items)}>"


class Loadable(Generic[T, D]):
    """Capability: populate a collection from an items source.

    Every record is built with ``item_constructor`` before anything is
    assigned, so a failing source or a record that cannot be built leaves the
    previous content in place.
    """

    total: int
    _items: list[T]

    def __init__(self, item_constructor: Callable[[D], T], source: ItemsSource[D], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._item_constructor = item_constructor
        self._source = source

    async def load(self) -> None:
        page = await self._source.load_items_list()
        items = [self._item_constructor(raw) for raw in page.items]

        self.total, self._items = page.total, items

        logger.debug("Collection loaded", collection=type(self).__name__, total=page.total, count=len(items))


class Modifiable(Generic[T]):
    """Capability: append and delete single records."""

    _items: list[T]

    def add_item(self, item: T) -> None:
        self._items.append(item)

    def delete(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexOutOfRange(index, len(self._items))
        del self._items[index]


class LoadCollection(Loadable[T, D], Collection[T]):
    """Read-only collection filled by ``load()``."""


class ModifiableCollection(Modifiable[T], Collection[T]):
    """Collection changed one record at a time; never loaded."""
