"""
In-memory ordered container of dataclass beans.

Items are addressed by integer ids assigned in insertion order; ids are never
reused. Views observe the container through the items_changed signal, which
fires after every add, remove and committed edit.
"""

from typing import Any, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, Type, TypeVar
import logging

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BeanItem(Generic[T]):
    """One bean in a container, together with its id."""

    def __init__(self, container: "BeanItemContainer", item_id: int, bean: T):
        self._container = container
        self.item_id = item_id
        self.bean = bean

    def get_value(self, property_id: str) -> Any:
        return getattr(self.bean, property_id)

    def set_values(self, values: Mapping[str, Any]) -> None:
        """Write properties into the bean and notify the container."""
        for property_id, value in values.items():
            if not hasattr(self.bean, property_id):
                raise AttributeError(
                    f"{type(self.bean).__name__} has no property '{property_id}'"
                )
            setattr(self.bean, property_id, value)
        self._container.item_changed(self.item_id)

    def __repr__(self) -> str:
        return f"BeanItem({self.item_id}, {self.bean!r})"


class BeanItemContainer(QObject):
    """Ordered collection of beans of a single type."""

    items_changed = pyqtSignal()

    def __init__(self, bean_type: Type[T], beans: Iterable[T] = (), parent=None):
        super().__init__(parent)
        self.bean_type = bean_type
        self._items: Dict[int, BeanItem[T]] = {}
        self._next_id = 0
        for bean in beans:
            self.add_bean(bean)

    def add_bean(self, bean: T) -> int:
        """Add an existing bean. Returns its item id."""
        if not isinstance(bean, self.bean_type):
            raise TypeError(f"Expected {self.bean_type.__name__}, got {type(bean).__name__}")
        item_id = self._next_id
        self._next_id += 1
        self._items[item_id] = BeanItem(self, item_id, bean)
        logger.debug(f"Added item {item_id}: {bean!r}")
        self.items_changed.emit()
        return item_id

    def add_item(self) -> int:
        """Add a fresh bean built with the type's default constructor."""
        return self.add_bean(self.bean_type())

    def remove_item(self, item_id: int) -> bool:
        """Remove an item. Returns False if there was no such item."""
        item = self._items.pop(item_id, None)
        if item is None:
            return False
        logger.debug(f"Removed item {item_id}: {item.bean!r}")
        self.items_changed.emit()
        return True

    def remove_items(self, item_ids: Iterable[int]) -> int:
        """Remove several items, emitting one change notification. Returns how many were removed."""
        removed = 0
        was_blocked = self.blockSignals(True)
        try:
            for item_id in list(item_ids):
                if self.remove_item(item_id):
                    removed += 1
        finally:
            self.blockSignals(was_blocked)
        if removed:
            self.items_changed.emit()
        return removed

    def get_item(self, item_id: int) -> Optional[BeanItem[T]]:
        return self._items.get(item_id)

    def item_ids(self) -> List[int]:
        return list(self._items)

    def beans(self) -> List[T]:
        return [item.bean for item in self._items.values()]

    def size(self) -> int:
        return len(self._items)

    def item_changed(self, item_id: int) -> None:
        logger.debug(f"Item {item_id} changed")
        self.items_changed.emit()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[BeanItem[T]]:
        return iter(list(self._items.values()))
