"""
List screen over a bean container.

Each row shows one item and carries a check box marking it for bulk actions.
Activating a row (double click or Enter) fires CHOOSE_ITEM_ACTION with the
item id as target.
"""

from dataclasses import fields, is_dataclass
from typing import Any, Callable, List, Optional
import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QListWidget, QListWidgetItem

from touchee.data import BeanItemContainer
from touchee.protocols import Action, ActionResult
from .action_view import ActionView

logger = logging.getLogger(__name__)

ITEM_ID_ROLE = Qt.ItemDataRole.UserRole


def default_item_caption(bean: Any) -> str:
    """Caption of a bean: its first dataclass field, or str() otherwise."""
    if is_dataclass(bean):
        bean_fields = fields(bean)
        if bean_fields:
            return str(getattr(bean, bean_fields[0].name))
    return str(bean)


class ListView(ActionView):
    """Screen listing the items of a BeanItemContainer."""

    CHOOSE_ITEM_ACTION = Action("Choose")

    def __init__(self, caption: str = "", item_caption: Optional[Callable[[Any], str]] = None, parent=None):
        super().__init__(caption, parent=parent)
        self._container: Optional[BeanItemContainer] = None
        self._item_caption = item_caption or default_item_caption

        self._list = QListWidget(self)
        self._list.itemActivated.connect(self._on_item_activated)
        self.content_layout.addWidget(self._list)

    @property
    def list_widget(self) -> QListWidget:
        return self._list

    # ========== DATA SOURCE ==========

    def set_container_data_source(self, container: Optional[BeanItemContainer]) -> None:
        if self._container is not None:
            self._container.items_changed.disconnect(self.refresh)
        self._container = container
        if container is not None:
            container.items_changed.connect(self.refresh)
        self.refresh()

    def get_container_data_source(self) -> Optional[BeanItemContainer]:
        return self._container

    def refresh(self) -> None:
        """Rebuild rows from the container, keeping marks on surviving items."""
        marked = set(self.marked_items())
        self._list.clear()
        if self._container is None:
            return
        for item in self._container:
            row = QListWidgetItem(self._item_caption(item.bean))
            row.setData(ITEM_ID_ROLE, item.item_id)
            row.setFlags(row.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            row.setCheckState(Qt.CheckState.Checked if item.item_id in marked else Qt.CheckState.Unchecked)
            self._list.addItem(row)

    def _row_for(self, item_id: int) -> Optional[QListWidgetItem]:
        for index in range(self._list.count()):
            row = self._list.item(index)
            if row.data(ITEM_ID_ROLE) == item_id:
                return row
        return None

    def item_ids(self) -> List[int]:
        return [self._list.item(index).data(ITEM_ID_ROLE) for index in range(self._list.count())]

    # ========== MARKING ==========

    def marked_items(self) -> List[int]:
        """Ids of the items currently marked, in list order."""
        return [
            self._list.item(index).data(ITEM_ID_ROLE)
            for index in range(self._list.count())
            if self._list.item(index).checkState() == Qt.CheckState.Checked
        ]

    def set_marked(self, item_id: int, marked: bool = True) -> None:
        row = self._row_for(item_id)
        if row is None:
            raise KeyError(f"No item {item_id} in {self.caption()!r}")
        row.setCheckState(Qt.CheckState.Checked if marked else Qt.CheckState.Unchecked)

    # ========== CHOOSING ==========

    def choose_item(self, item_id: int) -> ActionResult:
        """Fire CHOOSE_ITEM_ACTION for item_id."""
        logger.debug(f"Item {item_id} chosen in {self.caption()!r}")
        return self.fire_action(self.CHOOSE_ITEM_ACTION, item_id)

    def _on_item_activated(self, row: QListWidgetItem) -> None:
        self.choose_item(row.data(ITEM_ID_ROLE))
