# itemboard/client/view.py
"""
State behind the item page: the list being shown and the text typed into
the input box.

The list is only changed with data the service has confirmed. A failed
call is logged and leaves the view as it was.
"""

import logging
from typing import List, Optional, Tuple

from itemboard.client.http import ItemsClient
from itemboard.exceptions import NetworkError
from itemboard.models.items import ItemOut

logger = logging.getLogger(__name__)


class ItemsView:
    def __init__(self, client: ItemsClient):
        self.client = client
        self._items: List[ItemOut] = []
        self.pending = ""

    @property
    def items(self) -> Tuple[ItemOut, ...]:
        return tuple(self._items)

    def load(self) -> None:
        """
        Replace the local list with what the service holds.
        """
        try:
            fetched = self.client.list_items()
        except NetworkError:
            logger.exception("Error fetching items")
            return
        self._items = list(fetched)

    def set_pending(self, text: str) -> None:
        self.pending = text

    def add(self) -> Optional[ItemOut]:
        """
        Send the pending text to the service. On success the created item
        (with the id the service gave it) goes to the end of the list and
        the input is cleared. Returns the created item, or None on failure.
        """
        try:
            created = self.client.append_item(self.pending)
        except NetworkError:
            logger.exception("Error adding item")
            return None

        self._items.append(created)
        self.pending = ""
        return created
