# itemboard/client/http.py

import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter

from itemboard.exceptions import NetworkError
from itemboard.models.items import ItemOut

logger = logging.getLogger(__name__)

ITEMS_PATH = "/api/data"

_item_list = TypeAdapter(List[ItemOut])


class ItemsClient:
    """
    Blocking client for the item endpoint. Every transport failure, non-2xx
    answer or malformed body comes back as ``NetworkError``.
    """

    def __init__(self, base_url: str = "", http: Optional[httpx.Client] = None):
        self.http = http or httpx.Client(base_url=base_url)

    def list_items(self) -> List[ItemOut]:
        try:
            response = self.http.get(ITEMS_PATH)
            response.raise_for_status()
            return _item_list.validate_python(response.json())
        except (httpx.HTTPError, ValueError) as e:
            raise NetworkError("Could not fetch items", cause=e) from e

    def append_item(self, name: str) -> ItemOut:
        try:
            response = self.http.post(ITEMS_PATH, json={"name": name})
            response.raise_for_status()
            return ItemOut.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            raise NetworkError("Could not add item", cause=e) from e

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ItemsClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
