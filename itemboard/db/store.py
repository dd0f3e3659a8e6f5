# itemboard/db/store.py
"""
Persistence for the item collection.

``ItemStore`` owns one SQLAlchemy engine for the lifetime of the service.
Connections are checked out per call and returned when the ``with`` block
exits. Any SQLAlchemy failure, or a name the driver cannot encode, is
re-raised as ``StoreError`` so the HTTP layer only has one thing to catch.
"""

import logging
from typing import List

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from itemboard.db.engine import get_engine
from itemboard.db.schema import items, metadata
from itemboard.exceptions import StoreError
from itemboard.models.items import ItemOut

logger = logging.getLogger(__name__)


class ItemStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "ItemStore":
        return cls(get_engine(url, echo=echo))

    def init_schema(self, reset: bool = False) -> None:
        """
        Create the items table if it is missing. With ``reset`` the table is
        dropped first.
        """
        try:
            if reset:
                metadata.drop_all(self.engine)
            metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StoreError("Could not create schema", cause=e) from e

    def list_items(self) -> List[ItemOut]:
        """
        Return every stored item, oldest first.
        """
        stmt = select(items.c.id, items.c.name).order_by(items.c.id)

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except (SQLAlchemyError, UnicodeError) as e:
            raise StoreError("Could not fetch items", cause=e) from e

        return [ItemOut(id=row["id"], name=row["name"]) for row in rows]

    def create_item(self, name: str) -> ItemOut:
        """
        Insert one item and return it with the id the database assigned.
        The name is stored as given; empty strings and duplicates are fine.
        """
        stmt = insert(items).values(name=name)

        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
                item_id = result.inserted_primary_key[0]
        except (SQLAlchemyError, UnicodeError) as e:
            raise StoreError("Could not insert item", cause=e) from e

        logger.info("Created item %s", item_id)
        return ItemOut(id=item_id, name=name)

    def dispose(self) -> None:
        self.engine.dispose()
