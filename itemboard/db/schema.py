# itemboard/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, String

metadata = MetaData()

items = Table(
    "items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
)
