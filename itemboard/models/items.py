# itemboard/models/items.py

from pydantic import BaseModel, ConfigDict, StrictStr


class ItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ItemCreate(BaseModel):
    # any string is accepted, including "" and names already in use
    name: StrictStr


class ErrorOut(BaseModel):
    error: str
