# itemboard/api/items.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from itemboard.db.store import ItemStore
from itemboard.exceptions import StoreError
from itemboard.models.items import ErrorOut, ItemCreate, ItemOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/data", tags=["items"])

GENERIC_ERROR = {"error": "Internal Server Error"}
ERROR_RESPONSES = {500: {"model": ErrorOut}}


def get_store(request: Request) -> ItemStore:
    return request.app.state.store


def _server_error() -> JSONResponse:
    return JSONResponse(status_code=500, content=GENERIC_ERROR)


@router.get("", response_model=List[ItemOut], responses=ERROR_RESPONSES)
def list_items(store: ItemStore = Depends(get_store)):
    """
    Return every stored item.
    """
    try:
        return store.list_items()
    except StoreError:
        logger.exception("Error fetching data")
        return _server_error()


@router.post("", response_model=ItemOut, responses=ERROR_RESPONSES)
def create_item(payload: ItemCreate, store: ItemStore = Depends(get_store)):
    """
    Store a new item and return it with its assigned id.
    """
    try:
        return store.create_item(payload.name)
    except StoreError:
        logger.exception("Error inserting data")
        return _server_error()
