# itemboard/exceptions.py

from typing import Optional


class ItemBoardError(Exception):
    """Base exception for the item board"""
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(self.message)


class StoreError(ItemBoardError):
    """The relational store could not be reached or the statement failed"""
    pass


class NetworkError(ItemBoardError):
    """An HTTP call from the client to the item service failed"""
    pass
