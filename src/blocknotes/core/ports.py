from typing import Protocol

from .model import BlockId


class IdGenerator(Protocol):
    """
    Source of block ids. Every call must return an id not handed out before
    in this process.
    """

    def new_id(self) -> BlockId:
        pass
