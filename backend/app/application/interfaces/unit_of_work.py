"""Abstract transaction boundary (port)."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Runs a block of repository calls atomically.

    Leaving ``transaction()`` normally commits; any exception rolls back every
    write made inside the block and is re-raised.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        ...
