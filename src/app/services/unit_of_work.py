"""Unit of Work Interface

Groups repository writes into one transaction.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
