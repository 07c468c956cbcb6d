"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One request in, one response out; services do the store work."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
