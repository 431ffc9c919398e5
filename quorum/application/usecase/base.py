"""Use case contract shared by the application layer."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """A single application action.

    Takes a validated pydantic request carrying string identifiers,
    converts them to domain types, delegates to one domain service and
    returns a pydantic response. Domain errors propagate unchanged; the
    interface layer maps them to HTTP statuses.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the use case."""
        ...
