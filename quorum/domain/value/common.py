"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable, multi-field value compared by its contents (e.g. VoteSet).

    Being frozen, instances are hashable and safe to share between the
    before/after states produced by a transition.
    """

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around a single validated primitive (e.g. Username).

    ``model_dump()`` yields the bare primitive and ``str()`` the wrapped
    value, so instances drop straight into notification text and SQL
    parameters via ``.root``.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
