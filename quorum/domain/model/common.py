"""Shared base for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic entity.

    State never changes in place: transitions return
    ``model_copy(update=...)`` and repositories persist the copy, which is
    what makes the load-compute-save retry loop safe to re-run.
    """

    model_config = ConfigDict(frozen=True)
