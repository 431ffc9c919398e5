"""Votable base model.

Questions and answers both carry an author, a vote set and a revision
counter. The revision (``version``) backs optimistic compare-and-set saves:
a repository only accepts a write whose ``version`` matches the stored one.
"""

from typing import ClassVar
from uuid import UUID

from pydantic import Field

from quorum.domain.model.common import DomainModel
from quorum.domain.value import UserId, VotableType, VoteSet


class Votable(DomainModel):
    """Anything that can carry up/down votes."""

    votable_type: ClassVar[VotableType]

    id: UUID
    author_id: UserId
    votes: VoteSet = Field(default_factory=VoteSet)
    version: int = Field(default=0, ge=0)

    @property
    def vote_count(self) -> int:
        """Net score of this votable."""
        return self.votes.vote_count
