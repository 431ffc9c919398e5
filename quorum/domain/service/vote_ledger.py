"""Vote ledger: toggle transitions over a votable's vote set."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from quorum.domain.model import Votable
from quorum.domain.value import UserId, VoteSet, VoteType

from .base import Service

V = TypeVar("V", bound=Votable)


@dataclass(frozen=True)
class VoteOutcome(Generic[V]):
    """Result of applying a vote.

    Attributes:
        votable: The votable carrying its new vote set
        vote_count: Net score after the vote
        resulting_vote: The voter's vote after the transition (None if toggled off)
    """

    votable: V
    vote_count: int
    resulting_vote: VoteType | None


class VoteLedger(Service):
    """Applies votes with toggle semantics.

    Per voter and votable the state is one of no vote, upvoted or
    downvoted:

        up:   none -> up,   up -> none,   down -> up
        down: none -> down, down -> none, up -> down

    The ledger checks neither identity nor eligibility; callers exclude
    self-votes and under-reputation voters first.
    """

    def apply_vote(
        self, votable: V, voter_id: UserId, vote_type: VoteType
    ) -> VoteOutcome[V]:
        """Compute the votable's state after ``voter_id`` casts ``vote_type``.

        Args:
            votable: Current votable state
            voter_id: Voting user
            vote_type: Requested vote direction

        Returns:
            Vote outcome with the new votable (the input is not modified)
        """
        votes = votable.votes
        upvoters = set(votes.upvoters)
        downvoters = set(votes.downvoters)

        if vote_type == VoteType.UP:
            toggled_on = voter_id not in upvoters
            downvoters.discard(voter_id)
            if toggled_on:
                upvoters.add(voter_id)
            else:
                upvoters.discard(voter_id)
        else:
            toggled_on = voter_id not in downvoters
            upvoters.discard(voter_id)
            if toggled_on:
                downvoters.add(voter_id)
            else:
                downvoters.discard(voter_id)

        new_votes = VoteSet(
            upvoters=frozenset(upvoters), downvoters=frozenset(downvoters)
        )
        return VoteOutcome(
            votable=votable.model_copy(update={"votes": new_votes}),
            vote_count=new_votes.vote_count,
            resulting_vote=vote_type if toggled_on else None,
        )

    def vote_of(self, votable: Votable, user_id: UserId) -> VoteType | None:
        """Return the user's current vote on a votable, if any."""
        return votable.votes.vote_of(user_id)
