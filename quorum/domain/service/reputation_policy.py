"""Reputation gates for community actions."""

from quorum.config import ReputationSettings
from quorum.domain.model import User

from .base import Service


class ReputationPolicy(Service):
    """Decides whether a user's reputation allows a gated action.

    Pure: reads only the thresholds and the user's reputation.
    """

    def __init__(self, settings: ReputationSettings | None = None) -> None:
        """Initialize reputation policy.

        Args:
            settings: Thresholds (defaults to 15 / 50 / 2000)
        """
        self.settings = settings or ReputationSettings()

    def can_vote(self, user: User) -> bool:
        return user.reputation >= self.settings.vote_threshold

    def can_comment(self, user: User) -> bool:
        return user.reputation >= self.settings.comment_threshold

    def can_edit_others(self, user: User) -> bool:
        return user.reputation >= self.settings.edit_others_threshold
