"""Domain services."""

from .acceptance_arbiter import AcceptanceArbiter, AcceptanceOutcome
from .answer_service import AnswerService
from .base import Service
from .interaction_service import InteractionService
from .notification_dispatcher import NotificationDispatcher
from .notification_service import NotificationService
from .reputation_policy import ReputationPolicy
from .vote_ledger import VoteLedger, VoteOutcome

__all__ = [
    "AcceptanceArbiter",
    "AcceptanceOutcome",
    "AnswerService",
    "InteractionService",
    "NotificationDispatcher",
    "NotificationService",
    "ReputationPolicy",
    "Service",
    "VoteLedger",
    "VoteOutcome",
]
