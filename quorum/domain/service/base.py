"""Domain service marker."""


class Service:
    """Common base for domain services.

    Pure services (ReputationPolicy, VoteLedger, AcceptanceArbiter,
    NotificationDispatcher) hold no state beyond configuration. Orchestrating
    services (InteractionService, AnswerService, NotificationService) receive
    their repositories through the constructor and are built per request.
    """
