"""Domain layer errors.

Every error here is an expected, caller-recoverable condition. The
interface layer maps them to HTTP status codes.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class SelfVoteForbiddenError(DomainError):
    """Raised when a user votes on their own question or answer."""

    def __init__(self, votable_type: str, votable_id: str):
        super().__init__(f"Cannot vote on your own {votable_type} {votable_id}")


class InsufficientReputationError(DomainError):
    """Raised when a user's reputation is below an action's threshold."""

    def __init__(self, action: str, required: int, actual: int):
        self.action = action
        self.required = required
        self.actual = actual
        super().__init__(
            f"You need at least {required} reputation to {action} (you have {actual})"
        )


class MismatchedQuestionError(DomainError):
    """Raised when an answer is accepted on a question it does not belong to."""

    def __init__(self, answer_id: str, question_id: str):
        super().__init__(
            f"Answer {answer_id} does not belong to question {question_id}"
        )


class QuestionClosedError(DomainError):
    """Raised when acting on a question that is not open."""

    def __init__(self, question_id: str, status: str):
        self.status = status
        super().__init__(f"Question {question_id} is {status}")


class VersionConflictError(DomainError):
    """Raised when a compare-and-set save finds a newer stored revision."""

    def __init__(self, resource: str, identifier: str, expected_version: int):
        self.resource = resource
        self.identifier = identifier
        self.expected_version = expected_version
        super().__init__(
            f"{resource} {identifier} was modified concurrently "
            f"(expected version {expected_version})"
        )


class TransientFailureError(DomainError):
    """Raised when an operation keeps colliding with concurrent writers."""

    def __init__(self, operation: str, attempts: int):
        self.operation = operation
        self.attempts = attempts
        super().__init__(
            f"{operation} failed after {attempts} attempts due to concurrent "
            "modification, please retry"
        )


class NotificationDeliveryFailedError(DomainError):
    """Raised by a notification sink that could not accept an event.

    Never propagated to callers of vote or acceptance operations.
    """

    def __init__(self, notification_id: str, reason: str):
        self.notification_id = notification_id
        super().__init__(f"Failed to deliver notification {notification_id}: {reason}")
