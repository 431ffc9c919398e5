"""SQLAlchemy table definitions for Quorum.

Questions and answers embed their vote sets as UUID arrays and carry a
``version`` column used for compare-and-set updates.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _id() -> Column:
    return Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    )


def _created_at() -> Column:
    return Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )


def _vote_columns() -> list[Column]:
    # Vote sets embedded as arrays, plus the compare-and-set revision
    return [
        Column("upvoters", ARRAY(UUID), nullable=False, server_default="{}"),
        Column("downvoters", ARRAY(UUID), nullable=False, server_default="{}"),
        Column("version", Integer, nullable=False, server_default="0"),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    _id(),
    Column("username", String(30), nullable=False, unique=True),
    Column("reputation", Integer, nullable=False, server_default="0"),
    _created_at(),
    CheckConstraint("reputation >= 0", name="reputation_non_negative"),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    _id(),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "status",
        Enum(
            "open",
            "closed",
            "duplicate",
            "on-hold",
            name="question_status",
        ),
        nullable=False,
        server_default="open",
    ),
    # No FK: answers reference questions, so this would be circular
    Column("accepted_answer_id", UUID, nullable=True),
    *_vote_columns(),
    _created_at(),
    CheckConstraint("NOT (upvoters && downvoters)", name="question_votes_disjoint"),
)

Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    _id(),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    *_vote_columns(),
    _created_at(),
    CheckConstraint("NOT (upvoters && downvoters)", name="answer_votes_disjoint"),
    UniqueConstraint("question_id", "author_id", name="uq_answer_per_author"),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    _id(),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "sender_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "kind",
        Enum(
            "answer",
            "vote",
            "accept",
            "system",
            name="notification_kind",
        ),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("message", Text, nullable=False),
    Column("question_id", UUID, nullable=True),
    Column("answer_id", UUID, nullable=True),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    _created_at(),
)

Index(
    "idx_notifications_recipient_created_at",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)

Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    notifications_table.c.is_read,
)
