"""PostgreSQL implementation of Answer repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    VersionConflictError,
)
from quorum.domain.model import Answer
from quorum.domain.repository import AnswerRepository
from quorum.domain.value import AnswerId, QuestionId, UserId
from quorum.persistence.mappers import answer_to_dict, row_to_answer
from quorum.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find the answer a user wrote for a question."""
        stmt = select(answers_table).where(
            and_(
                answers_table.c.question_id == question_id,
                answers_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def add(self, answer: Answer) -> Answer:
        """Insert a new answer.

        The insert runs in a SAVEPOINT so that losing the race on
        ``uq_answer_per_author`` leaves the request transaction usable.

        Raises:
            BusinessRuleViolationError: If the author already answered the
                question
        """
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if "uq_answer_per_author" not in str(e.orig):
                raise
            raise BusinessRuleViolationError(
                "You have already answered this question"
            ) from e
        return answer

    async def save(self, answer: Answer) -> Answer:
        """Compare-and-set update keyed on the version column."""
        values = answer_to_dict(answer)
        values["version"] = answer.version + 1
        stmt = (
            update(answers_table)
            .where(
                and_(
                    answers_table.c.id == answer.id,
                    answers_table.c.version == answer.version,
                )
            )
            .values(**values)
            .returning(*answers_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            exists = await self.session.scalar(
                select(answers_table.c.id).where(answers_table.c.id == answer.id)
            )
            if exists is None:
                raise NotFoundError("Answer", str(answer.id))
            raise VersionConflictError("Answer", str(answer.id), answer.version)

        await self.session.flush()
        return row_to_answer(row._asdict())

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        stmt = (
            delete(answers_table)
            .where(answers_table.c.id == answer_id)
            .returning(answers_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted
