"""PostgreSQL implementation of Question repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.error import NotFoundError, VersionConflictError
from quorum.domain.model import Question
from quorum.domain.repository import QuestionRepository
from quorum.domain.value import QuestionId
from quorum.persistence.mappers import question_to_dict, row_to_question
from quorum.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def add(self, question: Question) -> Question:
        """Insert a new question."""
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def save(self, question: Question) -> Question:
        """Compare-and-set update keyed on the version column.

        The UPDATE only matches while the stored version equals the one the
        question was loaded at, so two writers can never both succeed.
        """
        values = question_to_dict(question)
        values["version"] = question.version + 1
        stmt = (
            update(questions_table)
            .where(
                and_(
                    questions_table.c.id == question.id,
                    questions_table.c.version == question.version,
                )
            )
            .values(**values)
            .returning(*questions_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            exists = await self.session.scalar(
                select(questions_table.c.id).where(questions_table.c.id == question.id)
            )
            if exists is None:
                raise NotFoundError("Question", str(question.id))
            raise VersionConflictError("Question", str(question.id), question.version)

        await self.session.flush()
        return row_to_question(row._asdict())
