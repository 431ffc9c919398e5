"""Unit tests for SubmitAnswerUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from quorum.application.usecase.answer import SubmitAnswerRequest, SubmitAnswerUseCase
from quorum.domain.repository import QuestionRepository, UserRepository
from quorum.domain.value import UserId
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitAnswerUseCase:
    """Tests for the submit answer use case."""

    @pytest.mark.asyncio
    async def test_submit_answer_returns_created_answer(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SubmitAnswerUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        answerer = await user_repo.save(make_user(username="answerer"))
        question = await question_repo.add(make_question(author_id=UserId(uuid4())))
        content = "Recursion works too, but iteration avoids stack depth limits."

        # Act
        response = await use_case.execute(
            SubmitAnswerRequest(
                question_id=str(question.id),
                author_id=str(answerer.id),
                content=content,
            )
        )

        # Assert
        assert response.question_id == str(question.id)
        assert response.content == content
        assert response.vote_count == 0

    def test_short_content_is_rejected(self):
        """Answers shorter than 20 characters never reach the service."""
        with pytest.raises(ValidationError):
            SubmitAnswerRequest(
                question_id=str(uuid4()),
                author_id=str(uuid4()),
                content="Too short",
            )
