"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from quorum.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    QuestionClosedError,
)
from quorum.domain.model import Answer
from quorum.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.domain.service import (
    AnswerService,
    NotificationDispatcher,
    NotificationService,
)
from quorum.domain.value import (
    AnswerId,
    NotificationKind,
    QuestionId,
    QuestionStatus,
    UserId,
)
from quorum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

CONTENT = "Use a two-pointer walk and swap next pointers in place."


class UnsyncedAnswerRepository(InMemoryAnswerRepository):
    """Existence checks never see answers written by a concurrent request."""

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Answer | None:
        return None


class TestSubmitAnswer:
    """Tests for submit_answer."""

    @pytest.mark.asyncio
    async def test_submit_answer_creates_answer_and_notifies_asker(self, unit_env):
        # Arrange
        service = await unit_env.get(AnswerService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        asker = await user_repo.save(make_user(username="asker"))
        answerer = await user_repo.save(make_user(username="answerer"))
        question = await question_repo.add(make_question(author_id=asker.id))

        # Act
        answer = await service.submit_answer(answerer.id, question.id, CONTENT)

        # Assert
        assert answer.question_id == question.id
        assert answer.author_id == answerer.id
        assert answer.vote_count == 0
        assert await answer_repo.find_by_id(answer.id) == answer

        assert len(notification_repo.events) == 1
        event = notification_repo.events[0]
        assert event.kind == NotificationKind.ANSWER
        assert event.recipient_id == asker.id
        assert event.answer_id == answer.id

    @pytest.mark.asyncio
    async def test_answering_own_question_sends_no_notification(self, unit_env):
        service = await unit_env.get(AnswerService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        asker = await user_repo.save(make_user(username="asker"))
        question = await question_repo.add(make_question(author_id=asker.id))

        await service.submit_answer(asker.id, question.id, CONTENT)

        assert notification_repo.events == []

    @pytest.mark.asyncio
    async def test_second_answer_by_same_author_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(AnswerService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        answerer = await user_repo.save(make_user(username="answerer"))
        question = await question_repo.add(make_question(author_id=UserId(uuid4())))
        await service.submit_answer(answerer.id, question.id, CONTENT)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already answered"):
            await service.submit_answer(answerer.id, question.id, CONTENT)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status",
        [QuestionStatus.CLOSED, QuestionStatus.DUPLICATE, QuestionStatus.ON_HOLD],
    )
    async def test_non_open_question_rejects_answers(self, unit_env, status):
        service = await unit_env.get(AnswerService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        answerer = await user_repo.save(make_user(username="answerer"))
        question = await question_repo.add(
            make_question(author_id=UserId(uuid4()), status=status)
        )

        with pytest.raises(QuestionClosedError, match=status.value):
            await service.submit_answer(answerer.id, question.id, CONTENT)

    @pytest.mark.asyncio
    async def test_unknown_question_raises_not_found(self, unit_env):
        service = await unit_env.get(AnswerService)
        user_repo = await unit_env.get(UserRepository)
        answerer = await user_repo.save(make_user(username="answerer"))

        with pytest.raises(NotFoundError, match="Question not found"):
            await service.submit_answer(answerer.id, uuid4(), CONTENT)

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(self, unit_env):
        service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.add(make_question(author_id=UserId(uuid4())))

        with pytest.raises(NotFoundError, match="User not found"):
            await service.submit_answer(UserId(uuid4()), question.id, CONTENT)

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_is_rejected_by_the_store(self):
        """Two submissions that both pass the existence check create one answer."""
        # Arrange
        users = InMemoryUserRepository()
        questions = InMemoryQuestionRepository()
        notifications = InMemoryNotificationRepository()
        service = AnswerService(
            answer_repository=UnsyncedAnswerRepository(),
            question_repository=questions,
            user_repository=users,
            notification_dispatcher=NotificationDispatcher(),
            notification_service=NotificationService(notifications),
        )
        asker = await users.save(make_user(username="asker"))
        answerer = await users.save(make_user(username="answerer"))
        question = await questions.add(make_question(author_id=asker.id))
        await service.submit_answer(answerer.id, question.id, CONTENT)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already answered"):
            await service.submit_answer(answerer.id, question.id, CONTENT)

        assert len(notifications.events) == 1


class TestDeleteAnswer:
    """Tests for delete_answer."""

    @pytest.mark.asyncio
    async def test_author_deletes_answer(self, unit_env):
        service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        author = UserId(uuid4())
        answer = await answer_repo.add(make_answer(QuestionId(uuid4()), author))

        deleted = await service.delete_answer(author, answer.id)

        assert deleted == answer
        assert await answer_repo.find_by_id(answer.id) is None

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.add(
            make_answer(QuestionId(uuid4()), UserId(uuid4()))
        )

        with pytest.raises(NotAuthorizedError):
            await service.delete_answer(UserId(uuid4()), answer.id)

        assert await answer_repo.find_by_id(answer.id) == answer

    @pytest.mark.asyncio
    async def test_unknown_answer_raises_not_found(self, unit_env):
        service = await unit_env.get(AnswerService)

        with pytest.raises(NotFoundError):
            await service.delete_answer(UserId(uuid4()), AnswerId(uuid4()))
