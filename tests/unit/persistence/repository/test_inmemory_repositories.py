"""Unit tests for the in-memory repositories."""

from uuid import uuid4

import pytest

from quorum.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    VersionConflictError,
)
from quorum.domain.service import NotificationDispatcher
from quorum.domain.value import NotificationId, UserId, VoteSet
from quorum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
)
from tests.conftest import make_answer, make_question


class TestQuestionCompareAndSet:
    """Tests for InMemoryQuestionRepository.save."""

    @pytest.mark.asyncio
    async def test_save_bumps_version(self):
        repo = InMemoryQuestionRepository()
        question = await repo.add(make_question(author_id=UserId(uuid4())))

        saved = await repo.save(question)

        assert saved.version == question.version + 1
        assert (await repo.find_by_id(question.id)).version == saved.version

    @pytest.mark.asyncio
    async def test_stale_save_is_rejected(self):
        """A second writer holding the old revision must not overwrite."""
        # Arrange
        repo = InMemoryQuestionRepository()
        question = await repo.add(make_question(author_id=UserId(uuid4())))
        voter = UserId(uuid4())
        await repo.save(
            question.model_copy(update={"votes": VoteSet(upvoters=frozenset({voter}))})
        )

        # Act & Assert
        with pytest.raises(VersionConflictError):
            await repo.save(question)

        stored = await repo.find_by_id(question.id)
        assert stored.votes.vote_of(voter) is not None

    @pytest.mark.asyncio
    async def test_save_of_unknown_question_raises_not_found(self):
        repo = InMemoryQuestionRepository()

        with pytest.raises(NotFoundError):
            await repo.save(make_question(author_id=UserId(uuid4())))


class TestAnswerRepository:
    """Tests for InMemoryAnswerRepository."""

    @pytest.mark.asyncio
    async def test_find_by_question_and_author(self):
        repo = InMemoryAnswerRepository()
        question = make_question(author_id=UserId(uuid4()))
        author = UserId(uuid4())
        answer = await repo.add(make_answer(question.id, author))

        assert await repo.find_by_question_and_author(question.id, author) == answer
        stranger = UserId(uuid4())
        assert await repo.find_by_question_and_author(question.id, stranger) is None

    @pytest.mark.asyncio
    async def test_stale_save_is_rejected(self):
        repo = InMemoryAnswerRepository()
        answer = await repo.add(make_answer(uuid4(), UserId(uuid4())))
        await repo.save(answer)

        with pytest.raises(VersionConflictError):
            await repo.save(answer)

    @pytest.mark.asyncio
    async def test_second_answer_by_same_author_is_rejected(self):
        repo = InMemoryAnswerRepository()
        question = make_question(author_id=UserId(uuid4()))
        author = UserId(uuid4())
        await repo.add(make_answer(question.id, author))

        with pytest.raises(BusinessRuleViolationError, match="already answered"):
            await repo.add(make_answer(question.id, author))

    @pytest.mark.asyncio
    async def test_delete(self):
        repo = InMemoryAnswerRepository()
        answer = await repo.add(make_answer(uuid4(), UserId(uuid4())))

        assert await repo.delete(answer.id) is True
        assert await repo.find_by_id(answer.id) is None
        assert await repo.delete(answer.id) is False


class TestNotificationInbox:
    """Tests for the read and delete operations of the notification repository."""

    @pytest.mark.asyncio
    async def test_mark_read_is_scoped_to_recipient(self):
        # Arrange
        repo = InMemoryNotificationRepository()
        recipient = UserId(uuid4())
        event = await repo.enqueue(
            NotificationDispatcher().for_system(recipient, "Hi", "Hello")
        )

        # Act
        foreign = await repo.mark_read(UserId(uuid4()), event.id)
        read = await repo.mark_read(recipient, event.id)

        # Assert
        assert foreign is None
        assert read.is_read is True
        assert read.read_at is not None
        assert await repo.count_by_recipient(recipient, unread_only=True) == 0

    @pytest.mark.asyncio
    async def test_mark_unknown_notification_returns_none(self):
        repo = InMemoryNotificationRepository()

        assert await repo.mark_read(UserId(uuid4()), NotificationId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_mark_all_read_counts_only_unread(self):
        repo = InMemoryNotificationRepository()
        dispatcher = NotificationDispatcher()
        recipient = UserId(uuid4())
        first = await repo.enqueue(dispatcher.for_system(recipient, "One", "Body"))
        await repo.enqueue(dispatcher.for_system(recipient, "Two", "Body"))
        await repo.enqueue(dispatcher.for_system(UserId(uuid4()), "Other", "Body"))
        await repo.mark_read(recipient, first.id)

        changed = await repo.mark_all_read(recipient)

        assert changed == 1
        assert await repo.count_by_recipient(recipient) == 2
        assert await repo.count_by_recipient(recipient, unread_only=True) == 0

    @pytest.mark.asyncio
    async def test_find_unread_only(self):
        repo = InMemoryNotificationRepository()
        dispatcher = NotificationDispatcher()
        recipient = UserId(uuid4())
        read = await repo.enqueue(dispatcher.for_system(recipient, "Read", "Body"))
        await repo.enqueue(dispatcher.for_system(recipient, "Unread", "Body"))
        await repo.mark_read(recipient, read.id)

        found = await repo.find_by_recipient(recipient, unread_only=True)

        assert [e.title for e in found] == ["Unread"]

    @pytest.mark.asyncio
    async def test_delete_and_clear_all(self):
        # Arrange
        repo = InMemoryNotificationRepository()
        dispatcher = NotificationDispatcher()
        recipient = UserId(uuid4())
        other = UserId(uuid4())
        first = await repo.enqueue(dispatcher.for_system(recipient, "One", "Body"))
        await repo.enqueue(dispatcher.for_system(recipient, "Two", "Body"))
        kept = await repo.enqueue(dispatcher.for_system(other, "Other", "Body"))

        # Act & Assert
        assert await repo.delete(other, first.id) is False
        assert await repo.delete(recipient, first.id) is True
        assert await repo.clear_all(recipient) == 1
        assert await repo.count_by_recipient(recipient) == 0
        assert repo.events == [kept]
