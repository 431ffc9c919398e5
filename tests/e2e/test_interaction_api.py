"""End-to-end tests for the vote, answer and notification endpoints."""

from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from quorum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.domain.value import QuestionStatus, UserId
from quorum.interface.api.app import create_app
from tests.conftest import make_answer, make_question, make_user
from tests.di import build_test_container

ANSWER_TEXT = "Keep three pointers: previous, current and next."


@pytest_asyncio.fixture
async def container():
    """Test container with in-memory persistence, shared by app and test."""
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """Create async test client bound to the test container."""
    app_instance = create_app(container)
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded(container):
    """An asker, an answerer and a voter with one question and one answer."""
    users = await container.get(UserRepository)
    questions = await container.get(QuestionRepository)
    answers = await container.get(AnswerRepository)

    asker = await users.save(make_user(username="asker"))
    answerer = await users.save(make_user(username="answerer"))
    voter = await users.save(make_user(username="voter", reputation=20))
    newcomer = await users.save(make_user(username="newcomer", reputation=14))
    question = await questions.add(make_question(author_id=asker.id))
    answer = await answers.add(make_answer(question.id, answerer.id))

    return {
        "asker": asker,
        "answerer": answerer,
        "voter": voter,
        "newcomer": newcomer,
        "question": question,
        "answer": answer,
    }


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestVoteEndpoints:
    """End-to-end tests for vote endpoints.

    Business rules are covered in depth by the InteractionService unit tests.
    """

    @pytest.mark.asyncio
    async def test_upvote_toggle_and_notification(self, client, seeded):
        # Arrange
        answer_id = seeded["answer"].id
        body = {"actor_id": str(seeded["voter"].id), "vote_type": "up"}

        # Act
        first = await client.post(f"/answers/{answer_id}/vote", json=body)
        second = await client.post(f"/answers/{answer_id}/vote", json=body)

        # Assert
        assert first.status_code == 200
        assert first.json()["vote_count"] == 1
        assert first.json()["resulting_vote"] == "up"
        assert second.status_code == 200
        assert second.json()["vote_count"] == 0
        assert second.json()["resulting_vote"] is None

        notifications = await client.get(
            f"/users/{seeded['answerer'].id}/notifications"
        )
        assert notifications.status_code == 200
        items = notifications.json()["notifications"]
        assert len(items) == 1
        assert items[0]["kind"] == "vote"
        assert items[0]["title"] == "Your answer was upvoted"

    @pytest.mark.asyncio
    async def test_get_vote(self, client, seeded):
        question_id = seeded["question"].id
        actor_id = str(seeded["voter"].id)
        await client.post(
            f"/questions/{question_id}/vote",
            json={"actor_id": actor_id, "vote_type": "down"},
        )

        response = await client.get(
            f"/questions/{question_id}/vote", params={"actor_id": actor_id}
        )

        assert response.status_code == 200
        assert response.json() == {"vote_type": "down"}

    @pytest.mark.asyncio
    async def test_self_vote_returns_400(self, client, seeded):
        response = await client.post(
            f"/questions/{seeded['question'].id}/vote",
            json={"actor_id": str(seeded["asker"].id), "vote_type": "up"},
        )

        assert response.status_code == 400
        assert "own" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_insufficient_reputation_returns_403(self, client, seeded):
        response = await client.post(
            f"/questions/{seeded['question'].id}/vote",
            json={"actor_id": str(seeded["newcomer"].id), "vote_type": "up"},
        )

        assert response.status_code == 403
        assert "15 reputation" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_votable_returns_404(self, client, seeded):
        response = await client.post(
            f"/answers/{uuid4()}/vote",
            json={"actor_id": str(seeded["voter"].id), "vote_type": "up"},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id_returns_400(self, client, seeded):
        response = await client.post(
            "/questions/not-a-uuid/vote",
            json={"actor_id": str(seeded["voter"].id), "vote_type": "up"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_invalid_vote_type_returns_422(self, client, seeded):
        response = await client.post(
            f"/questions/{seeded['question'].id}/vote",
            json={"actor_id": str(seeded["voter"].id), "vote_type": "sideways"},
        )

        assert response.status_code == 422


class TestAnswerEndpoints:
    """End-to-end tests for answer submission and acceptance."""

    @pytest.mark.asyncio
    async def test_submit_answer(self, client, seeded):
        response = await client.post(
            f"/questions/{seeded['question'].id}/answers",
            json={"author_id": str(seeded["voter"].id), "content": ANSWER_TEXT},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["question_id"] == str(seeded["question"].id)
        assert data["content"] == ANSWER_TEXT

    @pytest.mark.asyncio
    async def test_duplicate_answer_returns_400(self, client, seeded):
        response = await client.post(
            f"/questions/{seeded['question'].id}/answers",
            json={"author_id": str(seeded["answerer"].id), "content": ANSWER_TEXT},
        )

        assert response.status_code == 400
        assert "already answered" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_answer_on_closed_question_returns_409(self, client, container):
        users = await container.get(UserRepository)
        questions = await container.get(QuestionRepository)
        author = await users.save(make_user(username="author"))
        closed = await questions.add(
            make_question(author_id=UserId(uuid4()), status=QuestionStatus.CLOSED)
        )

        response = await client.post(
            f"/questions/{closed.id}/answers",
            json={"author_id": str(author.id), "content": ANSWER_TEXT},
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_accept_answer_and_repeat(self, client, seeded):
        # Arrange
        url = f"/questions/{seeded['question'].id}/answers/{seeded['answer'].id}/accept"
        body = {"actor_id": str(seeded["asker"].id)}

        # Act
        first = await client.post(url, json=body)
        second = await client.post(url, json=body)

        # Assert
        assert first.status_code == 200
        assert first.json()["changed"] is True
        assert first.json()["accepted_answer_id"] == str(seeded["answer"].id)
        assert second.status_code == 200
        assert second.json()["changed"] is False

        notifications = await client.get(
            f"/users/{seeded['answerer'].id}/notifications"
        )
        kinds = [n["kind"] for n in notifications.json()["notifications"]]
        assert kinds == ["accept"]

    @pytest.mark.asyncio
    async def test_accept_by_non_author_returns_403(self, client, seeded):
        url = f"/questions/{seeded['question'].id}/answers/{seeded['answer'].id}/accept"

        response = await client.post(url, json={"actor_id": str(seeded["voter"].id)})

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_accept_answer_of_other_question_returns_400(
        self, client, container, seeded
    ):
        questions = await container.get(QuestionRepository)
        answers = await container.get(AnswerRepository)
        other = await questions.add(make_question(author_id=UserId(uuid4())))
        foreign = await answers.add(make_answer(other.id, seeded["voter"].id))
        url = f"/questions/{seeded['question'].id}/answers/{foreign.id}/accept"

        response = await client.post(url, json={"actor_id": str(seeded["asker"].id)})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_accepted_answer_releases_acceptance(
        self, client, container, seeded
    ):
        # Arrange
        answer_id = seeded["answer"].id
        await client.post(
            f"/questions/{seeded['question'].id}/answers/{answer_id}/accept",
            json={"actor_id": str(seeded["asker"].id)},
        )

        # Act
        response = await client.delete(
            f"/answers/{answer_id}", params={"actor_id": str(seeded["answerer"].id)}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["acceptance_released"] is True
        questions = await container.get(QuestionRepository)
        stored = await questions.find_by_id(seeded["question"].id)
        assert stored.accepted_answer_id is None

    @pytest.mark.asyncio
    async def test_delete_answer_by_non_author_returns_403(self, client, seeded):
        response = await client.delete(
            f"/answers/{seeded['answer'].id}",
            params={"actor_id": str(seeded["voter"].id)},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_delete_unknown_answer_returns_404(self, client, seeded):
        response = await client.delete(
            f"/answers/{uuid4()}", params={"actor_id": str(seeded["voter"].id)}
        )

        assert response.status_code == 404


class TestNotificationEndpoints:
    """End-to-end tests for the notification inbox."""

    async def _upvote_answer(self, client, seeded):
        await client.post(
            f"/answers/{seeded['answer'].id}/vote",
            json={"actor_id": str(seeded["voter"].id), "vote_type": "up"},
        )

    async def _upvote_question(self, client, seeded):
        await client.post(
            f"/questions/{seeded['question'].id}/vote",
            json={"actor_id": str(seeded["voter"].id), "vote_type": "up"},
        )

    @pytest.mark.asyncio
    async def test_list_reports_read_state_and_unread_count(self, client, seeded):
        await self._upvote_answer(client, seeded)

        response = await client.get(f"/users/{seeded['answerer'].id}/notifications")

        assert response.status_code == 200
        data = response.json()
        assert data["unread_count"] == 1
        assert data["total"] == 1
        assert data["notifications"][0]["is_read"] is False
        assert data["notifications"][0]["read_at"] is None

    @pytest.mark.asyncio
    async def test_mark_one_read(self, client, seeded):
        # Arrange
        await self._upvote_answer(client, seeded)
        base = f"/users/{seeded['answerer'].id}/notifications"
        listing = await client.get(base)
        notification_id = listing.json()["notifications"][0]["notification_id"]

        # Act
        response = await client.put(f"{base}/{notification_id}/read")

        # Assert
        assert response.status_code == 200
        assert response.json()["notification"]["is_read"] is True
        after = await client.get(base)
        assert after.json()["unread_count"] == 0
        unread = await client.get(base, params={"unread": "true"})
        assert unread.json()["notifications"] == []

    @pytest.mark.asyncio
    async def test_mark_someone_elses_notification_returns_404(self, client, seeded):
        await self._upvote_answer(client, seeded)
        listing = await client.get(f"/users/{seeded['answerer'].id}/notifications")
        notification_id = listing.json()["notifications"][0]["notification_id"]

        response = await client.put(
            f"/users/{seeded['voter'].id}/notifications/{notification_id}/read"
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_mark_all_read(self, client, seeded):
        await self._upvote_question(client, seeded)
        base = f"/users/{seeded['asker'].id}/notifications"
        await client.post(
            f"/questions/{seeded['question'].id}/answers",
            json={"author_id": str(seeded["voter"].id), "content": ANSWER_TEXT},
        )

        response = await client.put(f"{base}/read-all")

        assert response.status_code == 200
        assert response.json() == {"updated": 2}
        assert (await client.get(base)).json()["unread_count"] == 0

    @pytest.mark.asyncio
    async def test_delete_one_and_clear_all(self, client, seeded):
        # Arrange
        await self._upvote_question(client, seeded)
        await client.post(
            f"/questions/{seeded['question'].id}/answers",
            json={"author_id": str(seeded["voter"].id), "content": ANSWER_TEXT},
        )
        base = f"/users/{seeded['asker'].id}/notifications"
        listing = await client.get(base)
        first_id = listing.json()["notifications"][0]["notification_id"]

        # Act
        deleted = await client.delete(f"{base}/{first_id}")
        deleted_again = await client.delete(f"{base}/{first_id}")
        cleared = await client.delete(f"{base}/clear-all")

        # Assert
        assert deleted.status_code == 200
        assert deleted_again.status_code == 404
        assert cleared.status_code == 200
        assert cleared.json() == {"removed": 1}
        assert (await client.get(base)).json()["total"] == 0

    @pytest.mark.asyncio
    async def test_malformed_notification_id_returns_400(self, client, seeded):
        response = await client.put(
            f"/users/{seeded['asker'].id}/notifications/not-a-uuid/read"
        )

        assert response.status_code == 400
