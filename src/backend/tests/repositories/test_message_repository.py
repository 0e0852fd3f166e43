"""
Tests for message repository queries against SQLite.
"""

from datetime import datetime, timedelta, timezone

import pytest

from models.user import UserRole
from repositories.message_repository import MessageRepository

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.unit
class TestMessageRepository:
    async def test_create_loads_participants(self, db_session, make_user) -> None:
        citizen = await make_user(name="John Citizen")
        rep = await make_user(name="Angela Brown", role=UserRole.REPRESENTATIVE)

        message = await MessageRepository(db_session).create(citizen.id, rep.id, "Hello", "Body")

        assert message.read is False
        assert message.sender.name == "John Citizen"
        assert message.recipient.name == "Angela Brown"

    async def test_inbox_page_and_total(self, db_session, make_user, make_message) -> None:
        citizen = await make_user()
        rep = await make_user(role=UserRole.REPRESENTATIVE)
        for i in range(3):
            await make_message(citizen, rep, subject=f"#{i}", created_at=BASE_TIME + timedelta(minutes=i))

        messages, total = await MessageRepository(db_session).list_for_recipient(rep.id, page=1, limit=2)

        assert total == 3
        assert [m.subject for m in messages] == ["#2", "#1"]

    async def test_mark_all_read_counts_only_unread(self, db_session, make_user, make_message) -> None:
        citizen = await make_user()
        rep = await make_user(role=UserRole.REPRESENTATIVE)
        await make_message(citizen, rep)
        await make_message(citizen, rep)
        await make_message(citizen, rep, read=True)
        repo = MessageRepository(db_session)

        assert await repo.mark_all_read(rep.id) == 2
        assert await repo.count_unread(rep.id) == 0
        assert await repo.mark_all_read(rep.id) == 0

    async def test_delete_for_participant(self, db_session, make_user, make_message) -> None:
        citizen = await make_user()
        rep = await make_user(role=UserRole.REPRESENTATIVE)
        outsider = await make_user()
        message = await make_message(citizen, rep)
        repo = MessageRepository(db_session)

        assert await repo.delete_for_participant(message.id, outsider.id) is False
        assert await repo.delete_for_participant(message.id, citizen.id) is True
        assert await repo.get_by_id(message.id) is None
