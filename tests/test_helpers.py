"""
Tests for the credential store and the owner-scoped people store.
"""

import uuid

import pytest

from api.errors import BadRequest, DuplicateKey, NotFound
from database.helpers import (
    create_person,
    create_user,
    delete_person,
    find_user_by_username,
    get_person,
    list_people,
    update_person,
)


class TestCredentialStore:
    @pytest.mark.asyncio
    async def test_create_and_find(self, session):
        user = await create_user(session, "alice", "digest")
        found = await find_user_by_username(session, "alice")
        assert found is not None
        assert found.id == user.id
        assert found.password_hash == "digest"

    @pytest.mark.asyncio
    async def test_find_missing(self, session):
        assert await find_user_by_username(session, "nobody") is None

    @pytest.mark.asyncio
    async def test_duplicate_username(self, session):
        await create_user(session, "alice", "digest")
        with pytest.raises(DuplicateKey):
            await create_user(session, "alice", "other")
        # session is usable again after the failed insert
        assert await find_user_by_username(session, "alice") is not None


class TestPeopleStore:
    @pytest.mark.asyncio
    async def test_create_stamps_owner(self, session):
        person = await create_person(
            session, "alice", {"name": "Bob", "title": "CEO", "username": "mallory"},
        )
        assert person.username == "alice"
        assert person.name == "Bob"
        assert person.image is None

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_owner(self, session):
        await create_person(session, "alice", {"name": "Bob"})
        await create_person(session, "alice", {"name": "Carol"})
        await create_person(session, "bob", {"name": "Dave"})

        alice_people = await list_people(session, "alice")
        assert {p.name for p in alice_people} == {"Bob", "Carol"}
        assert [p.name for p in await list_people(session, "bob")] == ["Dave"]
        assert await list_people(session, "nobody") == []

    @pytest.mark.asyncio
    async def test_round_trip(self, session):
        created = await create_person(session, "alice", {"name": "Bob", "title": "CEO"})

        fetched = await get_person(session, str(created.id))
        assert fetched.name == "Bob"

        updated = await update_person(session, str(created.id), {"title": "CTO"})
        assert updated.title == "CTO"
        assert updated.name == "Bob"

        deleted = await delete_person(session, str(created.id))
        assert deleted.id == created.id
        with pytest.raises(NotFound):
            await get_person(session, str(created.id))

    @pytest.mark.asyncio
    async def test_update_cannot_change_owner(self, session):
        created = await create_person(session, "alice", {"name": "Bob"})
        updated = await update_person(session, created.id, {"username": "mallory"})
        assert updated.username == "alice"

    @pytest.mark.asyncio
    async def test_missing_id(self, session):
        missing = str(uuid.uuid4())
        with pytest.raises(NotFound):
            await get_person(session, missing)
        with pytest.raises(NotFound):
            await update_person(session, missing, {"name": "x"})
        with pytest.raises(NotFound):
            await delete_person(session, missing)

    @pytest.mark.asyncio
    async def test_malformed_id(self, session):
        with pytest.raises(BadRequest):
            await get_person(session, "not-a-uuid")

    @pytest.mark.asyncio
    async def test_owner_scoping_on_single_record(self, session):
        created = await create_person(session, "alice", {"name": "Bob"})
        assert (await get_person(session, created.id, owner="alice")).name == "Bob"
        with pytest.raises(NotFound):
            await get_person(session, created.id, owner="mallory")
        with pytest.raises(NotFound):
            await update_person(session, created.id, {"name": "x"}, owner="mallory")
        with pytest.raises(NotFound):
            await delete_person(session, created.id, owner="mallory")
        # untouched
        assert (await get_person(session, created.id)).name == "Bob"
