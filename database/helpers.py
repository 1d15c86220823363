"""
Database helper functions — credential store and owner-scoped people store.

Writes commit immediately; each call is atomic for a single row.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import BadRequest, DuplicateKey, NotFound
from database.models import Person, User

logger = logging.getLogger(__name__)

PERSON_FIELDS = ("name", "image", "title")


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise BadRequest(f"Invalid id: {value!r}")


def _person_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k in PERSON_FIELDS}


# ── Credentials ─────────────────────────────────────────────────────


async def create_user(session: AsyncSession, username: str, password_hash: str) -> User:
    """Insert a credential row; raises ``DuplicateKey`` if the username is taken."""
    user = User(id=uuid.uuid4(), username=username, password_hash=password_hash)
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise DuplicateKey(str(exc.orig))
    return user


async def find_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


# ── People ──────────────────────────────────────────────────────────


async def list_people(session: AsyncSession, owner: str) -> List[Person]:
    result = await session.execute(select(Person).where(Person.username == owner))
    return list(result.scalars().all())


async def create_person(session: AsyncSession, owner: str, fields: Dict[str, Any]) -> Person:
    """Create a record stamped with ``owner``; any owner in ``fields`` is ignored."""
    person = Person(id=uuid.uuid4(), username=owner, **_person_fields(fields))
    session.add(person)
    await session.commit()
    logger.info("Created person %s for %s", person.id, owner)
    return person


async def get_person(
    session: AsyncSession,
    person_id: str | uuid.UUID,
    owner: str | None = None,
) -> Person:
    """
    Fetch a record by id.

    With ``owner`` set, a record belonging to someone else is treated as
    missing.
    """
    pid = _to_uuid(person_id)
    person = await session.get(Person, pid)
    if person is None or (owner is not None and person.username != owner):
        raise NotFound(f"Person {pid} not found")
    return person


async def update_person(
    session: AsyncSession,
    person_id: str | uuid.UUID,
    fields: Dict[str, Any],
    owner: str | None = None,
) -> Person:
    person = await get_person(session, person_id, owner)
    for key, value in _person_fields(fields).items():
        setattr(person, key, value)
    await session.commit()
    logger.info("Updated person %s", person.id)
    return person


async def delete_person(
    session: AsyncSession,
    person_id: str | uuid.UUID,
    owner: str | None = None,
) -> Person:
    person = await get_person(session, person_id, owner)
    await session.delete(person)
    await session.commit()
    logger.info("Deleted person %s (%s)", person.id, person.name)
    return person
