"""
REST API routes — liveness check and the caller's people records.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_username
from database.helpers import (
    create_person,
    delete_person,
    get_person,
    list_people,
    update_person,
)
from database.models import Person

router = APIRouter()


class PersonIn(BaseModel):
    """Fields a client may set; anything else (including ``username``) is dropped."""

    name: Optional[str] = None
    image: Optional[str] = None
    title: Optional[str] = None


class PersonOut(BaseModel):
    id: str
    name: Optional[str] = None
    image: Optional[str] = None
    title: Optional[str] = None
    username: str


def _serialize(person: Person) -> Dict[str, Any]:
    return {
        "id": str(person.id),
        "name": person.name,
        "image": person.image,
        "title": person.title,
        "username": person.username,
    }


@router.get("/")
async def index() -> Dict[str, str]:
    return {"hello": "world"}


@router.get("/people", response_model=List[PersonOut])
async def index_people(
    session: AsyncSession = Depends(db_session),
    username: str = Depends(get_current_username),
) -> List[Dict[str, Any]]:
    people = await list_people(session, username)
    return [_serialize(p) for p in people]


@router.post("/people", response_model=PersonOut)
async def create_people(
    body: PersonIn,
    session: AsyncSession = Depends(db_session),
    username: str = Depends(get_current_username),
) -> Dict[str, Any]:
    person = await create_person(session, username, body.model_dump(exclude_unset=True))
    return _serialize(person)


@router.get("/people/{person_id}", response_model=PersonOut)
async def show_people(
    person_id: str,
    session: AsyncSession = Depends(db_session),
    username: str = Depends(get_current_username),
) -> Dict[str, Any]:
    person = await get_person(session, person_id, owner=username)
    return _serialize(person)


@router.put("/people/{person_id}", response_model=PersonOut)
async def update_people(
    person_id: str,
    body: PersonIn,
    session: AsyncSession = Depends(db_session),
    username: str = Depends(get_current_username),
) -> Dict[str, Any]:
    """Partial update: only fields present in the body are replaced."""
    person = await update_person(
        session, person_id, body.model_dump(exclude_unset=True), owner=username,
    )
    return _serialize(person)


@router.delete("/people/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def destroy_people(
    person_id: str,
    session: AsyncSession = Depends(db_session),
    username: str = Depends(get_current_username),
) -> Response:
    await delete_person(session, person_id, owner=username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
