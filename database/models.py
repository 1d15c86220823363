"""
SQLAlchemy ORM models for users and their people records.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(128), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class Person(Base):
    __tablename__ = "people"
    __table_args__ = (Index("ix_people_username", "username"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text)
    image = Column(Text)
    title = Column(Text)
    # Owner, stamped from the authenticated identity. Not a foreign key.
    username = Column(String(128), nullable=False)
