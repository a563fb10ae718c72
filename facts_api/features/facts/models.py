"""Database models for prompts and the facts extracted from them."""

from datetime import datetime

from sqlalchemy import DateTime as SADateTime
from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from facts_api.db.postgres.session import Base


class Prompt(Base):
    """One submitted text and its cache key."""

    __tablename__ = "prompts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    context: Mapped[str] = mapped_column(String(length=256), nullable=False)
    hash: Mapped[str] = mapped_column(String(length=64), nullable=False)
    fact_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    inserted_at: Mapped[datetime] = mapped_column(
        SADateTime(timezone=True), server_default=func.now(), nullable=False
    )

    facts: Mapped[list["Fact"]] = relationship(
        back_populates="prompt", order_by="Fact.id"
    )

    __table_args__ = (Index("ix_prompts_hash", "hash", unique=True),)


class Fact(Base):
    """One extracted statement, owned by a prompt."""

    __tablename__ = "facts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    context: Mapped[str] = mapped_column(String(length=256), nullable=False)
    prompt_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("prompts.id"), nullable=False
    )
    inserted_at: Mapped[datetime] = mapped_column(
        SADateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        SADateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    prompt: Mapped[Prompt] = relationship(back_populates="facts")

    __table_args__ = (
        Index("ix_facts_context", "context"),
        Index("ix_facts_prompt_id", "prompt_id"),
    )
