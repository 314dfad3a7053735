"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBPlayer(Base):
    __tablename__ = "players"
    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(String(16), default="player")

    scores: Mapped[list["DBScore"]] = relationship(back_populates="player")


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True)
    description: Mapped[str] = mapped_column(Text, default="")

    scores: Mapped[list["DBScore"]] = relationship(back_populates="game")


class DBScore(Base):
    __tablename__ = "scores"
    __table_args__ = (
        UniqueConstraint("player_id", "game_id", name="uq_scores_player_game"),
        CheckConstraint("value >= 0", name="ck_scores_value_non_negative"),
    )
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    player_id: Mapped[UUID] = mapped_column(ForeignKey("players.id"), index=True)
    game_id: Mapped[int] = mapped_column(ForeignKey("games.id"), index=True)
    value: Mapped[int] = mapped_column(BigInteger, default=0)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)

    player: Mapped[DBPlayer] = relationship(back_populates="scores")
    game: Mapped[DBGame] = relationship(back_populates="scores")
