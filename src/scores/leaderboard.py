"""Ranked view of all scores in a game."""

from dataclasses import dataclass
from typing import Iterable

from src.core.models import PlayerScore
from src.scores.encoding import encode_score


@dataclass(frozen=True)
class LeaderboardEntry:
    username: str
    score: str


def build_leaderboard(records: Iterable[PlayerScore]) -> list[LeaderboardEntry]:
    """Highest score first. Equal scores keep the order in which they were supplied."""
    ranked = sorted(records, key=lambda record: record.value, reverse=True)
    return [
        LeaderboardEntry(username=record.username, score=encode_score(record.value))
        for record in ranked
    ]
