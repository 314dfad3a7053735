"""Unit tests for src/cli.py"""

import pytest
from click.testing import CliRunner
from sqlalchemy.orm import Session, sessionmaker

from src import cli as cli_module
from src.core.config import settings
from src.core.shared_types import Role
from src.db.sql_repository import SQLScoresRepository


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch, session_factory: sessionmaker) -> CliRunner:
    """Point the commands at the in-memory test database."""
    monkeypatch.setattr(cli_module, "SessionLocal", session_factory)
    return CliRunner()


def test_seed_creates_admin_once(runner: CliRunner, db_session_repo: Session) -> None:
    result = runner.invoke(cli_module.cli, ["seed"])
    assert result.exit_code == 0, result.output

    admin = SQLScoresRepository(db_session_repo).find_player_by_username(
        settings.ADMIN_USERNAME
    )
    assert admin is not None
    assert admin.role == Role.ADMIN

    # running it again is harmless
    assert runner.invoke(cli_module.cli, ["seed"]).exit_code == 0


def test_reset_keeps_only_admin(runner: CliRunner, db_session_repo: Session) -> None:
    runner.invoke(cli_module.cli, ["seed"])
    repo = SQLScoresRepository(db_session_repo)
    player = repo.create_player("mocker", "mocker@example.com", "hash")
    game = repo.create_game("Pong", "")
    repo.create_score(player.id, game.id)

    result = runner.invoke(cli_module.cli, ["reset", "--yes"])
    assert result.exit_code == 0, result.output

    db_session_repo.expire_all()
    assert repo.list_games() == []
    assert repo.find_player_by_username("mocker") is None
    assert repo.find_player_by_username(settings.ADMIN_USERNAME) is not None


def test_reset_asks_for_confirmation(runner: CliRunner, db_session_repo: Session) -> None:
    repo = SQLScoresRepository(db_session_repo)
    repo.create_game("Pong", "")

    result = runner.invoke(cli_module.cli, ["reset"], input="n\n")
    assert result.exit_code != 0
    assert len(repo.list_games()) == 1
