"""Administrative commands: `game-scores migrate|seed|reset|serve`."""

import click
import uvicorn

from src.core.config import settings
from src.core.exceptions import DuplicateUserError
from src.core.logger import configure_logging, get_logger
from src.core.shared_types import Role
from src.db.database import SessionLocal, create_tables
from src.db.sql_repository import SQLScoresRepository
from src.services.auth_service import hash_password

logger = get_logger("cli")


@click.group()
def cli() -> None:
    """Game Scores API administration."""
    configure_logging(settings.LOG_LEVEL)


@cli.command("migrate")
def migrate_command() -> None:
    """Create missing tables."""
    create_tables()
    logger.info("Database schema is up-to-date")


@cli.command("seed")
def seed_command() -> None:
    """Create the admin account if it does not exist yet."""
    with SessionLocal() as db:
        repo = SQLScoresRepository(db)
        if repo.find_player_by_username(settings.ADMIN_USERNAME) is not None:
            logger.info("Admin user already exists. Seeder finished.")
            return
        try:
            repo.create_player(
                username=settings.ADMIN_USERNAME,
                email=settings.ADMIN_EMAIL,
                password_hash=hash_password(settings.ADMIN_PASSWORD),
                role=Role.ADMIN,
            )
        except DuplicateUserError as exc:
            raise click.ClickException(
                f"Cannot create admin user {settings.ADMIN_USERNAME!r}: {exc.message}"
            ) from exc
    logger.info("Admin user created successfully.")


@cli.command("reset")
@click.confirmation_option(prompt="Delete all scores, games and non-admin players?")
def reset_command() -> None:
    """Delete scores, then games, then every player except the admin."""
    with SessionLocal() as db:
        repo = SQLScoresRepository(db)
        # scores reference both games and players, so they go first
        logger.info(f"Deleted {repo.delete_all_scores()} scores.")
        logger.info(f"Deleted {repo.delete_all_games()} games.")
        deleted = repo.delete_players_except(settings.ADMIN_USERNAME)
        logger.info(f"Deleted {deleted} non-admin users.")
    logger.info("Database reset complete. Admin account remains.")


@cli.command("serve")
@click.option("--host", default=settings.HOST, show_default=True)
@click.option("--port", default=settings.PORT, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Restart on code changes (development).")
def serve_command(host: str, port: int, reload: bool) -> None:
    """Run the HTTP API."""
    create_tables()
    uvicorn.run("src.api.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()
