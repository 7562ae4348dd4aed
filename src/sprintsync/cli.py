"""CLI entry point for sprintsync.

Commands:
- sync: one-shot sync of open sprint issues into a project
- create-project: create a project to sync into
- serve: run the REST API
"""

from __future__ import annotations

import sys

import click

from sprintsync import __version__
from sprintsync.config import ConfigError, Settings
from sprintsync.logging import get_logger, setup_logging
from sprintsync.sync import (
    DEFAULT_OPEN_VALUE,
    DEFAULT_STATE_FIELD,
    resolve_board,
    sync_open_sprint_issues,
)
from sprintsync.task_store import TaskStore, TaskStoreError
from sprintsync.youtrack import InvalidInputError, YouTrackError

logger = get_logger("cli")


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """sprintsync - copy open YouTrack sprint issues into Todo tasks."""
    settings = _load_settings()
    level = "DEBUG" if verbose else settings.log_level
    setup_logging(log_dir=settings.log_dir, level=level)
    ctx.obj = settings


@main.command()
@click.option(
    "--project-id", envvar="VK_PROJECT_ID", required=True, help="Project to create tasks in"
)
@click.option(
    "--youtrack-base-url",
    envvar="YOUTRACK_BASE_URL",
    help="YouTrack base URL, e.g. https://host/youtrack/",
)
@click.option(
    "--youtrack-token",
    envvar="YOUTRACK_TOKEN",
    required=True,
    help="YouTrack permanent token (sent as Authorization: Bearer ...)",
)
@click.option("--agile-id", envvar="YOUTRACK_AGILE_ID", help="Agile board id, e.g. 65-52")
@click.option("--sprint-id", envvar="YOUTRACK_SPRINT_ID", help="Sprint id, e.g. 66-155467")
@click.option(
    "--board-url",
    envvar="YOUTRACK_BOARD_URL",
    help="Full board URL; replaces base URL, agile id and sprint id",
)
@click.option(
    "--state-field",
    envvar="YOUTRACK_STATE_FIELD",
    default=DEFAULT_STATE_FIELD,
    show_default=True,
    help="Custom field holding the issue state",
)
@click.option(
    "--open-value",
    envvar="YOUTRACK_OPEN_VALUE",
    default=DEFAULT_OPEN_VALUE,
    show_default=True,
    help="State value considered open",
)
@click.option("--dry-run", is_flag=True, help="Only report what would be created")
@click.option("--db-path", default=None, help="SQLite path (default: SPRINTSYNC_DB_PATH)")
@click.pass_obj
def sync(
    settings: Settings,
    project_id: str,
    youtrack_base_url: str | None,
    youtrack_token: str,
    agile_id: str | None,
    sprint_id: str | None,
    board_url: str | None,
    state_field: str,
    open_value: str,
    dry_run: bool,
    db_path: str | None,
) -> None:
    """Create Todo tasks for the open issues of a YouTrack sprint."""
    try:
        board = resolve_board(
            board_url=board_url,
            base_url=youtrack_base_url,
            agile_id=agile_id,
            sprint_id=sprint_id,
        )
    except InvalidInputError as e:
        logger.error("Invalid input: %s", e)
        sys.exit(1)

    store = TaskStore(db_path or settings.db_path)
    try:
        summary = sync_open_sprint_issues(
            store,
            project_id,
            board,
            token=youtrack_token,
            state_field=state_field,
            open_value=open_value,
            dry_run=dry_run,
        )
    except (YouTrackError, TaskStoreError) as e:
        logger.error("Sync failed: %s", e)
        sys.exit(1)
    finally:
        store.close()

    logger.info(
        "Done. open_issues_total=%d created=%d skipped_existing=%d dry_run=%s",
        summary.open_issues_total,
        summary.created,
        summary.skipped_existing,
        summary.dry_run,
    )
    for title in summary.created_titles:
        logger.info("  %s %s", "would create" if dry_run else "created", title)


@main.command("create-project")
@click.argument("name")
@click.option("--db-path", default=None, help="SQLite path (default: SPRINTSYNC_DB_PATH)")
@click.pass_obj
def create_project(settings: Settings, name: str, db_path: str | None) -> None:
    """Create a project and print its id."""
    store = TaskStore(db_path or settings.db_path)
    try:
        project = store.create_project(name=name)
    except TaskStoreError as e:
        logger.error("Could not create project: %s", e)
        sys.exit(1)
    finally:
        store.close()
    click.echo(project.id)


@main.command()
@click.option("--host", default=None, help="Bind address (default: SPRINTSYNC_HOST)")
@click.option("--port", type=int, default=None, help="Bind port (default: SPRINTSYNC_PORT)")
@click.option("--db-path", default=None, help="SQLite path (default: SPRINTSYNC_DB_PATH)")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None, db_path: str | None) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn  # noqa: PLC0415

    from sprintsync.api.app import create_app  # noqa: PLC0415

    app = create_app(db_path or settings.db_path)
    uvicorn.run(app, host=host or settings.host, port=port or settings.port)


if __name__ == "__main__":
    main()
