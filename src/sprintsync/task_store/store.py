"""TaskStore - Main API for Task Store operations."""

from __future__ import annotations

import logging

from sqlalchemy import func, literal_column, select
from sqlalchemy.exc import SQLAlchemyError

from sprintsync.task_store.database import Database
from sprintsync.task_store.exceptions import ProjectNotFoundError, TaskStoreError
from sprintsync.task_store.models import Project, Task, TaskStatus

logger = logging.getLogger("sprintsync.task_store")


class TaskStore:
    """Main API for Task Store operations.

    Every write runs in its own session and is committed on its own, so a
    failure part way through a batch leaves earlier writes in place.
    """

    def __init__(self, db_path: str = "sprintsync.db") -> None:
        """Initialize Task Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
        """
        self._db = Database(db_path)
        self._db.create_tables()

    @property
    def database(self) -> Database:
        return self._db

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    # --- Project Operations ---

    def create_project(self, name: str, project_id: str | None = None) -> Project:
        """Create a new project.

        Args:
            name: Human-readable project name
            project_id: Explicit ID to use instead of a generated UUID

        Returns:
            Created Project object
        """
        session = self._db.get_session()
        try:
            project = Project(name=name, id=project_id)
            session.add(project)
            session.commit()
            session.refresh(project)
            logger.info("Created project %s (%s)", project.id, name)
            return project
        except SQLAlchemyError as e:
            session.rollback()
            raise TaskStoreError(f"failed to create project '{name}': {e}") from e
        finally:
            session.close()

    def get_project(self, project_id: str) -> Project:
        """Get project by ID.

        Raises:
            ProjectNotFoundError: If project doesn't exist
        """
        session = self._db.get_session()
        try:
            project = session.get(Project, project_id)
            if project is None:
                raise ProjectNotFoundError(f"Project with id '{project_id}' not found")
            return project
        finally:
            session.close()

    def list_projects(self) -> list[Project]:
        """List all projects, ordered by name."""
        session = self._db.get_session()
        try:
            stmt = select(Project).order_by(Project.name)
            return list(session.execute(stmt).scalars().all())
        finally:
            session.close()

    # --- Task Operations ---

    def find_task_by_title_prefix(self, project_id: str, prefix: str) -> Task | None:
        """Find a task in a project whose title starts with prefix.

        The comparison is exact and case-sensitive; LIKE is avoided because
        SQLite folds ASCII case for it.

        Args:
            project_id: The project to search in
            prefix: Leading text the title must carry

        Returns:
            The first matching Task, or None

        Raises:
            TaskStoreError: If the lookup query fails
        """
        session = self._db.get_session()
        try:
            stmt = (
                select(Task)
                .where(
                    Task.project_id == project_id,
                    func.substr(Task.title, 1, len(prefix)) == prefix,
                )
                .order_by(Task.created_at)
                .limit(1)
            )
            return session.execute(stmt).scalars().first()
        except SQLAlchemyError as e:
            raise TaskStoreError(
                f"failed to look up task with title prefix {prefix!r} "
                f"in project '{project_id}': {e}"
            ) from e
        finally:
            session.close()

    def create_task(
        self,
        project_id: str,
        title: str,
        description: str | None = None,
        status: TaskStatus = TaskStatus.TODO,
        task_id: str | None = None,
    ) -> Task:
        """Create a task in a project.

        Workspace and shared-task linkage are left unset.

        Args:
            project_id: The owning project's ID
            title: Task title
            description: Optional long-form description
            status: Initial status
            task_id: Explicit ID; a fresh UUID4 is generated when omitted

        Returns:
            Created Task object

        Raises:
            ProjectNotFoundError: If project doesn't exist
            TaskStoreError: If the insert fails
        """
        session = self._db.get_session()
        try:
            if session.get(Project, project_id) is None:
                raise ProjectNotFoundError(f"Project with id '{project_id}' not found")

            task = Task(
                project_id=project_id,
                title=title,
                id=task_id,
                description=description,
                status=status.value,
            )
            session.add(task)
            session.commit()
            session.refresh(task)
            logger.debug("Created task %s: %s", task.id, title)
            return task
        except SQLAlchemyError as e:
            session.rollback()
            raise TaskStoreError(f"failed to create task {title!r}: {e}") from e
        finally:
            session.close()

    def list_tasks(self, project_id: str) -> list[Task]:
        """List tasks of a project, oldest first.

        Raises:
            ProjectNotFoundError: If project doesn't exist
        """
        session = self._db.get_session()
        try:
            if session.get(Project, project_id) is None:
                raise ProjectNotFoundError(f"Project with id '{project_id}' not found")
            stmt = (
                select(Task)
                .where(Task.project_id == project_id)
                .order_by(Task.created_at, literal_column("tasks.rowid"))
            )
            return list(session.execute(stmt).scalars().all())
        finally:
            session.close()
