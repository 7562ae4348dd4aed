"""sprintsync - Sync open YouTrack sprint issues into a task store."""

__version__ = "0.1.0"
