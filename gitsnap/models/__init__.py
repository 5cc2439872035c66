from .git_snapshot import GitSnapshot

__all__ = [
    "GitSnapshot",
]
