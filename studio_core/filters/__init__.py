"""Project list filtering."""

from .projects import FilterKey, ProjectFilterResolver

__all__ = ["FilterKey", "ProjectFilterResolver"]
