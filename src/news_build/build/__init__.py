"""
Build package for news_build.

This package contains the project tree, the root build configuration and its tasks.
"""

from .configure import (
    configure_project,
    configure_repositories,
    load_project,
    output_path,
    register_clean_task,
    set_subproject_output_path,
)
from .project import Project
from .task_registry import TaskRegistry

__all__ = [
    'Project',
    'TaskRegistry',
    'configure_project',
    'configure_repositories',
    'load_project',
    'output_path',
    'register_clean_task',
    'set_subproject_output_path',
]
