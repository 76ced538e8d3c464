"""
Explicit project tree.

The root project owns its subprojects; configuration is applied by
walking the tree rather than through global state.
"""

import os
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .config.exceptions import DuplicateProjectException, InvalidProjectNameException
from .config.models import RepositoryList

logger = logging.getLogger(__name__)


class Project:
    """A node in the project tree."""

    def __init__(self, name: str, project_dir: Union[str, Path], parent: Optional['Project'] = None):
        self.name = name
        self.project_dir = Path(project_dir)
        self.parent = parent
        self.children: List['Project'] = []
        self.build_dir: Path = self.project_dir / "build"
        self.repositories: Optional[RepositoryList] = None
        self.configured = False

    def __repr__(self):
        return f"Project({self.name!r}, {str(self.project_dir)!r})"

    @property
    def root(self) -> 'Project':
        project = self
        while project.parent is not None:
            project = project.parent
        return project

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def add_subproject(self, name: str, project_dir: Optional[Union[str, Path]] = None) -> 'Project':
        """
        Register a child project.

        Args:
            name: Subproject name, unique across the whole tree
            project_dir: Directory of the subproject (defaults to <this dir>/<name>)

        Raises:
            InvalidProjectNameException: If the name is empty, contains a path separator or is . or ..
            DuplicateProjectException: If any project in the tree already has this name
        """
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise InvalidProjectNameException(f"Invalid project name: {name!r}", project_name=name)
        if self.root.find(name) is not None:
            raise DuplicateProjectException(
                f"Project '{name}' already exists in the tree rooted at '{self.root.name}'",
                project_name=name,
            )
        child = Project(name, project_dir or self.project_dir / name, parent=self)
        self.children.append(child)
        logger.debug(f"Added subproject {name} under {self.name}")
        return child

    def all_projects(self) -> Iterator['Project']:
        """This project followed by every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.all_projects()

    def subprojects(self) -> Iterator['Project']:
        """Every descendant, excluding this project."""
        for child in self.children:
            yield from child.all_projects()

    def find(self, name: str) -> Optional['Project']:
        for project in self.all_projects():
            if project.name == name:
                return project
        return None

    def resolve(self, relative: str) -> Path:
        """Resolve a path against this project's directory without touching the filesystem."""
        return Path(os.path.normpath(self.project_dir / relative))
