"""
Root build configuration for the project tree.

Applies three effects to a freshly built tree, once per configuration pass:

1. every project resolves dependencies against the configured repositories,
   vendor registry first;
2. every subproject writes its output to ``<root>/../build/<name>``;
3. a ``clean`` task is registered that deletes the root build directory
   when, and only when, it is invoked.
"""

import shutil
import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .config.exceptions import (
    ConfigException,
    ProjectAlreadyConfiguredException,
    RepositoryRegistrationException,
)
from .config.loading import load_build_config
from .config.models import (
    DEFAULT_SUBPROJECT_BUILD_DIR,
    BuildConfig,
    RepositoryList,
    default_repositories,
)
from .project import Project
from .task_registry import RegisteredTask, TaskRegistry

logger = logging.getLogger(__name__)

CLEAN_TASK = "clean"


def output_path(name: str, template: str = DEFAULT_SUBPROJECT_BUILD_DIR) -> str:
    """Relative build directory for a subproject, e.g. ``../build/app``."""
    return template.format(name=name)


def configure_repositories(scope: Iterable[Project],
                           repositories: Optional[RepositoryList] = None) -> None:
    """
    Register the repository list on every project in scope.

    Raises:
        RepositoryRegistrationException: If a project already has repositories
    """
    repositories = repositories if repositories is not None else default_repositories()
    for project in scope:
        if project.repositories is not None:
            raise RepositoryRegistrationException(
                f"Repositories already registered for project '{project.name}'",
                project_name=project.name,
            )
        project.repositories = repositories
        logger.debug(f"{project.name}: repositories {repositories.names()}")


def set_subproject_output_path(subproject: Project,
                               template: str = DEFAULT_SUBPROJECT_BUILD_DIR) -> Path:
    """Point a subproject's build directory at ``<root>/../build/<name>``."""
    if subproject.is_root:
        raise ConfigException(
            f"'{subproject.name}' is the root project, not a subproject",
            project_name=subproject.name,
        )
    subproject.build_dir = subproject.root.resolve(output_path(subproject.name, template))
    logger.debug(f"{subproject.name}: build dir {subproject.build_dir}")
    return subproject.build_dir


def clean_build_dir(build_dir: Path) -> bool:
    """
    Recursively delete a build directory.

    Returns:
        True if something was deleted, False if the directory was already absent
    """
    if not build_dir.exists():
        logger.info(f"Nothing to clean at {build_dir}")
        return False
    shutil.rmtree(build_dir)
    logger.info(f"Deleted {build_dir}")
    return True


def register_clean_task(root: Project, registry: TaskRegistry) -> RegisteredTask:
    """Register ``clean``; the root build directory is looked up when the task runs."""
    return registry.register(
        CLEAN_TASK,
        lambda: clean_build_dir(root.build_dir),
        description=f"Delete the build directory of {root.name}",
    )


def configure_project(root: Project, config: BuildConfig, registry: TaskRegistry) -> None:
    """
    Apply the root build configuration to a project tree.

    Raises:
        ProjectAlreadyConfiguredException: If the tree was configured before
    """
    if root.configured:
        raise ProjectAlreadyConfiguredException(
            f"Project '{root.name}' has already been configured", project_name=root.name
        )

    configure_repositories(root.all_projects(), config.repositories)
    for subproject in root.subprojects():
        set_subproject_output_path(subproject, config.subproject_build_dir)
    register_clean_task(root, registry)

    root.configured = True
    logger.info(
        f"Configured {root.name}: {len(list(root.subprojects()))} subprojects, "
        f"repositories {config.repositories.names()}"
    )


def load_project(config: Optional[BuildConfig] = None,
                 project_dir: Optional[Union[str, Path]] = None) -> Tuple[Project, TaskRegistry]:
    """
    Run one configuration pass: build a fresh tree and configure it.

    Args:
        config: Build configuration; loaded from build.yaml when omitted
        project_dir: Root project directory (defaults to current directory)

    Returns:
        (root project, task registry)
    """
    project_dir = Path(project_dir or Path.cwd())
    if config is None:
        config = load_build_config(project_dir=project_dir)

    root = Project(config.root_name, project_dir)
    root.build_dir = root.resolve(config.root_build_dir)
    for name in config.subprojects:
        root.add_subproject(name)

    registry = TaskRegistry()
    configure_project(root, config, registry)
    return root, registry
