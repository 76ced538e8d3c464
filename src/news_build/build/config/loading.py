"""
Loading of build.yaml into a validated BuildConfig.
"""
import os
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from .exceptions import ConfigFileException, UnknownRepositoryException
from .models import KNOWN_REPOSITORIES, BuildConfig, Repository, RepositoryList

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "build.yaml"
CONFIG_ENV_VAR = "NEWS_BUILD_CONFIG"


def find_config_file(config_path: Optional[Union[str, Path]] = None,
                     project_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Work out which configuration file applies.

    Precedence: explicit path, then NEWS_BUILD_CONFIG, then build.yaml
    in the project directory (current directory by default).
    """
    if config_path:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)
    return Path(project_dir or Path.cwd()) / CONFIG_FILE_NAME


def _parse_repositories(entries: Any, config_path: Path) -> RepositoryList:
    if not isinstance(entries, list):
        raise ConfigFileException("'repositories' must be a list", config_path=str(config_path))

    repositories: List[Repository] = []
    for entry in entries:
        if isinstance(entry, str):
            name, url = entry, None
        elif isinstance(entry, dict) and 'name' in entry:
            name, url = entry['name'], entry.get('url')
        else:
            raise ConfigFileException(
                f"Invalid repository entry: {entry!r}", config_path=str(config_path)
            )
        if url is None:
            if name not in KNOWN_REPOSITORIES:
                raise UnknownRepositoryException(
                    f"Unknown repository '{name}'",
                    repository_name=name,
                    known=list(KNOWN_REPOSITORIES),
                    config_path=str(config_path),
                )
            url = KNOWN_REPOSITORIES[name]
        repositories.append(Repository(name=name, url=url))

    try:
        return RepositoryList(repositories=tuple(repositories))
    except ValidationError as e:
        raise ConfigFileException(str(e), config_path=str(config_path)) from e


def parse_build_config(data: Dict[str, Any], config_path: Path) -> BuildConfig:
    """Validate an already-parsed build.yaml mapping."""
    data = dict(data)
    if 'repositories' in data:
        data['repositories'] = _parse_repositories(data['repositories'], config_path)
    try:
        return BuildConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigFileException(str(e), config_path=str(config_path)) from e


def load_build_config(config_path: Optional[Union[str, Path]] = None,
                      project_dir: Optional[Union[str, Path]] = None) -> BuildConfig:
    """
    Load the root build configuration.

    A missing build.yaml in the project directory means defaults
    (google, mavenCentral, no subprojects). A missing file that was asked
    for explicitly, or via NEWS_BUILD_CONFIG, is an error.

    Raises:
        ConfigFileException: If the file is missing, unreadable or invalid
        UnknownRepositoryException: If a repository has no known URL
    """
    explicit = bool(config_path) or bool(os.environ.get(CONFIG_ENV_VAR, "").strip())
    path = find_config_file(config_path, project_dir)

    logger.debug(f"Looking for build config at: {path}")
    if not path.exists():
        if explicit:
            raise ConfigFileException(f"Config file not found: {path}", config_path=str(path))
        logger.debug("No build config found, using defaults")
        return BuildConfig()

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigFileException(f"Could not parse YAML: {e}", config_path=str(path)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigFileException("Top level of the config must be a mapping", config_path=str(path))

    config = parse_build_config(data, path)
    logger.info(f"Loaded build config for '{config.root_name}' from {path}")
    return config
