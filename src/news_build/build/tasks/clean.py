"""
Root project tasks.

Exposes the registered build tasks (clean) and configuration
diagnostics as invoke tasks.
"""

import sys
import logging

import yaml
from invoke import task

from ..config.exceptions import ConfigException
from ..config.loading import find_config_file, load_build_config
from ..configure import CLEAN_TASK, load_project
from ...run.config.logging import bootstrap_logging

logger = logging.getLogger(__name__)


def _load(config):
    build_config = load_build_config(config_path=config)
    project_dir = find_config_file(config).parent
    logger.debug(f"Root project directory: {project_dir}")
    return build_config, load_project(build_config, project_dir)


@task(help={
    'config': "Path to build.yaml (default: ./build.yaml or $NEWS_BUILD_CONFIG)",
    'debug': "Enable debug logging",
})
def clean(ctx, config=None, debug=False):
    """
    Delete the root project's build directory.

    Succeeds without doing anything when the directory does not exist.
    """
    bootstrap_logging(debug)
    try:
        _, (root, registry) = _load(config)
        removed = registry.run(CLEAN_TASK)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"❌ Could not clean {e.filename or 'build directory'}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)

    if removed:
        print(f"🧹 Deleted {root.build_dir}")
    else:
        print(f"✅ Nothing to clean at {root.build_dir}")


@task(help={'config': "Path to build.yaml", 'debug': "Enable debug logging"})
def show_config(ctx, config=None, debug=False):
    """
    Show the effective root build configuration.

    Outputs:
        stdout: YAML configuration (parseable)
        stderr: Diagnostic information
    """
    bootstrap_logging(debug)
    try:
        build_config, (root, registry) = _load(config)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    print(f"🔍 Root project: {root.name} ({root.project_dir})", file=sys.stderr)
    print(f"📦 Repositories (lookup order): {', '.join(build_config.repositories.names())}", file=sys.stderr)
    print(f"🗂️  Subprojects: {len(list(root.subprojects()))}", file=sys.stderr)
    print(f"🔧 Tasks: {', '.join(registry.names())}", file=sys.stderr)

    yaml.dump(build_config.to_dict(), sys.stdout, default_flow_style=False, sort_keys=False)


@task(help={'config': "Path to build.yaml", 'debug': "Enable debug logging"})
def projects(ctx, config=None, debug=False):
    """List every project with its build directory, one per line."""
    bootstrap_logging(debug)
    try:
        _, (root, _registry) = _load(config)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    for project in root.all_projects():
        print(f"{project.name}\t{project.build_dir}")
