"""
Exception classes with built-in guidance for build configuration.
"""
import sys


class ConfigException(Exception):
    """Base exception for all build configuration errors."""
    def __init__(self, message: str, error_type: str = None, project_name: str = None,
                 task_name: str = None, repository_name: str = None, config_path: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.project_name = project_name
        self.task_name = task_name
        self.repository_name = repository_name
        self.config_path = config_path
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your build.yaml and try again
"""


class ConfigFileException(ConfigException):
    """Raised when build.yaml cannot be parsed or does not match the schema."""
    def __init__(self, message: str, config_path: str, **kwargs):
        super().__init__(message, config_path=config_path, error_type="config_file", **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Invalid build configuration in {self.config_path}
   {self}
💡 Fix the file, or point NEWS_BUILD_CONFIG at a valid one
"""


class UnknownRepositoryException(ConfigException):
    """Raised when a repository shorthand has no known URL."""
    def __init__(self, message: str, repository_name: str, known: list = None, **kwargs):
        self.known = list(known or [])
        super().__init__(message, repository_name=repository_name,
                         error_type="unknown_repository", **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Repository '{self.repository_name}' has no URL
💡 Resolve this in one of the following ways:
   1. Use a well-known repository: {', '.join(self.known) or 'none'}
   2. Or declare it with an explicit url:
      - name: {self.repository_name}
        url: https://...
"""


class DuplicateProjectException(ConfigException):
    """Raised when two projects in the same tree share a name."""
    def __init__(self, message: str, project_name: str, **kwargs):
        super().__init__(message, project_name=project_name,
                         error_type="duplicate_project", **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Project '{self.project_name}' is declared more than once
💡 Subproject names must be unique within the project tree; rename or remove the duplicate in build.yaml
"""


class ProjectAlreadyConfiguredException(ConfigException):
    """Raised when a project tree is configured a second time."""
    def __init__(self, message: str, project_name: str, **kwargs):
        super().__init__(message, project_name=project_name,
                         error_type="already_configured", **kwargs)


class RepositoryRegistrationException(ConfigException):
    """Raised when repositories are registered twice on the same project."""
    def __init__(self, message: str, project_name: str, **kwargs):
        super().__init__(message, project_name=project_name,
                         error_type="repository_registration", **kwargs)


class DuplicateTaskException(ConfigException):
    """Raised when a task name is registered twice."""
    def __init__(self, message: str, task_name: str, **kwargs):
        super().__init__(message, task_name=task_name, error_type="duplicate_task", **kwargs)


class UnknownTaskException(ConfigException):
    """Raised when a task is looked up that was never registered."""
    def __init__(self, message: str, task_name: str, available: list = None, **kwargs):
        self.available = list(available or [])
        super().__init__(message, task_name=task_name, error_type="unknown_task", **kwargs)

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ Task '{self.task_name}' is not registered
💡 Available tasks: {', '.join(self.available) or 'none'}
   Run one of them instead of: {command}
"""


class InvalidProjectNameException(ConfigException):
    """Raised when a subproject name cannot be used as a directory name."""
    def __init__(self, message: str, project_name: str, **kwargs):
        super().__init__(message, project_name=project_name,
                         error_type="invalid_project_name", **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Project name '{self.project_name}' is not a valid directory name
💡 Use a non-empty name without '/' or '\\' that is not '.' or '..'
"""
