"""
Pydantic models for the root build configuration.
"""
from typing import Callable, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Vendor registry first, public registry second.
KNOWN_REPOSITORIES: Dict[str, str] = {
    "google": "https://dl.google.com/dl/android/maven2/",
    "mavenCentral": "https://repo.maven.apache.org/maven2/",
}

DEFAULT_REPOSITORY_NAMES = ("google", "mavenCentral")
DEFAULT_SUBPROJECT_BUILD_DIR = "../build/{name}"
DEFAULT_ROOT_BUILD_DIR = "build"


class Repository(BaseModel):
    """A named dependency-resolution source."""
    model_config = ConfigDict(frozen=True)

    name: str
    url: str


class RepositoryList(BaseModel):
    """Ordered, immutable list of repositories. Earlier entries win lookups."""
    model_config = ConfigDict(frozen=True)

    repositories: Tuple[Repository, ...] = ()

    @field_validator("repositories")
    @classmethod
    def _unique_names(cls, value: Tuple[Repository, ...]) -> Tuple[Repository, ...]:
        seen = set()
        for repository in value:
            if repository.name in seen:
                raise ValueError(f"repository '{repository.name}' is declared more than once")
            seen.add(repository.name)
        return value

    @classmethod
    def from_names(cls, names) -> 'RepositoryList':
        """Build a list from well-known repository names."""
        return cls(repositories=tuple(
            Repository(name=name, url=KNOWN_REPOSITORIES[name]) for name in names
        ))

    def names(self) -> List[str]:
        return [repository.name for repository in self.repositories]

    def lookup(self, coordinate: str,
               contains: Callable[[Repository, str], bool]) -> Optional[Repository]:
        """
        Return the first repository that holds ``coordinate``.

        Args:
            coordinate: Artifact coordinate, e.g. ``androidx.core:core:1.12.0``
            contains: Predicate telling whether a repository serves the coordinate

        Returns:
            The first matching repository in declaration order, or None
        """
        for repository in self.repositories:
            if contains(repository, coordinate):
                return repository
        return None


def default_repositories() -> RepositoryList:
    return RepositoryList.from_names(DEFAULT_REPOSITORY_NAMES)


class BuildConfig(BaseModel):
    """Declarative configuration of the root project."""
    model_config = ConfigDict(populate_by_name=True)

    root_name: str = Field(default="android", alias="root")
    repositories: RepositoryList = Field(default_factory=default_repositories)
    subprojects: List[str] = Field(default_factory=list)
    subproject_build_dir: str = DEFAULT_SUBPROJECT_BUILD_DIR
    root_build_dir: str = DEFAULT_ROOT_BUILD_DIR

    @field_validator("subproject_build_dir")
    @classmethod
    def _has_name_placeholder(cls, value: str) -> str:
        if "{name}" not in value:
            raise ValueError("subproject_build_dir must contain a '{name}' placeholder")
        try:
            value.format(name="x")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"subproject_build_dir may only use the '{{name}}' placeholder: {e!r}"
            ) from e
        return value

    def to_dict(self) -> Dict[str, object]:
        """Plain dictionary in the shape build.yaml uses."""
        return {
            "root": self.root_name,
            "repositories": [
                {"name": repository.name, "url": repository.url}
                for repository in self.repositories.repositories
            ],
            "subprojects": list(self.subprojects),
            "subproject_build_dir": self.subproject_build_dir,
            "root_build_dir": self.root_build_dir,
        }
