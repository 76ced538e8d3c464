"""
Configuration management for the root build.
"""

from .loading import load_build_config
from .models import BuildConfig, Repository, RepositoryList

__all__ = [
    'BuildConfig',
    'Repository',
    'RepositoryList',
    'load_build_config',
]
