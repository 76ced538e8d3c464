"""
Root pytest configuration for news_build.
"""

import pytest

from news_build.build.config.loading import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _no_config_override(monkeypatch):
    """Tests never pick up a NEWS_BUILD_CONFIG from the developer's shell."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
