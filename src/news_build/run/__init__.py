"""Runtime helpers for news_build."""
