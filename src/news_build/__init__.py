"""
News app root build configuration.

Run the tasks with: invoke -c news_build.tasks <task>
"""

__version__ = "0.1.0"
