"""
Root Build Task Collection
"""

from invoke import Collection

from .build.tasks import clean

# Flattened: invoke clean, invoke show-config, invoke projects
namespace = Collection()
for task in Collection.from_module(clean).tasks.values():
    namespace.add_task(task)
