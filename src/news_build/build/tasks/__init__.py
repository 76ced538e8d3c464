"""
Root build tasks package.

Modules are collected by news_build.tasks using Collection.from_module().
"""
