"""Taskboard: users and tasks CRUD API."""

__version__ = "1.0.0"
