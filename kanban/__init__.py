"""Kanban board API: boards, columns and tasks with per-user ownership."""

__version__ = "0.1.0"
