# src/tasktracker/api/__init__.py
"""
API layer for the task tracker (FastAPI).

- app: app factory, lifespan and error-kind -> HTTP mapping
- routes: /task/ endpoints
- deps: dependency injection helpers
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
