"""
LaunchKit API package.

Provides the FastAPI application for the LaunchKit auth service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
