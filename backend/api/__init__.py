"""
User directory API package.

Provides the FastAPI application exposing the directory operations over HTTP.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
