"""HTTP API exposing the shot solver to renderer and UI clients."""

from .main import create_app

__all__ = ["create_app"]
