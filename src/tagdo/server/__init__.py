"""HTTP server for tagdo."""

from tagdo.server.app import create_app

__all__ = [
    "create_app",
]
