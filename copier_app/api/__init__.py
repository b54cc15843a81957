"""HTTP surface for Masters and Slaves."""

from .app import ENDPOINTS, create_app

__all__ = ["ENDPOINTS", "create_app"]
