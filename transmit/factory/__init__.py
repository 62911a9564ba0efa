"""
Factory module for FastAPI applications.
"""

from transmit.factory.app import configure_app

__all__ = ["configure_app"]
