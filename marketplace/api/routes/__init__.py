"""
API routes package.
"""

from . import accounts, admin, health, jobs, quotes

__all__ = ["accounts", "admin", "health", "jobs", "quotes"]
